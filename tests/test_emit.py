import os

import pytest

from aseres import emit
from aseres.emit import (
    format_bytes,
    generate_header,
    generate_source,
    include_path,
    tag_identifier,
    tag_identifiers,
)
from aseres.errors import ConfigError, IdentifierError, MetadataError
from aseres.frames import DerivedFrame
from aseres.tags import ResolvedTag


FRAMES = (
    DerivedFrame(width=2, height=1, x_offset=-1, y_offset=-0.5, duration=6,
                 pixels=bytes([0xff, 0x00, 0x0a, 0x00, 0x01, 0x02, 0x03, 0xfc])),
    DerivedFrame(width=1, height=1, x_offset=3, y_offset=2, duration=12,
                 pixels=bytes([0, 0, 0, 255])),
)

TAGS = (
    ResolvedTag("Walk Cycle", (0, 1, 0), 24),
    ResolvedTag("idle", (1,), 12),
)

SYMBOLS = ("hero_walk_cycle", "hero_idle")


def test_header_declares_sprite_and_tags(tmp_path):
    base = tmp_path / "art"
    header = generate_header("hero", SYMBOLS, str(tmp_path / "lib" / "neomura.h"),
                             str(tmp_path / "lib" / "sprites" / "sprites.h"), str(base))

    assert header == (
        "#pragma once\n"
        "\n"
        "#include \"../lib/neomura.h\"\n"
        "#include \"../lib/sprites/sprites.h\"\n"
        "\n"
        "extern const sprite_t hero;\n"
        "\n"
        "extern const sprite_animation_t hero_walk_cycle;\n"
        "extern const sprite_animation_t hero_idle;\n"
    )


def test_header_without_tags(tmp_path):
    header = generate_header("hero", (), "a.h", "b.h", ".")
    assert header.endswith("extern const sprite_t hero;\n")
    assert "sprite_animation_t" not in header


def test_source_tables():
    source = generate_source("hero", FRAMES, TAGS, SYMBOLS, "hero.h")

    assert source.startswith("#include \"hero.h\"\n")
    assert "static const u16_t hero_widths[2] = { 2, 1 };" in source
    assert "static const u16_t hero_heights[2] = { 1, 1 };" in source
    assert "static const s16_t hero_x_offsets[2] = { -1, 3 };" in source
    assert "static const s16_t hero_y_offsets[2] = { -0.5, 2 };" in source
    assert "static const u16_t hero_durations[2] = { 6, 12 };" in source


def test_source_pixel_arrays_and_pointer_table():
    source = generate_source("hero", FRAMES, TAGS, SYMBOLS, "hero.h")

    assert ("static const u8_t hero_rgba_0[8] = {\n"
            "    0xFF, 0x00, 0x0A, 0x00, 0x01, 0x02, 0x03, 0xFC,\n"
            "};") in source
    assert "static const u8_t hero_rgba_1[4] = {" in source
    assert "static const u8_t * hero_rgba[2] = { hero_rgba_0, hero_rgba_1 };" in source
    assert ("const sprite_t hero = {\n"
            "  &hero_widths,\n"
            "  &hero_heights,\n"
            "  &hero_x_offsets,\n"
            "  &hero_y_offsets,\n"
            "  &hero_durations,\n"
            "  &hero_rgba,\n"
            "  2\n"
            "};") in source


def test_source_animations():
    source = generate_source("hero", FRAMES, TAGS, SYMBOLS, "hero.h")

    assert "static const u16_t hero_walk_cycle_indices[3] = { 0, 1, 0 };" in source
    assert ("const sprite_animation_t hero_walk_cycle = {\n"
            "  &hero,\n"
            "  &hero_walk_cycle_indices,\n"
            "  3,\n"
            "  24\n"
            "};") in source
    assert "static const u16_t hero_idle_indices[1] = { 1 };" in source
    assert source.index("hero_walk_cycle =") < source.index("hero_idle =")


def test_format_bytes_wraps_lines():
    lines = format_bytes(bytes(range(20)))
    assert len(lines) == 2
    assert lines[1] == "    0x10, 0x11, 0x12, 0x13,"


def test_include_path_uses_forward_slashes(tmp_path):
    path = include_path(os.path.join(str(tmp_path), "a", "b", "c.h"), str(tmp_path))
    assert path == "a/b/c.h"


def test_tag_without_letters_cannot_be_named():
    with pytest.raises(IdentifierError):
        tag_identifier("hero", "--")


def test_tag_identifiers_in_tag_order():
    assert tag_identifiers("hero", TAGS) == SYMBOLS


def test_tag_identifiers_normalize_each_tag_once(monkeypatch):
    calls = []
    original = emit.convert_file_name_to_identifier

    def counting(text):
        calls.append(text)
        return original(text)

    monkeypatch.setattr(emit, "convert_file_name_to_identifier", counting)
    tag_identifiers("hero", TAGS)
    assert calls == ["Walk Cycle", "idle"]


def test_tags_sharing_an_identifier_fail():
    tags = (ResolvedTag("Walk", (0,), 1), ResolvedTag("walk", (0,), 1))
    with pytest.raises(MetadataError, match="both produce the identifier hero_walk"):
        tag_identifiers("hero", tags)


def test_include_path_without_relative_form(monkeypatch):
    def relpath(path, start):
        raise ValueError("path is on mount 'D:', start on mount 'C:'")

    monkeypatch.setattr(emit.os.path, "relpath", relpath)
    with pytest.raises(ConfigError, match="Cannot include"):
        include_path("D:/lib/neomura.h", "C:/art")
