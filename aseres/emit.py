# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
C code generation for compiled sprites.

The header declares the sprite and one animation per tag:

    #pragma once

    #include "../neomura/neomura.h"
    #include "../neomura/sprites.h"

    extern const sprite_t hero;

    extern const sprite_animation_t hero_walk;

The source holds the frame tables, one pixel array per frame (addressed
through a pointer table), the sprite_t instance and, per tag, an index
array plus a sprite_animation_t instance.
"""

import os

from .errors import ConfigError, IdentifierError, MetadataError
from .identifier import convert_file_name_to_identifier

SPRITE_TYPE = 'sprite_t'
ANIMATION_TYPE = 'sprite_animation_t'

BYTES_PER_LINE = 16


def sprite_identifier(name):
    """Identifier of the sprite_t symbol for a sheet name."""
    identifier = convert_file_name_to_identifier(name)
    if not identifier:
        raise IdentifierError(name, 'Sprite')
    return identifier


def tag_identifier(sprite, tag_name):
    """Identifier of the sprite_animation_t symbol for a tag."""
    identifier = convert_file_name_to_identifier(tag_name)
    if not identifier:
        raise IdentifierError(tag_name, 'Tag')
    return f"{sprite}_{identifier}"


def tag_identifiers(sprite, tags):
    """
    Identifiers for every tag, in tag order.
    Two tags may not share an identifier.
    """
    symbols = []
    seen = {}
    for tag in tags:
        symbol = tag_identifier(sprite, tag.name)
        if symbol in seen:
            raise MetadataError(f'tags "{seen[symbol]}" and "{tag.name}" both produce '
                                f'the identifier {symbol}')
        seen[symbol] = tag.name
        symbols.append(symbol)
    return tuple(symbols)


def include_path(path, base_dir):
    """Path of an #include relative to base_dir, with forward slashes."""
    try:
        relative = os.path.relpath(path, base_dir)
    except ValueError as e:
        # Windows paths on different drives have no relative form
        raise ConfigError(f"Cannot include {path} relative to {base_dir}: {e}")
    return relative.replace(os.sep, '/')


def format_list(values):
    return ', '.join(str(value) for value in values)


def format_bytes(data):
    """Format bytes as indented lines of 0xNN literals."""
    lines = []
    for i in range(0, len(data), BYTES_PER_LINE):
        chunk = data[i:i + BYTES_PER_LINE]
        lines.append("    " + ", ".join(f"0x{b:02X}" for b in chunk) + ",")
    return lines


def generate_header(name, tag_symbols, header_file, sprites_header_file, base_dir):
    """Generate the .h text for a sprite."""
    lines = [
        "#pragma once",
        "",
        f"#include \"{include_path(header_file, base_dir)}\"",
        f"#include \"{include_path(sprites_header_file, base_dir)}\"",
        "",
        f"extern const {SPRITE_TYPE} {name};",
    ]

    if tag_symbols:
        lines.append("")
        for symbol in tag_symbols:
            lines.append(f"extern const {ANIMATION_TYPE} {symbol};")

    lines.append("")
    return '\n'.join(lines)


def generate_source(name, frames, tags, tag_symbols, header_name):
    """Generate the .c text for a sprite."""
    count = len(frames)

    lines = [
        f"#include \"{header_name}\"",
        "",
        f"static const u16_t {name}_widths[{count}] = "
        f"{{ {format_list(frame.width for frame in frames)} }};",
        f"static const u16_t {name}_heights[{count}] = "
        f"{{ {format_list(frame.height for frame in frames)} }};",
        f"static const s16_t {name}_x_offsets[{count}] = "
        f"{{ {format_list(frame.x_offset for frame in frames)} }};",
        f"static const s16_t {name}_y_offsets[{count}] = "
        f"{{ {format_list(frame.y_offset for frame in frames)} }};",
        f"static const u16_t {name}_durations[{count}] = "
        f"{{ {format_list(frame.duration for frame in frames)} }};",
        "",
    ]

    # One array per frame so each frame's pixels stay independently addressable
    for index, frame in enumerate(frames):
        lines.append(f"static const u8_t {name}_rgba_{index}[{len(frame.pixels)}] = {{")
        lines.extend(format_bytes(frame.pixels))
        lines.append("};")
        lines.append("")

    pointers = format_list(f"{name}_rgba_{index}" for index in range(count))
    lines.append(f"static const u8_t * {name}_rgba[{count}] = {{ {pointers} }};")
    lines.append("")

    lines.extend([
        f"const {SPRITE_TYPE} {name} = {{",
        f"  &{name}_widths,",
        f"  &{name}_heights,",
        f"  &{name}_x_offsets,",
        f"  &{name}_y_offsets,",
        f"  &{name}_durations,",
        f"  &{name}_rgba,",
        f"  {count}",
        "};",
    ])

    for tag, symbol in zip(tags, tag_symbols):
        lines.extend([
            "",
            f"static const u16_t {symbol}_indices[{len(tag.indices)}] = "
            f"{{ {format_list(tag.indices)} }};",
            "",
            f"const {ANIMATION_TYPE} {symbol} = {{",
            f"  &{name},",
            f"  &{symbol}_indices,",
            f"  {len(tag.indices)},",
            f"  {tag.duration}",
            "};",
        ])

    lines.append("")
    return '\n'.join(lines)
