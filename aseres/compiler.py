# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
Sprite compilation pipeline.

    data document + sheet -> derive_frames -> resolve_tags -> generate_*

compile_sprite() is the pure core and works on in-memory values only;
compile_file() wraps it with the Aseprite export and temporary directory,
and write_outputs() is the only step that touches the output directory.
"""

import os
import tempfile
from dataclasses import dataclass

from . import aseprite
from .emit import generate_header, generate_source, sprite_identifier, tag_identifiers
from .errors import OutputError
from .frames import derive_frames
from .sheet import load_sheet, parse_sprite_data
from .tags import resolve_tags


@dataclass(frozen=True)
class CompiledSprite:
    """Generated text for one sprite, plus counts for reporting."""

    identifier: str
    header: str
    source: str
    frame_count: int
    tag_count: int


def compile_sprite(name, raw_frames, raw_tags, sheet, refresh_rate,
                   header_file, sprites_header_file, base_dir, output_name):
    """
    Compile one sprite from already-loaded inputs.

    name is the human-readable sheet name, base_dir the directory include
    paths are made relative to, and output_name the basename of the
    generated files.
    """
    identifier = sprite_identifier(name)

    frames = derive_frames(raw_frames, sheet, refresh_rate)
    tags = resolve_tags(raw_tags, frames)
    symbols = tag_identifiers(identifier, tags)

    header = generate_header(identifier, symbols, header_file, sprites_header_file, base_dir)
    source = generate_source(identifier, frames, tags, symbols, f"{output_name}.h")

    return CompiledSprite(identifier, header, source, len(frames), len(tags))


def compile_file(config, verbose=False, run=None):
    """Export config.aseprite_file with Aseprite and compile the result."""
    with tempfile.TemporaryDirectory(prefix='aseres-') as directory:
        export = aseprite.export_sheet(config.aseprite_file, directory,
                                       config.aseprite, run)
        if verbose:
            print(f"Ran {export.command}")

        raw_frames, raw_tags = parse_sprite_data(aseprite.read_data(export))
        sheet = load_sheet(export.sheet_path)

    compiled = compile_sprite(
        config.sprite_name,
        raw_frames,
        raw_tags,
        sheet,
        config.refresh_rate,
        config.header_file,
        config.sprites_header_file,
        os.path.dirname(os.path.abspath(config.aseprite_file)),
        os.path.basename(config.output),
    )

    if verbose:
        print(f"Compiled '{compiled.identifier}': {compiled.frame_count} frames, "
              f"{compiled.tag_count} tags")

    return compiled


def write_outputs(compiled, output):
    """
    Write <output>.h and <output>.c, creating directories as needed.
    Returns: (header path, source path)
    """
    directory = os.path.dirname(output)
    header_path = f"{output}.h"
    source_path = f"{output}.c"

    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(header_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(compiled.header)
        with open(source_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(compiled.source)
    except OSError as e:
        raise OutputError(f"Failed to write {output}: {e}")

    return header_path, source_path
