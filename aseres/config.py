# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
Build configuration.

A BuildConfig describes one sprite to compile. It comes either from the
command line or from a YAML project file:

    refresh_rate: 60
    neomura_header_file: ../submodules/neomura/neomura.h
    neomura_sprites_header_file: ../submodules/neomura-sprites/sprites.h
    output_dir: build/sprites

    sprites:
      - source: art/hero.ase
      - source: art/Title Screen.aseprite
        output: build/ui/title     # optional, default <output_dir>/<identifier>
        refresh_rate: 30           # optional per-sprite override

Relative paths are resolved against the YAML file's directory.
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .aseprite import default_executable
from .emit import sprite_identifier
from .errors import ConfigError


@dataclass
class BuildConfig:
    """Everything needed to compile one sprite."""

    aseprite_file: str
    header_file: str
    sprites_header_file: str
    output: str
    refresh_rate: int
    aseprite: str = field(default_factory=default_executable)

    def validate(self):
        for name in ('aseprite_file', 'header_file', 'sprites_header_file', 'output'):
            if not getattr(self, name):
                raise ConfigError(f"{name.replace('_', ' ')} must not be empty")
        if isinstance(self.refresh_rate, bool) or not isinstance(self.refresh_rate, int):
            raise ConfigError(f"refresh rate must be an integer (got {self.refresh_rate!r})")
        if self.refresh_rate < 1:
            raise ConfigError(f"refresh rate must be at least 1 hertz (got {self.refresh_rate})")
        return self

    @property
    def sprite_name(self):
        """Sheet name without directory or extension."""
        return Path(self.aseprite_file).stem


def _resolve(path, base_dir):
    if path is None or os.path.isabs(path):
        return path
    return str(base_dir / path)


def load_project(yaml_path, aseprite=None):
    """
    Load a YAML project file.
    Returns: list of BuildConfig, in file order
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise ConfigError(f"YAML file not found: {yaml_path}")

    yaml_dir = yaml_path.parent

    with open(yaml_path, encoding='utf-8') as f:
        try:
            project = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_path}: {e}")

    if not project:
        raise ConfigError(f"{yaml_path}: no sprites to compile")
    if not isinstance(project, dict):
        raise ConfigError(f"{yaml_path}: top level must be a mapping")

    sprites = project.get('sprites')
    if not isinstance(sprites, list) or not sprites:
        raise ConfigError(f"{yaml_path}: 'sprites' must be a non-empty list")

    header_file = _resolve(project.get('neomura_header_file'), yaml_dir)
    sprites_header_file = _resolve(project.get('neomura_sprites_header_file'), yaml_dir)
    output_dir = _resolve(project.get('output_dir', '.'), yaml_dir)
    refresh_rate = project.get('refresh_rate')

    configs = []
    for i, entry in enumerate(sprites):
        if isinstance(entry, str):
            entry = {'source': entry}
        if not isinstance(entry, dict) or not entry.get('source'):
            raise ConfigError(f"{yaml_path}: sprite {i + 1} is missing 'source'")

        source = _resolve(entry['source'], yaml_dir)

        output = entry.get('output')
        if output:
            output = _resolve(output, yaml_dir)
        else:
            output = os.path.join(output_dir, sprite_identifier(Path(source).stem))

        sprite_rate = entry.get('refresh_rate', refresh_rate)
        if 'refresh_rate' in entry and refresh_rate is not None and sprite_rate != refresh_rate:
            print(f"Warning: sprite '{entry['source']}' overrides the project refresh rate "
                  f"({refresh_rate} -> {sprite_rate} hertz)", file=sys.stderr)

        config = BuildConfig(
            aseprite_file=source,
            header_file=_resolve(entry.get('neomura_header_file'), yaml_dir) or header_file,
            sprites_header_file=(_resolve(entry.get('neomura_sprites_header_file'), yaml_dir)
                                 or sprites_header_file),
            output=output,
            refresh_rate=sprite_rate,
        )
        if aseprite:
            config.aseprite = aseprite

        try:
            configs.append(config.validate())
        except ConfigError as e:
            raise ConfigError(f"{yaml_path}: sprite {i + 1}: {e}")

    return configs
