# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
aseres - Aseprite Resource Compiler

Converts Aseprite files (*.ase, *.aseprite) into C source (*.c) and header
(*.h) files compatible with the neomura sprites library.

Usage:
    aseres -af art/hero.ase -nhf neomura.h -nshf sprites.h -rr 60 -o build/hero
    aseres sprites.yaml

Each frame's duration must be a whole number of ticks at the refresh rate;
for example 100ms works at 60Hz (6 ticks) but 16ms does not.
"""

import argparse
import sys

from . import __version__
from .compiler import compile_file, write_outputs
from .config import BuildConfig, load_project
from .errors import AseResError, ConfigError

SINGLE_OPTIONS = {
    'aseprite_file': '--aseprite-file',
    'header_file': '--neomura-header-file',
    'sprites_header_file': '--neomura-sprites-header-file',
    'output': '--output',
    'refresh_rate': '--refresh-rate',
}


def positive_int(value):
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1 (got {parsed})")
    return parsed


def build_parser():
    parser = argparse.ArgumentParser(
        prog='aseres',
        description='Aseprite Resource Compiler - convert Aseprite files to C source and headers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('project', nargs='?', help='YAML project file listing sprites to compile')
    parser.add_argument('-af', '--aseprite-file', help='the aseprite file')
    parser.add_argument('-nhf', '--neomura-header-file', dest='header_file',
                        help='the neomura library header file')
    parser.add_argument('-nshf', '--neomura-sprites-header-file', dest='sprites_header_file',
                        help='the neomura sprites library header file')
    parser.add_argument('-o', '--output',
                        help='the base name of the header (*.h) and source (*.c) files to produce')
    parser.add_argument('-rr', '--refresh-rate', type=positive_int, metavar='HERTZ',
                        help='the refresh rate of the game the sprite will be used in')
    parser.add_argument('--aseprite', help='Aseprite executable (default: $ASEPRITE or aseprite)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def configs_from_args(args):
    """Build the list of BuildConfigs requested on the command line."""
    given = [name for name in SINGLE_OPTIONS if getattr(args, name) is not None]

    if args.project:
        if given:
            raise ConfigError(f"a project file cannot be combined with {SINGLE_OPTIONS[given[0]]}")
        return load_project(args.project, args.aseprite)

    missing = [name for name in SINGLE_OPTIONS if name not in given]
    if missing:
        raise ConfigError("missing required option(s): "
                          + ', '.join(SINGLE_OPTIONS[name] for name in missing))

    config = BuildConfig(
        aseprite_file=args.aseprite_file,
        header_file=args.header_file,
        sprites_header_file=args.sprites_header_file,
        output=args.output,
        refresh_rate=args.refresh_rate,
    )
    if args.aseprite:
        config.aseprite = args.aseprite
    return [config.validate()]


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configs = configs_from_args(args)

        # Compile everything before writing anything
        compiled = [(compile_file(config, args.verbose), config) for config in configs]

        for result, config in compiled:
            header_path, source_path = write_outputs(result, config.output)
            if args.verbose:
                print("Generated:")
                print(f"  {header_path}")
                print(f"  {source_path}")
    except AseResError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
