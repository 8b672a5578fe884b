# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
Aseprite CLI wrapper.

Exports a .ase/.aseprite file into a trimmed PNG sheet plus a JSON data
document listing frames and tags:

    aseprite --batch --list-tags --trim hero.ase \
        --data <dir>/data.json --filename-format {frame} --sheet <dir>/sheet.png
"""

import os
import subprocess
import sys
from dataclasses import dataclass

from .errors import AsepriteError, EmptyDataError

DEFAULT_EXECUTABLE = 'aseprite'
DATA_FILE = 'data.json'
SHEET_FILE = 'sheet.png'


@dataclass(frozen=True)
class Export:
    """Files written by one Aseprite export."""

    command: str
    data_path: str
    sheet_path: str
    stdout: str


def default_executable():
    return os.environ.get('ASEPRITE', DEFAULT_EXECUTABLE)


def build_command(aseprite_file, data_path, sheet_path, executable=DEFAULT_EXECUTABLE):
    args = [
        '--batch',
        '--list-tags',
        '--trim',
        str(aseprite_file),
        '--data',
        data_path,
        '--filename-format',
        '{frame}',
        '--sheet',
        sheet_path,
    ]
    if sys.platform == 'win32':
        return ['cmd', '/c', executable] + args
    return [executable] + args


def export_sheet(aseprite_file, directory, executable=DEFAULT_EXECUTABLE, run=None):
    """
    Run Aseprite, writing the sheet and data document into directory.
    Returns: Export
    """
    run = run or subprocess.run
    data_path = os.path.join(directory, DATA_FILE)
    sheet_path = os.path.join(directory, SHEET_FILE)
    cmd = build_command(aseprite_file, data_path, sheet_path, executable)
    command = ' '.join(cmd)

    try:
        result = run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise AsepriteError(f'"{command}" could not be started: {e}')

    # Aseprite does not reliably use exit codes, so stderr output also fails
    if result.returncode != 0 or result.stderr.strip() != '':
        raise AsepriteError(
            f'"{command}" exited with code {result.returncode}; '
            f'stdout {result.stdout}; stderr {result.stderr}.'
        )

    return Export(command, data_path, sheet_path, result.stdout)


def read_data(export):
    """Read the exported data document, rejecting an empty one."""
    try:
        with open(export.data_path, encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError:
        text = ''

    if text == '':
        raise EmptyDataError(export.command)
    return text
