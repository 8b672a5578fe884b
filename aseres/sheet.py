# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
Sprite sheet inputs: the Aseprite data document and the packed sheet image.

Aseprite's JSON export looks like:

    {
      "frames": [
        {
          "frame": { "x": 0, "y": 0, "w": 16, "h": 24 },
          "spriteSourceSize": { "x": 4, "y": 0, "w": 16, "h": 24 },
          "sourceSize": { "w": 24, "h": 24 },
          "duration": 100
        }
      ],
      "meta": {
        "frameTags": [
          { "name": "Walk", "from": 0, "to": 3, "direction": "pingpong" }
        ]
      }
    }

"frames" may also be an object keyed by frame name (the default "hash"
layout), in which case frames are taken in key order.
"""

import json
from dataclasses import dataclass

from PIL import Image

from .errors import MetadataError, SheetError


@dataclass(frozen=True)
class RawFrameMetadata:
    """One frame of the data document, in sheet pixel coordinates."""

    x: int
    y: int
    width: int
    height: int
    trim_x: int
    trim_y: int
    source_width: int
    source_height: int
    duration: int


@dataclass(frozen=True)
class RawTag:
    """A named frame range; start and end are inclusive frame indices."""

    name: str
    start: int
    end: int
    direction: str


@dataclass(frozen=True)
class SheetContext:
    """A decoded sheet: row-major RGBA bytes, 4 per pixel."""

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise SheetError(f"Sheet data is {len(self.data)} bytes, expected {expected} "
                             f"for {self.width}x{self.height} RGBA")

    @classmethod
    def from_image(cls, img):
        """Build a context from a Pillow image, converting it to RGBA."""
        if img.mode != 'RGBA':
            img = img.convert('RGBA')
        width, height = img.size
        return cls(width, height, img.tobytes())

    def pixel(self, x, y):
        """Return the (r, g, b, a) tuple at x, y."""
        offset = (y * self.width + x) * 4
        return tuple(self.data[offset:offset + 4])


def load_sheet(path):
    """Decode a PNG sprite sheet into a SheetContext."""
    try:
        with Image.open(path) as img:
            return SheetContext.from_image(img)
    except (OSError, ValueError) as e:
        raise SheetError(f"Failed to load sprite sheet {path}: {e}")


# ============================================================================
# Data document parsing
# ============================================================================

def _field(obj, key, kind, where):
    if not isinstance(obj, dict) or key not in obj:
        raise MetadataError(f"{where} is missing '{key}'")
    value = obj[key]
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, kind):
        raise MetadataError(f"{where} has an invalid '{key}': {value!r}")
    return value


def _frame_key(item):
    key = item[0]
    return (0, int(key)) if key.isdigit() else (1, 0)


def parse_frame(obj, number):
    """Parse one entry of "frames"; number is 1-based and used in errors."""
    where = f"frame {number}"
    rect = _field(obj, 'frame', dict, where)
    trim = _field(obj, 'spriteSourceSize', dict, where)
    source = _field(obj, 'sourceSize', dict, where)

    return RawFrameMetadata(
        x=_field(rect, 'x', int, f"{where} frame"),
        y=_field(rect, 'y', int, f"{where} frame"),
        width=_field(rect, 'w', int, f"{where} frame"),
        height=_field(rect, 'h', int, f"{where} frame"),
        trim_x=_field(trim, 'x', int, f"{where} spriteSourceSize"),
        trim_y=_field(trim, 'y', int, f"{where} spriteSourceSize"),
        source_width=_field(source, 'w', int, f"{where} sourceSize"),
        source_height=_field(source, 'h', int, f"{where} sourceSize"),
        duration=_field(obj, 'duration', int, where),
    )


def parse_tag(obj, number):
    """Parse one entry of "meta.frameTags"; number is 1-based."""
    where = f"tag {number}"
    return RawTag(
        name=_field(obj, 'name', str, where),
        start=_field(obj, 'from', int, where),
        end=_field(obj, 'to', int, where),
        direction=_field(obj, 'direction', str, where),
    )


def parse_sprite_data(text):
    """
    Parse an Aseprite data document.
    Returns: (list of RawFrameMetadata, list of RawTag)
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MetadataError(f"Invalid sprite data JSON: {e}")

    if not isinstance(data, dict):
        raise MetadataError("Sprite data must be a JSON object")

    frames = data.get('frames')
    if isinstance(frames, dict):
        frames = [value for _, value in sorted(frames.items(), key=_frame_key)]
    elif not isinstance(frames, list):
        raise MetadataError("Sprite data is missing 'frames'")

    meta = data.get('meta', {})
    if not isinstance(meta, dict):
        raise MetadataError("Sprite data has an invalid 'meta'")
    tags = meta.get('frameTags', [])
    if not isinstance(tags, list):
        raise MetadataError("Sprite data has an invalid 'meta.frameTags'")

    raw_frames = [parse_frame(obj, i + 1) for i, obj in enumerate(frames)]
    raw_tags = [parse_tag(obj, i + 1) for i, obj in enumerate(tags)]
    return raw_frames, raw_tags
