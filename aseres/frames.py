# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
Frame derivation: turns raw frame metadata plus the decoded sheet into
validated, range-checked frame records ready for emission.

Per frame:
  - width/height must fit an unsigned 16-bit value
  - x/y offsets are measured from the centre of the untrimmed canvas and
    must fit a signed 16-bit value
  - the millisecond duration must be a whole number of ticks at the
    target refresh rate
  - pixels are copied out of the sheet with premultiplied alpha
"""

import math
from dataclasses import dataclass

from .errors import (
    S16_MAX,
    S16_MIN,
    U16_MAX,
    DurationIncompatible,
    FrameCountLimitExceeded,
    FrameDurationLimitExceeded,
    GeometryLimitExceeded,
    MetadataError,
    SheetError,
)


@dataclass(frozen=True)
class DerivedFrame:
    """A validated frame. duration is in ticks, pixels is premultiplied RGBA."""

    width: int
    height: int
    x_offset: float
    y_offset: float
    duration: int
    pixels: bytes


def centre_offset(trim, size):
    """Offset of a trimmed edge from the centre of an untrimmed axis."""
    offset = trim - size / 2
    if offset.is_integer():
        return int(offset)
    return offset


def duration_to_ticks(duration_ms, refresh_rate):
    """Return the tick count for duration_ms, or None if it is fractional."""
    scaled = duration_ms * refresh_rate
    if scaled % 1000 != 0:
        return None
    return scaled // 1000


def premultiply(sheet, x, y, width, height):
    """
    Copy a rectangle out of the sheet with premultiplied alpha.

    Colour channels are scaled by alpha / 255 and rounded down; the fourth
    channel holds 255 - alpha, which is what the sprites runtime blends with.
    """
    pixels = bytearray(width * height * 4)
    data = sheet.data

    for row in range(height):
        src = ((y + row) * sheet.width + x) * 4
        dst = row * width * 4
        for _ in range(width):
            alpha = data[src + 3]
            coefficient = alpha / 255
            for channel in range(3):
                pixels[dst + channel] = math.floor(data[src + channel] * coefficient)
            pixels[dst + 3] = 255 - alpha
            src += 4
            dst += 4

    return bytes(pixels)


def _check_geometry(number, quantity, value, low, high):
    if value > high:
        raise GeometryLimitExceeded(number, quantity, value, high)
    if value < low:
        raise GeometryLimitExceeded(number, quantity, value, low)


def derive_frame(raw, number, sheet, refresh_rate):
    """Derive a single frame; number is 1-based and used in errors."""
    _check_geometry(number, 'width', raw.width, 0, U16_MAX)
    _check_geometry(number, 'height', raw.height, 0, U16_MAX)

    x_offset = centre_offset(raw.trim_x, raw.source_width)
    _check_geometry(number, 'x offset', x_offset, S16_MIN, S16_MAX)

    y_offset = centre_offset(raw.trim_y, raw.source_height)
    _check_geometry(number, 'y offset', y_offset, S16_MIN, S16_MAX)

    if raw.duration < 0:
        raise MetadataError(f"frame {number}'s duration of {raw.duration} milliseconds is negative.")

    duration = duration_to_ticks(raw.duration, refresh_rate)
    if duration is None:
        raise DurationIncompatible(number, raw.duration, refresh_rate)
    if duration > U16_MAX:
        raise FrameDurationLimitExceeded(number, duration)

    if (raw.x < 0 or raw.y < 0
            or raw.x + raw.width > sheet.width
            or raw.y + raw.height > sheet.height):
        raise SheetError(
            f"frame {number}'s rectangle {raw.width}x{raw.height} at "
            f"({raw.x}, {raw.y}) lies outside the {sheet.width}x{sheet.height} sheet."
        )

    pixels = premultiply(sheet, raw.x, raw.y, raw.width, raw.height)

    return DerivedFrame(
        width=raw.width,
        height=raw.height,
        x_offset=x_offset,
        y_offset=y_offset,
        duration=duration,
        pixels=pixels,
    )


def derive_frames(raw_frames, sheet, refresh_rate):
    """
    Derive every frame of a sprite, in input order.
    Returns: tuple of DerivedFrame
    """
    if len(raw_frames) > U16_MAX:
        raise FrameCountLimitExceeded(len(raw_frames))

    return tuple(
        derive_frame(raw, index + 1, sheet, refresh_rate)
        for index, raw in enumerate(raw_frames)
    )
