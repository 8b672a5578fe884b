# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
Exceptions raised by aseres.

Every error is terminal for the sprite being compiled. Limit errors carry
their context (1-based frame number, offending value, limit) as attributes
so callers can report them without re-deriving anything.
"""

U16_MAX = 65535
S16_MIN = -32768
S16_MAX = 32767


class AseResError(Exception):
    """Base exception for aseres errors."""
    pass


class ConfigError(AseResError):
    """Invalid command line or project file configuration."""
    pass


class IdentifierError(AseResError):
    """A name normalizes to an empty identifier."""

    def __init__(self, name, role):
        self.name = name
        self.role = role
        super().__init__(f"{role} name {name!r} does not contain any letters or digits "
                         f"and cannot be used as an identifier.")


class AsepriteError(AseResError):
    """The Aseprite CLI could not be run or reported a failure."""
    pass


class EmptyDataError(AseResError):
    """Aseprite ran but wrote an empty data file."""

    def __init__(self, command):
        self.command = command
        super().__init__(f'"{command}" produced an empty data file.')


class OutputError(AseResError):
    """Generated files could not be written."""
    pass


class MetadataError(AseResError):
    """The sprite sheet data document is malformed."""
    pass


class SheetError(AseResError):
    """The sprite sheet image could not be decoded."""
    pass


# ============================================================================
# Limit errors
# ============================================================================

class LimitError(AseResError):
    """A value does not fit the fixed-width integer used to encode it."""
    pass


class GeometryLimitExceeded(LimitError):
    """A frame's width, height or offset does not fit its 16-bit encoding."""

    def __init__(self, frame_number, quantity, value, limit):
        self.frame_number = frame_number
        self.quantity = quantity
        self.value = value
        self.limit = limit

        if quantity == 'width' and value > limit:
            detail = f"width of {value} is wider than the limit of {limit} pixels"
        elif quantity == 'height' and value > limit:
            detail = f"height of {value} is taller than the limit of {limit} pixels"
        else:
            detail = f"{quantity} of {value} is beyond the limit of {limit} pixels"
        super().__init__(f"frame {frame_number}'s {detail}.")


class DurationIncompatible(LimitError):
    """A frame's duration is not a whole number of ticks."""

    def __init__(self, frame_number, duration, refresh_rate):
        self.frame_number = frame_number
        self.duration = duration
        self.refresh_rate = refresh_rate
        super().__init__(
            f"frame {frame_number}'s duration of {duration} milliseconds is "
            f"incompatible with the refresh rate of {refresh_rate} hertz."
        )


class FrameDurationLimitExceeded(LimitError):
    """A single frame lasts more ticks than a 16-bit duration can hold."""

    def __init__(self, frame_number, duration, limit=U16_MAX):
        self.frame_number = frame_number
        self.duration = duration
        self.limit = limit
        super().__init__(
            f"frame {frame_number}'s duration of {duration} frames is longer than "
            f"the limit of {limit}."
        )


class FrameCountLimitExceeded(LimitError):
    """The sprite has more frames than a 16-bit index can address."""

    def __init__(self, frame_count, limit=U16_MAX):
        self.frame_count = frame_count
        self.limit = limit
        super().__init__(f"the frame count {frame_count} exceeds the limit of {limit}.")


class TagDurationLimitExceeded(LimitError):
    """A tag's total duration does not fit its 16-bit encoding."""

    def __init__(self, tag_name, duration, limit=U16_MAX):
        self.tag_name = tag_name
        self.duration = duration
        self.limit = limit
        super().__init__(
            f'tag "{tag_name}"\'s duration of {duration} frames is longer than '
            f'the limit of {limit}.'
        )


class TagRangeError(AseResError):
    """A tag refers to frames that do not exist."""

    def __init__(self, tag_name, start, end, frame_count):
        self.tag_name = tag_name
        self.start = start
        self.end = end
        self.frame_count = frame_count
        if frame_count:
            available = f'frames 0-{frame_count - 1}'
        else:
            available = 'no frames'
        super().__init__(
            f'tag "{tag_name}" spans frames {start}-{end}, but the sprite has {available}.'
        )


# ============================================================================
# Protocol errors
# ============================================================================

class ProtocolError(AseResError):
    """Aseprite produced data outside of its documented contract."""
    pass


class UnknownDirectionError(ProtocolError):
    """A tag uses an animation direction aseres does not implement."""

    def __init__(self, tag_name, direction):
        self.tag_name = tag_name
        self.direction = direction
        super().__init__(f'tag "{tag_name}" uses unimplemented direction "{direction}".')
