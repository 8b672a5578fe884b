# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
Tag expansion: turns Aseprite frame tags into concrete frame index
sequences with a total duration in ticks.

    forward   from=2, to=5  -> [2, 3, 4, 5]
    reverse   from=2, to=5  -> [5, 4, 3, 2]
    pingpong  from=2, to=5  -> [2, 3, 4, 5, 4, 3]
"""

from dataclasses import dataclass

from .errors import U16_MAX, TagDurationLimitExceeded, TagRangeError, UnknownDirectionError

FORWARD = 'forward'
REVERSE = 'reverse'
PINGPONG = 'pingpong'


@dataclass(frozen=True)
class ResolvedTag:
    """A tag's playback order as indices into the frame table."""

    name: str
    indices: tuple
    duration: int


def expand_indices(start, end, direction, name=''):
    """Expand an inclusive frame range into playback order."""
    if direction == FORWARD:
        return list(range(start, end + 1))
    if direction == REVERSE:
        return list(range(end, start - 1, -1))
    if direction == PINGPONG:
        # End and start frames play once per cycle, interior frames twice
        return list(range(start, end)) + list(range(end, start, -1))
    raise UnknownDirectionError(name, direction)


def resolve_tag(tag, frames):
    if tag.start < 0 or tag.end >= len(frames) or tag.start > tag.end:
        raise TagRangeError(tag.name, tag.start, tag.end, len(frames))

    indices = expand_indices(tag.start, tag.end, tag.direction, tag.name)

    # Single-frame pingpong degenerates to an empty cycle
    if not indices:
        indices = [tag.start]

    duration = sum(frames[index].duration for index in indices)
    if duration > U16_MAX:
        raise TagDurationLimitExceeded(tag.name, duration)

    return ResolvedTag(tag.name, tuple(indices), duration)


def resolve_tags(raw_tags, frames):
    """
    Resolve every tag against the derived frame table, in input order.
    Returns: tuple of ResolvedTag
    """
    return tuple(resolve_tag(tag, frames) for tag in raw_tags)
