# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""
Identifier normalization for generated C symbols.

Converts human-readable names (file names, tag names) into lowercase,
underscore-separated identifiers:

    "TestPascalCasedTXTString"  -> "test_pascal_cased_txt_string"
    "_test-kebab_Mixed"         -> "test_kebab_mixed"
    "A B C"                     -> "a_b_c"

Whitespace, underscores, hyphens and any other character outside
[A-Za-z0-9] separate words. Within a chunk, words are further split at
casing transitions by a small state machine (see split_words).
"""

import re
import string

_SEPARATORS = re.compile(r'[^A-Za-z0-9]+')

# Scanner states
_START = 0
_LOWER = 1
_UPPER = 2


def _is_upper(char):
    return char in string.ascii_uppercase


def _is_lower(char):
    return char in string.ascii_lowercase


def split_words(chunk):
    """
    Split a separator-free chunk into words at casing transitions.

    A boundary goes before an uppercase letter that follows a lowercase
    letter ("camelCase" -> "camel", "Case"), and before an uppercase letter
    that follows another uppercase letter and precedes a lowercase one
    ("TXTString" -> "TXT", "String"). Uppercase runs with no lowercase
    letter after them stay whole. A digit is neither case, so it never starts
    a new word and the letter after it is judged as if at the start of a word.
    """
    words = []
    word = ''
    state = _START

    for index, char in enumerate(chunk):
        if _is_upper(char):
            if state == _LOWER:
                boundary = True
            elif state == _UPPER:
                boundary = index + 1 < len(chunk) and _is_lower(chunk[index + 1])
            else:
                boundary = False

            if boundary and word:
                words.append(word)
                word = ''

            state = _UPPER
        elif _is_lower(char):
            state = _LOWER
        else:
            state = _START

        word += char

    if word:
        words.append(word)

    return words


def convert_file_name_to_identifier(text):
    """Normalize arbitrary text into a lowercase snake_case identifier."""
    words = []
    for chunk in _SEPARATORS.split(text):
        words.extend(split_words(chunk))
    return '_'.join(word.lower() for word in words)
