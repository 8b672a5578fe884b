# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

"""aseres - Aseprite Resource Compiler."""

__version__ = '0.1.0'
