# This file is part of aseres.
# Copyright (c) 2024-2025 aseres contributors
# SPDX-License-Identifier: MIT

import sys

from .cli import main

sys.exit(main())
