"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

# ==============================================================================
# SEGMENT PLACEHOLDERS
# ==============================================================================

ZERO_DURATION = "00:00:00"
ZERO_PACE = "00:00"
ZERO_DISTANCE = 0

# Values treated as "no real value" for distance, duration and pace fields
EMPTY_MARKERS = {"", "0", ZERO_PACE, ZERO_DURATION}

DISTANCE_DECIMALS = 3

SEGMENT_FIELDS = ("distance", "duration", "pace")
SEGMENT_ID_KEY = "uuid"

# ==============================================================================
# NAMED PACES
# ==============================================================================

PACE_MARKER = "@"

# Token (without marker) -> pace per km as MM:SS
NAMED_PACES = {
    "RECOV": "05:30",
    "EASY": "05:10",
    "LRP": "04:45",
    "MP": "04:05",
    "MP+5%": "04:17",
    "21KP": "03:53",
    "16KP": "03:49",
    "LT": "03:49",
    "10KP": "03:36",
    "5KP": "03:30",
    "3KP": "03:21",
    "MIP": "03:10",
}

# ==============================================================================
# QUARTER PACE
# ==============================================================================

# 400 m is 4/10 of the reference km
QUARTER_PACE_RATIO = 4 / 10
