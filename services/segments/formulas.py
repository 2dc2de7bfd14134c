"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Formulas linking distance, duration and pace of a segment.

``duration = pace * distance``; every result is rounded to the whole
second (durations, paces) or to the metre (distances). Zero divisors give
zero results instead of raising.
"""

from __future__ import annotations

from typing import Any, Dict

from utils.coercion import coerce_float
from utils.constants import DISTANCE_DECIMALS, QUARTER_PACE_RATIO
from utils.time import (
    duration_to_seconds,
    format_duration,
    format_pace,
    pace_to_seconds,
    round_half_up,
)

Segment = Dict[str, Any]


def make_duration(segment: Segment) -> str:
    """Duration from distance and pace, e.g. 05:10 * 12.93 km = 01:06:48."""
    pace_seconds = pace_to_seconds(segment.get("pace"))
    distance = coerce_float(segment.get("distance"))
    total_seconds = int(round_half_up(pace_seconds * distance))
    return format_duration(total_seconds)


def make_pace(segment: Segment) -> str:
    """Pace from duration and distance, ``00:00`` for a zero distance."""
    distance = coerce_float(segment.get("distance"))
    if distance <= 0:
        return format_pace(0)
    duration_seconds = duration_to_seconds(segment.get("duration"))
    return format_pace(int(round_half_up(duration_seconds / distance)))


def make_distance(segment: Segment) -> float:
    """Distance from duration and pace, rounded to 3 decimals."""
    pace_seconds = pace_to_seconds(segment.get("pace"))
    duration_seconds = duration_to_seconds(segment.get("duration"))
    if pace_seconds == 0 or duration_seconds == 0:
        return 0
    return round_half_up(duration_seconds / pace_seconds, DISTANCE_DECIMALS)


def convert_pace_to_400(pace: Any) -> str:
    """Rework a per-km pace into a per-400 m pace (``MM:SS``)."""
    seconds = pace_to_seconds(pace)
    return format_pace(int(round_half_up(seconds * QUARTER_PACE_RATIO)))
