"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from services.segments.augmentation import augment_segment_data
from services.segments.formulas import Segment, make_duration, make_pace
from utils.coercion import coerce_float, has_no_real_value
from utils.constants import (
    DISTANCE_DECIMALS,
    PACE_MARKER,
    ZERO_DISTANCE,
    ZERO_DURATION,
    ZERO_PACE,
)
from utils.time import duration_to_seconds, format_duration, round_half_up

Total = Dict[str, Any]


def empty_total() -> Total:
    return {
        "distance": ZERO_DISTANCE,
        "duration": ZERO_DURATION,
        "pace": ZERO_PACE,
    }


def make_segments_total(
    segments: Iterable[Segment],
    named_paces: Optional[Mapping[str, str]] = None,
    marker: str = PACE_MARKER,
) -> Total:
    """Sum distances and durations of a training's segments and derive the total pace.

    Each segment is augmented first so partially filled segments still
    count. The input list is left untouched.
    """
    total = empty_total()
    segments = list(segments or [])
    if not segments:
        return total

    distance = 0.0
    duration_seconds = 0
    for segment in segments:
        augmented = augment_segment_data(segment, named_paces, marker)
        distance += coerce_float(augmented.get("distance"))
        duration_seconds += duration_to_seconds(augmented.get("duration"))
        total["duration"] = format_duration(duration_seconds)
    total["distance"] = round_half_up(distance, DISTANCE_DECIMALS)

    if has_no_real_value(total, "pace"):
        total["pace"] = make_pace(total)
    elif has_no_real_value(total, "duration"):
        total["duration"] = make_duration(total)
    return total
