"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

from services.segments.formulas import Segment, make_duration, make_pace
from utils.coercion import has_no_real_value
from utils.constants import SEGMENT_FIELDS


def is_valid_segment(segment: Segment) -> bool:
    """Round-trip check: duration and pace recomputed from the other fields must match.

    Distance is not checked: a distance rounded to 3 decimals rarely
    survives the round trip through whole seconds. A segment with a
    placeholder in any field is never valid.
    """
    if not isinstance(segment, dict):
        return False
    if any(has_no_real_value(segment, key) for key in SEGMENT_FIELDS):
        return False
    if make_duration(segment) != segment.get("duration"):
        return False
    return make_pace(segment) == segment.get("pace")
