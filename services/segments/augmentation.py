"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Complete a segment from partial data.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Mapping, Optional

from services.segments.formulas import Segment, make_distance, make_duration, make_pace
from services.segments.named_paces import resolve_named_pace
from services.segments.validation import is_valid_segment
from utils.coercion import has_no_real_value
from utils.constants import PACE_MARKER, SEGMENT_FIELDS
from utils.time import parse_duration


def missing_fields(segment: Segment) -> list[str]:
    return [key for key in SEGMENT_FIELDS if has_no_real_value(segment, key)]


def can_augment(segment: Segment) -> bool:
    """A segment is augmentable when exactly one of distance, duration, pace is missing."""
    return len(missing_fields(segment)) == 1


def augment_segment_data(
    segment: Segment,
    named_paces: Optional[Mapping[str, str]] = None,
    marker: str = PACE_MARKER,
) -> Segment:
    """Return a copy of ``segment`` with its missing field derived and ``isValid`` set.

    Named paces are translated and shorthand durations normalized first.
    Segments that are complete, or miss two or more fields, keep their
    values.
    """
    augmented = deepcopy(segment)
    augmented["pace"] = resolve_named_pace(augmented.get("pace"), named_paces, marker)
    if "duration" in augmented:
        augmented["duration"] = parse_duration(augmented["duration"])

    if can_augment(augmented):
        if has_no_real_value(augmented, "duration"):
            augmented["duration"] = make_duration(augmented)
        elif has_no_real_value(augmented, "pace"):
            augmented["pace"] = make_pace(augmented)
        elif has_no_real_value(augmented, "distance"):
            augmented["distance"] = make_distance(augmented)

    augmented["isValid"] = is_valid_segment(augmented)
    return augmented
