"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

from services.segments.augmentation import augment_segment_data, can_augment
from services.segments.collection import (
    SegmentNotFoundError,
    add_segment,
    find_segment,
    is_dirty_segment,
    remove_segment,
    update_segment,
)
from services.segments.formulas import (
    convert_pace_to_400,
    make_distance,
    make_duration,
    make_pace,
)
from services.segments.named_paces import resolve_named_pace
from services.segments.totals import make_segments_total
from services.segments.validation import is_valid_segment

__all__ = [
    "SegmentNotFoundError",
    "add_segment",
    "augment_segment_data",
    "can_augment",
    "convert_pace_to_400",
    "find_segment",
    "is_dirty_segment",
    "is_valid_segment",
    "make_distance",
    "make_duration",
    "make_pace",
    "make_segments_total",
    "remove_segment",
    "resolve_named_pace",
    "update_segment",
]
