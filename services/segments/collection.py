"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Copy-on-write operations over a training's list of segments.

Every function deep-copies its inputs and returns new objects; the
caller's list and segments are never modified.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, List, Mapping, Optional

from streamlit.logger import get_logger

from services.segments.augmentation import augment_segment_data
from services.segments.formulas import Segment
from utils.constants import PACE_MARKER, SEGMENT_FIELDS, SEGMENT_ID_KEY
from utils.ids import new_id, same_id

logger = get_logger(__name__)


class SegmentNotFoundError(ValueError):
    """Raised when an update targets a segment the training does not hold."""


def _index_of(uuid: Any, segments: List[Segment]) -> int:
    for index, stored in enumerate(segments):
        if same_id(stored.get(SEGMENT_ID_KEY), uuid):
            return index
    return -1


def find_segment(uuid: Any, segments: List[Segment]) -> Optional[Segment]:
    index = _index_of(uuid, segments)
    if index == -1:
        return None
    return deepcopy(segments[index])


def remove_segment(segment: Segment, segments: List[Segment]) -> List[Segment]:
    """Return a copy of ``segments`` without the first segment sharing ``segment``'s id."""
    result = deepcopy(list(segments))
    index = _index_of(segment.get(SEGMENT_ID_KEY), result)
    if index == -1:
        logger.debug("Segment %s not in training, nothing removed", segment.get(SEGMENT_ID_KEY))
        return result
    del result[index]
    return result


def add_segment(
    segment: Segment,
    segments: List[Segment],
    overwrite_uuid: bool = False,
    named_paces: Optional[Mapping[str, str]] = None,
    marker: str = PACE_MARKER,
) -> List[Segment]:
    """Append an augmented copy of ``segment``, giving it a fresh id when needed."""
    new_segment = deepcopy(segment)
    result = deepcopy(list(segments))
    if not new_segment.get(SEGMENT_ID_KEY) or overwrite_uuid:
        new_segment[SEGMENT_ID_KEY] = new_id()
    result.append(augment_segment_data(new_segment, named_paces, marker))
    logger.debug("Added segment %s (%d in training)", new_segment[SEGMENT_ID_KEY], len(result))
    return result


def update_segment(
    segment: Segment,
    segments: List[Segment],
    named_paces: Optional[Mapping[str, str]] = None,
    marker: str = PACE_MARKER,
) -> List[Segment]:
    """Replace the stored segment sharing ``segment``'s id with an augmented copy.

    Raises:
        SegmentNotFoundError: no stored segment has that id.
    """
    updated = augment_segment_data(segment, named_paces, marker)
    result = deepcopy(list(segments))
    index = _index_of(updated.get(SEGMENT_ID_KEY), result)
    if index == -1:
        logger.warning("Cannot update segment %s: not found", updated.get(SEGMENT_ID_KEY))
        raise SegmentNotFoundError(f"Segment {updated.get(SEGMENT_ID_KEY)} not found")
    result[index] = updated
    return result


def is_dirty_segment(segment: Segment, segments: List[Segment]) -> bool:
    """Tell whether ``segment`` differs from the stored segment with the same id."""
    stored = find_segment(segment.get(SEGMENT_ID_KEY), segments)
    if stored is None:
        return False
    return any(stored.get(key) != segment.get(key) for key in SEGMENT_FIELDS)
