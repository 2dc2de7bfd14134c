"""Segments service: keep one training's segments consistent."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from streamlit.logger import get_logger

from services.segments import (
    add_segment,
    augment_segment_data,
    find_segment,
    is_dirty_segment,
    make_segments_total,
    remove_segment,
    update_segment,
)
from utils.config import Config, load_config
from utils.constants import NAMED_PACES, PACE_MARKER

logger = get_logger(__name__)


@dataclass
class SegmentsService:
    segments: List[Dict[str, Any]] = field(default_factory=list)
    named_paces: Dict[str, str] = field(default_factory=lambda: dict(NAMED_PACES))
    pace_marker: str = PACE_MARKER

    def __post_init__(self) -> None:
        # Own a snapshot, never the caller's list
        self.segments = deepcopy(list(self.segments))

    @classmethod
    def from_config(
        cls, segments: Optional[List[Dict[str, Any]]] = None, cfg: Optional[Config] = None
    ) -> "SegmentsService":
        cfg = cfg or load_config()
        return cls(
            segments=segments or [],
            named_paces=dict(cfg.named_paces),
            pace_marker=cfg.pace_marker,
        )

    def list(self) -> List[Dict[str, Any]]:
        return deepcopy(self.segments)

    def augment(self, segment: Dict[str, Any]) -> Dict[str, Any]:
        return augment_segment_data(segment, self.named_paces, self.pace_marker)

    def find(self, uuid: str) -> Optional[Dict[str, Any]]:
        return find_segment(uuid, self.segments)

    def add(self, segment: Dict[str, Any], overwrite_uuid: bool = False) -> List[Dict[str, Any]]:
        self.segments = add_segment(
            segment, self.segments, overwrite_uuid, self.named_paces, self.pace_marker
        )
        return self.list()

    def update(self, segment: Dict[str, Any]) -> List[Dict[str, Any]]:
        self.segments = update_segment(segment, self.segments, self.named_paces, self.pace_marker)
        return self.list()

    def remove(self, segment: Dict[str, Any]) -> List[Dict[str, Any]]:
        self.segments = remove_segment(segment, self.segments)
        return self.list()

    def is_dirty(self, segment: Dict[str, Any]) -> bool:
        return is_dirty_segment(segment, self.segments)

    def total(self) -> Dict[str, Any]:
        total = make_segments_total(self.segments, self.named_paces, self.pace_marker)
        logger.debug(
            "Training total over %d segments: %s km in %s",
            len(self.segments),
            total["distance"],
            total["duration"],
        )
        return total
