"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Translate named paces such as ``@EASY`` into real ``MM:SS`` paces.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from streamlit.logger import get_logger

from utils.constants import NAMED_PACES, PACE_MARKER

logger = get_logger(__name__)


def is_named_pace(pace: Any, marker: str = PACE_MARKER) -> bool:
    return isinstance(pace, str) and bool(marker) and pace.startswith(marker)


def resolve_named_pace(
    pace: Any,
    named_paces: Optional[Mapping[str, str]] = None,
    marker: str = PACE_MARKER,
) -> Any:
    """Return the real pace for a named pace, or ``pace`` itself.

    Values that are absent or do not start with ``marker`` are returned
    unchanged, as are unknown tokens.
    """
    if not is_named_pace(pace, marker):
        return pace
    table = NAMED_PACES if named_paces is None else named_paces
    token = pace[len(marker):]
    real_pace = table.get(token)
    if real_pace is None:
        logger.debug("Unknown named pace %s, keeping it as is", pace)
        return pace
    return real_pace
