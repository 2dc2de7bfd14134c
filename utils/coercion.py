"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Type coercion utilities for segment fields.
"""

from __future__ import annotations

import math
from typing import Any, Dict

from utils.constants import EMPTY_MARKERS


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Coerce a value to float with a default fallback.

    Handles None, empty strings, NaN and conversion errors by returning the default.

    Args:
        value: Value to coerce (can be None, str, int, float, etc.)
        default: Default value to return if coercion fails (default: 0.0)

    Returns:
        float: Coerced value or default if coercion fails
    """
    if value in (None, "") or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result):
        return default
    return result


def has_no_real_value(record: Dict[str, Any], key: str) -> bool:
    """Tell whether ``record[key]`` is absent or only a placeholder.

    None, a missing key, "", NaN, numeric zero, "00:00" and "00:00:00"
    all count as no real value.
    """
    if not isinstance(record, dict) or key not in record:
        return True
    value = record[key]
    if value is None or isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return math.isnan(value) or value == 0
    if isinstance(value, str):
        return value.strip() in EMPTY_MARKERS
    return False
