"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Duration and pace string helpers.

Durations are stored as ``HH:MM:SS`` and paces as ``MM:SS`` per unit
distance. Parsing never raises: malformed values count as zero seconds.
"""

from __future__ import annotations

import datetime as dt
import math
import re
from typing import Any

_CLOCK_RE = re.compile(r"^\s*(\d+):(\d{1,2})(?::(\d{1,2}))?\s*$")


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for positives (2.5 -> 3), unlike ``round``."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def format_duration(seconds: float) -> str:
    total = max(int(seconds or 0), 0)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_pace(seconds: float) -> str:
    total = max(int(seconds or 0), 0)
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def _clock_parts(value: str) -> tuple[int, int, int] | None:
    match = _CLOCK_RE.match(value)
    if not match:
        return None
    first, second, third = match.groups()
    if third is None:
        return 0, int(first), int(second)
    return int(first), int(second), int(third)


def duration_to_seconds(value: Any) -> int:
    """Convert a duration to whole seconds.

    Accepts ``HH:MM:SS``, ``MM:SS``, a number of seconds or a timedelta.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, dt.timedelta):
        return int(value.total_seconds())
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return 0
        return max(int(value), 0)
    parts = _clock_parts(str(value))
    if parts is None:
        return 0
    hours, minutes, secs = parts
    return hours * 3600 + minutes * 60 + secs


def pace_to_seconds(value: Any) -> int:
    """Convert a ``MM:SS`` pace to seconds per unit distance."""
    if value is None or isinstance(value, bool):
        return 0
    parts = _clock_parts(str(value))
    if parts is None:
        return 0
    hours, minutes, secs = parts
    return hours * 3600 + minutes * 60 + secs


def is_clock_string(value: Any) -> bool:
    return isinstance(value, str) and _CLOCK_RE.match(value) is not None


def parse_duration(duration: Any) -> Any:
    """Normalize duration input to ``HH:MM:SS``.

    - an int (or digit string) is a number of minutes: 945 -> "15:45:00"
    - ``MM:SS`` is padded: "45:00" -> "00:45:00"

    Anything else is returned unchanged.
    """
    if duration is None or duration == "" or isinstance(duration, bool):
        return duration
    if isinstance(duration, (int, float)) or (isinstance(duration, str) and duration.strip().isdigit()):
        try:
            minutes = int(float(duration))
        except (TypeError, ValueError):
            return duration
        return format_duration(dt.timedelta(minutes=minutes).total_seconds())
    if isinstance(duration, str) and len(duration) == 5:
        return f"00:{duration}"
    return duration
