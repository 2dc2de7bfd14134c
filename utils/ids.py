"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

ID helpers.
"""

from __future__ import annotations

import uuid
from typing import Any


def new_id() -> str:
    return str(uuid.uuid4())


def same_id(left: Any, right: Any) -> bool:
    # Identifiers may come back from forms as ints; compare their text
    return str(left) == str(right)
