"""
Configuration loading utilities.

Loads environment variables from `.env` and builds the named-pace table
used to normalize segment paces.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv, find_dotenv
from streamlit.logger import get_logger

from utils.constants import NAMED_PACES, PACE_MARKER
from utils.time import is_clock_string

logger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    pace_marker: str
    named_paces_path: Optional[Path]
    named_paces: Dict[str, str] = field(default_factory=lambda: dict(NAMED_PACES))


def _read_named_paces(path: Path) -> Dict[str, str]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RuntimeError(f"Cannot read named paces from {path}") from e
    if not isinstance(raw, dict):
        raise RuntimeError(f"Named paces file {path} must contain a JSON object")
    table: Dict[str, str] = {}
    for token, pace in raw.items():
        if not is_clock_string(pace):
            logger.warning("Skipping named pace %s: %r is not MM:SS", token, pace)
            continue
        table[str(token)] = str(pace).strip()
    return table


def load_config() -> Config:
    """Load configuration from environment."""
    load_dotenv(find_dotenv(), override=True)

    pace_marker = os.getenv("SEGMENTS_PACE_MARKER") or PACE_MARKER
    path_str = os.getenv("SEGMENTS_NAMED_PACES_PATH")
    named_paces_path = Path(path_str).expanduser().resolve() if path_str else None

    named_paces = dict(NAMED_PACES)
    if named_paces_path is not None:
        overrides = _read_named_paces(named_paces_path)
        logger.debug("Loaded %d named paces from %s", len(overrides), named_paces_path)
        named_paces.update(overrides)

    return Config(
        pace_marker=pace_marker,
        named_paces_path=named_paces_path,
        named_paces=named_paces,
    )
