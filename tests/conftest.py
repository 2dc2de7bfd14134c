import sys
from pathlib import Path

import pytest


# Ensure project root is importable for tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def training_segments():
    return [
        {"uuid": "seg-1", "distance": 5, "duration": "00:25:00", "pace": "05:00"},
        {"uuid": "seg-2", "distance": 2, "duration": "00:07:00", "pace": "03:30"},
        {"uuid": "seg-3", "distance": 1, "duration": "00:05:30", "pace": "05:30"},
    ]


@pytest.fixture(autouse=True)
def _clear_segment_env(monkeypatch):
    monkeypatch.delenv("SEGMENTS_PACE_MARKER", raising=False)
    monkeypatch.delenv("SEGMENTS_NAMED_PACES_PATH", raising=False)
