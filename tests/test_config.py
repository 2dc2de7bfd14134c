import json

import pytest

from utils.config import load_config
from utils.constants import NAMED_PACES


def test_load_config_defaults():
    cfg = load_config()
    assert cfg.pace_marker == "@"
    assert cfg.named_paces_path is None
    assert cfg.named_paces == NAMED_PACES


def test_load_config_merges_named_paces(tmp_path, monkeypatch):
    path = tmp_path / "paces.json"
    path.write_text(json.dumps({"EASY": "05:20", "HMP": "04:10", "BAD": "fast"}), encoding="utf-8")
    monkeypatch.setenv("SEGMENTS_NAMED_PACES_PATH", str(path))
    monkeypatch.setenv("SEGMENTS_PACE_MARKER", "#")
    cfg = load_config()
    assert cfg.pace_marker == "#"
    assert cfg.named_paces["EASY"] == "05:20"
    assert cfg.named_paces["HMP"] == "04:10"
    assert cfg.named_paces["MP"] == "04:05"
    assert "BAD" not in cfg.named_paces


def test_load_config_rejects_unreadable_file(tmp_path, monkeypatch):
    path = tmp_path / "paces.json"
    path.write_text("[1, 2]", encoding="utf-8")
    monkeypatch.setenv("SEGMENTS_NAMED_PACES_PATH", str(path))
    with pytest.raises(RuntimeError):
        load_config()
    monkeypatch.setenv("SEGMENTS_NAMED_PACES_PATH", str(tmp_path / "missing.json"))
    with pytest.raises(RuntimeError):
        load_config()
