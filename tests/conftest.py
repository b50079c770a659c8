"""Shared test fixtures: sample host payloads and their expected renders."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep PICOMAP_* overrides from the developer's shell out of the tests."""
    monkeypatch.delenv("PICOMAP_SMOOTHING", raising=False)
    monkeypatch.delenv("PICOMAP_FORMAT", raising=False)


@pytest.fixture
def sample_sync_args() -> dict:
    """A 10-line buffer shown in a 5-row window.

    Hunk marks lines 2-4, an error on line 3 and a warning on line 8.
    Cursor on line 1, lines 1-5 visible (all 1-based, as the host sends them).
    """
    return {
        "len": 10,
        "height": 5,
        "cursor": 1,
        "top": 1,
        "bottom": 5,
        "locations": [
            {"lnum": 3, "type": "E", "text": "undefined name 'foo'"},
            {"lnum": 8, "type": "W", "text": "unused import"},
        ],
        "hunks": [[0, 0, 2, 3]],
    }


@pytest.fixture
def sample_sync_rows() -> list:
    """Expected render of ``sample_sync_args``."""
    return [
        "▖ 0100c",
        "▌▌0102v",
        "▘ 0100v",
        " ▖0001 ",
        " ▘0001 ",
    ]


@pytest.fixture
def sample_payload_file(tmp_path: Path, sample_sync_args: dict) -> Path:
    path = tmp_path / "sync.json"
    path.write_text(json.dumps(sample_sync_args), encoding="utf-8")
    return path
