"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


# Ensure the package is importable when running tests without an editable
# install.
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from random_show_themes.logging import configure_logging  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(level="ERROR")
    yield


@pytest.fixture
def sample_catalog() -> dict:
    return {
        "1": {"id": 1, "title": "A", "opening_themes": ["X"]},
        "2": {"id": 2, "title": "B", "ending_themes": ["Y", "Z"]},
    }


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
