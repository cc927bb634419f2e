"""Test configuration ensuring the local package is importable."""

from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _no_cell_limit_override(monkeypatch):
    monkeypatch.delenv("WILDFUZZ_MAX_CELLS", raising=False)
