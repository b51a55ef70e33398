"""Shared fixtures for linestore tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the src/ package importable without an install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from linestore.store import LineFileStore  # noqa: E402


@pytest.fixture()
def store_path(tmp_path):
    return tmp_path / "data.txt"


@pytest.fixture()
def xy_store(store_path):
    """Store over a file holding the lines x, y."""
    store = LineFileStore(store_path)
    store.write_all("x\ny").unwrap()
    return store
