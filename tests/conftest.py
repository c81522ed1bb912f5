"""Pytest configuration helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Give every test a default configuration free of DMLKIT_* variables."""
    from dmlkit.config import set_config

    for name in list(os.environ):
        if name.startswith("DMLKIT_"):
            monkeypatch.delenv(name)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def sqlite_engine(tmp_path):
    """Create a file-backed SQLite engine with a ``users`` table."""
    db_path = tmp_path / "test.db"
    # Use as_posix() to ensure forward slashes for SQLite URLs (required on Windows)
    engine = create_engine(f"sqlite:///{db_path.as_posix()}")
    with engine.begin() as conn:
        conn.exec_driver_sql(
            "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, email TEXT, age INTEGER)"
        )
    yield engine
    engine.dispose()


@pytest.fixture
def read_users(sqlite_engine):
    """Return a callable listing all ``users`` rows ordered by id."""

    def _read():
        with sqlite_engine.connect() as conn:
            result = conn.exec_driver_sql("SELECT * FROM users ORDER BY id")
            return [tuple(row) for row in result]

    return _read
