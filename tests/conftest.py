from __future__ import annotations

import os
from pathlib import Path

import pytest

from mbox2db.infrastructure.settings import get_settings
from samples import build_mbox


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep MBOX2DB_* variables, .env files and the settings cache out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("MBOX2DB_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_mbox(tmp_path):
    def _write(*messages: str, name: str = "archive.mbox") -> Path:
        path = tmp_path / name
        path.write_bytes(build_mbox(*messages))
        return path

    return _write
