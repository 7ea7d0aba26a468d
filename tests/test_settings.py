from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from mbox2db.infrastructure.settings import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.output_dir == Path(".")
    assert settings.progress_interval == 100
    assert settings.sqlite_journal_mode == "WAL"


def test_environment_prefix(monkeypatch):
    monkeypatch.setenv("MBOX2DB_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MBOX2DB_INCLUDE_TRASH", "true")
    monkeypatch.setenv("MBOX2DB_SQLITE_SYNCHRONOUS", "FULL")

    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.include_trash is True
    assert settings.sqlite_synchronous == "FULL"


def test_dotenv_file_is_read(tmp_path):
    # the autouse fixture chdirs into tmp_path
    (tmp_path / ".env").write_text("MBOX2DB_PROGRESS_INTERVAL=25\n")
    assert Settings().progress_interval == 25


def test_invalid_values_are_rejected(monkeypatch):
    monkeypatch.setenv("MBOX2DB_PROGRESS_INTERVAL", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_retention_policy_merges_flags_with_settings():
    settings = Settings(include_spam=True)
    policy = settings.retention_policy(include_trash=True)

    assert policy.include_spam and policy.include_trash
    assert not policy.include_both


def test_cli_flags_cannot_disable_configured_inclusion():
    policy = Settings(include_spam_and_trash=True).retention_policy()
    assert policy.include_both


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
