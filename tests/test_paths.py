from __future__ import annotations

from datetime import date

from mbox2db.infrastructure.sqlite import resolve_output_path

TODAY = date(2024, 5, 1)


def test_explicit_output_wins(tmp_path):
    target = tmp_path / "custom.db"
    assert resolve_output_path(target, destructive=True, today=TODAY, directory=tmp_path) == target


def test_destructive_reuses_fixed_name(tmp_path):
    assert resolve_output_path(destructive=True, directory=tmp_path) == tmp_path / "emails.db"


def test_dated_name_when_free(tmp_path):
    assert resolve_output_path(today=TODAY, directory=tmp_path) == tmp_path / "2024-05-01-emails.db"


def test_numbered_suffix_skips_existing_files(tmp_path):
    (tmp_path / "2024-05-01-emails.db").touch()
    assert resolve_output_path(today=TODAY, directory=tmp_path) == tmp_path / "2024-05-01-emails-0001.db"

    (tmp_path / "2024-05-01-emails-0001.db").touch()
    (tmp_path / "2024-05-01-emails-0002.db").touch()
    assert resolve_output_path(today=TODAY, directory=tmp_path) == tmp_path / "2024-05-01-emails-0003.db"


def test_falls_back_to_dated_name_when_counters_run_out(tmp_path):
    (tmp_path / "2024-05-01-emails.db").touch()
    (tmp_path / "2024-05-01-emails-0001.db").touch()
    path = resolve_output_path(today=TODAY, directory=tmp_path, max_attempts=2)
    assert path == tmp_path / "2024-05-01-emails.db"


def test_defaults_to_current_directory(tmp_path):
    # the autouse fixture chdirs into tmp_path
    path = resolve_output_path(today=TODAY)
    assert path.name == "2024-05-01-emails.db"
    assert path.parent.resolve() == tmp_path.resolve()
