"""Output database file naming."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

DESTRUCTIVE_NAME = "emails.db"


def resolve_output_path(
    output: Optional[str | Path] = None,
    destructive: bool = False,
    today: Optional[date] = None,
    directory: str | Path = ".",
    max_attempts: int = 10000,
) -> Path:
    """Pick the database path for a run.

    An explicit ``output`` always wins. ``destructive`` reuses ``emails.db``.
    Otherwise the file is named after today's date, with a numbered suffix
    (``2024-05-01-emails-0001.db``) when earlier runs already used the name.
    """
    if output:
        return Path(output)

    directory = Path(directory)
    if destructive:
        return directory / DESTRUCTIVE_NAME

    stamp = (today or date.today()).strftime("%Y-%m-%d")
    base_file = directory / f"{stamp}-emails.db"
    if not base_file.exists():
        return base_file

    for counter in range(1, max_attempts):
        numbered_file = directory / f"{stamp}-emails-{counter:04d}.db"
        if not numbered_file.exists():
            return numbered_file

    return base_file
