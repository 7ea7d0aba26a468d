"""SQLite infrastructure for converted email storage."""

from mbox2db.infrastructure.sqlite.client import COLUMNS, SQLiteEmailStore
from mbox2db.infrastructure.sqlite.paths import resolve_output_path

__all__ = [
    "COLUMNS",
    "SQLiteEmailStore",
    "resolve_output_path",
]
