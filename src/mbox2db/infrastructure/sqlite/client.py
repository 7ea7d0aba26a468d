"""SQLite storage for converted email records."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from loguru import logger

from mbox2db.application.ports.record_sink import RecordSink
from mbox2db.domain.entities.email_record import EmailRecord
from mbox2db.domain.errors import SinkUnavailableError

# column -> EmailRecord attribute, in insert order
COLUMNS: tuple[tuple[str, str], ...] = (
    ("from_addr", "from_addr"),
    ("to_addr", "to_addr"),
    ("cc", "cc"),
    ("bcc", "bcc"),
    ("subject", "subject"),
    ("date", "date"),
    ("date_parsed", "date_parsed"),
    ("message_id", "message_id"),
    ("in_reply_to", "in_reply_to"),
    ("refs", "references"),
    ("content_type", "content_type"),
    ("body_plain", "body_plain"),
    ("body_html", "body_html"),
)

_INSERT_SQL = (
    f"INSERT INTO emails ({', '.join(column for column, _ in COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in COLUMNS)})"
)


class SQLiteEmailStore(RecordSink):
    """SQLite sink for EmailRecords.

    One connection stays open for the lifetime of the store so a whole mbox
    can be written inside a single transaction.
    """

    def __init__(
        self,
        db_path: str | Path = "emails.db",
        journal_mode: str = "WAL",
        synchronous: str = "NORMAL",
        cache_size: int = -64000,
        mmap_size: int = 30_000_000_000,
    ):
        self.db_path = Path(db_path)
        self.journal_mode = journal_mode
        self.synchronous = synchronous
        self.cache_size = cache_size
        self.mmap_size = mmap_size
        self._conn: sqlite3.Connection | None = None
        self._ensure_db()

    def _ensure_db(self) -> None:
        """Create database, tables and indexes if they don't exist."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = self._connect()
            conn.executescript(f"""
                PRAGMA journal_mode={self.journal_mode};
                PRAGMA synchronous={self.synchronous};
                PRAGMA cache_size={int(self.cache_size)};
                PRAGMA temp_store=MEMORY;
                PRAGMA mmap_size={int(self.mmap_size)};

                CREATE TABLE IF NOT EXISTS emails (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    from_addr TEXT,
                    to_addr TEXT,
                    cc TEXT,
                    bcc TEXT,
                    subject TEXT,
                    date TEXT,
                    date_parsed TEXT,
                    message_id TEXT,
                    in_reply_to TEXT,
                    refs TEXT,
                    content_type TEXT,
                    body_plain TEXT,
                    body_html TEXT
                );

                CREATE INDEX IF NOT EXISTS idx_from ON emails(from_addr);
                CREATE INDEX IF NOT EXISTS idx_date ON emails(date);
                CREATE INDEX IF NOT EXISTS idx_date_parsed ON emails(date_parsed);
                CREATE INDEX IF NOT EXISTS idx_subject ON emails(subject);
            """)
        except (OSError, sqlite3.Error) as e:
            self.close()
            raise SinkUnavailableError(f"Failed to create database {self.db_path}: {e}") from e
        logger.info(f"SQLite database initialized at {self.db_path}")

    def _connect(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, timeout=30.0)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    @property
    def connection(self) -> sqlite3.Connection:
        return self._connect()

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """Commit everything added inside the block, or roll it all back."""
        conn = self.connection
        try:
            yield
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise SinkUnavailableError(f"Failed to write to database {self.db_path}: {e}") from e
        except Exception:
            conn.rollback()
            raise

    def add(self, record: EmailRecord) -> None:
        """Insert one record. Commit happens in ``transaction``."""
        try:
            self.connection.execute(
                _INSERT_SQL,
                tuple(getattr(record, attribute) for _, attribute in COLUMNS),
            )
        except sqlite3.Error as e:
            raise SinkUnavailableError(f"Failed to insert into {self.db_path}: {e}") from e

    def count(self) -> int:
        cursor = self.connection.execute("SELECT COUNT(*) FROM emails")
        return cursor.fetchone()[0]

    def fetch_all(self) -> list[dict[str, Any]]:
        """All stored rows, oldest first."""
        cursor = self.connection.execute("SELECT * FROM emails ORDER BY id")
        return [dict(row) for row in cursor.fetchall()]

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug(f"Closed SQLite database {self.db_path}")

    def __enter__(self) -> SQLiteEmailStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
