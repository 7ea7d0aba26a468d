"""Domain models, pure rules and errors."""

from mbox2db.domain.dates import normalize_date
from mbox2db.domain.entities import EmailRecord, RawMessageBlock
from mbox2db.domain.errors import (
    Mbox2DbError,
    ParseFailure,
    SinkUnavailableError,
    SourceUnavailableError,
)
from mbox2db.domain.retention import RetentionPolicy, should_skip

__all__ = [
    "EmailRecord",
    "RawMessageBlock",
    "Mbox2DbError",
    "ParseFailure",
    "SourceUnavailableError",
    "SinkUnavailableError",
    "RetentionPolicy",
    "should_skip",
    "normalize_date",
]
