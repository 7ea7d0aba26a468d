"""Email parsing: MIME adapter, record extraction and mbox providers."""

from mbox2db.infrastructure.email.mime import (
    MimeLeaf,
    MimeMultipart,
    MimeParseError,
    ParsedMime,
    parse_mime,
)
from mbox2db.infrastructure.email.rfc822 import (
    clean_leading_whitespace,
    collect_bodies,
    extract_email_record,
)

__all__ = [
    "MimeLeaf",
    "MimeMultipart",
    "MimeParseError",
    "ParsedMime",
    "parse_mime",
    "clean_leading_whitespace",
    "collect_bodies",
    "extract_email_record",
]
