from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class EmailRecord:
    """One converted message. Every field is best-effort and defaults to empty."""

    from_addr: str = ""
    to_addr: str = ""
    cc: str = ""
    bcc: str = ""
    subject: str = ""
    date: str = ""  # raw Date header, stored verbatim
    date_parsed: Optional[str] = None  # YYYY-MM-DD HH:MM:SS when normalizable
    message_id: str = ""
    in_reply_to: str = ""
    references: str = ""
    content_type: str = ""
    body_plain: str = ""
    body_html: str = ""
    gmail_labels: str = ""  # consumed by the retention filter, never persisted
