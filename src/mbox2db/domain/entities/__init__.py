"""Domain entities."""

from mbox2db.domain.entities.email_record import EmailRecord
from mbox2db.domain.entities.raw_message import RawMessageBlock

__all__ = [
    "EmailRecord",
    "RawMessageBlock",
]
