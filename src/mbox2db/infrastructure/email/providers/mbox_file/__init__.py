"""Local mbox file provider."""

from mbox2db.infrastructure.email.providers.mbox_file.source import (
    BOUNDARY_PREFIX,
    MboxFileSource,
    split_messages,
)

__all__ = [
    "BOUNDARY_PREFIX",
    "MboxFileSource",
    "split_messages",
]
