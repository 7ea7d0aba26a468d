"""Ports implemented by infrastructure adapters."""

from mbox2db.application.ports.message_source import MessageSource
from mbox2db.application.ports.record_sink import RecordSink

__all__ = [
    "MessageSource",
    "RecordSink",
]
