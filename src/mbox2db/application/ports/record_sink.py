from __future__ import annotations
from typing import ContextManager, Protocol
from mbox2db.domain.entities.email_record import EmailRecord

class RecordSink(Protocol):
    def transaction(self) -> ContextManager[None]: ...
    def add(self, record: EmailRecord) -> None: ...
