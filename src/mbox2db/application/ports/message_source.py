from __future__ import annotations
from typing import Iterator, Protocol
from mbox2db.domain.entities.raw_message import RawMessageBlock

class MessageSource(Protocol):
    def blocks(self) -> Iterator[RawMessageBlock]: ...
