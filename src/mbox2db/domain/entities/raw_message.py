from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class RawMessageBlock:
    # 1-based position of the block in the mbox file
    sequence: int
    # each line ends with exactly one b"\n"; the first is usually the "From " envelope
    lines: tuple[bytes, ...]

    @property
    def data(self) -> bytes:
        return b"".join(self.lines)
