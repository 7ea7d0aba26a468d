from __future__ import annotations
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional

from loguru import logger

from mbox2db.application.ports.message_source import MessageSource
from mbox2db.domain.entities.raw_message import RawMessageBlock
from mbox2db.domain.errors import SourceUnavailableError

BOUNDARY_PREFIX = b"From "


def _normalize_line(line: bytes) -> bytes:
    if line.endswith(b"\r\n"):
        line = line[:-2]
    elif line.endswith(b"\n"):
        line = line[:-1]
    return line + b"\n"


def split_messages(lines: Iterable[bytes]) -> Iterator[RawMessageBlock]:
    """Split mbox lines into message blocks at ``From `` lines.

    A ``From `` line only closes a block when something is accumulated, so the
    first envelope line simply opens the first block. Body lines that start
    with ``From `` split the message as well; unescaped mboxes are ambiguous.
    """
    current: list[bytes] = []
    sequence = 0
    for line in lines:
        if line.startswith(BOUNDARY_PREFIX) and current:
            sequence += 1
            yield RawMessageBlock(sequence=sequence, lines=tuple(current))
            current = []
        current.append(_normalize_line(line))

    if current:
        sequence += 1
        yield RawMessageBlock(sequence=sequence, lines=tuple(current))


class MboxFileSource(MessageSource):
    """Streams message blocks from an mbox file, one block in memory at a time."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._handle: Optional[BinaryIO] = None

    def open(self) -> MboxFileSource:
        if self._handle is None:
            try:
                self._handle = self.path.open("rb")
            except OSError as e:
                raise SourceUnavailableError(f"Failed to open input file {self.path}: {e}") from e
            logger.info(f"Reading mbox file {self.path}")
        return self

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> MboxFileSource:
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    def blocks(self) -> Iterator[RawMessageBlock]:
        self.open()
        try:
            yield from split_messages(self._handle)
        except OSError as e:
            raise SourceUnavailableError(f"Failed to read input file {self.path}: {e}") from e
