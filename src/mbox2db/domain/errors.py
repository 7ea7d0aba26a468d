"""Error types shared across layers."""

from __future__ import annotations


class Mbox2DbError(Exception):
    """Base class for mbox2db errors."""


class ParseFailure(Mbox2DbError):
    """A message block could not be interpreted as an RFC-822 message.

    Recovered per message: the conversion logs it, counts it and moves on.
    """

    def __init__(self, sequence: int, reason: str) -> None:
        super().__init__(f"message {sequence}: {reason}")
        self.sequence = sequence
        self.reason = reason


class SourceUnavailableError(Mbox2DbError):
    """The mbox input cannot be opened or read. Fatal for the run."""


class SinkUnavailableError(Mbox2DbError):
    """The output database cannot be created or opened. Fatal for the run."""
