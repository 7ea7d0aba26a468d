"""Convert an mbox archive into stored email records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from loguru import logger

from mbox2db.application.ports.message_source import MessageSource
from mbox2db.application.ports.record_sink import RecordSink
from mbox2db.domain.dates import normalize_date
from mbox2db.domain.entities.email_record import EmailRecord
from mbox2db.domain.entities.raw_message import RawMessageBlock
from mbox2db.domain.errors import ParseFailure
from mbox2db.domain.retention import RetentionPolicy
from mbox2db.infrastructure.email.rfc822 import extract_email_record


@dataclass
class ConversionStats:
    """Counters reported at the end of a run."""
    converted: int = 0
    skipped: int = 0
    failed: int = 0
    interrupted: bool = False

    @property
    def total(self) -> int:
        return self.converted + self.skipped + self.failed


class ConvertMboxUseCase:
    """Run every message block through extraction, date normalization,
    retention filtering and storage.

    Flow per block:
    1. Extract header fields and bodies (parse failures are logged and counted)
    2. Normalize the Date header into ``date_parsed``
    3. Skip Spam/Trash according to the retention policy
    4. Hand the record to the sink

    All writes happen inside a single sink transaction. ``request_stop`` ends
    the run at the next block boundary and still commits what was accepted.
    """

    def __init__(
        self,
        source: MessageSource,
        sink: RecordSink,
        policy: RetentionPolicy | None = None,
        progress_interval: int = 100,
        extractor: Callable[[RawMessageBlock], EmailRecord] = extract_email_record,
    ) -> None:
        self.source = source
        self.sink = sink
        self.policy = policy or RetentionPolicy()
        self.progress_interval = max(progress_interval, 1)
        self.extractor = extractor
        self._stop_requested = False

    def request_stop(self) -> None:
        """Stop after the block currently being processed."""
        self._stop_requested = True

    def run(self) -> ConversionStats:
        stats = ConversionStats()
        logger.info("Starting conversion...")

        with self.sink.transaction():
            for block in self.source.blocks():
                self._process_block(block, stats)
                if self._stop_requested:
                    stats.interrupted = True
                    logger.warning(f"Stop requested, ending after message {block.sequence}")
                    break
            logger.info("Committing to database...")

        logger.info(
            f"Conversion finished: converted={stats.converted}, "
            f"skipped={stats.skipped}, failed={stats.failed}"
        )
        return stats

    def _process_block(self, block: RawMessageBlock, stats: ConversionStats) -> None:
        try:
            record = self.extractor(block)
        except ParseFailure as e:
            stats.failed += 1
            logger.warning(f"Failed to parse email {block.sequence}: {e.reason}")
            return

        record.date_parsed = normalize_date(record.date)
        if record.date and record.date_parsed is None:
            logger.debug(f"Could not normalize date of email {block.sequence}: {record.date!r}")

        if self.policy.should_skip(record.gmail_labels):
            stats.skipped += 1
            logger.debug(f"Skipping email {block.sequence} (labels: {record.gmail_labels})")
            return

        self.sink.add(record)
        stats.converted += 1
        if stats.converted % self.progress_interval == 0:
            logger.info(f"Processed {stats.converted} emails ({stats.skipped} skipped)")
