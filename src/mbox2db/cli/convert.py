"""Convert an mbox archive into a SQLite database."""

from __future__ import annotations

import argparse
import signal
from pathlib import Path

from loguru import logger

from mbox2db.application.use_cases.convert_mbox import ConversionStats, ConvertMboxUseCase
from mbox2db.domain.errors import Mbox2DbError, SinkUnavailableError
from mbox2db.domain.retention import RetentionPolicy
from mbox2db.infrastructure import configure_logging, get_settings
from mbox2db.infrastructure.email.providers.mbox_file import MboxFileSource
from mbox2db.infrastructure.sqlite import SQLiteEmailStore, resolve_output_path

EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mbox2db", description="Convert mbox files to SQLite database")
    parser.add_argument("input", type=Path, help="Input mbox file path")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output database file path (default: YYYY-MM-DD-emails.db)")
    parser.add_argument("-d", "--destructive", action="store_true", help="Write to emails.db, replacing it, instead of auto-incrementing the filename (an -o path is never deleted)")
    parser.add_argument("--include-spam", action="store_true", help="Include emails marked as Spam")
    parser.add_argument("--include-trash", action="store_true", help="Include emails marked as Trash")
    parser.add_argument("--include-spam-and-trash", action="store_true", help="Include both Spam and Trash emails")
    parser.add_argument("--log-level", default=None, help="Log level (default: MBOX2DB_LOG_LEVEL or INFO)")
    return parser


def remove_existing_database(path: Path) -> None:
    """Delete a previous database and its WAL side files."""
    for candidate in (path, path.with_name(f"{path.name}-wal"), path.with_name(f"{path.name}-shm")):
        if not candidate.exists():
            continue
        try:
            candidate.unlink()
        except OSError as e:
            raise SinkUnavailableError(f"Failed to remove existing database {candidate}: {e}") from e
        logger.info(f"Removed existing {candidate}")


def format_summary(stats: ConversionStats, policy: RetentionPolicy) -> str:
    lines = [f"✓ Successfully converted {stats.converted} emails to database"]
    skip_hint = policy.describe_skipped(stats.skipped)
    if skip_hint:
        lines.append(f"    {skip_hint}")
    if stats.failed:
        lines.append(f"    {stats.failed} emails could not be parsed (see warnings above)")
    if stats.interrupted:
        lines.append("    Conversion interrupted, emails processed so far were kept")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the mbox2db command."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    logger.info(f"{settings.app_name} v{settings.app_version}")

    policy = settings.retention_policy(
        include_spam=args.include_spam,
        include_trash=args.include_trash,
        include_both=args.include_spam_and_trash,
    )
    output_path = resolve_output_path(args.output, args.destructive, directory=settings.output_dir)

    source = MboxFileSource(args.input)
    try:
        source.open()
        # an explicit -o path is never deleted
        if args.destructive and args.output is None:
            remove_existing_database(output_path)
        store = SQLiteEmailStore(
            output_path,
            journal_mode=settings.sqlite_journal_mode,
            synchronous=settings.sqlite_synchronous,
            cache_size=settings.sqlite_cache_size,
            mmap_size=settings.sqlite_mmap_size,
        )
    except Mbox2DbError as e:
        source.close()
        logger.error(str(e))
        return 1

    uc = ConvertMboxUseCase(
        source=source,
        sink=store,
        policy=policy,
        progress_interval=settings.progress_interval,
    )

    def _handle_shutdown(signum, frame) -> None:
        logger.info(f"Received signal {signum}, finishing current message...")
        uc.request_stop()

    previous_handlers = {
        sig: signal.signal(sig, _handle_shutdown) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        stats = uc.run()
    except Mbox2DbError as e:
        logger.error(str(e))
        return 1
    finally:
        for sig, handler in previous_handlers.items():
            signal.signal(sig, handler)
        source.close()
        store.close()

    print(format_summary(stats, policy))
    print(f"Database written to: {output_path}")
    return EXIT_INTERRUPTED if stats.interrupted else 0


if __name__ == "__main__":
    raise SystemExit(main())
