"""mbox2db - convert mbox archives into a SQLite database."""

__version__ = "0.1.0"
