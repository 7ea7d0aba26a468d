"""Application settings using Pydantic Settings for configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mbox2db.domain.retention import RetentionPolicy


class Settings(BaseSettings):
    """Application settings loaded from MBOX2DB_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MBOX2DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    app_name: str = "mbox2db"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Retention (CLI flags can only enable these)
    include_spam: bool = False
    include_trash: bool = False
    include_spam_and_trash: bool = False

    # Output
    output_dir: Path = Path(".")
    progress_interval: int = Field(default=100, ge=1)

    # SQLite tuning
    sqlite_journal_mode: Literal["WAL", "DELETE", "TRUNCATE", "PERSIST", "MEMORY", "OFF"] = "WAL"
    sqlite_synchronous: Literal["OFF", "NORMAL", "FULL", "EXTRA"] = "NORMAL"
    sqlite_cache_size: int = -64000
    sqlite_mmap_size: int = 30_000_000_000

    def retention_policy(
        self,
        include_spam: bool = False,
        include_trash: bool = False,
        include_both: bool = False,
    ) -> RetentionPolicy:
        """Merge CLI flags with configured defaults."""
        return RetentionPolicy(
            include_spam=include_spam or self.include_spam,
            include_trash=include_trash or self.include_trash,
            include_both=include_both or self.include_spam_and_trash,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
