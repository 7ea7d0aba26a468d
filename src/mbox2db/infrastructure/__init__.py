"""Infrastructure layer - configuration, logging, parsing and storage adapters."""

from mbox2db.infrastructure.logging_config import configure_logging
from mbox2db.infrastructure.settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
]
