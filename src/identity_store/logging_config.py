"""Logging setup for applications embedding the identity store."""

import logging
import sys

from identity_store_config import get_settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure logging for the identity store.

    Sets up:
    - Console output with timestamps and module names
    - Configurable log level for identity_store modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level_str = (level or get_settings().log_level).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("identity_store").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
