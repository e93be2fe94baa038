"""
Logging configuration.

Configures loguru sinks for the ingestion process.
Sets up log rotation and retention policies.
"""

import sys

from loguru import logger

from chain_store.config.settings import Settings


def setup_logging(settings: Settings) -> None:
    """Configure logger with stderr and optional file rotation."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            level=settings.log_level,
            encoding="utf-8",
        )

    logger.info("Chain store logging configured")
