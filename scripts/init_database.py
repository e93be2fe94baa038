#!/usr/bin/env python3
"""Initialize chain store tables."""

import asyncio
import sys

from loguru import logger
from pydantic import ValidationError

from chain_store.config import Database, get_settings

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def init_database() -> None:
    """Create all chain store tables."""
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Invalid database settings: {e}")
        sys.exit(1)

    logger.info("Connecting to database...")
    database = Database.from_settings(settings)

    try:
        logger.info("Creating tables (checkfirst=True)...")
        await database.create_schema()
    finally:
        await database.dispose()

    logger.success("Database tables created successfully!")


if __name__ == "__main__":
    asyncio.run(init_database())
