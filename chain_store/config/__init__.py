"""Configuration: settings, logging and the database handle."""

from chain_store.config.database import Database
from chain_store.config.logging_config import setup_logging
from chain_store.config.settings import Settings, get_settings

__all__ = [
    "Database",
    "Settings",
    "get_settings",
    "setup_logging",
]
