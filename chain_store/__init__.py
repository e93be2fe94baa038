"""
Chain store.

Idempotent persistence layer for a staking chain indexer.
"""

from chain_store.config.database import Database
from chain_store.config.settings import Settings, get_settings
from chain_store.records import (
    AuthorRecord,
    BlockHeader,
    BlockRecord,
    RewardEventRecord,
    SlashEventRecord,
    TokenDistributionRecord,
    ValidatorRecord,
)
from chain_store.services.chain_store_service import ChainStore
from chain_store.utils.exceptions import (
    ChainStoreError,
    InvalidRecordError,
    NotFoundError,
    StoreError,
    UndefinedRatioError,
)

__version__ = "0.1.0"

__all__ = [
    "AuthorRecord",
    "BlockHeader",
    "BlockRecord",
    "ChainStore",
    "ChainStoreError",
    "Database",
    "InvalidRecordError",
    "NotFoundError",
    "RewardEventRecord",
    "Settings",
    "SlashEventRecord",
    "StoreError",
    "TokenDistributionRecord",
    "UndefinedRatioError",
    "ValidatorRecord",
    "get_settings",
]
