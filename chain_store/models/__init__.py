"""
Database models.

Exports all SQLAlchemy models for easy imports.
"""

from chain_store.models.author import Author
from chain_store.models.base import Base
from chain_store.models.block import Block
from chain_store.models.reward_event import RewardEvent
from chain_store.models.slash_event import SlashEvent
from chain_store.models.token_distribution import TokenDistribution
from chain_store.models.validator import Validator

__all__ = [
    # Base
    "Base",
    # Chain
    "Block",
    "Author",
    "Validator",
    # Events
    "RewardEvent",
    "SlashEvent",
    # Snapshots
    "TokenDistribution",
]
