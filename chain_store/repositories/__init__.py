"""
Repositories.

One idempotent writer per stored entity.
"""

from chain_store.repositories.author_repository import AuthorRepository
from chain_store.repositories.base import BaseRepository
from chain_store.repositories.block_repository import BlockRepository
from chain_store.repositories.reward_event_repository import RewardEventRepository
from chain_store.repositories.slash_event_repository import SlashEventRepository
from chain_store.repositories.token_distribution_repository import (
    TokenDistributionRepository,
)
from chain_store.repositories.validator_repository import ValidatorRepository

__all__ = [
    "AuthorRepository",
    "BaseRepository",
    "BlockRepository",
    "RewardEventRepository",
    "SlashEventRepository",
    "TokenDistributionRepository",
    "ValidatorRepository",
]
