"""
Token distribution repository.
"""

from chain_store.models.token_distribution import TokenDistribution
from chain_store.records import TokenDistributionRecord
from chain_store.repositories.base import BaseRepository
from chain_store.utils.query_executor import QueryExecutor


class TokenDistributionRepository(BaseRepository[TokenDistribution]):
    """Repository for token supply snapshots."""

    conflict_keys = ("height",)

    def __init__(self, executor: QueryExecutor) -> None:
        """Initialize repository."""
        super().__init__(TokenDistribution, executor)

    async def save_token_distribution(self, distribution: TokenDistributionRecord) -> None:
        """
        Store the snapshot for a height, fully replacing any stored version.

        Args:
            distribution: Snapshot computed at a block
        """
        self.logger.info(f"Save token: #{distribution.height}")
        await self.upsert([distribution.as_row()])
