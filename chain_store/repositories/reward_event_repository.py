"""
Reward event repository.

Idempotent staking.Reward writes and the latest payout split.
"""

from collections.abc import Sequence

from sqlalchemy import select

from chain_store.models.reward_event import RewardEvent
from chain_store.records import BlockHeader, RewardEventRecord
from chain_store.repositories.base import BaseRepository
from chain_store.utils.query_executor import QueryExecutor


class RewardEventRepository(BaseRepository[RewardEvent]):
    """Repository for staking.Reward events."""

    conflict_keys = ("height", "index")

    def __init__(self, executor: QueryExecutor) -> None:
        """Initialize repository."""
        super().__init__(RewardEvent, executor)

    async def save_reward_events(
        self, header: BlockHeader, events: Sequence[RewardEventRecord]
    ) -> None:
        """
        Insert reward events of a block, ignoring known (height, index) pairs.

        Args:
            header: Header of the block holding the events
            events: Decoded reward events
        """
        if not events:
            return

        self.logger.info(f"Save staking.Reward event: #{header.number}")
        await self.insert_ignore([event.as_row(header.number) for event in events])

    async def get_latest(self) -> tuple[str, str] | None:
        """
        Get the payout split of the most recent reward event.

        Events at the same height belong to the same era payout; the one
        with the highest index is taken.

        Returns:
            (validators_amount, treasury_amount) as decimal text, or None
        """
        stmt = (
            select(RewardEvent.validators_amount, RewardEvent.treasury_amount)
            .order_by(RewardEvent.height.desc(), RewardEvent.index.desc())
            .limit(1)
        )
        result = await self.executor.execute(stmt)
        if not result.rows:
            return None

        validators_amount, treasury_amount = result.rows[0]
        return validators_amount, treasury_amount
