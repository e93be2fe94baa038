"""
Slash event repository.
"""

from collections.abc import Sequence

from chain_store.models.slash_event import SlashEvent
from chain_store.records import BlockHeader, SlashEventRecord
from chain_store.repositories.base import BaseRepository
from chain_store.utils.query_executor import QueryExecutor


class SlashEventRepository(BaseRepository[SlashEvent]):
    """Repository for staking.Slash events."""

    conflict_keys = ("height", "index")

    def __init__(self, executor: QueryExecutor) -> None:
        """Initialize repository."""
        super().__init__(SlashEvent, executor)

    async def save_slash_events(
        self, header: BlockHeader, events: Sequence[SlashEventRecord]
    ) -> None:
        """
        Insert slash events of a block, ignoring known (height, index) pairs.

        Args:
            header: Header of the block holding the events
            events: Decoded slash events
        """
        if not events:
            return

        self.logger.info(f"Save staking.Slash event: #{header.number}")
        await self.insert_ignore([event.as_row(header.number) for event in events])
