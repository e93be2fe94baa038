"""
Block repository.

Idempotent block writes and the scan cursor.
"""

from collections.abc import Sequence

from sqlalchemy import func, select

from chain_store.models.block import Block
from chain_store.records import BlockRecord
from chain_store.repositories.base import BaseRepository
from chain_store.utils.query_executor import QueryExecutor


class BlockRepository(BaseRepository[Block]):
    """Repository for processed blocks."""

    conflict_keys = ("height",)

    def __init__(self, executor: QueryExecutor) -> None:
        """Initialize repository."""
        super().__init__(Block, executor)

    async def save_blocks(self, blocks: Sequence[BlockRecord]) -> None:
        """
        Insert blocks, ignoring heights that are already stored.

        Writing a batch equals writing its blocks one by one in any order,
        so re-delivered ranges are absorbed.

        Args:
            blocks: Decoded blocks, usually a contiguous height range
        """
        if not blocks:
            return

        self.logger.info(f"Save block: #{blocks[0].height} ~ #{blocks[-1].height}")
        await self.insert_ignore([block.as_row() for block in blocks])

    async def get_last_height(self) -> int | None:
        """
        Get the highest stored block height.

        Returns:
            Height, or None when no block is stored yet (0 is a valid height)
        """
        result = await self.executor.execute(select(func.max(Block.height)))
        return result.scalar()
