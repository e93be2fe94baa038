"""
Validator repository.
"""

from collections.abc import Sequence

from chain_store.models.validator import Validator
from chain_store.records import BlockHeader, ValidatorRecord
from chain_store.repositories.base import BaseRepository
from chain_store.utils.query_executor import QueryExecutor

# Columns refreshed when a snapshot for the same key is re-delivered
PER_BLOCK_COLUMNS = ("height", "online", "era_point")


class ValidatorRepository(BaseRepository[Validator]):
    """Repository for validator snapshots."""

    conflict_keys = ("height", "validator_addr")

    def __init__(self, executor: QueryExecutor) -> None:
        """Initialize repository."""
        super().__init__(Validator, executor)

    async def save_validators(
        self, header: BlockHeader, validators: Sequence[ValidatorRecord]
    ) -> None:
        """
        Insert validator snapshots for a block.

        On key conflict only height, online and era_point are updated;
        identity, commission and bonding keep their stored values.

        Args:
            header: Header of the block the snapshot was taken at
            validators: Validator snapshots
        """
        if not validators:
            return

        self.logger.info(f"Save validators: #{header.number}")
        await self.upsert(
            [validator.as_row(header.number) for validator in validators],
            update_columns=PER_BLOCK_COLUMNS,
        )
