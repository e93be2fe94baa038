"""
Chain Store Service.

Interface exposed to the ingestion driver: one method per stored entity
plus the two derived reads used to resume and report.
"""

from collections.abc import Sequence
from decimal import Decimal

from loguru import logger

from chain_store.config.database import Database
from chain_store.records import (
    AuthorRecord,
    BlockHeader,
    BlockRecord,
    RewardEventRecord,
    SlashEventRecord,
    TokenDistributionRecord,
    ValidatorRecord,
)
from chain_store.repositories import (
    AuthorRepository,
    BlockRepository,
    RewardEventRepository,
    SlashEventRepository,
    TokenDistributionRepository,
    ValidatorRepository,
)
from chain_store.utils.exceptions import NotFoundError, UndefinedRatioError
from chain_store.utils.query_executor import QueryExecutor


class ChainStore:
    """
    Persistence facade for chain-derived facts.

    Every write is idempotent under re-delivery, except author writes
    which rely on the caller delivering blocks in non-decreasing height
    order. Writes either succeed or raise StoreError, which is fatal.
    Writers for different entities may run concurrently; consistency
    across entities of the same height is eventual.

    Example:
        database = Database.from_settings(settings)
        store = ChainStore(database)
        start = await store.get_last_block_processed()
    """

    def __init__(self, database: Database) -> None:
        """
        Initialize store.

        Args:
            database: Long-lived database handle shared by all writers
        """
        self.database = database
        self.executor = QueryExecutor(database)
        self.logger = logger.bind(service=self.__class__.__name__)

        self.blocks = BlockRepository(self.executor)
        self.authors = AuthorRepository(self.executor)
        self.validators = ValidatorRepository(self.executor)
        self.reward_events = RewardEventRepository(self.executor)
        self.slash_events = SlashEventRepository(self.executor)
        self.token_distributions = TokenDistributionRepository(self.executor)

    async def save_blocks(self, blocks: Sequence[BlockRecord]) -> None:
        """Insert-or-ignore blocks by height."""
        await self.blocks.save_blocks(blocks)

    async def save_validators(
        self, header: BlockHeader, validators: Sequence[ValidatorRecord]
    ) -> None:
        """Insert validators; refresh height/online/era_point on conflict."""
        await self.validators.save_validators(header, validators)

    async def save_author(self, author: AuthorRecord) -> None:
        """Replace the author's last-seen block pointer."""
        await self.authors.save_author(author)

    async def save_reward_events(
        self, header: BlockHeader, events: Sequence[RewardEventRecord]
    ) -> None:
        """Insert-or-ignore reward events by (height, index)."""
        await self.reward_events.save_reward_events(header, events)

    async def save_slash_events(
        self, header: BlockHeader, events: Sequence[SlashEventRecord]
    ) -> None:
        """Insert-or-ignore slash events by (height, index)."""
        await self.slash_events.save_slash_events(header, events)

    async def save_token_distribution(self, distribution: TokenDistributionRecord) -> None:
        """Replace the token snapshot for its height."""
        await self.token_distributions.save_token_distribution(distribution)

    async def get_last_block_processed(self) -> int | None:
        """
        Get the scan cursor.

        Returns:
            Highest stored block height, or None when nothing is stored
        """
        return await self.blocks.get_last_height()

    async def get_last_reward_event_percent(self) -> float:
        """
        Get the validators' share of the most recent reward payout.

        Returns:
            validators / (validators + treasury) of the reward event with
            the greatest height

        Raises:
            NotFoundError: If no reward event is stored
            UndefinedRatioError: If both amounts of that event are zero
        """
        latest = await self.reward_events.get_latest()
        if latest is None:
            raise NotFoundError("No reward events stored")

        validators = Decimal(latest[0])
        total = validators + Decimal(latest[1])
        if total == 0:
            raise UndefinedRatioError("Latest reward event has a zero payout")

        return float(validators / total)

    async def create_schema(self) -> None:
        """Create all tables if missing."""
        await self.database.create_schema()

    async def close(self) -> None:
        """Dispose the connection pool."""
        await self.database.dispose()
