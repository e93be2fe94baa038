"""
Author repository.
"""

from chain_store.models.author import Author
from chain_store.records import AuthorRecord
from chain_store.repositories.base import BaseRepository
from chain_store.utils.query_executor import QueryExecutor


class AuthorRepository(BaseRepository[Author]):
    """Repository for block authors."""

    conflict_keys = ("author_addr",)

    def __init__(self, executor: QueryExecutor) -> None:
        """Initialize repository."""
        super().__init__(Author, executor)

    async def save_author(self, author: AuthorRecord) -> None:
        """
        Replace the author's last-seen block pointer.

        The last write wins regardless of height. Callers must write in
        non-decreasing height order for the pointer to be the latest block.

        Args:
            author: Author of a processed block
        """
        self.logger.info(f"Save author: #{author.height}")
        await self.upsert([author.as_row()])
