"""
Base repository.

Idempotent bulk writes and generic reads for all repositories.
"""

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from loguru import logger
from sqlalchemy import Table, func, select
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.sql import Executable

from chain_store.models.base import Base
from chain_store.utils.query_executor import QueryExecutor, StatementResult

# Generic type for model
ModelType = TypeVar("ModelType", bound=Base)

# Dialect-specific INSERT constructs that support conflict clauses
DIALECT_INSERTS: dict[str, Callable[[Table], Any]] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
    "mysql": mysql.insert,
    "mariadb": mysql.insert,
}


class BaseRepository(Generic[ModelType]):
    """
    Base repository with idempotent bulk write operations.

    Every write is a single multi-row INSERT with one of three conflict
    policies keyed by ``conflict_keys``:

    - ignore: keep the stored row
    - replace: overwrite every non-key column
    - update: overwrite only the listed columns

    Type Parameters:
        ModelType: SQLAlchemy model class

    Example:
        class BlockRepository(BaseRepository[Block]):
            conflict_keys = ("height",)

            def __init__(self, executor: QueryExecutor):
                super().__init__(Block, executor)
    """

    conflict_keys: tuple[str, ...] = ()

    def __init__(
        self, model: type[ModelType], executor: QueryExecutor
    ) -> None:
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            executor: Query executor bound to the shared database handle
        """
        self.model = model
        self.table: Table = model.__table__
        self.executor = executor
        self.logger = logger.bind(repository=self.__class__.__name__)

    @property
    def dialect_name(self) -> str:
        """Dialect of the backing store."""
        return self.executor.database.dialect_name

    def _insert(self, rows: list[dict[str, Any]]) -> Any:
        """Dialect-specific multi-row INSERT for the model table."""
        try:
            insert = DIALECT_INSERTS[self.dialect_name]
        except KeyError:
            raise NotImplementedError(
                f"Upserts are not supported for dialect {self.dialect_name!r}"
            ) from None
        return insert(self.table).values(rows)

    def _key_columns(self) -> list[Any]:
        return [self.table.c[key] for key in self.conflict_keys]

    def replace_columns(self) -> list[str]:
        """Non-key columns overwritten by a replace write."""
        return [
            column.key
            for column in self.table.columns
            if column.key not in self.conflict_keys and not column.primary_key
        ]

    def dedupe(
        self, rows: Sequence[dict[str, Any]], keep: str = "first"
    ) -> list[dict[str, Any]]:
        """
        Collapse rows sharing a conflict key.

        A single statement must not touch the same key twice (PostgreSQL
        rejects it for ON CONFLICT DO UPDATE). Order of first appearance
        is preserved.

        Args:
            rows: Row dicts keyed by column key
            keep: "first" for ignore policies, "last" for replace/update
        """
        unique: dict[tuple[Any, ...], dict[str, Any]] = {}
        for row in rows:
            key = tuple(row[k] for k in self.conflict_keys)
            if key in unique and keep == "first":
                continue
            unique[key] = row
        return list(unique.values())

    def build_insert_ignore(self, rows: Sequence[dict[str, Any]]) -> Executable:
        """INSERT that leaves existing rows untouched on key conflict."""
        stmt = self._insert(self.dedupe(rows, keep="first"))
        if self.dialect_name in ("mysql", "mariadb"):
            return stmt.prefix_with("IGNORE")
        return stmt.on_conflict_do_nothing(index_elements=self._key_columns())

    def build_upsert(
        self,
        rows: Sequence[dict[str, Any]],
        update_columns: Sequence[str] | None = None,
    ) -> Executable:
        """
        INSERT that overwrites columns of existing rows on key conflict.

        Args:
            rows: Row dicts keyed by column key
            update_columns: Columns to overwrite; all non-key columns if None
        """
        columns = list(update_columns) if update_columns is not None else self.replace_columns()
        stmt = self._insert(self.dedupe(rows, keep="last"))

        if self.dialect_name in ("mysql", "mariadb"):
            return stmt.on_duplicate_key_update(
                {self.table.c[column]: stmt.inserted[column] for column in columns}
            )
        return stmt.on_conflict_do_update(
            index_elements=self._key_columns(),
            set_={self.table.c[column]: stmt.excluded[column] for column in columns},
        )

    async def insert_ignore(self, rows: Sequence[dict[str, Any]]) -> StatementResult | None:
        """Insert rows, ignoring key conflicts. No statement for empty input."""
        if not rows:
            return None
        return await self.executor.execute(self.build_insert_ignore(rows))

    async def upsert(
        self,
        rows: Sequence[dict[str, Any]],
        update_columns: Sequence[str] | None = None,
    ) -> StatementResult | None:
        """Insert rows, overwriting columns on key conflict. No statement for empty input."""
        if not rows:
            return None
        return await self.executor.execute(self.build_upsert(rows, update_columns))

    # Read helpers for operators and tests; the ingestion path only writes

    async def find_all(
        self,
        limit: int | None = None,
        **filters: Any,
    ) -> list[dict[str, Any]]:
        """
        Find all rows matching filters.

        Args:
            limit: Max number of results
            **filters: Column filters by column key

        Returns:
            List of row dicts keyed by column key, ordered by primary key
        """
        stmt = select(*[column.label(column.key) for column in self.table.columns])
        for key, value in filters.items():
            stmt = stmt.where(self.table.c[key] == value)
        stmt = stmt.order_by(*self.table.primary_key.columns)

        if limit:
            stmt = stmt.limit(limit)

        result = await self.executor.execute(stmt)
        return [dict(row._mapping) for row in result.rows]

    async def get_by(self, **filters: Any) -> dict[str, Any] | None:
        """
        Get single row by filters.

        Returns:
            First matching row dict or None
        """
        rows = await self.find_all(limit=1, **filters)
        return rows[0] if rows else None

    async def count(self, **filters: Any) -> int:
        """
        Count rows matching filters.

        Args:
            **filters: Column filters by column key

        Returns:
            Count of matching rows
        """
        stmt = select(func.count()).select_from(self.table)
        for key, value in filters.items():
            stmt = stmt.where(self.table.c[key] == value)

        result = await self.executor.execute(stmt)
        return result.scalar() or 0
