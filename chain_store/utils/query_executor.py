"""
Query executor.

Runs parameterized statements against the store, one transaction per
statement, and normalizes store failures into StoreError.
"""

from dataclasses import dataclass, field
from typing import Any

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Executable

from chain_store.config.database import Database
from chain_store.utils.exceptions import STORE_FAILURES, StoreError


@dataclass
class StatementResult:
    """Rows and affected row count of one executed statement."""
    rows: list[Any] = field(default_factory=list)
    rowcount: int = -1

    def scalar(self) -> Any:
        """First column of the first row, or None."""
        if not self.rows:
            return None
        return self.rows[0][0]


class QueryExecutor:
    """
    Executes statements through the shared connection pool.

    Each statement runs on its own pooled connection and transaction, so it is
    atomic as a unit and committed on success. Concurrent callers
    never share a connection.
    """

    def __init__(self, database: Database) -> None:
        """
        Initialize executor.

        Args:
            database: Long-lived database handle
        """
        self.database = database
        self.logger = logger.bind(component="QueryExecutor")

    async def execute(self, statement: Executable) -> StatementResult:
        """
        Execute a statement and fetch its rows.

        Args:
            statement: SQLAlchemy statement with bound parameters

        Returns:
            StatementResult with fetched rows (empty for DML)

        Raises:
            StoreError: On any store-level failure, including a refused
                or dropped connection
        """
        try:
            async with self.database.engine.begin() as conn:
                result = await conn.execute(statement)
                rows = list(result.all()) if result.returns_rows else []
                return StatementResult(rows=rows, rowcount=result.rowcount)
        except STORE_FAILURES as e:
            sql = self.render(statement, e)
            self.logger.error(f"database error:\nsql: {sql},\nerror: {e}")
            raise StoreError(sql, e) from e

    def render(self, statement: Executable, error: BaseException | None = None) -> str:
        """SQL text of a statement for error reports (parameters stay bound)."""
        failed_sql = getattr(error, "statement", None)
        if failed_sql:
            return str(failed_sql)
        try:
            return str(statement.compile(dialect=self.database.engine.dialect))
        except SQLAlchemyError:
            return repr(statement)
