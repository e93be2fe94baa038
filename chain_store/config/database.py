"""
Database handle.

Owns the async engine and its connection pool.
Constructed once at process start and passed into every component.
"""

from typing import Any

from loguru import logger
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from chain_store.config.settings import Settings
from chain_store.models import Base


class Database:
    """
    Long-lived handle to the backing store.

    Writers running concurrently each take their own pooled connection.
    In-memory SQLite (or any StaticPool engine) shares one connection
    between all callers and supports a single pipeline only; use a
    file-backed database or a server for concurrent writers.

    Example:
        database = Database.from_settings(settings)
        await database.create_schema()
        ...
        await database.dispose()
    """

    def __init__(self, url: str, **engine_kwargs: Any) -> None:
        """
        Initialize database handle.

        Args:
            url: SQLAlchemy async URL
            **engine_kwargs: Extra arguments for create_async_engine
        """
        self.url = make_url(url)
        self.engine: AsyncEngine = create_async_engine(self.url, **engine_kwargs)
        logger.info(
            f"Database handle created for {self.url.render_as_string(hide_password=True)}"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Create handle with pool options from settings."""
        url = settings.sqlalchemy_url
        engine_kwargs: dict[str, Any] = {"echo": settings.database_echo}

        # SQLite uses a single-connection pool without size options
        if make_url(url).get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
                pool_pre_ping=settings.database_pool_pre_ping,
            )

        return cls(url, **engine_kwargs)

    @property
    def dialect_name(self) -> str:
        """Dialect name used to pick upsert syntax (postgresql, sqlite, mysql)."""
        return self.engine.dialect.name

    async def create_schema(self) -> None:
        """Create all tables (checkfirst=True)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        logger.info("Chain store tables created")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connection pool disposed")
