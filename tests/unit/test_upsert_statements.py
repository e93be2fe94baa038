"""
Unit tests for upsert statement construction.

Statements are compiled per dialect without a database to check the
conflict policy of every writer.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import mysql, postgresql, sqlite

from chain_store.repositories import (
    AuthorRepository,
    BlockRepository,
    RewardEventRepository,
    SlashEventRepository,
    TokenDistributionRepository,
    ValidatorRepository,
)
from chain_store.repositories.validator_repository import PER_BLOCK_COLUMNS

DIALECTS = {
    "postgresql": postgresql.dialect(),
    "sqlite": sqlite.dialect(),
    "mysql": mysql.dialect(),
}


def make_executor(dialect_name: str):
    """Executor mock reporting the given dialect."""
    executor = MagicMock()
    executor.database.dialect_name = dialect_name
    executor.execute = AsyncMock()
    return executor


def compile_sql(statement, dialect_name: str) -> str:
    """Compile statement to SQL text for a dialect."""
    return str(statement.compile(dialect=DIALECTS[dialect_name]))


@pytest.fixture
def block_rows():
    """Two block rows."""
    return [
        {"height": 1, "hash": "0x01", "author_addr": "a"},
        {"height": 2, "hash": "0x02", "author_addr": "b"},
    ]


class TestInsertIgnore:
    """Insert-or-ignore writers (blocks, events)."""

    @pytest.mark.parametrize("dialect_name", ["postgresql", "sqlite"])
    def test_block_on_conflict_do_nothing(self, dialect_name, block_rows):
        """Blocks ignore conflicts on height."""
        repo = BlockRepository(make_executor(dialect_name))
        sql = compile_sql(repo.build_insert_ignore(block_rows), dialect_name)

        assert sql.startswith("INSERT INTO ksm_block")
        assert "ON CONFLICT (height) DO NOTHING" in sql

    def test_block_mysql_insert_ignore(self, block_rows):
        """MySQL uses INSERT IGNORE."""
        repo = BlockRepository(make_executor("mysql"))
        sql = compile_sql(repo.build_insert_ignore(block_rows), "mysql")

        assert sql.startswith("INSERT IGNORE INTO ksm_block")
        assert "ON DUPLICATE KEY" not in sql

    @pytest.mark.parametrize("repo_class", [RewardEventRepository, SlashEventRepository])
    def test_events_conflict_on_height_and_index(self, repo_class):
        """Events ignore conflicts on (height, index)."""
        repo = repo_class(make_executor("postgresql"))
        row = {column.key: None for column in repo.table.columns if column.key != "id"}
        row.update(height=1, index=0)

        sql = compile_sql(repo.build_insert_ignore([row]), "postgresql")

        assert "ON CONFLICT (height, " in sql
        assert "index" in sql.split("ON CONFLICT")[1]
        assert sql.endswith("DO NOTHING")

    def test_multi_row_single_statement(self, block_rows):
        """A batch becomes one multi-row VALUES clause."""
        repo = BlockRepository(make_executor("sqlite"))
        sql = compile_sql(repo.build_insert_ignore(block_rows), "sqlite")

        assert sql.count("INSERT") == 1
        assert sql.count("(?, ?, ?)") == 2


class TestUpsert:
    """Replace and partial-update writers."""

    def test_validator_updates_only_per_block_columns(self):
        """Validators refresh height, online and era_point only."""
        repo = ValidatorRepository(make_executor("postgresql"))
        row = {column.key: None for column in repo.table.columns if column.key != "id"}
        row.update(height=1, validator_addr="v")

        sql = compile_sql(repo.build_upsert([row], PER_BLOCK_COLUMNS), "postgresql")
        update_clause = sql.split("DO UPDATE SET")[1]

        assert "ON CONFLICT (height, validator_addr)" in sql
        assert "height = excluded.height" in update_clause
        assert "online = excluded.online" in update_clause
        assert "era_point = excluded.era_point" in update_clause
        assert "commission" not in update_clause
        assert "total_bonded" not in update_clause

    def test_validator_mysql_on_duplicate_key(self):
        """MySQL partial update uses ON DUPLICATE KEY UPDATE."""
        repo = ValidatorRepository(make_executor("mysql"))
        row = {column.key: None for column in repo.table.columns if column.key != "id"}
        row.update(height=1, validator_addr="v")

        sql = compile_sql(repo.build_upsert([row], PER_BLOCK_COLUMNS), "mysql")
        update_clause = sql.split("ON DUPLICATE KEY UPDATE")[1]

        assert "era_point" in update_clause
        assert "commission" not in update_clause

    def test_author_replace_overwrites_all_columns(self):
        """Author replace overwrites height and hash."""
        repo = AuthorRepository(make_executor("sqlite"))
        row = {"author_addr": "a", "last_block_height": 1, "last_block_hash": "0x01"}

        sql = compile_sql(repo.build_upsert([row]), "sqlite")
        update_clause = sql.split("DO UPDATE SET")[1]

        assert "ON CONFLICT (author_addr)" in sql
        assert "last_block_height = excluded.last_block_height" in update_clause
        assert "last_block_hash = excluded.last_block_hash" in update_clause

    def test_token_replace_columns(self):
        """Token replace covers every non-key column."""
        repo = TokenDistributionRepository(make_executor("postgresql"))

        assert repo.replace_columns() == [
            "current_era",
            "current_session",
            "total_issuance",
            "total_bond",
            "validators_count",
            "staking_ratio",
            "inflation",
            "val_day_rewards",
        ]

    def test_unsupported_dialect(self, block_rows):
        """Dialects without upsert support are rejected."""
        repo = BlockRepository(make_executor("oracle"))
        with pytest.raises(NotImplementedError):
            repo.build_insert_ignore(block_rows)


class TestDedupe:
    """Collapsing duplicate keys inside one batch."""

    def test_ignore_keeps_first(self):
        """Ignore policies keep the first row per key."""
        repo = BlockRepository(make_executor("postgresql"))
        rows = [
            {"height": 1, "hash": "0xa"},
            {"height": 1, "hash": "0xb"},
            {"height": 2, "hash": "0xc"},
        ]

        assert repo.dedupe(rows, keep="first") == [
            {"height": 1, "hash": "0xa"},
            {"height": 2, "hash": "0xc"},
        ]

    def test_update_keeps_last(self):
        """Update policies keep the last row per key, in first-seen order."""
        repo = BlockRepository(make_executor("postgresql"))
        rows = [
            {"height": 1, "hash": "0xa"},
            {"height": 2, "hash": "0xc"},
            {"height": 1, "hash": "0xb"},
        ]

        assert repo.dedupe(rows, keep="last") == [
            {"height": 1, "hash": "0xb"},
            {"height": 2, "hash": "0xc"},
        ]


class TestEmptyBatches:
    """Empty input never reaches the executor."""

    @pytest.mark.asyncio
    async def test_empty_blocks_no_statement(self):
        """Empty block batch issues no statement."""
        executor = make_executor("postgresql")
        await BlockRepository(executor).save_blocks([])
        executor.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_validators_no_statement(self, make_header):
        """Empty validator batch issues no statement."""
        executor = make_executor("postgresql")
        await ValidatorRepository(executor).save_validators(make_header(1), [])
        executor.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_events_no_statement(self, make_header):
        """Empty event batches issue no statement."""
        executor = make_executor("postgresql")
        await RewardEventRepository(executor).save_reward_events(make_header(1), [])
        await SlashEventRepository(executor).save_slash_events(make_header(1), [])
        executor.execute.assert_not_awaited()
