"""Pytest configuration and shared fixtures for all tests."""

import os

# Minimal environment for tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from sqlalchemy.pool import StaticPool

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
from chain_store.services.chain_store_service import ChainStore


@pytest.fixture
async def database():
    """In-memory SQLite database with all tables created (single pipeline)."""
    db = Database("sqlite+aiosqlite://", poolclass=StaticPool)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture
async def store(database):
    """ChainStore bound to the in-memory database."""
    return ChainStore(database)


@pytest.fixture
def sample_validator_addr():
    """Sample Kusama validator address."""
    return "HNZata7iMYWmk5RvZRTiAsSDhV8366zq2YGb3tLH5Upf74F"


@pytest.fixture
def sample_author_addr():
    """Sample Kusama block author address."""
    return "GLVeryFRbg5hEKvQZcAnLvXZEXhiYaBjzSDwrXBXrfPF7wj"


@pytest.fixture
def make_block(sample_author_addr):
    """Factory for block records."""
    def _make(height: int, author_addr: str | None = None) -> BlockRecord:
        return BlockRecord(
            height=height,
            hash=f"0x{height:064x}",
            author_addr=author_addr or sample_author_addr,
        )
    return _make


@pytest.fixture
def make_header():
    """Factory for block headers."""
    def _make(number: int) -> BlockHeader:
        return BlockHeader(number=number, hash=f"0x{number:064x}")
    return _make


@pytest.fixture
def make_author(sample_author_addr):
    """Factory for author records."""
    def _make(height: int, author_addr: str | None = None) -> AuthorRecord:
        return AuthorRecord(
            author_addr=author_addr or sample_author_addr,
            height=height,
            hash=f"0x{height:064x}",
        )
    return _make


@pytest.fixture
def make_validator(sample_validator_addr):
    """Factory for validator snapshots with overridable fields."""
    def _make(**overrides) -> ValidatorRecord:
        values = {
            "current_era": 1500,
            "current_session": 9000,
            "validator_addr": sample_validator_addr,
            "validator_name": "KUSAMA-VALIDATOR-01",
            "controller_addr": "FcxNWVy5RESDsErjwyZmPCW6Z8Y3fbfLzmou34YZTrbcraL",
            "controller_name": "controller-01",
            "online": True,
            "era_point": 100,
            "reward_destination": "Staked",
            "commission": "10",
            "total_bonded": "12000000000000000",
            "self_bonded": "1000000000000000",
            "nominators": 64,
        }
        values.update(overrides)
        return ValidatorRecord(**values)
    return _make


@pytest.fixture
def make_reward_event():
    """Factory for reward events."""
    def _make(index: int, validators_amount="80", treasury_amount="20") -> RewardEventRecord:
        return RewardEventRecord(
            index=index,
            validators_amount=validators_amount,
            treasury_amount=treasury_amount,
        )
    return _make


@pytest.fixture
def make_slash_event():
    """Factory for slash events."""
    def _make(index: int, amount="500000000000", nickname="slashed-validator") -> SlashEventRecord:
        return SlashEventRecord(
            index=index,
            account_addr="DbF59HrqrrPh9L2Fi4EBd7gn4xFUSXmrE6zyMzf3pETXLvg",
            amount=amount,
            nickname=nickname,
        )
    return _make


@pytest.fixture
def make_token_distribution():
    """Factory for token supply snapshots."""
    def _make(height: int, **overrides) -> TokenDistributionRecord:
        values = {
            "height": height,
            "current_era": 1500,
            "current_session": 9000,
            "total_issuance": "14000000000000000000",
            "total_bond": "6300000000000000000",
            "validators_count": 1000,
            "staking_ratio": "0.45",
            "inflation": "0.1",
            "val_day_rewards": "3200000000000",
        }
        values.update(overrides)
        return TokenDistributionRecord(**values)
    return _make
