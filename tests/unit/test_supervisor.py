"""
Unit tests for the fail-fast supervisor.
"""

import pytest
from sqlalchemy.exc import OperationalError

from chain_store.supervisor import STORE_FAILURE_EXIT_CODE, fail_fast, run_fail_fast
from chain_store.utils.exceptions import (
    NotFoundError,
    StoreError,
    UndefinedRatioError,
    is_fatal,
)


def make_store_error() -> StoreError:
    """StoreError wrapping a driver failure."""
    cause = OperationalError("INSERT INTO ksm_block", {}, Exception("connection lost"))
    return StoreError("INSERT INTO ksm_block (height) VALUES (?)", cause)


class TestExceptionCategories:
    """Test fatal/non-fatal classification."""

    def test_store_error_is_fatal(self):
        """Store failures are fatal."""
        assert is_fatal(make_store_error())

    def test_raw_sqlalchemy_error_is_fatal(self):
        """Unwrapped SQLAlchemy errors are fatal too."""
        assert is_fatal(OperationalError("SELECT 1", {}, Exception("gone")))

    @pytest.mark.parametrize(
        "exc", [NotFoundError("none"), UndefinedRatioError("0/0"), ValueError("x")]
    )
    def test_read_errors_not_fatal(self, exc):
        """Read outcomes and caller errors are not fatal."""
        assert not is_fatal(exc)

    def test_store_error_keeps_statement(self):
        """StoreError carries statement and cause."""
        error = make_store_error()

        assert "ksm_block" in error.statement
        assert isinstance(error.cause, OperationalError)
        assert str(error).startswith("OperationalError")


class TestRunFailFast:
    """Test run_fail_fast."""

    @pytest.mark.asyncio
    async def test_result_passes_through(self):
        """Successful coroutines return their result."""
        async def ingest():
            return 42

        assert await run_fail_fast(ingest()) == 42

    @pytest.mark.asyncio
    async def test_store_error_terminates(self):
        """A store failure becomes SystemExit with the failure code."""
        error = make_store_error()

        async def ingest():
            raise error

        with pytest.raises(SystemExit) as exc_info:
            await run_fail_fast(ingest())

        assert exc_info.value.code == STORE_FAILURE_EXIT_CODE
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_non_fatal_error_propagates(self):
        """Non-store errors are re-raised unchanged."""
        async def ingest():
            raise NotFoundError("No reward events stored")

        with pytest.raises(NotFoundError):
            await run_fail_fast(ingest())

    @pytest.mark.asyncio
    async def test_decorator(self):
        """fail_fast wraps async functions."""
        calls = []

        @fail_fast
        async def ingest(start, end):
            calls.append((start, end))
            raise make_store_error()

        with pytest.raises(SystemExit):
            await ingest(1, 10)

        assert calls == [(1, 10)]
        assert ingest.__name__ == "ingest"

    @pytest.mark.asyncio
    async def test_connection_loss_terminates(self):
        """A lost connection wrapped by the executor exits with the failure code."""
        async def ingest():
            raise StoreError("SELECT max(height) FROM ksm_block", ConnectionResetError("reset"))

        with pytest.raises(SystemExit) as exc_info:
            await run_fail_fast(ingest())

        assert exc_info.value.code == STORE_FAILURE_EXIT_CODE
