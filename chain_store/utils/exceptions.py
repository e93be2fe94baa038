"""
Exception handling utilities.

Defines categorized exception types for the persistence layer.
"""

from sqlalchemy.exc import SQLAlchemyError


class ChainStoreError(Exception):
    """Base class for all persistence layer errors."""
    pass


class StoreError(ChainStoreError):
    """
    Raised when the backing store fails to execute a statement.

    Store failures are fatal: they are never retried or swallowed inside
    the persistence layer. The supervisor terminates the process and the
    scanner resumes from the last durable cursor after restart.

    Attributes:
        statement: SQL text of the failing statement
        cause: Original driver/SQLAlchemy exception
    """

    def __init__(self, statement: str, cause: BaseException) -> None:
        self.statement = statement
        self.cause = cause
        super().__init__(f"{type(cause).__name__}: {cause}")


class NotFoundError(ChainStoreError, LookupError):
    """Raised when a read query finds no rows where "no data" must be explicit."""
    pass


class UndefinedRatioError(ChainStoreError, ArithmeticError):
    """Raised when a reward split has zero validator and zero treasury amounts."""
    pass


class InvalidRecordError(ChainStoreError, ValueError):
    """Raised when a decoded chain record carries malformed values."""
    pass


# Failures raised while talking to the store. Drivers such as asyncpg
# raise OSError (ConnectionRefusedError, TimeoutError) without SQLAlchemy
# wrapping when a connection is refused or dropped.
STORE_FAILURES = (
    SQLAlchemyError,
    OSError,
)

# Exception categories based on handling strategy

# Fatal - log the statement and terminate the process
FATAL = (
    StoreError,
    SQLAlchemyError,
)


def is_fatal(exc: BaseException) -> bool:
    """
    Check if exception must terminate the process.

    Args:
        exc: Exception to check

    Returns:
        True if exception is a store failure
    """
    return isinstance(exc, FATAL)
