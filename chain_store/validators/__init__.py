"""Validators for decoded chain values."""

from chain_store.validators.amounts import (
    normalize_amount,
    normalize_ratio,
    validate_amount,
    validate_height,
    validate_int,
)

__all__ = [
    "normalize_amount",
    "normalize_ratio",
    "validate_amount",
    "validate_height",
    "validate_int",
]
