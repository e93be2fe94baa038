"""
Standard type definitions for database models.

Provides consistent types for amount, hash and address columns across all models.
"""

from sqlalchemy import DECIMAL, String

# Chain amounts stored as decimal text
# Planck-denominated balances exceed 64-bit integers, so they are kept
# as strings and converted with Decimal when a metric needs arithmetic
AmountText = String(80)

# Hex-encoded block hash (0x + 64 hex chars)
HashType = String(66)

# SS58 account address
AddressType = String(64)

# Ratio type for staking ratio and inflation
# Precision: 20 digits total, 10 after decimal point
RatioType = DECIMAL(20, 10)
