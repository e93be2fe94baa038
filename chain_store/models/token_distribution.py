"""
Token distribution model.

Derived supply/staking snapshot per height. Safe to recompute, so a
re-delivery replaces the whole row.
"""

from decimal import Decimal

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from chain_store.models.base import Base
from chain_store.models.types import AmountText, RatioType


class TokenDistribution(Base):
    """Token supply snapshot."""

    __tablename__ = "ksm_token"

    height: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)

    current_era: Mapped[int] = mapped_column(Integer, nullable=False)
    current_session: Mapped[int] = mapped_column(Integer, nullable=False)

    # Supply (decimal text)
    total_issuance: Mapped[str] = mapped_column(AmountText, nullable=False)
    total_bond: Mapped[str] = mapped_column(AmountText, nullable=False)

    validators_count: Mapped[int] = mapped_column(Integer, nullable=False)
    staking_ratio: Mapped[Decimal] = mapped_column(RatioType, nullable=False)
    inflation: Mapped[Decimal] = mapped_column(RatioType, nullable=False)

    # Reward per validator per day (decimal text)
    val_day_rewards: Mapped[str] = mapped_column(AmountText, nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<TokenDistribution(height={self.height}, era={self.current_era}, "
            f"staking_ratio={self.staking_ratio})>"
        )
