"""
Reward event model.

staking.Reward events with the validator/treasury payout split.
"""

from sqlalchemy import BigInteger, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from chain_store.models.base import Base
from chain_store.models.types import AmountText


class RewardEvent(Base):
    """Era payout split between validators and treasury."""

    __tablename__ = "ksm_evt_reward"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    height: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    # Event position inside the block
    index: Mapped[int] = mapped_column(Integer, nullable=False)

    # Amounts as decimal text
    validators_amount: Mapped[str] = mapped_column(AmountText, nullable=False)
    treasury_amount: Mapped[str] = mapped_column(AmountText, nullable=False)

    __table_args__ = (
        UniqueConstraint("height", "index", name="uq_ksm_evt_reward_height_index"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<RewardEvent(height={self.height}, index={self.index}, "
            f"validators={self.validators_amount}, treasury={self.treasury_amount})>"
        )
