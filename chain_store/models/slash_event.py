"""
Slash event model.
"""

from sqlalchemy import BigInteger, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from chain_store.models.base import Base
from chain_store.models.types import AddressType, AmountText


class SlashEvent(Base):
    """staking.Slash event against an account."""

    __tablename__ = "ksm_evt_slash"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    height: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    index: Mapped[int] = mapped_column(Integer, nullable=False)

    account_addr: Mapped[str] = mapped_column(AddressType, nullable=False, index=True)
    nickname: Mapped[str | None] = mapped_column(String(255), nullable=True)
    amount: Mapped[str] = mapped_column(AmountText, nullable=False)

    __table_args__ = (
        UniqueConstraint("height", "index", name="uq_ksm_evt_slash_height_index"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<SlashEvent(height={self.height}, index={self.index}, "
            f"account={self.account_addr}, amount={self.amount})>"
        )
