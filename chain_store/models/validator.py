"""
Validator model.

Validator-set snapshots keyed by (height, validator address).
"""

from sqlalchemy import BigInteger, Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from chain_store.models.base import Base
from chain_store.models.types import AddressType, AmountText


class Validator(Base):
    """
    Validator snapshot.

    Identity, commission and bonding only change at era boundaries;
    online status and era points change every block. On a key conflict
    only height, online and era_point are refreshed.
    """

    __tablename__ = "ksm_validator"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Snapshot position
    height: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    current_era: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    current_session: Mapped[int] = mapped_column(Integer, nullable=False)

    # Identity
    validator_addr: Mapped[str] = mapped_column(AddressType, nullable=False, index=True)
    validator_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    controller_addr: Mapped[str | None] = mapped_column(AddressType, nullable=True)
    controller_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Per-block observations
    online: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    era_point: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Staking
    reward_destination: Mapped[str | None] = mapped_column(String(64), nullable=True)
    commission: Mapped[str | None] = mapped_column(String(32), nullable=True)
    total_bonded: Mapped[str] = mapped_column(AmountText, nullable=False)
    self_bonded: Mapped[str] = mapped_column(AmountText, nullable=False)
    nominators: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("height", "validator_addr", name="uq_ksm_validator_height_addr"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<Validator(addr={self.validator_addr}, height={self.height}, "
            f"era={self.current_era}, online={self.online})>"
        )
