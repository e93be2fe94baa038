"""
Block model.

One row per processed chain height.
"""

from sqlalchemy import BigInteger
from sqlalchemy.orm import Mapped, mapped_column

from chain_store.models.base import Base
from chain_store.models.types import AddressType, HashType


class Block(Base):
    """
    Processed block header.

    The highest stored height is the scan cursor used to resume ingestion.
    """

    __tablename__ = "ksm_block"

    height: Mapped[int] = mapped_column(
        BigInteger,
        primary_key=True,
        autoincrement=False,
    )
    hash: Mapped[str] = mapped_column(HashType, nullable=False)
    author_addr: Mapped[str | None] = mapped_column(
        AddressType, nullable=True, index=True
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Block(height={self.height}, hash={self.hash[:10]}...)>"
