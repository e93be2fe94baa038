"""
Author model.

Tracks the last block produced by each block author.
"""

from sqlalchemy import BigInteger
from sqlalchemy.orm import Mapped, mapped_column

from chain_store.models.base import Base
from chain_store.models.types import AddressType, HashType


class Author(Base):
    """
    Block author with a pointer to its last produced block.

    Rows are replaced on every write, so the pointer reflects the most
    recent write rather than the highest height.
    """

    __tablename__ = "ksm_author"

    author_addr: Mapped[str] = mapped_column(AddressType, primary_key=True)
    last_block_height: Mapped[int] = mapped_column(BigInteger, nullable=False)
    last_block_hash: Mapped[str] = mapped_column(HashType, nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<Author(addr={self.author_addr}, "
            f"last_block_height={self.last_block_height})>"
        )
