"""Services."""

from chain_store.services.chain_store_service import ChainStore

__all__ = ["ChainStore"]
