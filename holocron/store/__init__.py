"""
Vector store and factory.
"""

from typing import Any, Dict, Optional, Sequence

from holocron.model.record import Record
from holocron.store.interfaces import VectorStoreInterface

from .vector_store import MAX_TOP_K, DeleteStrategy, ScoredRecord, VectorStore


def create_vector_store(
    records: Optional[Sequence[Record]] = None, config: Optional[Dict[str, Any]] = None
) -> VectorStoreInterface:
    """
    Create a vector store instance.

    Args:
        records: Initial records
        config: Store configuration dictionary. When None, the store settings
            of the global configuration manager are used.

    Returns:
        Configured vector store instance
    """
    if config is None:
        from holocron.config import get_config

        config = get_config().get_vector_store_config()

    return VectorStore(records, config)


__all__ = [
    "create_vector_store",
    "VectorStore",
    "ScoredRecord",
    "DeleteStrategy",
    "MAX_TOP_K",
]
