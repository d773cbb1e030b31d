"""
Holocron: an in-memory vector record store with exact cosine-similarity search.
"""

from holocron.model.record import Record
from holocron.store import MAX_TOP_K, DeleteStrategy, ScoredRecord, VectorStore, create_vector_store
from holocron.store.interfaces import (
    ErrorKind,
    VectorStoreError,
    TopKTooLargeError,
    SimilarityError,
    EmptyVectorError,
    ZeroMagnitudeError,
    UnequalVectorLengthsError,
    SimilarityCalculationError,
)

__version__ = "0.1.0"

__all__ = [
    "Record",
    "VectorStore",
    "ScoredRecord",
    "DeleteStrategy",
    "MAX_TOP_K",
    "create_vector_store",
    "ErrorKind",
    "VectorStoreError",
    "TopKTooLargeError",
    "SimilarityError",
    "EmptyVectorError",
    "ZeroMagnitudeError",
    "UnequalVectorLengthsError",
    "SimilarityCalculationError",
]
