"""
Interfaces for vector store implementations.
"""

from .vector_store_interface import (
    VectorStoreInterface,
    ErrorKind,
    VectorStoreError,
    TopKTooLargeError,
    SimilarityError,
    EmptyVectorError,
    ZeroMagnitudeError,
    UnequalVectorLengthsError,
    SimilarityCalculationError,
)

__all__ = [
    "VectorStoreInterface",
    "ErrorKind",
    "VectorStoreError",
    "TopKTooLargeError",
    "SimilarityError",
    "EmptyVectorError",
    "ZeroMagnitudeError",
    "UnequalVectorLengthsError",
    "SimilarityCalculationError",
]
