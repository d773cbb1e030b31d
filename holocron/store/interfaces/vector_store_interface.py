"""
Abstract interface for vector stores.

This module defines the batch API that every Holocron vector store exposes,
together with the closed set of failures a store can report. Binding layers
wrap this interface, so its shape is kept stable.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from holocron.model.record import Record
    from holocron.store.vector_store import ScoredRecord


class ErrorKind(Enum):
    """Stable failure-kind tags carried by every store error."""

    TOP_K_TOO_LARGE = "TopKTooLarge"
    EMPTY_VECTOR = "EmptyVector"
    ZERO_MAGNITUDE = "ZeroMagnitude"
    UNEQUAL_VECTOR_LENGTHS = "UnequalVectorLengths"
    SIMILARITY_CALCULATION = "SimilarityCalculationError"


class VectorStoreInterface(ABC):
    """
    Abstract base class for vector store implementations.

    Mutating and lookup operations take batches (a sequence of records or a
    sequence of ids) rather than single items so that callers crossing a
    language boundary can amortize conversion overhead.
    """

    @abstractmethod
    def add(self, records: Sequence["Record"]) -> None:
        """
        Append records to the store.

        Args:
            records: Records to append, kept in the given relative order
        """
        pass

    @abstractmethod
    def get(self, ids: Sequence[str]) -> List["Record"]:
        """
        Look up records by id.

        Args:
            ids: Identifiers to look up

        Returns:
            Copies of the first matching record for each id, in request order.
            Ids without a match are omitted.
        """
        pass

    @abstractmethod
    def delete(self, ids: Sequence[str]) -> int:
        """
        Remove the first matching record for each id.

        Args:
            ids: Identifiers to remove

        Returns:
            Number of records actually removed
        """
        pass

    @abstractmethod
    def list(self) -> List[str]:
        """Return the ids currently held, in internal order."""
        pass

    @abstractmethod
    def query(self, vector: Sequence[float], top_k: int) -> List["ScoredRecord"]:
        """
        Rank stored records by cosine similarity to a query vector.

        Args:
            vector: Query embedding vector
            top_k: Maximum number of results to return

        Returns:
            (record, score) pairs sorted by descending score

        Raises:
            TopKTooLargeError: If top_k exceeds the store ceiling
            SimilarityCalculationError: If any stored record cannot be scored
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __str__(self) -> str:
        """String representation of the vector store."""
        return f"{self.__class__.__name__}(records={len(self)})"


class VectorStoreError(ValueError):
    """Base exception for vector store related errors."""

    kind: Optional[ErrorKind] = None


class TopKTooLargeError(VectorStoreError):
    """Exception raised when a query asks for more results than allowed."""

    kind = ErrorKind.TOP_K_TOO_LARGE

    def __init__(self, top_k: int, maximum: int):
        super().__init__(f"top_k maximum value is {maximum:,} records, got {top_k:,}")
        self.top_k = top_k
        self.maximum = maximum


class SimilarityError(VectorStoreError):
    """Base exception for failures while computing a similarity score."""

    pass


class EmptyVectorError(SimilarityError):
    """Exception raised when an operand vector has no components."""

    kind = ErrorKind.EMPTY_VECTOR

    def __init__(self):
        super().__init__("Vectors cannot be empty")


class ZeroMagnitudeError(SimilarityError):
    """Exception raised when an operand vector has an L2 norm of zero."""

    kind = ErrorKind.ZERO_MAGNITUDE

    def __init__(self):
        super().__init__("Vector magnitude cannot be zero")


class UnequalVectorLengthsError(SimilarityError):
    """Exception raised for dimension mismatches between two vectors."""

    kind = ErrorKind.UNEQUAL_VECTOR_LENGTHS

    def __init__(self, left: int, right: int):
        super().__init__(f"Vectors are not equal length: {left} != {right}")
        self.left = left
        self.right = right


class SimilarityCalculationError(VectorStoreError):
    """
    Exception raised when scoring a particular stored record fails.

    Carries the offending record id and the underlying similarity failure so
    callers can remove or fix the record and still branch on the root cause.
    """

    kind = ErrorKind.SIMILARITY_CALCULATION

    def __init__(self, record_id: str, cause: SimilarityError):
        super().__init__(f"failure scoring record {record_id}: {cause}")
        self.record_id = record_id
        self.cause = cause

    @property
    def root_cause(self) -> SimilarityError:
        """Return the low-level similarity failure."""
        return self.cause
