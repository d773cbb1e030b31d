"""
In-memory vector store with exact cosine-similarity search.

Records are kept in a plain list. Every lookup, delete and query is a linear
scan over that list; there is no secondary index and nothing is cached
between calls. The store is single-threaded and performs no I/O.
"""

import logging
import math
import operator
import time
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from holocron.model.record import Record
from holocron.store.interfaces import (
    SimilarityCalculationError,
    SimilarityError,
    TopKTooLargeError,
    VectorStoreInterface,
)
from holocron.store.similarity import VectorLike, as_vector, cosine_similarity

MAX_TOP_K = 10_000


class DeleteStrategy(Enum):
    """How a record is removed from the underlying list."""

    SWAP = "swap"  # O(1), moves the last record into the gap
    STABLE = "stable"  # O(n), keeps insertion order


class ScoredRecord(NamedTuple):
    """A query hit: a record and its cosine similarity to the query."""

    record: Record
    score: float


def _rank_key(hit: ScoredRecord) -> Tuple[bool, float]:
    # NaN scores sort after every comparable score
    if math.isnan(hit.score):
        return (True, 0.0)
    return (False, -hit.score)


def _id_batch(ids: Sequence[str]) -> List[str]:
    # A bare str would otherwise be iterated one character at a time
    if isinstance(ids, str):
        raise TypeError("ids must be a sequence of str, not str")
    return list(ids)


class VectorStore(VectorStoreInterface):
    """
    Owning, ordered collection of Records.

    Duplicate ids are allowed; get and delete act on the first match found by
    scanning in internal order. Records of different dimensions may coexist;
    only a query comparing incompatible dimensions fails.
    """

    def __init__(
        self,
        records: Optional[Sequence[Record]] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the vector store.

        Args:
            records: Initial records, stored as given (no dedup, no validation)
            config: Optional configuration dictionary with keys:
                - delete_strategy: 'swap' (default) or 'stable'
        """
        self.config = config or {}
        self.logger = logging.getLogger(__name__)

        self.delete_strategy = DeleteStrategy(self.config.get("delete_strategy", "swap"))
        self._records: List[Record] = list(records) if records else []

        self.logger.debug(
            f"Created vector store with {len(self._records)} records "
            f"(delete_strategy={self.delete_strategy.value})"
        )

    @property
    def records(self) -> Tuple[Record, ...]:
        """Snapshot of the stored records in internal order."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, records: Sequence[Record]) -> None:
        records = list(records)
        self._records.extend(records)
        self.logger.debug(f"Added {len(records)} records, store now holds {len(self._records)}")

    def get(self, ids: Sequence[str]) -> List[Record]:
        ids = _id_batch(ids)
        result = []
        for record_id in ids:
            index = self._find(record_id)
            if index is not None:
                result.append(self._records[index].clone())

        self.logger.debug(f"Get matched {len(result)} of {len(ids)} requested ids")
        return result

    def delete(self, ids: Sequence[str]) -> int:
        ids = _id_batch(ids)
        deleted_count = 0

        for record_id in ids:
            index = self._find(record_id)
            if index is None:
                continue

            if self.delete_strategy is DeleteStrategy.SWAP:
                last = self._records.pop()
                if index < len(self._records):
                    self._records[index] = last
            else:
                del self._records[index]
            deleted_count += 1

        if deleted_count:
            self.logger.info(f"Deleted {deleted_count} records, store now holds {len(self._records)}")
        return deleted_count

    def list(self) -> List[str]:
        return [record.id for record in self._records]

    def query(self, vector: VectorLike, top_k: int) -> List[ScoredRecord]:
        """
        Rank every stored record by cosine similarity to a query vector.

        The whole store is scanned on each call. Scoring stops at the first
        record that cannot be scored and nothing is returned in that case.

        Args:
            vector: Query embedding vector
            top_k: Maximum number of results, at most MAX_TOP_K

        Returns:
            Up to top_k ScoredRecord pairs with copied records, sorted by
            descending score. NaN scores rank last.

        Raises:
            TopKTooLargeError: If top_k exceeds MAX_TOP_K
            SimilarityCalculationError: If scoring any record fails; the
                offending record id and root cause are attached
        """
        if isinstance(top_k, bool):
            raise TypeError("top_k must be an int, got bool")
        top_k = operator.index(top_k)
        if top_k > MAX_TOP_K:
            raise TopKTooLargeError(top_k, MAX_TOP_K)
        if top_k < 0:
            raise ValueError(f"top_k must not be negative, got {top_k}")

        start_time = time.perf_counter()
        query_vector = as_vector(vector)

        hits = []
        for record in self._records:
            try:
                score = cosine_similarity(query_vector, record.values)
            except SimilarityError as e:
                self.logger.warning(f"Query aborted, failed to score record {record.id}: {e}")
                raise SimilarityCalculationError(record.id, e) from e
            hits.append(ScoredRecord(record, score))

        hits.sort(key=_rank_key)
        results = [ScoredRecord(hit.record.clone(), hit.score) for hit in hits[:top_k]]

        self.logger.debug(
            f"Query scored {len(hits)} records in "
            f"{(time.perf_counter() - start_time) * 1000:.2f}ms, returning {len(results)}"
        )
        return results

    def _find(self, record_id: str) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None
