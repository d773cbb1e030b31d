"""
Behavioural tests for the VectorStore.

These tests exercise the store end to end with randomly generated records and
check the properties every store must keep, independent of record order.
"""

import math
from collections import Counter

import numpy as np
import pytest

from holocron import (
    MAX_TOP_K,
    ErrorKind,
    Record,
    SimilarityCalculationError,
    TopKTooLargeError,
    VectorStore,
)


class TestAddGetRoundTrip:
    """Records added to a store come back unchanged."""

    def test_round_trip(self, make_records):
        records = make_records(50, 16)
        records.append(Record("with_meta", [0.5] * 16, {"source": "unit", "lang": "en"}))
        store = VectorStore([])
        store.add(records)

        ids = [r.id for r in records]
        result = store.get(ids)

        assert result == records
        assert [r.id for r in result] == ids

    def test_round_trip_reversed_request(self, make_records):
        records = make_records(20, 4)
        store = VectorStore(records)

        ids = [r.id for r in reversed(records)]

        assert [r.id for r in store.get(ids)] == ids

    def test_dict_round_trip(self, make_records):
        """Records survive conversion through their dictionary form."""
        records = make_records(5, 3) + [Record("meta", [1.0, 2.0, 3.0], {"k": "v"})]
        store = VectorStore([Record.from_dict(r.to_dict()) for r in records])

        assert store.get([r.id for r in records]) == records


class TestDeleteProperties:
    """Deletion removes matched ids and nothing else."""

    @pytest.mark.parametrize("strategy", ["swap", "stable"])
    def test_delete_removes_matched_ids(self, make_records, rng, strategy):
        records = make_records(40, 8)
        store = VectorStore(records, {"delete_strategy": strategy})

        to_delete = [records[i].id for i in rng.choice(40, size=15, replace=False)]
        to_delete += ["missing_1", "missing_2", to_delete[0]]

        removed = store.delete(to_delete)

        assert removed == 15
        assert len(store) == 25
        assert not set(to_delete) & set(store.list())
        assert Counter(store.list()) == Counter(r.id for r in records) - Counter(to_delete)

    def test_delete_unknown_id_is_idempotent(self, make_records):
        store = VectorStore(make_records(10, 4))
        before = store.list()

        store.delete(["unknown"])
        store.delete(["unknown"])

        assert store.list() == before

    def test_deleted_records_are_not_queried(self, make_records):
        records = make_records(10, 4)
        store = VectorStore(records)
        store.delete([records[0].id])

        hit_ids = {r.id for r, _ in store.query(records[0].values, 10)}

        assert records[0].id not in hit_ids
        assert len(hit_ids) == 9


class TestQueryProperties:
    """Ranking guarantees that hold for any store."""

    @pytest.mark.parametrize("count, top_k", [(0, 5), (3, 5), (25, 5), (25, 25), (25, 0)])
    def test_result_size_and_order(self, make_records, rng, count, top_k):
        store = VectorStore(make_records(count, 12))

        result = store.query(rng.normal(size=12), top_k)
        scores = [score for _, score in result]

        assert len(result) == min(top_k, count)
        assert all(a >= b for a, b in zip(scores, scores[1:]))

    def test_matches_numpy_reference(self, make_records, rng):
        records = make_records(100, 32)
        store = VectorStore(records)
        query = rng.normal(size=32)

        result = store.query(query, 10)

        matrix = np.array([r.values for r in records])
        expected = matrix @ query / (np.linalg.norm(matrix, axis=1) * np.linalg.norm(query))
        top = np.sort(expected)[::-1][:10]

        np.testing.assert_allclose([score for _, score in result], top)

    def test_exact_match_ranks_first(self, make_records):
        records = make_records(30, 6)
        store = VectorStore(records)

        record, score = store.query(records[17].values, 1)[0]

        assert record.id == records[17].id
        assert score == pytest.approx(1.0)

    def test_top_k_too_large_regardless_of_contents(self, make_records):
        for store in (VectorStore(), VectorStore(make_records(5, 3))):
            with pytest.raises(TopKTooLargeError) as exc_info:
                store.query([1.0, 2.0, 3.0], MAX_TOP_K + 1)
            assert exc_info.value.kind.value == "TopKTooLarge"

    def test_no_partial_results_on_failure(self, make_records):
        records = make_records(20, 4)
        records.insert(10, Record("zero", [0.0, 0.0, 0.0, 0.0]))
        store = VectorStore(records)

        with pytest.raises(SimilarityCalculationError) as exc_info:
            store.query([1.0, 1.0, 1.0, 1.0], 5)
        assert exc_info.value.root_cause.kind is ErrorKind.ZERO_MAGNITUDE

        # Caller-side recovery: drop the offending record and retry
        store.delete([exc_info.value.record_id])
        assert len(store.query([1.0, 1.0, 1.0, 1.0], 5)) == 5


class TestReferenceScenario:
    """The four two-dimensional records used across the project."""

    def test_query(self, sample_store):
        result = sample_store.query([1.0, 1.0], 3)

        assert [r.id for r, _ in result] == ["vec4", "vec3", "vec1"]

    def test_list(self, sample_store):
        assert sample_store.list() == ["vec1", "vec2", "vec3", "vec4"]

    def test_get(self, sample_store):
        assert sample_store.get(["vec1", "vec4"]) == [
            Record("vec1", [1.2, 2.0]),
            Record("vec4", [3.4, 3.1]),
        ]
        assert sample_store.get(["missing"]) == []

    def test_delete(self, sample_store):
        sample_store.delete(["vec3", "vec4"])

        assert set(sample_store.list()) == {"vec1", "vec2"}
        assert sorted(sample_store.records, key=lambda r: r.id) == [
            Record("vec1", [1.2, 2.0]),
            Record("vec2", [4.0, 9.5]),
        ]

    def test_query_scores_bounded(self, sample_store):
        for _, score in sample_store.query([1.0, 1.0], 4):
            assert not math.isnan(score)
            assert -1.0 <= score <= 1.0
