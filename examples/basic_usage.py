#!/usr/bin/env python3
"""
Basic usage examples for Holocron.

This script demonstrates the fundamental operations:
- Building records with and without metadata
- Adding, fetching, listing and deleting records
- Ranking records by cosine similarity
- Reacting to a record that cannot be scored
"""

import os
import sys

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from holocron import (
    ErrorKind,
    Record,
    SimilarityCalculationError,
    TopKTooLargeError,
    VectorStore,
)
from holocron.config import configure_logging, get_config


def crud_example(store: VectorStore):
    """Add, get, list and delete records."""
    print("\n=== Add / Get / Delete ===")

    store.add(
        [
            Record("vec1", [1.2, 2.0]),
            Record("vec2", [4.0, 9.5], {"source": "docs"}),
            Record("vec3", [9.3, 7.6]),
            Record("vec4", [3.4, 3.1]),
        ]
    )
    print(f"Stored ids: {store.list()}")

    for record in store.get(["vec2", "missing", "vec1"]):
        print(f"  {record}")

    removed = store.delete(["vec3", "not-there"])
    print(f"Removed {removed} record(s), remaining ids: {store.list()}")


def query_example(store: VectorStore):
    """Rank records against a query vector."""
    print("\n=== Query ===")

    for record, score in store.query([1.0, 1.0], top_k=3):
        print(f"  {record.id}: {score:.4f}")

    try:
        store.query([1.0, 1.0], top_k=10_001)
    except TopKTooLargeError as e:
        print(f"  {e.kind.value}: {e}")


def failure_example():
    """Find and remove a record that breaks similarity search."""
    print("\n=== Scoring failures ===")

    rng = np.random.default_rng(7)
    store = VectorStore([Record(f"doc{i}", rng.normal(size=8)) for i in range(5)])
    store.add([Record("broken", np.zeros(8))])

    query = rng.normal(size=8)
    try:
        store.query(query, top_k=3)
    except SimilarityCalculationError as e:
        print(f"  {e}")
        if e.root_cause.kind is ErrorKind.ZERO_MAGNITUDE:
            store.delete([e.record_id])

    for record, score in store.query(query, top_k=3):
        print(f"  {record.id}: {score:.4f}")


def main():
    configure_logging()
    store = VectorStore([], get_config().get_vector_store_config())

    crud_example(store)
    query_example(store)
    failure_example()


if __name__ == "__main__":
    main()
