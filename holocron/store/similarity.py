"""
Vector math used to rank records.

All functions operate on plain sequences or NumPy arrays and compute in
float64. Failures are raised as the typed similarity errors from
``holocron.store.interfaces`` rather than producing inf or NaN from a
division by zero.
"""

from typing import Sequence, Union

import numpy as np

from holocron.store.interfaces import (
    EmptyVectorError,
    UnequalVectorLengthsError,
    ZeroMagnitudeError,
)

VectorLike = Union[Sequence[float], np.ndarray]


def as_vector(values: VectorLike) -> np.ndarray:
    """
    Return values as a one-dimensional float64 array.

    Raises:
        ValueError: If values is not one-dimensional
    """
    vector = np.asarray(values, dtype=np.float64)
    if vector.ndim != 1:
        raise ValueError(f"Vectors must be one-dimensional, got shape {vector.shape}")
    return vector


def dot_product(a: VectorLike, b: VectorLike) -> float:
    """
    Compute the dot product of two vectors.

    Raises:
        UnequalVectorLengthsError: If the vectors differ in dimension
    """
    a = as_vector(a)
    b = as_vector(b)
    if a.shape[0] != b.shape[0]:
        raise UnequalVectorLengthsError(a.shape[0], b.shape[0])
    return float(np.dot(a, b))


def magnitude(a: VectorLike) -> float:
    """Return the L2 norm of a vector."""
    return float(np.linalg.norm(as_vector(a)))


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """
    Compute cosine similarity: dot(a, b) / (|a| * |b|).

    Args:
        a: First vector
        b: Second vector

    Returns:
        Similarity in [-1, 1] for finite input, NaN if a component is NaN

    Raises:
        EmptyVectorError: If either vector has no components
        UnequalVectorLengthsError: If the vectors differ in dimension
        ZeroMagnitudeError: If either vector has a norm of exactly zero
    """
    a = as_vector(a)
    b = as_vector(b)

    if a.size == 0 or b.size == 0:
        raise EmptyVectorError()

    dot = dot_product(a, b)
    mag_a = magnitude(a)
    mag_b = magnitude(b)

    if mag_a == 0.0 or mag_b == 0.0:
        raise ZeroMagnitudeError()

    return dot / (mag_a * mag_b)
