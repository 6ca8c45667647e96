# arowcv/training/linalg.py
"""
Dense linear algebra used by the AROW engine.

Every operation works on float64 numpy arrays at a single dimension d:
vectors of shape (d,) and square matrices of shape (d, d). Shapes are
checked up front; a mismatch raises DimensionMismatchError and is never
recovered from.
"""
from __future__ import annotations

import numpy as np

from arowcv.utils.errors import DimensionMismatchError


def _as_vector(v, name: str = "vector") -> np.ndarray:
    arr = np.asarray(v, dtype=np.float64)
    if arr.ndim != 1:
        raise DimensionMismatchError(
            f"{name} must be 1-D, got shape {arr.shape}"
        )
    return arr


def _as_square(m, name: str = "matrix") -> np.ndarray:
    arr = np.asarray(m, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise DimensionMismatchError(
            f"{name} must be square, got shape {arr.shape}"
        )
    return arr


def _check_same(a: np.ndarray, b: np.ndarray, op: str) -> None:
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(
            f"{op}: dimension {a.shape[0]} != {b.shape[0]}"
        )


# ----------------------------------------------------------------------
# Construction
# ----------------------------------------------------------------------
def identity(dimension: int) -> np.ndarray:
    if dimension < 0:
        raise DimensionMismatchError(f"negative dimension {dimension}")
    return np.eye(dimension, dtype=np.float64)


# ----------------------------------------------------------------------
# Products
# ----------------------------------------------------------------------
def dot(v1, v2) -> float:
    a = _as_vector(v1, "v1")
    b = _as_vector(v2, "v2")
    _check_same(a, b, "dot")
    return float(a @ b)


def matrix_vector(matrix, vector) -> np.ndarray:
    """Row-wise dot products: M · v."""
    m = _as_square(matrix)
    v = _as_vector(vector)
    _check_same(m, v, "matrix_vector")
    return m @ v


def vector_matrix(vector, matrix) -> np.ndarray:
    """v as a row vector times M (dot against each column)."""
    v = _as_vector(vector)
    m = _as_square(matrix)
    _check_same(v, m, "vector_matrix")
    return v @ m


def matrix_matrix(matrix1, matrix2) -> np.ndarray:
    m1 = _as_square(matrix1, "matrix1")
    m2 = _as_square(matrix2, "matrix2")
    _check_same(m1, m2, "matrix_matrix")
    return m1 @ m2


def quadratic_form(vector, matrix) -> float:
    """vᵀ · M · v"""
    v = _as_vector(vector)
    return dot(vector_matrix(v, matrix), v)


def outer(v1, v2) -> np.ndarray:
    a = _as_vector(v1, "v1")
    b = _as_vector(v2, "v2")
    _check_same(a, b, "outer")
    return np.outer(a, b)


# ----------------------------------------------------------------------
# Elementwise
# ----------------------------------------------------------------------
def scale(x, constant: float) -> np.ndarray:
    """Scalar multiple of a vector or a square matrix."""
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim == 2:
        _as_square(arr)
    elif arr.ndim != 1:
        raise DimensionMismatchError(
            f"scale expects a vector or a matrix, got shape {arr.shape}"
        )
    return arr * constant


def add_vectors(v1, v2) -> np.ndarray:
    a = _as_vector(v1, "v1")
    b = _as_vector(v2, "v2")
    _check_same(a, b, "add_vectors")
    return a + b


def subtract_matrices(matrix1, matrix2) -> np.ndarray:
    m1 = _as_square(matrix1, "matrix1")
    m2 = _as_square(matrix2, "matrix2")
    _check_same(m1, m2, "subtract_matrices")
    return m1 - m2


# ----------------------------------------------------------------------
# Predicates / rendering
# ----------------------------------------------------------------------
def is_zero_vector(vector) -> bool:
    # exact comparison: this gates whether an AROW update is applied
    v = _as_vector(vector)
    return bool(np.all(v == 0.0))


def format_vector(vector) -> str:
    v = _as_vector(vector)
    return ", ".join(repr(float(x)) for x in v)
