################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Matrix operations on nested float sequences

Matrices are row-major lists of rows, ``a[r][c]``. Every input is checked to
be rectangular before use; ragged or incompatible shapes raise ``ShapeError``.
Results are always new lists.

The determinant uses recursive cofactor expansion, which costs O(n!). It is
meant for the small matrices of 2D/3D geometry, and inputs larger than
``LinalgParams.max_determinant_dim`` are rejected.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional
from typing import TextIO

from oasis_linalg import linalg_print
from oasis_linalg.linalg_errors import DimensionError
from oasis_linalg.linalg_errors import ShapeError
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.linalg_params import resolve_params
from oasis_linalg.matrix3_inverse import determinant_2x2


Matrix = list[list[float]]


def _shape(a: Sequence[Sequence[float]], name: str) -> tuple[int, int]:
    """Return (rows, cols), requiring every row to have the same length."""
    rows: int = len(a)
    if rows == 0:
        return 0, 0
    cols: int = len(a[0])
    for r, row in enumerate(a):
        if len(row) != cols:
            raise ShapeError(
                f"{name} is ragged: row {r} has length {len(row)}, expected {cols}"
            )
    return rows, cols


def _require_same_shape(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> None:
    shape_a: tuple[int, int] = _shape(a, "a")
    shape_b: tuple[int, int] = _shape(b, "b")
    if shape_a != shape_b:
        raise ShapeError(f"shape mismatch: {shape_a} != {shape_b}")


def add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Add two matrices element-wise.

    Raises:
        ShapeError: If either matrix is ragged or the shapes differ
    """
    _require_same_shape(a, b)
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def subtract(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return ``a - b`` element-wise.

    Raises:
        ShapeError: If either matrix is ragged or the shapes differ
    """
    _require_same_shape(a, b)
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Multiply two matrices.

    Args:
        a: Left matrix with shape (n, k)
        b: Right matrix with shape (k, m)

    Returns:
        Matrix product with shape (n, m)

    Raises:
        ShapeError: If a matrix is ragged or the inner dimensions mismatch
    """
    a_rows, a_cols = _shape(a, "a")
    b_rows, b_cols = _shape(b, "b")
    if a_cols != b_rows:
        raise ShapeError(f"cannot multiply {a_rows}x{a_cols} by {b_rows}x{b_cols}")

    out: Matrix = []
    for r in range(a_rows):
        row: list[float] = []
        for c in range(b_cols):
            total: float = 0.0
            for k in range(a_cols):
                total += a[r][k] * b[k][c]
            row.append(total)
        out.append(row)
    return out


def scale(a: Sequence[Sequence[float]], scalar: float) -> Matrix:
    """Multiply every element by ``scalar``."""
    _shape(a, "a")
    return [[value * scalar for value in row] for row in a]


def transpose(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose, ``out[i][j] == a[j][i]``.

    Raises:
        ShapeError: If the matrix is empty or ragged
    """
    rows, cols = _shape(a, "a")
    if rows == 0 or cols == 0:
        raise ShapeError("cannot transpose an empty matrix")
    return [[a[r][c] for r in range(rows)] for c in range(cols)]


def identity(size: int) -> Matrix:
    """Return the ``size`` x ``size`` identity matrix."""
    if size < 0:
        raise ShapeError("size must be non-negative")
    return [[1.0 if r == c else 0.0 for c in range(size)] for r in range(size)]


def _determinant(a: Sequence[Sequence[float]]) -> float:
    n: int = len(a)
    if n == 2:
        return determinant_2x2(a[0], a[1])

    total: float = 0.0
    for i in range(n):
        # Minor with row 0 and column i removed
        minor: Matrix = [
            [a[r][c] for c in range(n) if c != i] for r in range(1, n)
        ]
        term: float = a[0][i] * _determinant(minor)
        if i % 2 == 0:
            total += term
        else:
            total -= term
    return total


def determinant(
    a: Sequence[Sequence[float]], params: Optional[LinalgParams] = None
) -> float:
    """Return the determinant by recursive cofactor expansion along row 0.

    A 1x1 matrix returns its entry and the empty matrix returns 1.0.

    Args:
        a: Square matrix
        params: Provides ``max_determinant_dim``

    Returns:
        Determinant of ``a``

    Raises:
        ShapeError: If the matrix is ragged or not square
        DimensionError: If the matrix exceeds ``max_determinant_dim``
    """
    resolved: LinalgParams = resolve_params(params)
    rows, cols = _shape(a, "a")
    if rows != cols:
        raise ShapeError(f"determinant requires a square matrix, got {rows}x{cols}")
    if rows > resolved.max_determinant_dim:
        raise DimensionError(
            f"{rows}x{rows} exceeds max_determinant_dim "
            f"{resolved.max_determinant_dim} for cofactor expansion"
        )
    if rows == 0:
        return 1.0
    if rows == 1:
        return float(a[0][0])
    return _determinant(a)


def clean_print(
    a: Sequence[Sequence[float]],
    precision: Optional[int] = None,
    params: Optional[LinalgParams] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Print one row per line, values separated by a space."""
    _shape(a, "a")
    linalg_print.clean_print(a, precision, params, file)
