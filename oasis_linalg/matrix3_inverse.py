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
3x3 inverse via the adjugate

Matrices are row-major nested lists ``a[r][c]``. The inverse is built as:

    minor[r][c]    = det of ``a`` with row r and column c removed
    cofactor[r][c] = (-1)^(r + c) * minor[r][c]
    adjugate       = cofactorᵀ
    inverse        = adjugate / det(a)

A singular matrix gives infinite or NaN entries by default. Strict mode raises
``DegenerateError`` when ``|det|`` is below ``singular_det_eps``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from oasis_linalg.linalg_errors import ShapeError
from oasis_linalg.linalg_numeric import check_degenerate
from oasis_linalg.linalg_numeric import ieee_reciprocal
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.linalg_params import resolve_params


Mat3 = list[list[float]]


def _validate_mat3(a: Sequence[Sequence[float]], name: str) -> None:
    if len(a) != 3 or any(len(row) != 3 for row in a):
        raise ShapeError(f"{name} must be 3x3")


def determinant_2x2(row0: Sequence[float], row1: Sequence[float]) -> float:
    """Return the determinant of the 2x2 matrix with the given rows."""
    return row0[0] * row1[1] - row0[1] * row1[0]


def determinant_3x3(a: Sequence[Sequence[float]]) -> float:
    """Return the determinant by cofactor expansion along the first row.

    Raises:
        ShapeError: If the matrix is not 3x3
    """
    _validate_mat3(a, "a")
    return (
        a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
        - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
        + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0])
    )


def minor_matrix(a: Sequence[Sequence[float]]) -> Mat3:
    """Return the matrix of 2x2 minors."""
    _validate_mat3(a, "a")
    out: Mat3 = [[0.0] * 3 for _ in range(3)]
    for r in range(3):
        rows: list[int] = [i for i in range(3) if i != r]
        for c in range(3):
            cols: list[int] = [j for j in range(3) if j != c]
            out[r][c] = determinant_2x2(
                [a[rows[0]][cols[0]], a[rows[0]][cols[1]]],
                [a[rows[1]][cols[0]], a[rows[1]][cols[1]]],
            )
    return out


def cofactor_matrix(a: Sequence[Sequence[float]]) -> Mat3:
    """Return the minor matrix with the ``+ - + / - + - / + - +`` signs."""
    minor: Mat3 = minor_matrix(a)
    return [
        [minor[r][c] if (r + c) % 2 == 0 else -minor[r][c] for c in range(3)]
        for r in range(3)
    ]


def adjugate_matrix(a: Sequence[Sequence[float]]) -> Mat3:
    """Return the transpose of the cofactor matrix."""
    cofactor: Mat3 = cofactor_matrix(a)
    return [[cofactor[c][r] for c in range(3)] for r in range(3)]


def inverse(
    a: Sequence[Sequence[float]], params: Optional[LinalgParams] = None
) -> Mat3:
    """Invert a 3x3 matrix.

    Args:
        a: 3x3 matrix in row-major form
        params: Degeneracy policy

    Returns:
        Inverse of ``a``, with non-finite entries if ``a`` is singular and
        strict mode is off

    Raises:
        ShapeError: If the matrix is not 3x3
        DegenerateError: If strict mode is set and ``a`` is singular
    """
    resolved: LinalgParams = resolve_params(params)
    det: float = determinant_3x3(a)
    check_degenerate(
        abs(det) < resolved.singular_det_eps if resolved.strict else det == 0.0,
        resolved,
        "matrix is singular",
    )
    inv_det: float = ieee_reciprocal(det)
    return [[value * inv_det for value in row] for row in adjugate_matrix(a)]
