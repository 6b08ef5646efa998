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
Vector operations on plain float sequences

Only 2D and 3D vectors are supported. Inputs are dispatched on their length to
``Vector2`` or ``Vector3``; any other length raises ``DimensionError`` rather
than being truncated or padded. Results are returned as new lists.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional
from typing import TextIO
from typing import Union

from oasis_linalg import linalg_print
from oasis_linalg.linalg_errors import DimensionError
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.vector2 import Vector2
from oasis_linalg.vector3 import Vector3


Vector = list[float]

FixedVector = Union[Vector2, Vector3]


def _to_fixed(a: Sequence[float], name: str) -> FixedVector:
    if len(a) == 2:
        return Vector2(float(a[0]), float(a[1]))
    if len(a) == 3:
        return Vector3(float(a[0]), float(a[1]), float(a[2]))
    raise DimensionError(f"{name} has unsupported dimension {len(a)}")


def _to_fixed_pair(
    a: Sequence[float], b: Sequence[float]
) -> tuple[FixedVector, FixedVector]:
    fixed_a: FixedVector = _to_fixed(a, "a")
    fixed_b: FixedVector = _to_fixed(b, "b")
    if len(a) != len(b):
        raise DimensionError(f"vector lengths differ: {len(a)} != {len(b)}")
    return fixed_a, fixed_b


def add(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Add two vectors of the same supported length.

    Raises:
        DimensionError: If a length is unsupported or the lengths differ
    """
    fixed_a, fixed_b = _to_fixed_pair(a, b)
    return fixed_a.plus(fixed_b).to_list()  # type: ignore[arg-type]


def subtract(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Return ``a - b``.

    Raises:
        DimensionError: If a length is unsupported or the lengths differ
    """
    fixed_a, fixed_b = _to_fixed_pair(a, b)
    return fixed_a.minus(fixed_b).to_list()  # type: ignore[arg-type]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product.

    Raises:
        DimensionError: If a length is unsupported or the lengths differ
    """
    fixed_a, fixed_b = _to_fixed_pair(a, b)
    return fixed_a.dot(fixed_b)  # type: ignore[arg-type]


def scale(a: Sequence[float], scalar: float) -> Vector:
    """Multiply every component by ``scalar``."""
    return _to_fixed(a, "a").scale(scalar).to_list()


def cross(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Return the cross product of two 3D vectors.

    Raises:
        DimensionError: If either vector is not 3D
    """
    fixed_a, fixed_b = _to_fixed_pair(a, b)
    if not isinstance(fixed_a, Vector3) or not isinstance(fixed_b, Vector3):
        raise DimensionError("cross product is only defined for 3D vectors")
    return fixed_a.cross(fixed_b).to_list()


def magnitude(a: Sequence[float]) -> float:
    return _to_fixed(a, "a").magnitude()


def normalize(a: Sequence[float], params: Optional[LinalgParams] = None) -> Vector:
    """Return the unit vector; a zero vector follows the degeneracy policy."""
    return _to_fixed(a, "a").normalize(params).to_list()


def clean_print(
    a: Sequence[float],
    precision: Optional[int] = None,
    params: Optional[LinalgParams] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Print one fixed-point component per line."""
    linalg_print.clean_print(a, precision, params, file)
