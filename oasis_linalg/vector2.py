################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Immutable 2D Cartesian vector."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.linalg_numeric import check_degenerate
from oasis_linalg.linalg_numeric import ieee_reciprocal
from oasis_linalg.linalg_numeric import require_index
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.linalg_params import resolve_params
from oasis_linalg.linalg_print import format_components


@dataclass(frozen=True)
class Vector2:
    """2D vector with x and y components."""

    x: float
    y: float

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)

    @staticmethod
    def x_axis() -> Vector2:
        return Vector2(1.0, 0.0)

    @staticmethod
    def y_axis() -> Vector2:
        return Vector2(0.0, 1.0)

    @staticmethod
    def from_array(arr: NDArray[np.float64]) -> Vector2:
        """Create a vector from a shape (2,) array."""
        vec: NDArray[np.float64] = np.asarray(arr, dtype=float)
        if vec.shape != (2,):
            raise ValueError("arr must be shape (2,)")
        return Vector2(float(vec[0]), float(vec[1]))

    def plus(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def minus(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self, params: Optional[LinalgParams] = None) -> Vector2:
        """
        Return the unit vector in the same direction

        A zero vector yields NaN components unless ``params.strict`` is set,
        in which case ``DegenerateError`` is raised.
        """
        mag: float = self.magnitude()
        check_degenerate(
            mag == 0.0, resolve_params(params), "cannot normalize a zero vector"
        )
        return self.scale(ieee_reciprocal(mag))

    def rotate(self, angle: float) -> Vector2:
        """Rotate counter-clockwise by ``angle`` radians."""
        cos_a: float = math.cos(angle)
        sin_a: float = math.sin(angle)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def element(self, index: int) -> float:
        """Return component ``index`` (0 for x, 1 for y)."""
        return (self.x, self.y)[require_index(index, 2, "Vector2")]

    def is_close(self, other: Vector2, abs_tol: float = 1e-12) -> bool:
        """Return True when each component matches within ``abs_tol``."""
        return all(
            math.isclose(a, b, rel_tol=0.0, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )

    def to_list(self) -> list[float]:
        return [self.x, self.y]

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=float)

    def __getitem__(self, index: int) -> float:
        return self.element(index)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __add__(self, other: Vector2) -> Vector2:
        return self.plus(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.minus(other)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector2:
        return self.scale(-1.0)

    def __str__(self) -> str:
        return format_components(self.to_list())
