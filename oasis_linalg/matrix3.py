################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Immutable 3x3 matrix stored as three ``Vector3`` rows."""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional
from typing import Union
from typing import overload

import numpy as np
from numpy.typing import NDArray

from oasis_linalg import matrix3_inverse
from oasis_linalg.linalg_errors import ShapeError
from oasis_linalg.linalg_numeric import require_index
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.vector3 import Vector3


@dataclass(frozen=True)
class Matrix3:
    """Row-major 3x3 matrix; columns are derived from the rows."""

    row0: Vector3
    row1: Vector3
    row2: Vector3

    @staticmethod
    def identity() -> Matrix3:
        return Matrix3(Vector3.x_axis(), Vector3.y_axis(), Vector3.z_axis())

    @staticmethod
    def zero() -> Matrix3:
        return Matrix3(Vector3.zero(), Vector3.zero(), Vector3.zero())

    @staticmethod
    def from_rows(rows: Sequence[Sequence[float]]) -> Matrix3:
        """Create a matrix from nested row-major values."""
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ShapeError("rows must be 3x3")
        return Matrix3(
            Vector3(*(float(v) for v in rows[0])),
            Vector3(*(float(v) for v in rows[1])),
            Vector3(*(float(v) for v in rows[2])),
        )

    @staticmethod
    def from_array(arr: NDArray[np.float64]) -> Matrix3:
        """Create a matrix from a shape (3, 3) array."""
        mat: NDArray[np.float64] = np.asarray(arr, dtype=float)
        if mat.shape != (3, 3):
            raise ValueError("arr must be shape (3, 3)")
        return Matrix3.from_rows(mat.tolist())

    @staticmethod
    def rotation_x(angle: float) -> Matrix3:
        """Rotation matrix about the x axis, matching ``rotate_about_x``."""
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        return Matrix3.from_rows([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])

    @staticmethod
    def rotation_y(angle: float) -> Matrix3:
        """Rotation matrix about the y axis, matching ``rotate_about_y``."""
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        return Matrix3.from_rows([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])

    @staticmethod
    def rotation_z(angle: float) -> Matrix3:
        """Rotation matrix about the z axis, matching ``rotate_about_z``."""
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        return Matrix3.from_rows([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])

    @staticmethod
    def rotation_about_axis(axis: Vector3, angle: float) -> Matrix3:
        """
        Rodrigues rotation matrix for a unit axis

        Each column is the image of a basis vector under
        ``Vector3.rotate_about_axis``, so the two always agree.
        """
        return Matrix3(
            Vector3.x_axis().rotate_about_axis(axis, angle),
            Vector3.y_axis().rotate_about_axis(axis, angle),
            Vector3.z_axis().rotate_about_axis(axis, angle),
        ).transpose()

    def row(self, index: int) -> Vector3:
        return (self.row0, self.row1, self.row2)[
            require_index(index, 3, "Matrix3 row")
        ]

    def column(self, index: int) -> Vector3:
        index = require_index(index, 3, "Matrix3 column")
        return Vector3(
            self.row0.element(index),
            self.row1.element(index),
            self.row2.element(index),
        )

    def element(self, r: int, c: int) -> float:
        return self.row(r).element(c)

    def plus(self, other: Matrix3) -> Matrix3:
        return Matrix3(
            self.row0.plus(other.row0),
            self.row1.plus(other.row1),
            self.row2.plus(other.row2),
        )

    def minus(self, other: Matrix3) -> Matrix3:
        return Matrix3(
            self.row0.minus(other.row0),
            self.row1.minus(other.row1),
            self.row2.minus(other.row2),
        )

    def scale(self, scalar: float) -> Matrix3:
        return Matrix3(
            self.row0.scale(scalar),
            self.row1.scale(scalar),
            self.row2.scale(scalar),
        )

    def transpose(self) -> Matrix3:
        return Matrix3(self.column(0), self.column(1), self.column(2))

    def determinant(self) -> float:
        """Closed-form cofactor expansion along the first row."""
        return matrix3_inverse.determinant_3x3(self.to_rows())

    def multiply_matrix(self, other: Matrix3) -> Matrix3:
        """Matrix product ``self @ other``; order matters."""
        cols: tuple[Vector3, Vector3, Vector3] = (
            other.column(0),
            other.column(1),
            other.column(2),
        )
        return Matrix3(
            *(
                Vector3(row.dot(cols[0]), row.dot(cols[1]), row.dot(cols[2]))
                for row in (self.row0, self.row1, self.row2)
            )
        )

    def multiply_vector(self, vector: Vector3) -> Vector3:
        """Matrix-vector product; component i is ``row(i).dot(vector)``."""
        return Vector3(
            self.row0.dot(vector),
            self.row1.dot(vector),
            self.row2.dot(vector),
        )

    @overload
    def multiply(self, other: Matrix3) -> Matrix3: ...

    @overload
    def multiply(self, other: Vector3) -> Vector3: ...

    def multiply(self, other: Union[Matrix3, Vector3]) -> Union[Matrix3, Vector3]:
        if isinstance(other, Matrix3):
            return self.multiply_matrix(other)
        if isinstance(other, Vector3):
            return self.multiply_vector(other)
        raise TypeError(f"cannot multiply Matrix3 by {type(other).__name__}")

    def inverse(self, params: Optional[LinalgParams] = None) -> Matrix3:
        """Return the inverse via the adjugate; see ``matrix3_inverse``."""
        return Matrix3.from_rows(matrix3_inverse.inverse(self.to_rows(), params))

    def is_close(self, other: Matrix3, abs_tol: float = 1e-12) -> bool:
        return (
            self.row0.is_close(other.row0, abs_tol)
            and self.row1.is_close(other.row1, abs_tol)
            and self.row2.is_close(other.row2, abs_tol)
        )

    def to_rows(self) -> list[list[float]]:
        return [self.row0.to_list(), self.row1.to_list(), self.row2.to_list()]

    def to_array(self) -> NDArray[np.float64]:
        return np.array(self.to_rows(), dtype=float)

    def __add__(self, other: Matrix3) -> Matrix3:
        return self.plus(other)

    def __sub__(self, other: Matrix3) -> Matrix3:
        return self.minus(other)

    def __mul__(self, scalar: float) -> Matrix3:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> Matrix3:
        return self.__mul__(scalar)

    @overload
    def __matmul__(self, other: Matrix3) -> Matrix3: ...

    @overload
    def __matmul__(self, other: Vector3) -> Vector3: ...

    def __matmul__(self, other: Union[Matrix3, Vector3]) -> Union[Matrix3, Vector3]:
        if not isinstance(other, (Matrix3, Vector3)):
            return NotImplemented
        return self.multiply(other)

    def __str__(self) -> str:
        rows: tuple[Vector3, Vector3, Vector3] = (self.row0, self.row1, self.row2)
        return "[" + ", ".join(str(row) for row in rows) + "]"
