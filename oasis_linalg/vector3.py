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
Immutable 3D Cartesian vector

Rotations follow the right-hand rule: a positive angle about an axis turns
the other two axes counter-clockwise when viewed looking down the axis
towards the origin. Angles are in radians.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.linalg_numeric import check_degenerate
from oasis_linalg.linalg_numeric import clipped_acos
from oasis_linalg.linalg_numeric import ieee_divide
from oasis_linalg.linalg_numeric import ieee_reciprocal
from oasis_linalg.linalg_numeric import require_index
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.linalg_params import resolve_params
from oasis_linalg.linalg_print import format_components


if TYPE_CHECKING:
    from oasis_linalg.spherical import SphericalVector


@dataclass(frozen=True)
class Vector3:
    """3D vector with x, y and z components."""

    x: float
    y: float
    z: float

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def x_axis() -> Vector3:
        return Vector3(1.0, 0.0, 0.0)

    @staticmethod
    def y_axis() -> Vector3:
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def z_axis() -> Vector3:
        return Vector3(0.0, 0.0, 1.0)

    @staticmethod
    def from_array(arr: NDArray[np.float64]) -> Vector3:
        """Create a vector from a shape (3,) array."""
        vec: NDArray[np.float64] = np.asarray(arr, dtype=float)
        if vec.shape != (3,):
            raise ValueError("arr must be shape (3,)")
        return Vector3(float(vec[0]), float(vec[1]), float(vec[2]))

    def plus(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def minus(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self, params: Optional[LinalgParams] = None) -> Vector3:
        """
        Return the unit vector in the same direction

        The result is ``scale(1 / magnitude())``. A zero vector yields NaN
        components unless ``params.strict`` is set, in which case
        ``DegenerateError`` is raised.
        """
        mag: float = self.magnitude()
        check_degenerate(
            mag == 0.0, resolve_params(params), "cannot normalize a zero vector"
        )
        return self.scale(ieee_reciprocal(mag))

    def distance_to(self, other: Vector3) -> float:
        return self.minus(other).magnitude()

    def angle_between(
        self, other: Vector3, params: Optional[LinalgParams] = None
    ) -> float:
        """Return the angle between two vectors in radians."""
        norms: float = self.magnitude() * other.magnitude()
        check_degenerate(
            norms == 0.0,
            resolve_params(params),
            "angle with a zero vector is undefined",
        )
        return clipped_acos(ieee_divide(self.dot(other), norms))

    def element(self, index: int) -> float:
        """Return component ``index`` (0 for x, 1 for y, 2 for z)."""
        return (self.x, self.y, self.z)[require_index(index, 3, "Vector3")]

    def rotate_about_x(self, angle: float) -> Vector3:
        cos_a: float = math.cos(angle)
        sin_a: float = math.sin(angle)
        return Vector3(
            self.x,
            self.y * cos_a - self.z * sin_a,
            self.y * sin_a + self.z * cos_a,
        )

    def rotate_about_y(self, angle: float) -> Vector3:
        cos_a: float = math.cos(angle)
        sin_a: float = math.sin(angle)
        return Vector3(
            self.x * cos_a + self.z * sin_a,
            self.y,
            -self.x * sin_a + self.z * cos_a,
        )

    def rotate_about_z(self, angle: float) -> Vector3:
        cos_a: float = math.cos(angle)
        sin_a: float = math.sin(angle)
        return Vector3(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
            self.z,
        )

    def rotate_about_axis(
        self,
        axis: Vector3,
        angle: float,
        params: Optional[LinalgParams] = None,
    ) -> Vector3:
        """
        Rotate about an arbitrary axis using Rodrigues' rotation formula

        The axis must be a unit vector. It is not normalized here: a non-unit
        axis silently produces a sheared, non-rigid transform. Strict mode
        rejects axes whose norm differs from 1 by more than
        ``params.unit_norm_tol``.

        Args:
            axis: Unit rotation axis
            angle: Rotation angle in radians
            params: Degeneracy policy

        Returns:
            Rotated vector

        Raises:
            DegenerateError: If strict mode is set and the axis is not unit
        """
        resolved: LinalgParams = resolve_params(params)
        if resolved.strict:
            check_degenerate(
                abs(axis.magnitude() - 1.0) > resolved.unit_norm_tol,
                resolved,
                "rotation axis must be a unit vector",
            )

        c: float = math.cos(angle)
        s: float = math.sin(angle)
        t: float = 1.0 - c
        ux: float = axis.x
        uy: float = axis.y
        uz: float = axis.z

        return Vector3(
            self.x * (c + ux * ux * t)
            + self.y * (ux * uy * t - uz * s)
            + self.z * (ux * uz * t + uy * s),
            self.x * (uy * ux * t + uz * s)
            + self.y * (c + uy * uy * t)
            + self.z * (uy * uz * t - ux * s),
            self.x * (uz * ux * t - uy * s)
            + self.y * (uz * uy * t + ux * s)
            + self.z * (c + uz * uz * t),
        )

    def to_spherical(self, params: Optional[LinalgParams] = None) -> SphericalVector:
        """
        Convert to spherical coordinates

        ``r`` is the magnitude, right ascension is ``atan2(y, x)`` and
        declination is the polar angle ``acos(z / r)``. The origin has no
        defined declination: it is NaN unless strict mode raises.
        """
        from oasis_linalg.spherical import SphericalVector

        r: float = self.magnitude()
        check_degenerate(
            r == 0.0,
            resolve_params(params),
            "spherical angles are undefined at zero radius",
        )
        return SphericalVector(
            r,
            math.atan2(self.y, self.x),
            clipped_acos(ieee_divide(self.z, r)),
        )

    def is_close(self, other: Vector3, abs_tol: float = 1e-12) -> bool:
        """Return True when each component matches within ``abs_tol``."""
        return all(
            math.isclose(a, b, rel_tol=0.0, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )

    def to_list(self) -> list[float]:
        return [self.x, self.y, self.z]

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=float)

    def __getitem__(self, index: int) -> float:
        return self.element(index)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __add__(self, other: Vector3) -> Vector3:
        return self.plus(other)

    def __sub__(self, other: Vector3) -> Vector3:
        return self.minus(other)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector3:
        return self.scale(-1.0)

    def __str__(self) -> str:
        return format_components(self.to_list())
