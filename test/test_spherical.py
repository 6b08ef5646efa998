################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for spherical coordinate conversion."""

from __future__ import annotations

import math

import pytest

from oasis_linalg.linalg_errors import DegenerateError
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.spherical import SphericalVector
from oasis_linalg.vector3 import Vector3


def test_to_spherical_known_value() -> None:
    """Checks radius, right ascension and declination of (1, 2, 3)."""
    spherical: SphericalVector = Vector3(1.0, 2.0, 3.0).to_spherical()

    assert spherical.r == 3.7416573867739413
    assert math.isclose(spherical.right_ascension, 1.1071487177940904)
    assert math.isclose(spherical.declination, 0.6405223126794245)


def test_to_spherical_axes() -> None:
    """Checks the angles of the coordinate axes."""
    x_axis: SphericalVector = Vector3.x_axis().to_spherical()
    y_axis: SphericalVector = Vector3.y_axis().to_spherical()
    z_axis: SphericalVector = Vector3(0.0, 0.0, -2.0).to_spherical()

    assert x_axis.is_close(SphericalVector(1.0, 0.0, math.pi / 2.0))
    assert y_axis.is_close(SphericalVector(1.0, math.pi / 2.0, math.pi / 2.0))
    assert z_axis.is_close(SphericalVector(2.0, 0.0, math.pi))


@pytest.mark.parametrize(
    "vec",
    [
        Vector3(1.0, 2.0, 3.0),
        Vector3(-4.0, 0.5, -2.0),
        Vector3(0.0, -3.0, 0.0),
        Vector3(0.3, 0.4, 5.0),
        Vector3(-7.0, -7.0, 0.1),
    ],
)
def test_spherical_roundtrip(vec: Vector3) -> None:
    """Checks Cartesian -> spherical -> Cartesian recovers the input."""
    assert vec.to_spherical().to_cartesian().is_close(vec, abs_tol=1e-12)


def test_to_cartesian_known_value() -> None:
    """Checks a point on the equator at 45 degrees right ascension."""
    spherical: SphericalVector = SphericalVector(2.0, math.pi / 4.0, math.pi / 2.0)
    cartesian: Vector3 = spherical.to_cartesian()

    assert cartesian.is_close(Vector3(math.sqrt(2.0), math.sqrt(2.0), 0.0))


def test_to_cartesian_zero_declination_is_pole() -> None:
    """Checks a zero polar angle points along +z regardless of right ascension."""
    assert SphericalVector(1.0, 0.0, 0.0).to_cartesian() == Vector3(0.0, 0.0, 1.0)
    pole: Vector3 = SphericalVector(2.0, 1.3, 0.0).to_cartesian()

    assert pole.is_close(Vector3(0.0, 0.0, 2.0))


def test_to_spherical_zero_radius() -> None:
    """Checks the origin yields an undefined declination."""
    spherical: SphericalVector = Vector3.zero().to_spherical()

    assert spherical.r == 0.0
    assert math.isnan(spherical.declination)
    with pytest.raises(DegenerateError):
        Vector3.zero().to_spherical(LinalgParams.strict_defaults())


def test_spherical_values_are_not_validated() -> None:
    """Checks construction accepts out-of-range components."""
    spherical: SphericalVector = SphericalVector(-1.0, 10.0, -3.0)

    assert spherical.to_list() == [-1.0, 10.0, -3.0]
    assert str(SphericalVector(1.0, 2.0, 3.0)) == "[1, 2, 3]"
