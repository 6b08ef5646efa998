################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import math

import pytest

from oasis_linalg.linalg_errors import DegenerateError
from oasis_linalg.linalg_errors import IndexOutOfRangeError
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.vector2 import Vector2


def test_vector2_algebra() -> None:
    a: Vector2 = Vector2(1.0, 2.0)
    b: Vector2 = Vector2(3.0, -4.0)

    assert a.plus(b) == Vector2(4.0, -2.0)
    assert a.minus(b) == Vector2(-2.0, 6.0)
    assert a.scale(3.0) == Vector2(3.0, 6.0)
    assert a.dot(b) == -5.0
    assert b.magnitude() == 5.0
    assert a.plus(b) == b.plus(a)
    assert a.minus(a) == Vector2.zero()


def test_vector2_normalize() -> None:
    unit: Vector2 = Vector2(3.0, -4.0).normalize()

    assert unit.is_close(Vector2(0.6, -0.8))
    assert math.isclose(unit.magnitude(), 1.0, abs_tol=1e-12)


def test_vector2_normalize_zero() -> None:
    unit: Vector2 = Vector2.zero().normalize()

    assert math.isnan(unit.x) and math.isnan(unit.y)
    with pytest.raises(DegenerateError):
        Vector2.zero().normalize(LinalgParams(strict=True))


def test_vector2_rotate() -> None:
    rotated: Vector2 = Vector2.x_axis().rotate(math.pi / 2.0)

    assert rotated.is_close(Vector2.y_axis())
    assert Vector2(1.0, 2.0).rotate(0.0) == Vector2(1.0, 2.0)
    assert Vector2(1.0, 2.0).rotate(2.0 * math.pi).is_close(Vector2(1.0, 2.0))


def test_vector2_element() -> None:
    vec: Vector2 = Vector2(7.0, 8.0)

    assert vec.element(0) == 7.0
    assert vec[1] == 8.0
    assert vec.to_list() == [7.0, 8.0]
    with pytest.raises(IndexOutOfRangeError):
        vec.element(2)
    with pytest.raises(TypeError):
        vec.element(True)
    with pytest.raises(TypeError):
        vec.element(0.0)  # type: ignore[arg-type]


def test_vector2_multiply_by_non_scalar_raises() -> None:
    vec: Vector2 = Vector2(1.0, -2.0)

    assert 3.0 * vec == Vector2(3.0, -6.0)
    with pytest.raises(TypeError):
        vec * Vector2(1.0, 1.0)  # type: ignore[operator]
