################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Vector, matrix and spherical-coordinate math for 2D and 3D geometry."""

from __future__ import annotations

from oasis_linalg.linalg_errors import DegenerateError
from oasis_linalg.linalg_errors import DimensionError
from oasis_linalg.linalg_errors import IndexOutOfRangeError
from oasis_linalg.linalg_errors import LinalgError
from oasis_linalg.linalg_errors import LinalgParamsError
from oasis_linalg.linalg_errors import ShapeError
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.matrix3 import Matrix3
from oasis_linalg.spherical import SphericalVector
from oasis_linalg.vector2 import Vector2
from oasis_linalg.vector3 import Vector3


__all__ = [
    "DegenerateError",
    "DimensionError",
    "IndexOutOfRangeError",
    "LinalgError",
    "LinalgParams",
    "LinalgParamsError",
    "Matrix3",
    "ShapeError",
    "SphericalVector",
    "Vector2",
    "Vector3",
]
