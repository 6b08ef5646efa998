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
Spherical coordinates

Conventions:
    * ``r`` is the distance from the origin
    * ``right_ascension`` is the azimuth in the x-y plane, measured from +x
      towards +y, in (-pi, pi]
    * ``declination`` is the polar angle measured from +z, in [0, pi]

The ranges are produced by ``Vector3.to_spherical`` and are not enforced on
construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from oasis_linalg.linalg_print import format_components
from oasis_linalg.vector3 import Vector3


@dataclass(frozen=True)
class SphericalVector:
    """Point in spherical coordinates."""

    r: float
    right_ascension: float
    declination: float

    def to_cartesian(self) -> Vector3:
        sin_decl: float = math.sin(self.declination)
        return Vector3(
            self.r * math.cos(self.right_ascension) * sin_decl,
            self.r * math.sin(self.right_ascension) * sin_decl,
            self.r * math.cos(self.declination),
        )

    def is_close(self, other: SphericalVector, abs_tol: float = 1e-12) -> bool:
        return all(
            math.isclose(a, b, rel_tol=0.0, abs_tol=abs_tol)
            for a, b in zip(self.to_list(), other.to_list())
        )

    def to_list(self) -> list[float]:
        return [self.r, self.right_ascension, self.declination]

    def __str__(self) -> str:
        return format_components(self.to_list())
