################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration schema for the linear algebra helpers."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Optional

from oasis_linalg.linalg_errors import LinalgParamsError


# Raise on degenerate results instead of propagating NaN/Inf
STRICT: bool = False

# Tolerance on |axis| - 1 for the strict unit-axis check
UNIT_NORM_TOL: float = 1e-9

# Determinant magnitude below which strict mode treats a matrix as singular
SINGULAR_DET_EPS: float = 1e-12

# Largest matrix dimension accepted by the O(n!) cofactor determinant
MAX_DETERMINANT_DIM: int = 8

# Digits after the decimal point used by clean_print
PRINT_PRECISION: int = 3


def _require_non_negative(value: float, name: str) -> None:
    """Require a non-negative value."""
    if value < 0.0:
        raise LinalgParamsError(f"{name} must be non-negative")


def _require_int(value: int, name: str) -> None:
    """Require an integer value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LinalgParamsError(f"{name} must be an int")


@dataclass(frozen=True)
class LinalgParams:
    """Tunable policy shared by the vector and matrix operations."""

    # Raise DegenerateError instead of returning NaN/Inf components
    strict: bool = STRICT
    # Tolerance on |axis| - 1 for the strict unit-axis check
    unit_norm_tol: float = UNIT_NORM_TOL
    # Strict-mode singularity threshold on |det|
    singular_det_eps: float = SINGULAR_DET_EPS
    # Largest dimension accepted by the cofactor determinant
    max_determinant_dim: int = MAX_DETERMINANT_DIM
    # Default precision for clean_print
    print_precision: int = PRINT_PRECISION

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default (permissive) parameters."""
        return cls()

    @classmethod
    def strict_defaults(cls) -> LinalgParams:
        """Return the default parameters with strict degeneracy checks."""
        return cls(strict=True)

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        if not isinstance(self.strict, bool):
            raise LinalgParamsError("strict must be a bool")
        _require_non_negative(self.unit_norm_tol, "unit_norm_tol")
        _require_non_negative(self.singular_det_eps, "singular_det_eps")
        _require_int(self.max_determinant_dim, "max_determinant_dim")
        if self.max_determinant_dim < 2:
            raise LinalgParamsError("max_determinant_dim must be at least 2")
        _require_int(self.print_precision, "print_precision")
        if self.print_precision < 0:
            raise LinalgParamsError("print_precision must be non-negative")

    def replace(self, **overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a dict representation for debugging."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


_DEFAULT_PARAMS: LinalgParams = LinalgParams.defaults()


def resolve_params(params: Optional[LinalgParams]) -> LinalgParams:
    """
    Return ``params`` or the defaults when ``None`` is given

    Raises:
        LinalgParamsError: If ``params`` fails validation
    """
    if params is None:
        return _DEFAULT_PARAMS
    params.validate()
    return params
