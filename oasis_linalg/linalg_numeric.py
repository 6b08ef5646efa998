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
Scalar helpers with IEEE 754 semantics

Python raises ``ZeroDivisionError`` for ``1.0 / 0.0`` and ``math.acos``
raises outside [-1, 1]. The vector and matrix types propagate ``inf`` and
``nan`` instead, so division and inverse-cosine go through numpy with
floating-point warnings silenced. In strict mode the degenerate input is
reported as a ``DegenerateError`` before any division happens.
"""

from __future__ import annotations

import logging
import operator

import numpy as np

from oasis_linalg.linalg_errors import DegenerateError
from oasis_linalg.linalg_errors import IndexOutOfRangeError
from oasis_linalg.linalg_params import LinalgParams


_LOG: logging.Logger = logging.getLogger(__name__)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: x/0 is +-inf and 0/0 is nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def ieee_reciprocal(value: float) -> float:
    """Return ``1 / value`` with IEEE semantics."""
    return ieee_divide(1.0, value)


def clipped_acos(value: float) -> float:
    """
    Return the inverse cosine, clipping rounding overshoot past +-1

    NaN input stays NaN.
    """
    with np.errstate(invalid="ignore"):
        return float(np.arccos(np.clip(np.float64(value), -1.0, 1.0)))


def require_index(index: int, size: int, name: str) -> int:
    """
    Return ``index`` as a position in ``[0, size)``

    Raises:
        TypeError: If ``index`` is not an integer, or is a bool
        IndexOutOfRangeError: If ``index`` is outside ``[0, size)``
    """
    if isinstance(index, bool):
        raise TypeError(f"{name} index must be an int, not bool")
    position: int = operator.index(index)
    if not 0 <= position < size:
        raise IndexOutOfRangeError(f"{name} index {position} out of range")
    return position


def check_degenerate(condition: bool, params: LinalgParams, message: str) -> None:
    """
    Handle a numerically degenerate input according to the policy

    Args:
        condition: True when the input is degenerate
        params: Policy deciding between raising and propagating NaN/Inf
        message: Description of the degeneracy

    Raises:
        DegenerateError: If ``condition`` holds and ``params.strict`` is set
    """
    if not condition:
        return
    if params.strict:
        raise DegenerateError(message)
    _LOG.debug("%s, propagating non-finite result", message)
