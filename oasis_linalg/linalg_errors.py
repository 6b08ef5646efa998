################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exception types raised by the linear algebra helpers."""

from __future__ import annotations


class LinalgError(ValueError):
    """Base class for linear algebra failures."""


class DimensionError(LinalgError):
    """Raised when a vector or matrix dimension is not supported."""


class IndexOutOfRangeError(LinalgError, IndexError):
    """Raised when an element, row or column index is out of range."""


class ShapeError(LinalgError):
    """Raised when matrix shapes are ragged or incompatible."""


class DegenerateError(LinalgError):
    """Raised in strict mode when a result would be NaN or infinite."""


class LinalgParamsError(LinalgError):
    """Raised when linear algebra parameter validation fails."""
