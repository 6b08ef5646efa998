################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Text formatting for vectors and matrices."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from typing import Optional
from typing import TextIO
from typing import Union

from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.linalg_params import resolve_params


Rows = Union[Sequence[float], Sequence[Sequence[float]]]


def format_scalar(value: float) -> str:
    """Format a component, dropping the trailing ``.0`` of integral values."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_components(values: Sequence[float]) -> str:
    """Format components as ``[a, b, c]``."""
    return "[" + ", ".join(format_scalar(value) for value in values) + "]"


def format_rows(values: Rows, precision: int) -> str:
    """
    Render a vector or matrix as fixed-point text

    A matrix is rendered one row per line with values separated by a single
    space. A vector is rendered one value per line.

    Args:
        values: Dynamic vector or row-major matrix
        precision: Digits after the decimal point

    Returns:
        Rendered text, newline terminated unless empty

    Raises:
        ValueError: If precision is negative
    """
    if precision < 0:
        raise ValueError("precision must be non-negative")

    lines: list[str] = []
    for row in values:
        if hasattr(row, "__iter__"):
            lines.append(" ".join(f"{value:.{precision}f}" for value in row))
        else:
            lines.append(f"{row:.{precision}f}")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def clean_print(
    values: Rows,
    precision: Optional[int] = None,
    params: Optional[LinalgParams] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Print a vector or matrix using ``format_rows``."""
    resolved: LinalgParams = resolve_params(params)
    digits: int = resolved.print_precision if precision is None else precision
    stream: TextIO = sys.stdout if file is None else file
    stream.write(format_rows(values, digits))
