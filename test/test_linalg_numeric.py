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

import logging
import math

import pytest

from oasis_linalg.linalg_errors import DegenerateError
from oasis_linalg.linalg_errors import IndexOutOfRangeError
from oasis_linalg.linalg_numeric import check_degenerate
from oasis_linalg.linalg_numeric import clipped_acos
from oasis_linalg.linalg_numeric import ieee_divide
from oasis_linalg.linalg_numeric import ieee_reciprocal
from oasis_linalg.linalg_numeric import require_index
from oasis_linalg.linalg_params import LinalgParams


def test_ieee_divide() -> None:
    assert ieee_divide(1.0, 4.0) == 0.25
    assert ieee_divide(1.0, 0.0) == math.inf
    assert ieee_divide(-1.0, 0.0) == -math.inf
    assert math.isnan(ieee_divide(0.0, 0.0))
    assert ieee_reciprocal(0.0) == math.inf


def test_clipped_acos() -> None:
    assert clipped_acos(1.0 + 1e-15) == 0.0
    assert clipped_acos(-1.0 - 1e-15) == math.pi
    assert math.isclose(clipped_acos(0.0), math.pi / 2.0)
    assert math.isnan(clipped_acos(math.nan))


def test_require_index() -> None:
    assert require_index(0, 3, "Vector3") == 0
    assert require_index(2, 3, "Vector3") == 2


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_require_index_out_of_range(index: int) -> None:
    with pytest.raises(IndexOutOfRangeError, match="Vector3 index"):
        require_index(index, 3, "Vector3")


@pytest.mark.parametrize("index", [1.0, True, "1", None])
def test_require_index_rejects_non_integers(index: object) -> None:
    with pytest.raises(TypeError):
        require_index(index, 3, "Vector3")  # type: ignore[arg-type]


def test_check_degenerate_permissive_logs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="oasis_linalg.linalg_numeric"):
        check_degenerate(True, LinalgParams.defaults(), "zero-length vector")

    assert "zero-length vector" in caplog.text


def test_check_degenerate_strict_raises() -> None:
    strict: LinalgParams = LinalgParams.strict_defaults()

    check_degenerate(False, strict, "unused")
    with pytest.raises(DegenerateError, match="zero-length vector"):
        check_degenerate(True, strict, "zero-length vector")
