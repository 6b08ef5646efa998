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

import io

import pytest

from oasis_linalg.linalg_errors import LinalgParamsError
from oasis_linalg.linalg_params import LinalgParams
from oasis_linalg.linalg_print import clean_print
from oasis_linalg.linalg_print import format_components
from oasis_linalg.linalg_print import format_rows
from oasis_linalg.linalg_print import format_scalar


def test_format_scalar() -> None:
    assert format_scalar(3.0) == "3"
    assert format_scalar(-0.5) == "-0.5"
    assert format_scalar(float("nan")) == "nan"
    assert format_scalar(float("-inf")) == "-inf"


def test_format_components() -> None:
    assert format_components([1.0, 2.5, -3.0]) == "[1, 2.5, -3]"
    assert format_components([]) == "[]"


def test_format_rows_vector() -> None:
    assert format_rows([1.0, -2.5], 1) == "1.0\n-2.5\n"


def test_format_rows_matrix() -> None:
    assert format_rows([[1.0, 0.5], [-1.0, 2.0]], 2) == "1.00 0.50\n-1.00 2.00\n"


def test_format_rows_zero_precision() -> None:
    assert format_rows([[1.4, 2.6]], 0) == "1 3\n"


def test_format_rows_empty() -> None:
    assert format_rows([], 3) == ""


def test_format_rows_negative_precision() -> None:
    with pytest.raises(ValueError):
        format_rows([1.0], -1)


def test_clean_print_uses_params_precision() -> None:
    stream: io.StringIO = io.StringIO()

    clean_print([0.125], params=LinalgParams(print_precision=1), file=stream)
    clean_print([0.125], 4, params=LinalgParams(print_precision=1), file=stream)

    assert stream.getvalue() == "0.1\n0.1250\n"


def test_clean_print_rejects_invalid_params() -> None:
    stream: io.StringIO = io.StringIO()

    with pytest.raises(LinalgParamsError):
        clean_print([1.0], params=LinalgParams(print_precision=-1), file=stream)
    assert stream.getvalue() == ""


def test_clean_print_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    clean_print([[1.0, 2.0]])

    assert capsys.readouterr().out == "1.000 2.000\n"
