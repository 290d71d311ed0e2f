from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
import math
import warnings

import numpy as np
import pytest

from vectors._scalar import abs_diff, fma, is_zero, sqrt


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, True),
        (0.0, True),
        (-0.0, True),
        (Fraction(0), True),
        (Decimal("0.000"), True),
        (np.float32(0), True),
        (1e-300, False),
        (-1, False),
        (Decimal("0.001"), False),
        (float("nan"), False),
    ],
)
def test_is_zero(value, expected):
    assert is_zero(value) is expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (3, 5, 2),
        (5, 3, 2),
        (-1, 1, 2),
        (2.5, 2.5, 0),
        (np.uint8(3), np.uint8(5), 2),
        (np.uint8(5), np.uint8(3), 2),
    ],
)
def test_abs_diff(a, b, expected):
    with warnings.catch_warnings():
        # numpy warns on unsigned wraparound
        warnings.simplefilter("error")
        assert abs_diff(a, b) == expected


@pytest.mark.parametrize(
    "x,expected,expected_type",
    [
        pytest.param(16, 4.0, float, id="int"),
        pytest.param(2.25, 1.5, float, id="float"),
        pytest.param(Fraction(9, 4), 1.5, float, id="fraction"),
        pytest.param(Decimal("2.25"), Decimal("1.5"), Decimal, id="decimal"),
        pytest.param(np.float32(6.25), 2.5, np.float32, id="numpy"),
    ],
)
def test_sqrt(x, expected, expected_type):
    result = sqrt(x)
    assert result == expected
    assert isinstance(result, expected_type)


def test_sqrt_unsupported():
    with pytest.raises(NotImplementedError, match="sqrt"):
        sqrt("four")


@pytest.mark.parametrize(
    "a,b,c,expected",
    [
        pytest.param(3, 4, 5, 17, id="int"),
        pytest.param(1.5, 2.0, 0.25, 3.25, id="float"),
        pytest.param(0, 2.0, 0.5, 0.5, id="zero"),
        pytest.param(Fraction(1, 3), 3, Fraction(1, 2), Fraction(3, 2), id="fraction"),
        pytest.param(
            Decimal("0.1"), Decimal(3), Decimal("0.2"), Decimal("0.5"), id="decimal"
        ),
        pytest.param(0, Decimal(3), Decimal("0.2"), Decimal("0.2"), id="decimal_rhs"),
    ],
)
def test_fma(a, b, c, expected):
    result = fma(a, b, c)
    assert result == expected
    assert type(result) is type(expected)


def test_fma_keeps_ints_exact():
    big = 2**60 + 1
    assert fma(big, big, 1) == big * big + 1


@pytest.mark.skipif(not hasattr(math, "fma"), reason="math.fma needs python 3.13")
def test_fma_float_is_fused():
    # 0.1 * 10 rounds to exactly 1.0, hiding the error that fused keeps.
    assert fma(0.1, 10.0, -1.0) != 0.1 * 10.0 - 1.0
    assert fma(0.1, 10.0, -1.0) == math.fma(0.1, 10.0, -1.0)


@pytest.mark.parametrize(
    "a,b,c,expected",
    [
        pytest.param(1e308, 10.0, 0.0, math.inf, id="overflow"),
        pytest.param(-1e308, 10.0, 0.0, -math.inf, id="negative_overflow"),
        pytest.param(math.inf, 0.0, 1.0, math.nan, id="inf_times_zero"),
        pytest.param(math.inf, 1.0, -math.inf, math.nan, id="inf_minus_inf"),
    ],
)
def test_fma_float_edges_match_arithmetic(a, b, c, expected):
    result = fma(a, b, c)
    if math.isnan(expected):
        assert math.isnan(result)
    else:
        assert result == expected
    assert type(result) is float
