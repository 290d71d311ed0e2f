"""Operations on single scalars, dispatched on their numeric type.

A scalar is anything that supports `== 0`, `+`, `-` and `*`:
ints, floats, `fractions.Fraction`, `decimal.Decimal` and numpy scalars all work.
Operations that don't have a single obvious spelling across those types
(square roots, fused multiply-add) go through a `Registry`.
"""

from __future__ import annotations

from decimal import Decimal
import math
import numbers
from typing import Any, Callable

import numpy as np

from vectors._registry import Registry

# math.fma only exists on python >= 3.13
_math_fma = getattr(math, "fma", None)


def is_zero(value: Any) -> bool:
    """Is `value` exactly the additive identity?

    This is exact equality, not closeness: 1e-300 is not zero.
    """
    return bool(value == 0)


def abs_diff(a: Any, b: Any) -> Any:
    """|a - b|, without ever subtracting the larger value from the smaller.

    This keeps unsigned scalars such as `np.uint8` from wrapping around.
    """
    if a < b:
        return b - a
    return a - b


sqrt = Registry[Callable[[Any], Any], Any](name="sqrt")


@sqrt.register
def _sqrt_decimal(x):
    if not isinstance(x, Decimal):
        return NotImplemented
    return x.sqrt()


# before _sqrt_real, since np.float64 is also a python float
@sqrt.register
def _sqrt_numpy(x):
    if not isinstance(x, np.generic):
        return NotImplemented
    return np.sqrt(x)


@sqrt.register
def _sqrt_real(x):
    if not isinstance(x, numbers.Real):
        return NotImplemented
    return math.sqrt(x)


fma = Registry[Callable[[Any, Any, Any], Any], Any](name="fma")
"""Fused multiply-add: `a * b + c`, rounded once where the type supports it.

>>> fma(1.5, 2.0, 0.25)
3.25
>>> fma(Decimal("0.1"), 2, Decimal("0.5"))
Decimal('0.7')
>>> fma(3, 4, 5)
17
"""


@fma.register
def _fma_decimal(a, b, c):
    if not any(isinstance(x, Decimal) for x in (a, b, c)):
        return NotImplemented
    return Decimal(a).fma(b, c)


@fma.register
def _fma_float(a, b, c):
    if _math_fma is None:
        return NotImplemented
    # exact type check, numpy scalars should stay numpy scalars
    if not any(type(x) is float for x in (a, b, c)):
        return NotImplemented
    try:
        return _math_fma(a, b, c)
    except (OverflowError, ValueError):
        # math.fma raises where float arithmetic gives inf or nan
        return a * b + c


@fma.register
def _fma_default(a, b, c):
    return a * b + c
