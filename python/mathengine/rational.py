# MathEngine - Rational Number Utilities
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Conversions between the exact and the floating representations of numbers.

Binary floats do not hold most decimal fractions exactly:

    >>> from fractions import Fraction
    >>> Fraction(0.1)
    Fraction(3602879701896397, 36028797018963968)  # Binary representation!

``to_fraction`` recovers the decimal the user most likely meant, while
``exact_fraction`` returns the true binary value, which is what equality
and ordering between Numbers need.

    >>> to_fraction(0.1)
    Fraction(1, 10)
    >>> to_fraction("2.50")
    Fraction(5, 2)
"""

from fractions import Fraction
from typing import Union

import mpmath


# Type for things that can be converted to Fraction
Numeric = Union[int, float, str, Fraction, mpmath.mpf]


def to_fraction(x: Numeric, max_denom: int = 10**12) -> Fraction:
    """
    Convert a numeric value to Fraction with human-friendly results.

    Decimal strings are read exactly. Floats (Python or mpf) are read
    through their shortest decimal representation so that 0.1 becomes
    1/10 rather than its binary approximation.

    Args:
        x: A number (int, float, mpf, decimal string or Fraction).
        max_denom: Maximum denominator for fallback limit_denominator.

    Returns:
        A Fraction representing the number.

    Raises:
        ValueError: If x is not finite or is not a valid decimal string.

    Examples:
        >>> to_fraction(0.25)
        Fraction(1, 4)
        >>> to_fraction("3.14159")
        Fraction(314159, 100000)
        >>> to_fraction(Fraction(1, 3))
        Fraction(1, 3)
    """
    if isinstance(x, Fraction):
        return x
    elif isinstance(x, int):
        return Fraction(x)
    elif isinstance(x, str):
        return Fraction(x.strip())
    elif isinstance(x, mpmath.mpf):
        if not mpmath.isfinite(x):
            raise ValueError(f"Cannot convert {x} to a fraction")
        return _decimal_to_fraction(mpmath.nstr(x, mpmath.mp.dps), x, max_denom)
    else:
        if x != x or x in (float('inf'), float('-inf')):
            raise ValueError(f"Cannot convert {x} to a fraction")
        return _decimal_to_fraction(repr(x), x, max_denom)


def _decimal_to_fraction(s: str, x: Numeric, max_denom: int) -> Fraction:
    """
    Convert the decimal rendering ``s`` of ``x`` to a Fraction.

    Strategy:
    1. Parse the decimal string exactly (catches 0.1 -> "1/10")
    2. Fall back to limit_denominator when the result is unreasonably fine
    """
    result = Fraction(s)
    if result.denominator <= max_denom:
        return result
    return exact_fraction(x).limit_denominator(max_denom)


def exact_fraction(x: Union[int, float, Fraction, mpmath.mpf]) -> Fraction:
    """
    Return the exact value of a finite number as a Fraction.

    Raises:
        ValueError: If x is infinite or NaN.
    """
    if isinstance(x, Fraction):
        return x
    if isinstance(x, int):
        return Fraction(x)
    if isinstance(x, float):
        return Fraction(x)
    if not mpmath.isfinite(x):
        raise ValueError(f"Cannot convert {x} to a fraction")
    sign, man, exp, _ = x._mpf_
    man = -int(man) if sign else int(man)
    if man == 0:
        return Fraction(0)
    if exp >= 0:
        return Fraction(man << int(exp))
    return Fraction(man, 1 << int(-exp))


def to_mpf(x: Union[int, float, str, Fraction, mpmath.mpf], precision: int) -> mpmath.mpf:
    """Round x to an mpf with the given precision in bits."""
    with mpmath.workprec(precision):
        if isinstance(x, Fraction):
            return mpmath.mpf(x.numerator) / x.denominator
        if isinstance(x, float):
            # Read through the shortest repr so 0.1 means one tenth
            return mpmath.mpf(repr(x))
        if isinstance(x, str):
            return mpmath.mpf(x.strip())
        # unary plus rounds to the working precision
        return +mpmath.mpf(x)
