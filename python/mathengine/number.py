# MathEngine - Numbers
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Exact and arbitrary precision numbers for MathEngine.

A Number is one of three representations:

- ``INTEGER``: an arbitrary precision ``int``
- ``RATIONAL``: an auto-reduced ``fractions.Fraction``
- ``FLOAT``: an ``mpmath.mpf`` carrying its working precision in bits

Arithmetic promotes to the widest representation present
(Integer < Rational < Float), and dividing two Integers gives a Rational
rather than a truncated Integer. Equality and ordering compare values,
not representations.

Example:
    >>> Number.of(5) / Number.of(2)
    Number(5/2)
    >>> Number.of(5) / Number.of(2) == Number.of(2.5)
    True
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from functools import total_ordering
from typing import Union

import mpmath
from mpmath.libmp import prec_to_dps

from .config import DEFAULT_PRECISION
from .exceptions import DivisionByZeroError, DomainError
from .rational import exact_fraction, to_fraction, to_mpf


class NumberKind(Enum):
    """Representation tag of a Number, in promotion order."""
    INTEGER = 0
    RATIONAL = 1
    FLOAT = 2


# Type alias for things that can be converted to numbers
NumberLike = Union['Number', int, float, str, Fraction, mpmath.mpf]


@total_ordering
@dataclass(frozen=True, eq=False)
class Number:
    """
    A tagged number: exact Integer, exact Rational or arbitrary precision Float.

    Numbers are immutable; every operation returns a new Number.
    """
    kind: NumberKind
    value: Union[int, Fraction, mpmath.mpf]
    precision: int = field(default=DEFAULT_PRECISION)

    # Constructors

    @classmethod
    def from_int(cls, value: int) -> Number:
        """Create an Integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        return cls(NumberKind.INTEGER, value)

    @classmethod
    def from_fraction(cls, numerator: Union[int, Fraction], denominator: int = 1) -> Number:
        """Create a Rational, reduced to lowest terms."""
        if denominator == 0:
            raise DivisionByZeroError(f"Rational {numerator}/0 has a zero denominator")
        return cls(NumberKind.RATIONAL, Fraction(numerator, denominator))

    @classmethod
    def from_float(
        cls,
        value: Union[float, str, mpmath.mpf],
        precision: int = None,
    ) -> Number:
        """
        Create a Float.

        Args:
            value: A Python float, a decimal string or an mpf.
            precision: Working precision in bits (defaults to DEFAULT_PRECISION).
        """
        precision = precision or DEFAULT_PRECISION
        return cls(NumberKind.FLOAT, to_mpf(value, precision), precision)

    @classmethod
    def of(cls, value: NumberLike) -> Number:
        """Convert a Python number (or a Number) to a Number."""
        if isinstance(value, Number):
            return value
        if isinstance(value, bool):
            raise TypeError("Cannot convert bool to Number")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, (float, str, mpmath.mpf)):
            return cls.from_float(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Number")

    # Predicates and conversions

    @property
    def is_exact(self) -> bool:
        return self.kind is not NumberKind.FLOAT

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def is_integral(self) -> bool:
        """True if the value is a whole number, whatever the representation."""
        if self.kind is NumberKind.INTEGER:
            return True
        if self.kind is NumberKind.RATIONAL:
            return self.value.denominator == 1
        return bool(mpmath.isint(self.value))

    def is_finite(self) -> bool:
        return self.is_exact or bool(mpmath.isfinite(self.value))

    def to_fraction(self) -> Fraction:
        """Exact value as a Fraction (floats give their exact binary value)."""
        return exact_fraction(self.value)

    def to_mpf(self, precision: int = None) -> mpmath.mpf:
        """Value rounded to an mpf."""
        return to_mpf(self.value, precision or self.precision)

    def rationalize(self) -> Number:
        """Convert to the nearest human-friendly Rational (exact numbers are unchanged)."""
        if self.is_exact:
            return self
        return Number.from_fraction(to_fraction(self.value))

    # Arithmetic

    def _promote(self, other: Number) -> tuple[NumberKind, int, object, object]:
        """Bring both operands to the widest representation present."""
        kind = max(self.kind, other.kind, key=lambda k: k.value)
        precision = _working_precision(self, other)
        if kind is NumberKind.INTEGER:
            return kind, precision, self.value, other.value
        if kind is NumberKind.RATIONAL:
            return kind, precision, Fraction(self.value), Fraction(other.value)
        return kind, precision, self.to_mpf(precision), other.to_mpf(precision)

    def _make(self, kind: NumberKind, value, precision: int) -> Number:
        if kind is NumberKind.FLOAT:
            return Number(kind, value, precision)
        return Number(kind, value)

    def __add__(self, other: NumberLike) -> Number:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        kind, precision, a, b = self._promote(other)
        with mpmath.workprec(precision):
            return self._make(kind, a + b, precision)

    def __radd__(self, other: NumberLike) -> Number:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other + self

    def __sub__(self, other: NumberLike) -> Number:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        kind, precision, a, b = self._promote(other)
        with mpmath.workprec(precision):
            return self._make(kind, a - b, precision)

    def __rsub__(self, other: NumberLike) -> Number:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other: NumberLike) -> Number:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        kind, precision, a, b = self._promote(other)
        with mpmath.workprec(precision):
            return self._make(kind, a * b, precision)

    def __rmul__(self, other: NumberLike) -> Number:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self

    def __truediv__(self, other: NumberLike) -> Number:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if other.is_zero():
            raise DivisionByZeroError(f"Division of {self} by zero")
        kind, precision, a, b = self._promote(other)
        if kind is NumberKind.INTEGER:
            return Number.from_fraction(a, b)
        with mpmath.workprec(precision):
            return self._make(kind, a / b, precision)

    def __rtruediv__(self, other: NumberLike) -> Number:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __neg__(self) -> Number:
        return self._make(self.kind, -self.value, self.precision)

    def __abs__(self) -> Number:
        return self if self >= 0 else -self

    def __pow__(self, exponent: NumberLike) -> Number:
        exponent = _coerce(exponent)
        if exponent is NotImplemented:
            return NotImplemented
        return self.pow(exponent)

    def __rpow__(self, base: NumberLike) -> Number:
        base = _coerce(base)
        if base is NotImplemented:
            return NotImplemented
        return base.pow(self)

    def pow(self, exponent: NumberLike) -> Number:
        """
        Raise to a power.

        An exact base with a whole exact exponent stays exact: an integral
        base with a non-negative exponent gives an Integer, anything else a
        Rational. All other combinations are computed as Floats.

        Raises:
            DivisionByZeroError: If zero is raised to a negative power.
            DomainError: If the result is not a real number.
        """
        exponent = Number.of(exponent)
        if self.is_exact and exponent.is_exact and exponent.is_integral():
            e = int(exponent.to_fraction())
            base = self.to_fraction()
            if base == 0 and e < 0:
                raise DivisionByZeroError(f"Zero raised to the negative power {e}")
            if base.denominator == 1 and e >= 0:
                return Number.from_int(base.numerator ** e)
            return Number.from_fraction(base ** e)
        return self._pow_float(exponent)

    def _pow_float(self, exponent: Number) -> Number:
        precision = _working_precision(self, exponent)
        with mpmath.workprec(precision):
            base = self.to_mpf(precision)
            power = exponent.to_mpf(precision)
            if base == 0 and power < 0:
                raise DivisionByZeroError(f"Zero raised to the negative power {exponent}")
            result = mpmath.power(base, power)
        if isinstance(result, mpmath.mpc):
            raise DomainError(f"{self} ^ {exponent} is not a real number")
        return Number(NumberKind.FLOAT, result, precision)

    # Comparison

    def _key(self) -> Union[Fraction, float]:
        if self.is_finite():
            return self.to_fraction()
        return float(self.value)

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: NumberLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        return float(self.value)

    def __int__(self) -> int:
        return int(self.value)

    # Rendering

    def __str__(self) -> str:
        if self.kind is NumberKind.FLOAT:
            return mpmath.nstr(self.value, prec_to_dps(self.precision))
        return str(self.value)

    def __repr__(self) -> str:
        return f"Number({self})"


def _working_precision(*numbers: Number) -> int:
    """Largest precision among the Float operands."""
    precisions = [n.precision for n in numbers if n.kind is NumberKind.FLOAT]
    return max(precisions, default=DEFAULT_PRECISION)


def _coerce(value: object) -> Union[Number, type(NotImplemented)]:
    """Convert an operand to a Number, or NotImplemented for foreign types."""
    if isinstance(value, Number):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, Fraction, mpmath.mpf)):
        return NotImplemented
    return Number.of(value)


ZERO = Number.from_int(0)
ONE = Number.from_int(1)
