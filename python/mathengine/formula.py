# MathEngine - Formulas
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Canonical expressions with natural Python syntax.

A Formula always holds ``order(simplify(tree))``. Every builder returns a
new canonical Formula, and two Formulas are equal when their canonical
trees are.

Example:
    >>> x = Formula('x')
    >>> x + x + x == 3 * x
    True
    >>> str((x * 2 + 1).substitute('x', 3))
    '7'
"""

from __future__ import annotations
from fractions import Fraction
from typing import FrozenSet, Union

import mpmath

from .expr import Expr, ExprLike, Constant, Add, Sub, Mul, Div, Pow, Log, Negate, var, to_expr
from .number import Number
from .ordering import order
from .simplify import simplify
from .substitution import count_occurrences, substitute


FormulaLike = Union['Formula', ExprLike, str]


class Formula:
    """
    An expression kept in canonical form.

    Args:
        value: An Expr, a number, a variable letter or another Formula.
    """

    __slots__ = ('expr',)

    def __init__(self, value: FormulaLike):
        self.expr = order(simplify(_unwrap(value)))

    @classmethod
    def _canonical(cls, expr: Expr) -> Formula:
        """Wrap an already canonical tree."""
        formula = cls.__new__(cls)
        formula.expr = expr
        return formula

    # Builders

    def __add__(self, other: FormulaLike) -> Formula:
        return Formula(Add(self.expr, _unwrap(other)))

    def __radd__(self, other: FormulaLike) -> Formula:
        return Formula(Add(_unwrap(other), self.expr))

    def __sub__(self, other: FormulaLike) -> Formula:
        return Formula(Sub(self.expr, _unwrap(other)))

    def __rsub__(self, other: FormulaLike) -> Formula:
        return Formula(Sub(_unwrap(other), self.expr))

    def __mul__(self, other: FormulaLike) -> Formula:
        return Formula(Mul(self.expr, _unwrap(other)))

    def __rmul__(self, other: FormulaLike) -> Formula:
        return Formula(Mul(_unwrap(other), self.expr))

    def __truediv__(self, other: FormulaLike) -> Formula:
        return Formula(Div(self.expr, _unwrap(other)))

    def __rtruediv__(self, other: FormulaLike) -> Formula:
        return Formula(Div(_unwrap(other), self.expr))

    def __neg__(self) -> Formula:
        return Formula(Negate(self.expr))

    def __pow__(self, exponent: FormulaLike) -> Formula:
        return self.pow(exponent)

    def __rpow__(self, base: FormulaLike) -> Formula:
        return Formula(Pow(_unwrap(base), self.expr))

    def pow(self, exponent: FormulaLike) -> Formula:
        """Raise to an arbitrary exponent."""
        return Formula(Pow(self.expr, _unwrap(exponent)))

    def powi(self, exponent: int) -> Formula:
        """Raise to an integer power."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"powi expects an int, got {type(exponent).__name__}")
        return self.pow(Constant(Number.from_int(exponent)))

    def powf(self, exponent: Union[float, str, mpmath.mpf]) -> Formula:
        """Raise to a floating point power."""
        return self.pow(Constant(Number.from_float(exponent)))

    def log(self, base: FormulaLike) -> Formula:
        """Logarithm of this formula to ``base``."""
        return Formula(Log(_unwrap(base), self.expr))

    def substitute(self, variable: str, replacement: FormulaLike) -> Formula:
        """Replace ``variable`` with ``replacement``."""
        return Formula._canonical(substitute(self.expr, variable, _unwrap(replacement)))

    # Queries

    def count(self, variable: str) -> int:
        """Occurrences of ``variable`` in the canonical tree."""
        return count_occurrences(self.expr, variable)

    def free_vars(self) -> FrozenSet[str]:
        return self.expr.free_vars()

    @property
    def is_constant(self) -> bool:
        return isinstance(self.expr, Constant)

    @property
    def value(self) -> Number:
        """
        The numeric value of a constant Formula.

        Raises:
            ValueError: If the Formula still contains variables.
        """
        if not isinstance(self.expr, Constant):
            raise ValueError(f"{self} is not a constant")
        return self.expr.value

    # Comparison and rendering

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Formula):
            return self.expr == other.expr
        if isinstance(other, (Expr, Number, int, float, Fraction, mpmath.mpf)) and not isinstance(other, bool):
            return self.expr == Formula(other).expr
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.expr)

    def __str__(self) -> str:
        return str(self.expr)

    def __repr__(self) -> str:
        return f"Formula({self.expr})"


def _unwrap(value: FormulaLike) -> Expr:
    if isinstance(value, Formula):
        return value.expr
    if isinstance(value, str):
        return var(value)
    return to_expr(value)
