# MathEngine - Canonical Ordering
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Deterministic ordering of commutative chains.

``order`` sorts the operands of every addition and multiplication chain by
a numeric weight, heaviest first, so that two simplified expressions that
differ only by commutative reordering become structurally identical.

A term's weight is the term evaluated numerically with every variable
replaced by the code point of its letter:

    >>> str(order(var('x') + var('z') + 2))
    '(z + (x + 2))'
"""

from __future__ import annotations

import mpmath

from .config import DEFAULT_PRECISION
from .exceptions import UnsupportedExpressionError
from .expr import (
    Expr, Constant, Variable, Add, Sub, Mul, Div, Pow, Log, Negate,
)
from .simplify import build_chain, flatten


def order(expr: Expr) -> Expr:
    """
    Put an expression in canonical order.

    Additive terms and multiplicative factors are sorted by descending
    weight; equal weights keep their original relative order. Other node
    kinds keep their shape and only have their children ordered.

    Raises:
        UnsupportedExpressionError: If a logarithm has to be weighed.
    """
    if isinstance(expr, (Constant, Variable)):
        return expr

    if isinstance(expr, (Add, Mul)):
        kind = type(expr)
        operands = [order(operand) for operand in flatten(expr, kind)]
        return build_chain(kind, sorted(operands, key=weight, reverse=True))

    if isinstance(expr, (Sub, Div, Pow, Log)):
        return type(expr)(*(order(child) for child in expr.children()))

    if isinstance(expr, Negate):
        return Negate(order(expr.value))

    raise UnsupportedExpressionError(type(expr).__name__.lower(), context="canonical ordering")


def weight(expr: Expr) -> mpmath.mpf:
    """Numeric sort weight of an expression (NaN weighs -inf)."""
    with mpmath.workprec(DEFAULT_PRECISION):
        result = _weight(expr)
    if mpmath.isnan(result):
        return mpmath.ninf
    return result


def _weight(expr: Expr) -> mpmath.mpf:
    if isinstance(expr, Constant):
        return expr.value.to_mpf(DEFAULT_PRECISION)

    if isinstance(expr, Variable):
        return mpmath.mpf(ord(expr.name))

    if isinstance(expr, Add):
        return _weight(expr.lhs) + _weight(expr.rhs)

    if isinstance(expr, Sub):
        return _weight(expr.lhs) - _weight(expr.rhs)

    if isinstance(expr, Mul):
        return _weight(expr.lhs) * _weight(expr.rhs)

    if isinstance(expr, Div):
        denominator = _weight(expr.denominator)
        if denominator == 0:
            return mpmath.inf
        return _weight(expr.numerator) / denominator

    if isinstance(expr, Pow):
        try:
            result = mpmath.power(_weight(expr.base), _weight(expr.exponent))
        except ZeroDivisionError:
            return mpmath.inf
        if isinstance(result, mpmath.mpc):
            return result.real
        return result

    if isinstance(expr, Negate):
        return -_weight(expr.value)

    if isinstance(expr, Log):
        raise UnsupportedExpressionError("log", context="canonical ordering")

    raise UnsupportedExpressionError(type(expr).__name__.lower(), context="canonical ordering")
