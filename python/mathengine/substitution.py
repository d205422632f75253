# MathEngine - Substitution
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""Variable substitution and occurrence counting."""

from __future__ import annotations

from .exceptions import UnsupportedExpressionError
from .expr import (
    Expr, ExprLike, Constant, Variable, Add, Sub, Mul, Div, Pow, Log, Negate,
    to_expr,
)
from .ordering import order
from .simplify import simplify


def replace(expr: Expr, variable: str, replacement: Expr) -> Expr:
    """
    Replace every occurrence of ``variable`` with ``replacement``.

    The result is not simplified. Trees are immutable, so the replacement
    is shared rather than copied.
    """
    if isinstance(expr, Variable):
        return replacement if expr.name == variable else expr

    if isinstance(expr, Constant):
        return expr

    if isinstance(expr, (Add, Sub, Mul, Div, Pow, Log, Negate)):
        return type(expr)(*(replace(child, variable, replacement) for child in expr.children()))

    raise UnsupportedExpressionError(type(expr).__name__.lower(), context="substitution")


def substitute(expr: Expr, variable: str, replacement: ExprLike) -> Expr:
    """
    Substitute ``replacement`` for ``variable`` and canonicalize the result.

    Example:
        >>> x = var('x')
        >>> str(substitute(x * 2 + 1, 'x', 3))
        '7'
    """
    return order(simplify(replace(expr, variable, to_expr(replacement))))


def count_occurrences(expr: Expr, variable: str) -> int:
    """Number of times ``variable`` appears in ``expr``."""
    if isinstance(expr, Variable):
        return 1 if expr.name == variable else 0
    return sum(count_occurrences(child, variable) for child in expr.children())
