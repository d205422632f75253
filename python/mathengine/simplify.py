# MathEngine - Symbolic Simplification
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Algebraic simplification for MathEngine expressions.

The simplifier rewrites a tree into a reduced form that is a fixed point
of itself (``simplify(simplify(e)) == simplify(e)``):

1. Constant folding (2 + 3 -> 5, 5 / 2 -> 5/2)
2. Identity removal (x + 0 -> x, x * 1 -> x, x ^ 1 -> x)
3. Zero propagation (x * 0 -> 0)
4. Negation pushing and cancellation (--x -> x, -(a + b) -> -a + -b)
5. Like term collection (x + x + x -> 3 * x, 3*x + x*5 -> 8 * x)
6. Like factor collection (x * x * x -> x ^ 3, x^3 * x -> x ^ 4)

Subtraction never survives: ``a - b`` becomes ``a + -(b)``.

Example:
    >>> x = var('x')
    >>> str(simplify(1 + x - 1))
    'x'
    >>> str(simplify(x * 5 + 3 * x))
    '(8 * x)'
"""

from __future__ import annotations
from typing import Type

from .exceptions import DomainError, UnsupportedExpressionError
from .expr import (
    Expr, Constant, Variable, Add, Sub, Mul, Div, Pow, Log, Negate,
)
from .number import Number, ZERO, ONE


NEG_ONE = Number.from_int(-1)


def simplify(expr: Expr) -> Expr:
    """
    Simplify an expression algebraically.

    Args:
        expr: Expression to simplify

    Returns:
        Simplified expression (mathematically equivalent)

    Raises:
        DivisionByZeroError: If a constant division by zero is folded.
        UnsupportedExpressionError: If the tree contains an unknown node kind.
    """
    if isinstance(expr, (Constant, Variable)):
        return expr

    if isinstance(expr, Add):
        return _simplify_sum(expr)

    if isinstance(expr, Sub):
        lhs = simplify(expr.lhs)
        negated = simplify(Negate(simplify(expr.rhs)))
        return simplify(Add(lhs, negated))

    if isinstance(expr, Mul):
        return _simplify_product(expr)

    if isinstance(expr, Div):
        numerator = simplify(expr.numerator)
        denominator = simplify(expr.denominator)
        # const / const (x^2 / x is deliberately left alone)
        if isinstance(numerator, Constant) and isinstance(denominator, Constant):
            return Constant(numerator.value / denominator.value)
        return Div(numerator, denominator)

    if isinstance(expr, Pow):
        return _simplify_power(expr)

    if isinstance(expr, Log):
        return Log(simplify(expr.base), simplify(expr.argument))

    if isinstance(expr, Negate):
        return _simplify_negation(expr)

    raise UnsupportedExpressionError(type(expr).__name__.lower(), context="simplification")


def _simplify_sum(expr: Add) -> Expr:
    """Fold constants and collect like terms across an addition chain."""
    constant = ZERO
    # Insertion order keeps terms at their first appearance
    collected: dict[object, list] = {}

    for operand in _extract_operands(expr, Add):
        if isinstance(operand, Constant):
            constant = constant + operand.value
            continue
        term, coefficient = _split_coefficient(operand)
        entry = collected.setdefault(_like_key(term), [term, ZERO])
        entry[1] = entry[1] + coefficient

    terms = []
    for term, coefficient in collected.values():
        if coefficient.is_zero():
            continue
        if not coefficient.is_one():
            term = simplify(Mul(Constant(coefficient), term))
        if isinstance(term, Constant):
            constant = constant + term.value
        else:
            terms.append(term)

    if not terms:
        return Constant(constant)
    if not constant.is_zero():
        terms.insert(0, Constant(constant))
    return build_chain(Add, terms)


def _split_coefficient(term: Expr) -> tuple[Expr, Number]:
    """Split a simplified additive term into (term without coefficient, coefficient)."""
    if isinstance(term, Mul):
        if isinstance(term.lhs, Constant):
            return term.rhs, term.lhs.value
        if isinstance(term.rhs, Constant):
            return term.lhs, term.rhs.value
    if isinstance(term, Negate):
        return term.value, NEG_ONE
    return term, ONE


def _like_key(expr: Expr) -> object:
    """
    Hashable key under which terms that differ only by the order of
    their commutative operands compare equal, so ``x*y`` and ``y*x``
    collect together.
    """
    if isinstance(expr, (Constant, Variable)):
        return expr
    if isinstance(expr, (Add, Mul)):
        keys = [_like_key(operand) for operand in flatten(expr, type(expr))]
        return (type(expr).__name__, tuple(sorted(keys, key=repr)))
    return (type(expr).__name__,) + tuple(_like_key(child) for child in expr.children())


def _simplify_product(expr: Mul) -> Expr:
    """Fold constants and collect like factors across a multiplication chain."""
    constant = ONE
    collected: dict[object, tuple[Expr, list[Expr]]] = {}

    for operand in _extract_operands(expr, Mul):
        if isinstance(operand, Constant):
            if operand.value.is_zero():
                return operand
            constant = constant * operand.value
            continue
        if isinstance(operand, Negate):
            constant = -constant
            operand = operand.value
        if isinstance(operand, Pow):
            collected.setdefault(_like_key(operand.base), (operand.base, []))[1].append(operand.exponent)
        else:
            collected.setdefault(_like_key(operand), (operand, []))[1].append(Constant(ONE))

    factors = []
    for base, powers in collected.values():
        if len(powers) == 1:
            factor = base if powers[0] == Constant(ONE) else Pow(base, powers[0])
        else:
            factor = simplify(Pow(base, build_chain(Add, powers)))
        if isinstance(factor, Constant):
            constant = constant * factor.value
        else:
            factors.append(factor)

    if constant.is_zero() or not factors:
        return Constant(constant)
    if constant == NEG_ONE and len(factors) == 1 and isinstance(factors[0], (Variable, Pow, Log)):
        return Negate(factors[0])
    if not constant.is_one():
        factors.insert(0, Constant(constant))
    return build_chain(Mul, factors)


def _simplify_power(expr: Pow) -> Expr:
    base = simplify(expr.base)
    exponent = simplify(expr.exponent)

    if isinstance(exponent, Constant):
        # x^1 -> x
        if exponent.value.is_one():
            return base
        # x^0 -> 1
        if exponent.value.is_zero():
            return Constant(ONE)

    # (x^y)^z -> x^(z*y)
    if isinstance(base, Pow):
        return simplify(Pow(base.base, simplify(Mul(exponent, base.exponent))))

    if isinstance(base, Constant) and isinstance(exponent, Constant):
        try:
            return Constant(base.value.pow(exponent.value))
        except DomainError:
            # Not a real number, e.g. (-8)^(1/2)
            return Pow(base, exponent)

    return Pow(base, exponent)


def _simplify_negation(expr: Negate) -> Expr:
    value = simplify(expr.value)

    if isinstance(value, Constant):
        return Constant(-value.value)
    # -(a + b) -> -a + -b
    if isinstance(value, Add):
        return simplify(Add(Negate(value.lhs), Negate(value.rhs)))
    # -(a - b) -> -a + b
    if isinstance(value, Sub):
        return simplify(Add(Negate(value.lhs), value.rhs))
    # -(a * b) -> (-a) * b
    if isinstance(value, Mul):
        return simplify(Mul(Negate(value.lhs), value.rhs))
    # -(a / b) -> (-a) / b
    if isinstance(value, Div):
        return simplify(Div(Negate(value.numerator), value.denominator))
    # --x -> x
    if isinstance(value, Negate):
        return value.value
    return Negate(value)


def _extract_operands(expr: Expr, kind: Type[Expr]) -> list[Expr]:
    """
    Flatten an associative chain into its simplified operands.

    Operands of another kind are simplified first; when one simplifies
    into the same kind of chain, its operands are spliced in as well.
    """
    operands = []
    for child in expr.children():
        if isinstance(child, kind):
            operands.extend(_extract_operands(child, kind))
            continue
        simplified = simplify(child)
        if isinstance(simplified, kind):
            operands.extend(flatten(simplified, kind))
        else:
            operands.append(simplified)
    return operands


def flatten(expr: Expr, kind: Type[Expr]) -> list[Expr]:
    """Flatten a chain of ``kind`` nodes into its operands without rewriting them."""
    if isinstance(expr, kind):
        return flatten(expr.lhs, kind) + flatten(expr.rhs, kind)
    return [expr]


def build_chain(kind: Type[Expr], operands: list[Expr]) -> Expr:
    """Rebuild a right-leaning chain: [a, b, c] -> kind(a, kind(b, c))."""
    result = operands[-1]
    for operand in reversed(operands[:-1]):
        result = kind(operand, result)
    return result
