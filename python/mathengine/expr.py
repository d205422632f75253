# MathEngine - Symbolic Expressions
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Symbolic expression tree for MathEngine.

Expressions are immutable trees of a fixed, closed set of node kinds.
Python operators build raw trees; nothing is simplified here (see
``mathengine.simplify`` and ``mathengine.formula``).

Example:
    >>> x = var('x')
    >>> str(x * 2 + 5)
    '((x * 2) + 5)'
    >>> (x ** 2 - var('y')).free_vars()
    frozenset({'x', 'y'})
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import Union, FrozenSet

import mpmath

from .number import Number


# Type alias for things that can be converted to expressions
ExprLike = Union['Expr', Number, int, float, Fraction, mpmath.mpf]


class Expr(ABC):
    """
    Base class for symbolic expressions.

    Expressions are immutable and can be composed using Python operators.
    Composition never simplifies: ``x + 0`` is an ``Add`` node.
    """

    @abstractmethod
    def children(self) -> tuple[Expr, ...]:
        """Return the direct sub-expressions, left to right."""
        ...

    def free_vars(self) -> FrozenSet[str]:
        """Return all variable names used in this expression."""
        names = frozenset()
        for child in self.children():
            names |= child.free_vars()
        return names

    # Operator overloading for natural math syntax
    def __neg__(self) -> Expr:
        return Negate(self)

    def __pos__(self) -> Expr:
        return self

    def __add__(self, other: ExprLike) -> Expr:
        return Add(self, to_expr(other))

    def __radd__(self, other: ExprLike) -> Expr:
        return Add(to_expr(other), self)

    def __sub__(self, other: ExprLike) -> Expr:
        return Sub(self, to_expr(other))

    def __rsub__(self, other: ExprLike) -> Expr:
        return Sub(to_expr(other), self)

    def __mul__(self, other: ExprLike) -> Expr:
        return Mul(self, to_expr(other))

    def __rmul__(self, other: ExprLike) -> Expr:
        return Mul(to_expr(other), self)

    def __truediv__(self, other: ExprLike) -> Expr:
        return Div(self, to_expr(other))

    def __rtruediv__(self, other: ExprLike) -> Expr:
        return Div(to_expr(other), self)

    def __pow__(self, exponent: ExprLike) -> Expr:
        return Pow(self, to_expr(exponent))

    def __rpow__(self, base: ExprLike) -> Expr:
        return Pow(to_expr(base), self)


def to_expr(x: ExprLike) -> Expr:
    """Convert a value to an Expr."""
    if isinstance(x, Expr):
        return x
    elif isinstance(x, Number):
        return Constant(x)
    elif isinstance(x, bool):
        raise TypeError("Cannot convert bool to Expr")
    elif isinstance(x, (int, float, Fraction, mpmath.mpf)):
        return Constant(Number.of(x))
    else:
        raise TypeError(f"Cannot convert {type(x).__name__} to Expr")


@dataclass(frozen=True)
class Constant(Expr):
    """A constant number."""
    value: Number

    def children(self) -> tuple[Expr, ...]:
        return ()

    def free_vars(self) -> FrozenSet[str]:
        return frozenset()

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"const({self.value})"


@dataclass(frozen=True)
class Variable(Expr):
    """A symbolic variable named by a single letter."""
    name: str

    def children(self) -> tuple[Expr, ...]:
        return ()

    def free_vars(self) -> FrozenSet[str]:
        return frozenset({self.name})

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"var('{self.name}')"


# Binary operations

@dataclass(frozen=True)
class Add(Expr):
    """Addition: lhs + rhs."""
    lhs: Expr
    rhs: Expr

    def children(self) -> tuple[Expr, ...]:
        return (self.lhs, self.rhs)

    def __str__(self) -> str:
        return f"({self.lhs} + {self.rhs})"


@dataclass(frozen=True)
class Sub(Expr):
    """Subtraction: lhs - rhs. Rewritten as an addition by the simplifier."""
    lhs: Expr
    rhs: Expr

    def children(self) -> tuple[Expr, ...]:
        return (self.lhs, self.rhs)

    def __str__(self) -> str:
        return f"({self.lhs} - {self.rhs})"


@dataclass(frozen=True)
class Mul(Expr):
    """Multiplication: lhs * rhs."""
    lhs: Expr
    rhs: Expr

    def children(self) -> tuple[Expr, ...]:
        return (self.lhs, self.rhs)

    def __str__(self) -> str:
        return f"({self.lhs} * {self.rhs})"


@dataclass(frozen=True)
class Div(Expr):
    """Division: numerator / denominator."""
    numerator: Expr
    denominator: Expr

    def children(self) -> tuple[Expr, ...]:
        return (self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"({self.numerator} / {self.denominator})"


@dataclass(frozen=True)
class Pow(Expr):
    """Power: base ^ exponent, with an arbitrary exponent expression."""
    base: Expr
    exponent: Expr

    def children(self) -> tuple[Expr, ...]:
        return (self.base, self.exponent)

    def __str__(self) -> str:
        return f"({self.base} ^ {self.exponent})"


@dataclass(frozen=True)
class Log(Expr):
    """Logarithm of ``argument`` to the given ``base``."""
    base: Expr
    argument: Expr

    def children(self) -> tuple[Expr, ...]:
        return (self.base, self.argument)

    def __str__(self) -> str:
        return f"Log_{self.base}({self.argument})"


# Unary operations

@dataclass(frozen=True)
class Negate(Expr):
    """Negation: -value."""
    value: Expr

    def children(self) -> tuple[Expr, ...]:
        return (self.value,)

    def __str__(self) -> str:
        return f"-({self.value})"


# Convenience functions

def var(name: str) -> Variable:
    """
    Create a symbolic variable.

    Args:
        name: A single alphabetic character.

    Raises:
        TypeError: If name is not a string.
        ValueError: If name is not a single letter.
    """
    if not isinstance(name, str):
        raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    if len(name) != 1 or not name.isalpha():
        raise ValueError(f"Variable name must be a single letter, got {name!r}")
    return Variable(name)


def const(value: Union[Number, int, float, Fraction, str, mpmath.mpf]) -> Constant:
    """Create a constant expression."""
    return Constant(Number.of(value))


def log(base: ExprLike, argument: ExprLike) -> Log:
    """Logarithm of ``argument`` to ``base``."""
    return Log(to_expr(base), to_expr(argument))


def power(base: ExprLike, exponent: ExprLike) -> Pow:
    """``base`` raised to ``exponent``."""
    return Pow(to_expr(base), to_expr(exponent))
