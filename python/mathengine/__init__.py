# MathEngine
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
MathEngine - Symbolic Algebra over Exact and Arbitrary Precision Numbers.

MathEngine represents arithmetic expressions as immutable trees, reduces
them to a canonical form, substitutes values for variables and solves
equations in which the unknown appears once.

Example:
    >>> import mathengine as me
    >>> x = me.Formula('x')
    >>> print(x * 5 + 3 * x)
    (x * 8)
    >>> print(me.solve(me.Equation.of(3, x * 2), 'x'))
    3/2

Key Features:
    - Exact Integer and Rational arithmetic with promotion to mpmath floats
    - Like-term and like-factor collection
    - Canonical ordering for structural comparison
    - Single-occurrence equation solving
"""

__version__ = "0.1.0"

# Numbers
from .number import (
    Number,
    NumberKind,
)

# Core expression types and constructors
from .expr import (
    Expr,
    Constant,
    Variable,
    Add,
    Sub,
    Mul,
    Div,
    Pow,
    Log,
    Negate,
    var,
    const,
    log,
    power,
)

# Algorithms
from .simplify import simplify
from .ordering import order
from .substitution import substitute, count_occurrences

# Formulas and equations
from .formula import Formula
from .equation import Equation, AntiOperation, solve

# Rational utilities
from .rational import to_fraction

# Configuration
from .config import Config, DEFAULT_PRECISION

# Exceptions
from .exceptions import (
    MathEngineError,
    DivisionByZeroError,
    DomainError,
    EquationMismatchError,
    NotYetImplementedError,
    InternalError,
    ExpressionError,
    UnsupportedExpressionError,
    LanguageError,
    LexerError,
    ParserError,
    EvalError,
    SUPPORTED_KINDS,
)

__all__ = [
    # Numbers
    "Number",
    "NumberKind",
    # Expressions
    "Expr",
    "Constant",
    "Variable",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Pow",
    "Log",
    "Negate",
    "var",
    "const",
    "log",
    "power",
    # Algorithms
    "simplify",
    "order",
    "substitute",
    "count_occurrences",
    # Formulas and equations
    "Formula",
    "Equation",
    "AntiOperation",
    "solve",
    # Rational utilities
    "to_fraction",
    # Configuration
    "Config",
    "DEFAULT_PRECISION",
    # Exceptions
    "MathEngineError",
    "DivisionByZeroError",
    "DomainError",
    "EquationMismatchError",
    "NotYetImplementedError",
    "InternalError",
    "ExpressionError",
    "UnsupportedExpressionError",
    "LanguageError",
    "LexerError",
    "ParserError",
    "EvalError",
    "SUPPORTED_KINDS",
]
