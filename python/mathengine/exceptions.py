# MathEngine - Exceptions
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""Exception hierarchy for MathEngine."""

from __future__ import annotations
from typing import Optional, Any


# Expression kinds understood by the engine, for reference in error messages
SUPPORTED_KINDS = [
    'const', 'var', 'add', 'sub', 'mul', 'div', 'pow', 'log', 'neg',
]


class MathEngineError(Exception):
    """Base class for all MathEngine exceptions."""
    pass


# Math errors


class DivisionByZeroError(MathEngineError, ZeroDivisionError):
    """Raised when a Number is divided by zero."""
    pass


class DomainError(MathEngineError, ValueError):
    """Raised when a numeric operation has no real result."""
    pass


class EquationMismatchError(MathEngineError):
    """Raised when the variable to solve for does not appear in the equation."""

    def __init__(self, variable: str, equation: Optional[Any] = None):
        message = f"Variable '{variable}' does not appear in the equation"
        if equation is not None:
            message += f" {equation}"
        super().__init__(message)
        self.variable = variable
        self.equation = equation


class NotYetImplementedError(MathEngineError):
    """Raised for inputs the engine knowingly cannot handle yet."""
    pass


class InternalError(MathEngineError, AssertionError):
    """Raised when an internal invariant is violated. Indicates a bug."""
    pass


# Expression errors


class ExpressionError(MathEngineError):
    """Raised when an unsupported expression is used."""

    def __init__(
        self,
        message: str,
        expression_kind: Optional[str] = None,
        suggestion: Optional[str] = None,
    ):
        full_message = message
        if suggestion:
            full_message += f"\n  Suggestion: {suggestion}"
        super().__init__(full_message)
        self.expression_kind = expression_kind
        self.suggestion = suggestion


class UnsupportedExpressionError(ExpressionError):
    """Raised when an expression kind is not supported by an operation."""

    def __init__(self, kind: str, context: Optional[str] = None):
        suggestion = _get_suggestion_for_kind(kind)
        message = f"Unsupported expression kind: '{kind}'"
        if context:
            message += f" in {context}"
        super().__init__(message, expression_kind=kind, suggestion=suggestion)


# Front-end errors


class LanguageError(MathEngineError):
    """Base class for errors raised while reading a statement."""
    pass


class LexerError(LanguageError):
    """Raised when a statement contains a character that cannot be tokenized."""

    def __init__(self, message: str, statement: str, position: int):
        suggestion = None
        if 0 <= position < len(statement):
            suggestion = _get_suggestion_for_char(statement, position)
        caret = " " * position + "^"
        full_message = f"\n | {statement}\n   {caret}\nLexer Error: {message}"
        if suggestion:
            full_message += f"\n  Suggestion: {suggestion}"
        super().__init__(full_message)
        self.statement = statement
        self.position = position
        self.suggestion = suggestion


class ParserError(LanguageError):
    """Raised when a token sequence does not match the grammar."""

    def __init__(self, message: str, token: Optional[Any] = None):
        full_message = f"Parser Error: {message}"
        if token is not None:
            full_message += f",\n  at token {token}"
        super().__init__(full_message)
        self.token = token


class EvalError(LanguageError):
    """Raised when a parsed statement cannot be evaluated."""

    def __init__(self, message: str, node: Optional[Any] = None):
        full_message = f"Interpreter Error: {message}"
        if node is not None:
            full_message += f",\n  at node {node}"
        super().__init__(full_message)
        self.node = node


def _get_suggestion_for_kind(kind: str) -> Optional[str]:
    """Get a helpful suggestion for an unsupported expression kind."""
    suggestions = {
        'log': "Logarithms are kept symbolic; avoid mixing them into sums or products "
               "that need a canonical order.",
        'sqrt': "Use x ^ 0.5 or x ^ (1/2) for square roots.",
        'exp': "Use a constant base raised to a power instead.",
        'sin': "Trigonometric functions are not supported.",
        'cos': "Trigonometric functions are not supported.",
        'tan': "Trigonometric functions are not supported.",
    }
    kind = kind.lower()
    if kind in suggestions:
        return suggestions[kind]
    if kind not in SUPPORTED_KINDS:
        return f"Supported kinds are: {', '.join(SUPPORTED_KINDS)}."
    return None


def _get_suggestion_for_char(statement: str, position: int) -> Optional[str]:
    """Get a helpful suggestion for a character the lexer rejected."""
    char = statement[position]
    suggestions = {
        '×': "Use '*' for multiplication.",
        '·': "Use '*' for multiplication.",
        '÷': "Use '/' for division.",
        '−': "Use '-' for subtraction.",
        '[': "Use '(' and ')' for grouping.",
        ']': "Use '(' and ')' for grouping.",
        '{': "Use '(' and ')' for grouping.",
        '}': "Use '(' and ')' for grouping.",
        ':': "Use '@' to solve or substitute, e.g. 2 * x = 4 @ x.",
        '²': "Use '^' for powers, e.g. x ^ 2.",
        '³': "Use '^' for powers, e.g. x ^ 3.",
        '%': "Modulo is not supported.",
        '!': "Factorials are not supported.",
    }
    return suggestions.get(char)
