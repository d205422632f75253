# MathEngine - Language Front-End
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""Lexer, parser and interpreter for typed MathEngine statements."""

from .lexer import Token, TokenKind, tokenize
from .parser import Parser, Statement, Solve, Substitute, parse
from .interpreter import Interpreter

__all__ = [
    'Token', 'TokenKind', 'tokenize',
    'Parser', 'Statement', 'Solve', 'Substitute', 'parse',
    'Interpreter',
]
