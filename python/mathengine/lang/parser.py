# MathEngine - Parser
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Recursive-descent parser for MathEngine statements.

Grammar:

    statement  := equation ['@' directive]
    equation   := expression ['=' expression]
    expression := term (('+' | '-') term)*
    term       := unary (('*' | '/') unary)*
    unary      := ('-' | '+') unary | power
    power      := atom ('^' atom)*
    atom       := number | variable | '(' expression ')'
    directive  := variable [',' ['-'] (number | variable)]

``^`` is left associative and binds tighter than unary minus, so
``-x^2`` is ``-(x^2)`` and ``2^3^2`` is ``(2^3)^2``. The parser builds raw
expression trees; nothing is simplified.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from ..config import Config
from ..equation import Equation
from ..exceptions import ParserError
from ..expr import Expr, Constant, Variable, Add, Sub, Mul, Div, Pow, Negate
from ..number import Number
from ..rational import to_fraction
from .lexer import Token, TokenKind, tokenize


@dataclass(frozen=True)
class Solve:
    """Directive ``@ x``: solve for ``x``."""
    variable: str


@dataclass(frozen=True)
class Substitute:
    """Directive ``@ x, value``: replace ``x`` with ``value``."""
    variable: str
    replacement: Expr


Directive = Union[Solve, Substitute]


@dataclass(frozen=True)
class Statement:
    body: Union[Expr, Equation]
    directive: Optional[Directive] = None


class Parser:
    """
    Parser over a token list.

    Args:
        tokens: Tokens ending with an EOF token.
        config: Controls how decimal literals are read.
    """

    def __init__(self, tokens: list[Token], config: Optional[Config] = None):
        self.tokens = tokens
        self.config = config or Config()
        self.index = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.current
        if token.kind is not TokenKind.EOF:
            self.index += 1
        return token

    def _accept(self, *kinds: TokenKind) -> Optional[Token]:
        if self.current.kind in kinds:
            return self._advance()
        return None

    def _expect(self, kind: TokenKind, message: str) -> Token:
        if self.current.kind is not kind:
            raise ParserError(message, self.current)
        return self._advance()

    # Grammar rules

    def parse_statement(self) -> Statement:
        body = self.parse_equation()
        directive = None
        if self._accept(TokenKind.AT):
            directive = self.parse_directive()
        if self.current.kind is not TokenKind.EOF:
            raise ParserError("Unexpected token after the end of the statement", self.current)
        return Statement(body, directive)

    def parse_equation(self) -> Union[Expr, Equation]:
        lhs = self.parse_expression()
        if self._accept(TokenKind.EQUALS):
            return Equation(lhs, self.parse_expression())
        return lhs

    def parse_directive(self) -> Directive:
        name = self._expect(TokenKind.VARIABLE, "Expected a variable after '@'").text
        if not self._accept(TokenKind.COMMA):
            return Solve(name)
        negative = self._accept(TokenKind.MINUS) is not None
        token = self.current
        if token.kind is TokenKind.NUMBER:
            replacement = self._number(self._advance())
        elif token.kind is TokenKind.VARIABLE:
            replacement = Variable(self._advance().text)
        else:
            raise ParserError("Expected a number or a variable to substitute", token)
        if negative:
            replacement = Negate(replacement)
        return Substitute(name, replacement)

    def parse_expression(self) -> Expr:
        result = self.parse_term()
        while True:
            if self._accept(TokenKind.PLUS):
                result = Add(result, self.parse_term())
            elif self._accept(TokenKind.MINUS):
                result = Sub(result, self.parse_term())
            else:
                return result

    def parse_term(self) -> Expr:
        result = self.parse_unary()
        while True:
            if self._accept(TokenKind.STAR):
                if self.current.kind is TokenKind.STAR:
                    raise ParserError("Use '^' for powers instead of '**'", self.current)
                result = Mul(result, self.parse_unary())
            elif self._accept(TokenKind.SLASH):
                result = Div(result, self.parse_unary())
            else:
                return result

    def parse_unary(self) -> Expr:
        if self._accept(TokenKind.MINUS):
            return Negate(self.parse_unary())
        if self._accept(TokenKind.PLUS):
            return self.parse_unary()
        return self.parse_power()

    def parse_power(self) -> Expr:
        result = self.parse_atom()
        while self._accept(TokenKind.CARET):
            result = Pow(result, self.parse_atom())
        return result

    def parse_atom(self) -> Expr:
        token = self.current
        if token.kind is TokenKind.NUMBER:
            return self._number(self._advance())
        if token.kind is TokenKind.VARIABLE:
            return Variable(self._advance().text)
        if self._accept(TokenKind.LPAREN):
            inner = self.parse_expression()
            self._expect(TokenKind.RPAREN, "Expected ')'")
            return inner
        raise ParserError("Expected a number, a variable or '('", token)

    def _number(self, token: Token) -> Constant:
        text = token.text
        if '.' not in text:
            return Constant(Number.from_int(int(text)))
        if self.config.exact_decimals:
            return Constant(Number.from_fraction(to_fraction(text)))
        return Constant(Number.from_float(text, self.config.precision))


def parse(statement: str, config: Optional[Config] = None) -> Statement:
    """Tokenize and parse one statement."""
    return Parser(tokenize(statement), config).parse_statement()
