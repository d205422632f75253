# MathEngine - Lexer
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""Tokenizer for MathEngine statements."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from ..exceptions import LexerError


class TokenKind(Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    CARET = "^"
    EQUALS = "="
    LPAREN = "("
    RPAREN = ")"
    AT = "@"
    COMMA = ","
    EOF = "end of input"


_SYMBOLS = {
    kind.value: kind
    for kind in TokenKind
    if kind not in (TokenKind.NUMBER, TokenKind.VARIABLE, TokenKind.EOF)
}


@dataclass(frozen=True)
class Token:
    """A token and the offset of its first character in the statement."""
    kind: TokenKind
    text: str
    position: int

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return self.kind.value
        return f"'{self.text}' (column {self.position + 1})"


def tokenize(statement: str) -> list[Token]:
    """
    Split a statement into tokens, ending with an EOF token.

    Variables are single letters, so ``xy`` is two variables.

    Raises:
        LexerError: On an unknown character or a malformed number.
    """
    tokens = []
    position = 0
    length = len(statement)

    while position < length:
        char = statement[position]

        if char.isspace():
            position += 1
            continue

        if _is_digit(char) or (char == '.' and position + 1 < length and _is_digit(statement[position + 1])):
            start = position
            seen_point = False
            while position < length and (_is_digit(statement[position]) or statement[position] == '.'):
                if statement[position] == '.':
                    if seen_point:
                        raise LexerError("Number has more than one decimal point", statement, position)
                    seen_point = True
                position += 1
            tokens.append(Token(TokenKind.NUMBER, statement[start:position], start))
            continue

        if char.isalpha():
            tokens.append(Token(TokenKind.VARIABLE, char, position))
            position += 1
            continue

        kind = _SYMBOLS.get(char)
        if kind is None:
            raise LexerError(f"Unexpected character '{char}'", statement, position)
        tokens.append(Token(kind, char, position))
        position += 1

    tokens.append(Token(TokenKind.EOF, "", length))
    return tokens


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits
    return '0' <= char <= '9'
