"""Token definitions for the lexer.

This module defines the `TokenType` enum for every token kind the Limonaca
lexer can produce and a small immutable `Token` dataclass holding a token type,
its source text and where it starts. Tokens are the atomic units produced by
the lexer and consumed by the parser.

The keyword and punctuation tables live here too so the lexer and the tests
share one definition of the closed token set.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict


class TokenType(Enum):
    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Literals
    IDENTIFIER = auto()
    NUMBER = auto()

    # Keywords
    KEYWORD_IN = auto()
    KEYWORD_FN = auto()
    KEYWORD_RETURN = auto()
    KEYWORD_AS = auto()
    KEYWORD_BEGIN = auto()
    KEYWORD_END = auto()
    KEYWORD_NONE = auto()
    KEYWORD_VAR = auto()
    KEYWORD_DEVPRINT = auto()
    TYPE_INT32 = auto()
    TYPE_INT16 = auto()

    # Punctuation
    COLON = auto()
    SEMICOLON = auto()
    COMMA = auto()
    ARROW = auto()
    ASSIGN = auto()
    LPAREN = auto()
    RPAREN = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Dict[str, TokenType] = {
    "in": TokenType.KEYWORD_IN,
    "fn": TokenType.KEYWORD_FN,
    "return": TokenType.KEYWORD_RETURN,
    "as": TokenType.KEYWORD_AS,
    "begin": TokenType.KEYWORD_BEGIN,
    "end": TokenType.KEYWORD_END,
    "none": TokenType.KEYWORD_NONE,
    "var": TokenType.KEYWORD_VAR,
    "devprint": TokenType.KEYWORD_DEVPRINT,
    "int32": TokenType.TYPE_INT32,
    "int16": TokenType.TYPE_INT16,
}

PUNCTUATION: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "=": TokenType.ASSIGN,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ">": TokenType.ARROW,
}

# Reverse lookup used when printing punctuation tokens (their value is empty).
PUNCTUATION_TEXT: Dict[TokenType, str] = {t: ch for ch, t in PUNCTUATION.items()}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str = ""
    # Source position of the first character; not part of token identity.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    def __str__(self) -> str:
        return f"{self.type} {self.value}"

    @property
    def lexeme(self) -> str:
        """Source text of the token (punctuation has an empty value)."""
        if self.value:
            return self.value
        return PUNCTUATION_TEXT.get(self.type, "")
