"""Error types raised by the Limonaca front end.

Every lexing and parsing failure is a `SyntaxError` subclass so callers can
catch the whole family the same way the driver does. Each error remembers the
source position it refers to (when one is known) and prefixes its message with
it. Loading the source file is a separate concern and fails with
`SourceLoadError`, which is deliberately not a `SyntaxError`.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from tokens import Token


class LimonacaError(SyntaxError):
    """Base class for all tokenize/parse failures."""

    phase = "Syntax"

    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.message = message
        self.line = line
        self.column = column
        if line:
            text = f"{self.phase} error at line {line}, column {column}: {message}"
        else:
            text = f"{self.phase} error: {message}"
        super().__init__(text)

    def __str__(self) -> str:
        return self.args[0]


class LexError(LimonacaError):
    phase = "Lexical"


class UnrecognizedCharacterError(LexError):
    def __init__(self, character: str, line: int = 0, column: int = 0):
        self.character = character
        super().__init__(f"Unrecognized character: {character}", line, column)


class ParseError(LimonacaError):
    phase = "Parse"

    def __init__(self, message: str, token: Optional["Token"] = None):
        self.token = token
        line = token.line if token is not None else 0
        column = token.column if token is not None else 0
        super().__init__(message, line, column)


class UnterminatedStatementError(ParseError):
    def __init__(self, token: Optional["Token"] = None):
        super().__init__("Expected ';' at the end of the statement.", token)


class UnexpectedTokenError(ParseError):
    def __init__(self, token: "Token", message: Optional[str] = None):
        super().__init__(message or f"Unexpected token: {token}", token)


class UnclosedParenthesisError(UnexpectedTokenError):
    def __init__(self, token: "Token"):
        super().__init__(token, f"Expected ')', got {token.type}")


class UnexpectedOperatorError(ParseError):
    def __init__(self, token: "Token"):
        super().__init__(f"Unexpected operator: {token.type}", token)


class NestingTooDeepError(ParseError):
    def __init__(self, token: Optional["Token"] = None):
        super().__init__("Expression nested too deeply.", token)


class SourceLoadError(OSError):
    """The source text could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to load file {path}: {reason}")
