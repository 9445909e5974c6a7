"""
Lexer for the Limonaca language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- Words are accumulated in a pending buffer. Whitespace and punctuation flush
    the buffer as a single token; punctuation is then emitted on its own as a
    one-character token.
- A flushed buffer is a keyword if it appears in `KEYWORDS`, otherwise an
    identifier if a letter or underscore was seen while accumulating it, and a
    number otherwise. Number tokens therefore only ever contain digits.

Examples:
    Input:  "devprint (a + 1) * 2;"
    Tokens: [KEYWORD_DEVPRINT('devprint'), LPAREN, IDENTIFIER('a'), PLUS,
             NUMBER('1'), RPAREN, STAR, NUMBER('2'), SEMICOLON, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and
    `self.current_char`; all state lives on the instance, so separate
    `Lexer` objects never interfere with each other.
- Any character that is not whitespace, a letter, a decimal digit, `_` or one of the
    punctuation characters raises `UnrecognizedCharacterError`.
- Exactly one EOF token is appended at the end of every token list.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, KEYWORDS, PUNCTUATION
from errors import UnrecognizedCharacterError


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

        # Pending word and where it started.
        self.buffer: List[str] = []
        self.is_identifier = False
        self.start_line = 1
        self.start_column = 1

    def error(self, char: str) -> UnrecognizedCharacterError:
        return UnrecognizedCharacterError(char, self.line, self.column)

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def make_word(self) -> Token:
        """Classify the pending buffer as a keyword, identifier or number."""
        word = "".join(self.buffer)
        if word in KEYWORDS:
            token_type = KEYWORDS[word]
        elif self.is_identifier:
            token_type = TokenType.IDENTIFIER
        else:
            token_type = TokenType.NUMBER
        return Token(token_type, word, self.start_line, self.start_column)

    def flush(self, tokens: List[Token]) -> None:
        """Emit the pending buffer (if any) and reset it."""
        if not self.buffer:
            return
        tokens.append(self.make_word())
        self.buffer = []
        self.is_identifier = False

    def accumulate(self, char: str) -> None:
        if not self.buffer:
            self.start_line = self.line
            self.start_column = self.column
        self.buffer.append(char)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, terminated by EOF."""
        tokens: List[Token] = []

        while self.current_char is not None:
            char = self.current_char

            if char.isspace():
                self.flush(tokens)
            elif char.isalpha() or char == "_":
                self.accumulate(char)
                self.is_identifier = True
            elif char.isdecimal():
                self.accumulate(char)
            else:
                self.flush(tokens)
                token_type: Optional[TokenType] = PUNCTUATION.get(char)
                if token_type is None:
                    raise self.error(char)
                tokens.append(Token(token_type, "", self.line, self.column))

            self.advance()

        self.flush(tokens)
        tokens.append(Token(TokenType.EOF, "", self.line, self.column))
        return tokens


def tokenize(text: str) -> List[Token]:
    """Tokenize `text` with a fresh lexer."""
    return Lexer(text).tokenize()
