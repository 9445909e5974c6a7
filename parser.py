"""
Parser for the Limonaca language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser with one
    method per precedence level. Each call to `parse()` reads exactly one
    statement from the token list produced by the lexer.

Grammar (highest precedence last):

    statement  := "devprint" expression ";" | expression ";"
    expression := term (("+" | "-") term)*
    term       := factor (("*" | "/") factor)*
    factor     := "(" expression ")" | NUMBER | IDENTIFIER

Key points:
- `parse_expression()` and `parse_term()` loop over their operators and build
    left-associative trees: `1 - 2 - 3` becomes `(1 - 2) - 3`.
- The operator token is mapped to a node type through a per-level table. A
    token outside the table raises `UnexpectedOperatorError`; the loop guards
    make this unreachable for well-formed token lists.
- A parenthesised factor must be closed by `)`.
- The read position (`self.pos`) is owned by the parser instance and reset at
    the start of every `parse()` call. The parser only moves forward and never
    backtracks or reads past the EOF token.
- Only one statement is parsed. `remaining()` returns any tokens left after
    it so callers can decide what to do with them.
- Nesting deeper than the interpreter recursion limit raises
    `NestingTooDeepError` instead of `RecursionError`.

Examples:
    - `devprint 1 + 2 * x;` -> DEVPRINT(PLUS(NUMBER 1, MULTIPLY(NUMBER 2, IDENTIFIER x)))
"""

from __future__ import annotations
from typing import Dict, List
from tokens import Token, TokenType
from ast_nodes import ASTNode, NodeType, binary, devprint, identifier, number
from errors import (
    NestingTooDeepError,
    UnclosedParenthesisError,
    UnexpectedOperatorError,
    UnexpectedTokenError,
    UnterminatedStatementError,
)


EXPRESSION_OPERATORS: Dict[TokenType, NodeType] = {
    TokenType.PLUS: NodeType.PLUS,
    TokenType.MINUS: NodeType.MINUS,
}

TERM_OPERATORS: Dict[TokenType, NodeType] = {
    TokenType.STAR: NodeType.MULTIPLY,
    TokenType.SLASH: NodeType.DIVIDE,
}


class Parser:
    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type != TokenType.EOF:
            # Tolerate hand-built token lists without a trailing EOF.
            tokens = list(tokens) + [Token(TokenType.EOF)]
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume the current token and return it. EOF is never consumed."""
        token = self.current
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def check(self, *token_types: TokenType) -> bool:
        return self.current.type in token_types

    def build_binary(
        self, operators: Dict[TokenType, NodeType], op: Token, left: ASTNode, right: ASTNode
    ) -> ASTNode:
        node_type = operators.get(op.type)
        if node_type is None:
            raise UnexpectedOperatorError(op)
        return binary(node_type, left, right)

    def parse(self) -> ASTNode:
        """Parse a single `;`-terminated statement and return its AST."""
        self.pos = 0
        try:
            return self.parse_statement()
        except RecursionError:
            raise NestingTooDeepError(self.current) from None

    def remaining(self) -> List[Token]:
        """Tokens after the last parsed statement, excluding EOF."""
        return [t for t in self.tokens[self.pos :] if t.type != TokenType.EOF]

    def parse_statement(self) -> ASTNode:
        token = self.current

        if token.type == TokenType.KEYWORD_DEVPRINT:
            self.advance()
            expr = self.parse_expression()
            self.expect_semicolon()
            return devprint(expr, token.line, token.column)

        expr = self.parse_expression()
        self.expect_semicolon()
        return expr

    def expect_semicolon(self) -> None:
        if not self.check(TokenType.SEMICOLON):
            raise UnterminatedStatementError(self.current)
        self.advance()

    def parse_expression(self) -> ASTNode:
        """expression := term (("+" | "-") term)*"""
        left = self.parse_term()

        while self.check(*EXPRESSION_OPERATORS):
            op = self.advance()
            right = self.parse_term()
            left = self.build_binary(EXPRESSION_OPERATORS, op, left, right)

        return left

    def parse_term(self) -> ASTNode:
        """term := factor (("*" | "/") factor)*"""
        left = self.parse_factor()

        while self.check(*TERM_OPERATORS):
            op = self.advance()
            right = self.parse_factor()
            left = self.build_binary(TERM_OPERATORS, op, left, right)

        return left

    def parse_factor(self) -> ASTNode:
        """factor := "(" expression ")" | NUMBER | IDENTIFIER"""
        token = self.current

        match token.type:
            case TokenType.LPAREN:
                self.advance()
                expr = self.parse_expression()
                if not self.check(TokenType.RPAREN):
                    raise UnclosedParenthesisError(self.current)
                self.advance()
                return expr

            case TokenType.NUMBER:
                self.advance()
                return number(token.value, token.line, token.column)

            case TokenType.IDENTIFIER:
                self.advance()
                return identifier(token.value, token.line, token.column)

            case _:
                raise UnexpectedTokenError(token)


def parse(tokens: List[Token]) -> ASTNode:
    """Parse one statement from `tokens` with a fresh parser."""
    return Parser(tokens).parse()
