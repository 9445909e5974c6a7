from lexer import Lexer
from parser import Parser
from ast_nodes import ASTNode, NodeType, binary, number, identifier


def parse_text(text: str) -> ASTNode:
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text).tokenize()).parse()


def types_of(tokens):
    return [t.type for t in tokens]


def num(text) -> ASTNode:
    return number(str(text))


def ident(name: str) -> ASTNode:
    return identifier(name)


def plus(left, right) -> ASTNode:
    return binary(NodeType.PLUS, left, right)


def minus(left, right) -> ASTNode:
    return binary(NodeType.MINUS, left, right)


def mul(left, right) -> ASTNode:
    return binary(NodeType.MULTIPLY, left, right)


def div(left, right) -> ASTNode:
    return binary(NodeType.DIVIDE, left, right)
