"""Pretty-printer for tokens and the AST.

Provides `PrettyPrinter.print_ast(node, indent)` which renders an AST into a
readable multi-line string, one `"<NodeType> <value>"` line per node. Children
are indented two spaces deeper than their parent; the left subtree is printed
before the right one.

`PrettyPrinter.print_tokens(tokens)` renders a token list the same way, one
`"<TokenType> <value>"` line per token.

Examples:
    >>> print(PrettyPrinter.print_ast(parse(tokenize("1 + x;"))))
    PLUS
      NUMBER 1
      IDENTIFIER x
"""

from __future__ import annotations
from typing import List, Optional
from ast_nodes import ASTNode
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: List[Token]) -> str:
        """Pretty print a token list and return it as a string."""
        return "\n".join(f"{t.type} {t.value}".rstrip() for t in tokens)

    @staticmethod
    def print_ast(node: Optional[ASTNode], indent: int = 0) -> str:
        """Pretty print AST and return as string."""
        lines: List[str] = []
        PrettyPrinter._print_node(node, indent, lines)
        return "\n".join(lines)

    @staticmethod
    def _print_node(node: Optional[ASTNode], indent: int, lines: List[str]) -> None:
        # Explicit stack: operator chains can be deeper than the recursion limit.
        # Right is pushed first so the left subtree prints first.
        stack = [(node, indent)]
        while stack:
            current, depth = stack.pop()
            if current is None:
                continue
            lines.append(f"{' ' * depth}{current.type} {current.value}".rstrip())
            stack.append((current.right, depth + 2))
            stack.append((current.left, depth + 2))

    @staticmethod
    def to_sexpr(node: Optional[ASTNode]) -> str:
        """Compact one-line form, e.g. `PLUS(NUMBER(1), IDENTIFIER(x))`."""
        if node is None:
            return ""
        if node.is_leaf():
            return f"{node.type}({node.value})"
        args = ", ".join(PrettyPrinter.to_sexpr(c) for c in node.children())
        return f"{node.type}({args})"
