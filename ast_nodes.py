"""AST node definitions for the Limonaca language.

The language only has arithmetic expressions, identifiers, numeric literals
and the `devprint` statement, so a single node shape covers everything: a
`NodeType` tag, optional `left`/`right` children and a string `value` that
is only filled in for number and identifier leaves.

Conventions:
- Binary operator nodes (PLUS, MINUS, MULTIPLY, DIVIDE) always have both
    children; NUMBER and IDENTIFIER leaves have none; DEVPRINT holds the
    printed expression in `left` and has no `right`.
- Nodes are frozen dataclasses: the parser builds each node once and the
    tree is never mutated afterwards. Children are owned by exactly one parent.
- `line`/`column` record where the node starts in the source and do not take
    part in equality, so tests can compare trees structurally.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Optional


class NodeType(Enum):
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    NUMBER = auto()
    IDENTIFIER = auto()
    DEVPRINT = auto()

    def __str__(self) -> str:
        return self.name


BINARY_TYPES = frozenset(
    {NodeType.PLUS, NodeType.MINUS, NodeType.MULTIPLY, NodeType.DIVIDE}
)
LEAF_TYPES = frozenset({NodeType.NUMBER, NodeType.IDENTIFIER})


@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    left: Optional[ASTNode] = None
    right: Optional[ASTNode] = None
    value: str = ""
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"{self.type} {self.value}"

    def is_binary(self) -> bool:
        return self.type in BINARY_TYPES

    def is_leaf(self) -> bool:
        return self.type in LEAF_TYPES

    def children(self) -> Iterator[ASTNode]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def walk(self) -> Iterator[ASTNode]:
        """Pre-order traversal of this subtree."""
        stack: List[ASTNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def number(text: str, line: int = 0, column: int = 0) -> ASTNode:
    return ASTNode(NodeType.NUMBER, value=text, line=line, column=column)


def identifier(text: str, line: int = 0, column: int = 0) -> ASTNode:
    return ASTNode(NodeType.IDENTIFIER, value=text, line=line, column=column)


def binary(node_type: NodeType, left: ASTNode, right: ASTNode) -> ASTNode:
    if node_type not in BINARY_TYPES:
        raise ValueError(f"{node_type} is not a binary operator")
    return ASTNode(node_type, left, right, line=left.line, column=left.column)


def devprint(expression: ASTNode, line: int = 0, column: int = 0) -> ASTNode:
    return ASTNode(NodeType.DEVPRINT, left=expression, line=line, column=column)
