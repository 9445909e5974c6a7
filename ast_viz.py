"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object (not
rendered). `write_and_render` writes the rendered image to disk, which needs
the Graphviz `dot` binary on the PATH.

Layout: one box per node labelled `<NodeType>` or `<NodeType> <value>`, with
edges to the children labelled `left` and `right`. Nodes are numbered in
pre-order (`n0` is the root).
"""

from typing import List, Optional, Tuple
from graphviz import CalledProcessError, Digraph, ExecutableNotFound
from ast_nodes import ASTNode


def _label(node: ASTNode) -> str:
    return f"{node.type} {node.value}".rstrip()


def render_ast_dot(node: Optional[ASTNode], fmt: str = "svg") -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may inspect `dot.source` or call `dot.render(...)`.
    """
    dot = Digraph(format=fmt)
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="Courier")

    # (node, parent name, edge label); right is pushed first to keep pre-order.
    stack: List[Tuple[ASTNode, Optional[str], str]] = []
    if node is not None:
        stack.append((node, None, ""))

    counter = 0
    while stack:
        n, parent, edge = stack.pop()
        name = f"n{counter}"
        counter += 1
        shape = "ellipse" if n.is_leaf() else "box"
        dot.node(name, _label(n), shape=shape)
        if parent is not None:
            dot.edge(parent, name, label=edge)
        if n.right is not None:
            stack.append((n.right, name, "right"))
        if n.left is not None:
            stack.append((n.left, name, "left"))
    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Render the AST to `out_path` (without extension) and return the written file.

    If Graphviz itself is not installed the DOT source is written to
    `out_path + ".dot"` instead and that path is returned.
    """
    dot = render_ast_dot(node, fmt=fmt)
    try:
        # render appends the extension itself
        return dot.render(out_path, cleanup=True)
    except (ExecutableNotFound, CalledProcessError):
        dot_path = f"{out_path}.dot"
        with open(dot_path, "w", encoding="utf-8") as fh:
            fh.write(dot.source)
        return dot_path
