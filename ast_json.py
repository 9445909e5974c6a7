"""Convert AST nodes into JSON-serializable structures and back.

`ast_to_json(node)` returns a nested dict describing the AST node: the node
type, the leaf value (for numbers and identifiers) and the `left`/`right`
children when present. `ast_from_json(data)` rebuilds an equal tree.
"""

from typing import Any, Dict, Optional
from ast_nodes import ASTNode, NodeType, BINARY_TYPES, LEAF_TYPES


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    data: Dict[str, Any] = {"node_type": node.type.name}
    if node.is_leaf():
        data["value"] = node.value
    if node.left is not None:
        data["left"] = ast_to_json(node.left)
    if node.right is not None:
        data["right"] = ast_to_json(node.right)
    if node.line:
        data["line"] = node.line
        data["column"] = node.column
    return data


def _invalid(data: Any, reason: str) -> ValueError:
    return ValueError(f"Invalid AST JSON ({reason}): {data!r}")


def ast_from_json(data: Any) -> Optional[ASTNode]:
    """Rebuild an AST from `ast_to_json` output, checking each node's shape."""
    if data is None:
        return None
    if not isinstance(data, dict):
        raise _invalid(data, "node is not an object")
    try:
        node_type = NodeType[data["node_type"]]
    except (KeyError, TypeError) as e:
        raise _invalid(data, "unknown node_type") from e

    left = ast_from_json(data.get("left"))
    right = ast_from_json(data.get("right"))
    value = data.get("value", "")
    if not isinstance(value, str):
        raise _invalid(data, "value is not a string")

    if node_type in BINARY_TYPES:
        if left is None or right is None or value:
            raise _invalid(data, f"{node_type} needs left and right and no value")
    elif node_type in LEAF_TYPES:
        if left is not None or right is not None or not value:
            raise _invalid(data, f"{node_type} needs a value and no children")
    elif left is None or right is not None or value:
        raise _invalid(data, f"{node_type} needs only a left child")

    return ASTNode(
        node_type,
        left=left,
        right=right,
        value=value,
        line=data.get("line", 0),
        column=data.get("column", 0),
    )
