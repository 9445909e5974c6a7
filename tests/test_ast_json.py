import json

import pytest

from main import lex, parse_tokens
from ast_json import ast_to_json, ast_from_json


def test_ast_to_json_shape():
    data = ast_to_json(parse_tokens(lex("devprint 1 + x;")))
    assert data["node_type"] == "DEVPRINT"
    assert "right" not in data
    body = data["left"]
    assert body["node_type"] == "PLUS"
    assert body["left"]["node_type"] == "NUMBER"
    assert body["left"]["value"] == "1"
    assert body["right"] == {"node_type": "IDENTIFIER", "value": "x", "line": 1, "column": 14}
    json.dumps(data)


def test_ast_from_json_rebuilds_equal_tree():
    ast = parse_tokens(lex("(a - 2) / b * 3;"))
    assert ast_from_json(json.loads(json.dumps(ast_to_json(ast)))) == ast


def test_none_and_invalid_input():
    assert ast_to_json(None) is None
    assert ast_from_json(None) is None
    with pytest.raises(ValueError):
        ast_from_json({"node_type": "ASSIGNMENT"})


@pytest.mark.parametrize(
    "data",
    [
        {"node_type": "PLUS", "left": 1},
        {"node_type": "PLUS"},
        {"node_type": "MINUS", "left": {"node_type": "NUMBER", "value": "1"}},
        {"node_type": "NUMBER"},
        {"node_type": "NUMBER", "value": 7},
        {"node_type": "IDENTIFIER", "value": "x", "left": {"node_type": "NUMBER", "value": "1"}},
        {"node_type": "DEVPRINT"},
        {"node_type": "DEVPRINT", "value": "x", "left": {"node_type": "NUMBER", "value": "1"}},
        {"node_type": ["PLUS"]},
        "PLUS",
        [],
    ],
)
def test_ast_from_json_rejects_malformed_shapes(data):
    with pytest.raises(ValueError):
        ast_from_json(data)
