"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node kind,
its payload, its children and its source position.
"""

from typing import Any, Dict, Optional
from ast_nodes import *


def _position(node: ASTNode) -> Dict[str, int]:
    return {"line": node.line, "column": node.column}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    # leaves
    if t == NodeType.COMMENT and isinstance(node, CommentNode):
        return {"node_type": "Comment", "text": node.text, **_position(node)}
    if t == NodeType.IDENTIFIER and isinstance(node, IdentifierNode):
        return {"node_type": "Identifier", "name": node.name, **_position(node)}
    if t == NodeType.INTEGER and isinstance(node, IntegerNode):
        return {"node_type": "Integer", "value": node.value, **_position(node)}
    if t == NodeType.FLOAT and isinstance(node, FloatNode):
        return {"node_type": "Float", "value": node.value, **_position(node)}
    if t == NodeType.STRING and isinstance(node, StringNode):
        return {"node_type": "String", "value": node.value, **_position(node)}
    if t == NodeType.BOOLEAN and isinstance(node, BooleanNode):
        return {"node_type": "Boolean", "value": node.value, **_position(node)}
    if t == NodeType.IMPORT and isinstance(node, ImportNode):
        return {"node_type": "Import", "module": node.module, **_position(node)}
    if t == NodeType.ERROR and isinstance(node, ErrorNode):
        return {"node_type": "Error", "message": node.message, **_position(node)}
    # compound nodes
    if t == NodeType.IF and isinstance(node, IfNode):
        return {
            "node_type": "If",
            "condition": ast_to_json(node.condition),
            "then": [ast_to_json(s) for s in node.then_branch],
            "else": [ast_to_json(s) for s in node.else_branch],
            **_position(node),
        }
    if t == NodeType.PRINT and isinstance(node, PrintNode):
        return {
            "node_type": "Print",
            "arguments": [ast_to_json(a) for a in node.arguments],
            **_position(node),
        }
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
            "errors": [
                {"message": e.message, "line": e.line, "column": e.column}
                for e in node.errors
            ],
            **_position(node),
        }

    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")
