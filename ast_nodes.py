"""AST node definitions for the scripting dialect.

This module defines the concrete AST node dataclasses built by the parser.
Each node is a dataclass carrying the relevant information (a literal value,
a name, child nodes). The `NodeType` enum identifies node kinds and is used
by the pretty-printer and the JSON dump.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`) and the `line`/`column` of the token that started it.
- The tree owns its children: branch and argument lists are fresh lists per
    node and nodes are never shared between parents.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Union

from errors import ParseError


class NodeType(Enum):
    PROGRAM = auto()
    COMMENT = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    BOOLEAN = auto()
    IMPORT = auto()
    IF = auto()
    PRINT = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


# Leaf Nodes
@dataclass
class CommentNode(ASTNode):
    type: NodeType = NodeType.COMMENT
    text: str = ""


@dataclass
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    name: str = ""


@dataclass
class LiteralNode(ASTNode):
    value: Union[int, float, str, bool] = 0


@dataclass
class IntegerNode(LiteralNode):
    type: NodeType = NodeType.INTEGER


@dataclass
class FloatNode(LiteralNode):
    type: NodeType = NodeType.FLOAT
    value: float = 0.0


@dataclass
class StringNode(LiteralNode):
    type: NodeType = NodeType.STRING
    value: str = ""


@dataclass
class BooleanNode(LiteralNode):
    type: NodeType = NodeType.BOOLEAN
    value: bool = False


@dataclass
class ImportNode(ASTNode):
    type: NodeType = NodeType.IMPORT
    module: str = ""


@dataclass
class ErrorNode(ASTNode):
    """Marks a construct the parser could not make sense of."""

    type: NodeType = NodeType.ERROR
    message: str = ""


# Compound Nodes
@dataclass
class IfNode(ASTNode):
    type: NodeType = NodeType.IF
    condition: ASTNode = field(default_factory=lambda: BooleanNode())
    then_branch: List[ASTNode] = field(default_factory=list)
    else_branch: List[ASTNode] = field(default_factory=list)


@dataclass
class PrintNode(ASTNode):
    type: NodeType = NodeType.PRINT
    arguments: List[ASTNode] = field(default_factory=list)


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: List[ASTNode] = field(default_factory=list)
    # Diagnostics recorded while parsing, in source order.
    errors: List[ParseError] = field(default_factory=list, compare=False)
