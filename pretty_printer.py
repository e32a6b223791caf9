"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders it back into one line of source-like text. The printer is
intended for debugging, tests and development.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from decimal import Decimal
from ast_nodes import *


def format_float(value: float) -> str:
    """Render a float as digits with one `.` and no exponent.

    The shortest round-tripping `repr` is expanded positionally, so
    `1e-05` becomes `0.00001` and `1e+16` becomes `10000000000000000.0`.
    """
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print an AST node and return as string."""
        if node is None:
            return ""

        indent_str = " " * indent
        lines = []

        match node:
            case CommentNode(text=text):
                lines.append(f"{indent_str}{prefix}Comment({text!r})")

            case IdentifierNode(name=name):
                lines.append(f"{indent_str}{prefix}Identifier({name})")

            case IntegerNode(value=v):
                lines.append(f"{indent_str}{prefix}Integer({v})")

            case FloatNode(value=v):
                lines.append(f"{indent_str}{prefix}Float({v})")

            case StringNode(value=v):
                lines.append(f"{indent_str}{prefix}String({v!r})")

            case BooleanNode(value=v):
                lines.append(f"{indent_str}{prefix}Boolean({'true' if v else 'false'})")

            case ImportNode(module=module):
                lines.append(f"{indent_str}{prefix}Import({module!r})")

            case ErrorNode(message=message):
                lines.append(
                    f"{indent_str}{prefix}Error({message}) at {node.line}:{node.column}"
                )

            case IfNode(condition=cond, then_branch=then_b, else_branch=else_b):
                lines.append(f"{indent_str}{prefix}If")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                for i, stmt in enumerate(then_b):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"then[{i}]: "))
                for i, stmt in enumerate(else_b):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"else[{i}]: "))

            case PrintNode(arguments=args):
                lines.append(f"{indent_str}{prefix}Print")
                for i, arg in enumerate(args):
                    lines.append(PrettyPrinter.print_ast(arg, indent + 4, f"arg[{i}]: "))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a surface-syntax rendering of an AST node.

        Statements are separated by spaces. Comments run to the end of the line
        in the source language, so a comment is always followed by a newline.
        Error nodes have no surface form and render as nothing.
        """
        if node is None:
            return ""

        def _seq(nodes) -> str:
            parts = [PrettyPrinter.print_surface(n) for n in nodes]
            return " ".join(p for p in parts if p)

        match node:
            case CommentNode(text=text):
                return f"#{text}\n"
            case IdentifierNode(name=n):
                return n
            case IntegerNode(value=v):
                return str(v)
            case FloatNode(value=v):
                return format_float(v)
            case StringNode(value=v):
                return f'"{v}"'
            case BooleanNode(value=v):
                return "true" if v else "false"
            case ImportNode(module=module):
                return f'import "{module}"'
            case IfNode(condition=cond, then_branch=then_b, else_branch=else_b):
                parts = ["if", PrettyPrinter.print_surface(cond), _seq(then_b), "else"]
                if else_b:
                    parts.append(_seq(else_b))
                return " ".join(p for p in parts if p)
            case PrintNode(arguments=args):
                if args:
                    return f"print {_seq(args)}"
                return "print"
            case ProgramNode(statements=stmts):
                return _seq(stmts)
            case _:
                return ""
