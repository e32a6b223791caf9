from main import lex, parse_text
from ast_nodes import *
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json


def _walk(node):
    yield node
    match node:
        case ProgramNode(statements=stmts):
            children = stmts
        case IfNode(condition=cond, then_branch=then_b, else_branch=else_b):
            children = [cond, *then_b, *else_b]
        case PrintNode(arguments=args):
            children = args
        case _:
            children = []
    for child in children:
        yield from _walk(child)


def test_if_nodes_always_have_condition_and_two_branch_lists():
    sources = ["if", "if c", "if c x", "if c else", "if if else else", "if a b else c"]
    for src in sources:
        ast = parse_text(src)
        for node in _walk(ast):
            if isinstance(node, IfNode):
                assert isinstance(node.condition, ASTNode)
                assert isinstance(node.then_branch, list)
                assert isinstance(node.else_branch, list)


def test_children_are_not_shared():
    ast = parse_text('if a print 1 2 else print 3 if b c else d')
    nodes = list(_walk(ast))
    assert len({id(n) for n in nodes}) == len(nodes)
    branch_lists = [
        lst
        for n in nodes
        if isinstance(n, IfNode)
        for lst in (n.then_branch, n.else_branch)
    ]
    assert len({id(lst) for lst in branch_lists}) == len(branch_lists)


def test_print_arguments_preserve_source_order():
    ast = parse_text("print c b a 3 2 1")
    args = ast.statements[0].arguments
    assert [getattr(a, "name", getattr(a, "value", None)) for a in args] == [
        "c",
        "b",
        "a",
        3,
        2,
        1,
    ]


def test_lex_and_parse_agree_on_leaf_values():
    src = '# c\nx 1 2.0 "s" true'
    tokens = lex(src)
    ast = parse_text(src)
    assert len(ast.statements) == len(tokens) - 1
    for token, node in zip(tokens, ast.statements):
        assert (node.line, node.column) == (token.line, token.column)


def test_pretty_printer_outputs_tree():
    ast = parse_text('import "m"\nif true print "a" else print 1.5 x')
    s = PrettyPrinter.print_ast(ast)
    lines = s.splitlines()
    assert lines[0] == "Program"
    assert "stmt[0]: Import('m')" in lines[1]
    assert "stmt[1]: If" in lines[2]
    assert any("condition: Boolean(true)" in l for l in lines)
    assert any("else[0]: Print" in l for l in lines)
    assert any("arg[1]: Identifier(x)" in l for l in lines)


def test_pretty_printer_shows_error_position():
    ast = parse_text("a else")
    s = PrettyPrinter.print_ast(ast)
    assert "Error(Unexpected token: else) at 1:3" in s


def test_surface_rendering_reparses_to_same_tree():
    src = '# top\nimport "m" if x print "a" 1 else print 2.5 false y'
    ast = parse_text(src)
    surface = PrettyPrinter.print_surface(ast)
    assert parse_text(surface) == ast


def test_ast_to_json_shape():
    ast = parse_text('if c print "a" else 7')
    data = ast_to_json(ast)
    assert data["node_type"] == "Program"
    assert data["errors"] == []
    node = data["statements"][0]
    assert node["node_type"] == "If"
    assert node["condition"] == {
        "node_type": "Identifier",
        "name": "c",
        "line": 1,
        "column": 4,
    }
    assert node["then"][0]["node_type"] == "Print"
    assert node["then"][0]["arguments"][0]["value"] == "a"
    assert node["else"] == [
        {"node_type": "Integer", "value": 7, "line": 1, "column": 21}
    ]


def test_ast_to_json_includes_errors():
    data = ast_to_json(parse_text("import 1"))
    assert data["statements"][0]["node_type"] == "Error"
    assert data["errors"][0]["line"] == 1
    assert data["errors"][0]["column"] == 8


def test_surface_rendering_writes_floats_without_exponent():
    ast = parse_text("print 0.00001 10000000000000000.0 2.0")
    surface = PrettyPrinter.print_surface(ast)
    assert surface == "print 0.00001 10000000000000000.0 2.0"
    assert parse_text(surface) == ast
    assert parse_text(surface).errors == []


def test_ast_to_json_program_has_position():
    data = ast_to_json(parse_text("\n  x"))
    assert (data["line"], data["column"]) == (2, 3)
