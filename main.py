from __future__ import annotations
from typing import List
from scanner import Scanner
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser


def lex(text: str) -> List[Token]:
    """Tokenize input string, ending with the first EOF or ERROR token."""
    scanner = Scanner(text)
    return scanner.tokenize()


def parse_text(text: str, *, strict: bool = False) -> ProgramNode:
    """Scan and parse source text into a Program node.

    Scanning is interleaved with parsing; no token list is built. Any
    diagnostics are available on the returned node's `errors`. With
    `strict=True` the first diagnostic is raised as a `ParseError` instead.
    """
    parser = Parser(Scanner(text), strict=strict)
    return parser.parse()
