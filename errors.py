"""Error types raised by the scanner and parser.

`FatalScanError` aborts a whole scan: it is raised when digit-shaped literal
text cannot be converted to a number. `ParseError` describes a recoverable
grammar violation; the parser records these on the program node, or raises
them when running in strict mode.
"""

from __future__ import annotations
from typing import Optional
from tokens import Token, TokenType


class FatalScanError(SyntaxError):
    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.line = line
        self.column = column
        super().__init__(f"Lexical error at line {line}, column {column}: {message}")


class ParseError(SyntaxError):
    def __init__(
        self,
        message: str,
        line: int = 0,
        column: int = 0,
        expected: Optional[TokenType] = None,
        found: Optional[Token] = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found
        super().__init__(f"Parse error at line {line}, column {column}: {message}")

    @classmethod
    def from_token(
        cls, message: str, token: Token, expected: Optional[TokenType] = None
    ) -> "ParseError":
        return cls(message, token.line, token.column, expected=expected, found=token)
