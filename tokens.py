"""Token definitions for the scanner.

This module defines the `TokenType` enum for all token kinds recognized by
the scanner, the `KEYWORDS` table mapping reserved words to the token they
produce, and a small `Token` dataclass that holds a token type, an optional
value and the source position where the token starts. Tokens are the atomic
units produced by the scanner and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


class TokenType(Enum):
    # Literals
    COMMENT = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    BOOLEAN = auto()

    # Keywords
    IMPORT = auto()
    IF = auto()
    ELSE = auto()
    PRINT = auto()

    # Special
    ERROR = auto()
    EOF = auto()

    def __str__(self) -> str:
        return self.name


# Reserved words and the (type, value) pair they scan to. Keywords always win
# over identifiers of the same spelling.
KEYWORDS: Dict[str, Tuple[TokenType, Optional[bool]]] = {
    "import": (TokenType.IMPORT, None),
    "if": (TokenType.IF, None),
    "else": (TokenType.ELSE, None),
    "print": (TokenType.PRINT, None),
    "true": (TokenType.BOOLEAN, True),
    "false": (TokenType.BOOLEAN, False),
}

TERMINAL_TYPES = (TokenType.ERROR, TokenType.EOF)


@dataclass
class Token:
    type: TokenType
    value: Optional[str | int | float | bool] = None
    # Position is informational only; two tokens are equal when their kind
    # and payload are.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def is_terminal(self) -> bool:
        return self.type in TERMINAL_TYPES

    @property
    def lexeme(self) -> str:
        if self.type == TokenType.EOF:
            return "end of input"
        if self.value is None:
            return str(self.type).lower()
        if self.type == TokenType.STRING:
            return f'"{self.value}"'
        if self.type == TokenType.BOOLEAN:
            return "true" if self.value else "false"
        return str(self.value)
