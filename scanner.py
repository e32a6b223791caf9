"""
Scanner for the scripting dialect.

Overview:
- This module implements a small hand-written lexical analyzer that turns an
    input source string into `Token` objects defined in `tokens.py`, one token
    per `next_token()` call. Nothing is buffered: the parser pulls tokens on
    demand, so scanning is interleaved with parsing.
- It recognizes `#` comments (to end of line), identifiers and the keywords
    in `tokens.KEYWORDS`, integer and float literals, and double-quoted
    strings. Whitespace, newlines included, is insignificant.

Examples:
    Input:  'import "os" print x 3.5'
    Tokens: [IMPORT, STRING('os'), PRINT, IDENTIFIER('x'), FLOAT(3.5), EOF]

Implementation notes:
- The scanner is a simple stateful cursor using `self.pos` and
    `self.current_char` (None at end of input), with 1-based `line`/`column`
    counters used to position tokens.
- End of input produces EOF. A character that cannot start any token produces
    ERROR and is *not* consumed, so asking again yields the same ERROR.
- Numbers are accumulated as text and converted at the end. Conversion
    failures (an integer that does not fit in 64 bits) raise `FatalScanError`
    instead of producing a token.
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Optional
from tokens import Token, TokenType, KEYWORDS
from errors import FatalScanError

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# str.isspace() also accepts the information separators \x1c-\x1f, which are
# not whitespace in this language and scan as unexpected characters.
NON_WHITESPACE_SEPARATORS = "\x1c\x1d\x1e\x1f"


def is_whitespace(char: str) -> bool:
    return char.isspace() and char not in NON_WHITESPACE_SEPARATORS


def is_decimal_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char is None:
            return

        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def make_token(
        self, token_type: TokenType, value=None, line: int = 0, column: int = 0
    ) -> Token:
        return Token(token_type, value, line or self.line, column or self.column)

    def error_token(self, message: str, line: int = 0, column: int = 0) -> Token:
        token = self.make_token(TokenType.ERROR, message, line, column)
        logger.debug("lexical error at %d:%d: %s", token.line, token.column, message)
        return token

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while self.current_char is not None and is_whitespace(self.current_char):
            self.advance()

    def comment(self) -> Token:
        """Scan a `#` comment up to (not including) the end of the line."""
        line, column = self.line, self.column
        self.advance()  # '#'

        result = []
        while self.current_char is not None and self.current_char != "\n":
            result.append(self.current_char)
            self.advance()

        return self.make_token(TokenType.COMMENT, "".join(result), line, column)

    def identifier(self) -> str:
        """Scan a maximal run of alphanumerics and underscores."""
        result = []
        while self.current_char is not None and (
            self.current_char.isalnum() or self.current_char == "_"
        ):
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    def number(self) -> Token:
        """Scan an integer or float literal.

        Digits and at most one `.` are accumulated; a second `.` ends the
        literal and is left for the next call.
        """
        line, column = self.line, self.column
        result = []
        is_float = False

        while self.current_char is not None and (
            is_decimal_digit(self.current_char) or self.current_char == "."
        ):
            if self.current_char == ".":
                if is_float:
                    break
                is_float = True
            result.append(self.current_char)
            self.advance()

        text = "".join(result)
        try:
            value = float(text) if is_float else int(text)
        except ValueError as exc:
            raise FatalScanError(
                f"Malformed numeric literal '{text}'", line, column
            ) from exc

        if not is_float and not INT64_MIN <= value <= INT64_MAX:
            raise FatalScanError(
                f"Integer literal '{text}' does not fit in 64 bits", line, column
            )

        token_type = TokenType.FLOAT if is_float else TokenType.INTEGER
        return self.make_token(token_type, value, line, column)

    def string(self) -> Token:
        """Scan a double-quoted string literal. There are no escapes."""
        line, column = self.line, self.column
        self.advance()  # opening '"'

        result = []
        while self.current_char is not None:
            if self.current_char == '"':
                self.advance()
                return self.make_token(TokenType.STRING, "".join(result), line, column)
            result.append(self.current_char)
            self.advance()

        return self.error_token("Unterminated string literal", line, column)

    def boolean(self) -> Token:
        """Match the words `true` or `false` one character at a time.

        `next_token()` never routes here, since keyword lookup already turns
        `true`/`false` into BOOLEAN tokens. Any mismatch yields ERROR, and the
        characters matched so far stay consumed.
        """
        line, column = self.line, self.column

        match self.current_char:
            case "t":
                word, value = "true", True
            case "f":
                word, value = "false", False
            case _:
                return self.error_token("Expected boolean literal", line, column)

        for expected in word:
            if self.current_char != expected:
                return self.error_token(
                    f"Expected '{word}', found {self.current_char!r}", line, column
                )
            self.advance()

        return self.make_token(TokenType.BOOLEAN, value, line, column)

    def next_token(self) -> Token:
        """Scanner that returns tokens one at a time."""
        self.skip_whitespace()

        if self.current_char is None:
            return self.make_token(TokenType.EOF)

        if self.current_char == "#":
            return self.comment()

        if self.current_char == '"':
            return self.string()

        # Identifiers and keywords: scan an identifier and map it through
        # KEYWORDS when it is a reserved word.
        if self.current_char.isalpha():
            line, column = self.line, self.column
            ident = self.identifier()
            if ident in KEYWORDS:
                token_type, value = KEYWORDS[ident]
                return self.make_token(token_type, value, line, column)
            return self.make_token(TokenType.IDENTIFIER, ident, line, column)

        if is_decimal_digit(self.current_char):
            return self.number()

        # The character is not recognized; leave it in place.
        return self.error_token(f"Unexpected character {self.current_char!r}")

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF or ERROR."""
        while True:
            token = self.next_token()
            yield token
            if token.is_terminal:
                return

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        return list(self)
