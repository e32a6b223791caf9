"""
Parser for the scripting dialect.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser. Each grammar
    production maps to one `parse_*` method. There are no operators in the
    language, so an expression is just a factor and no precedence table is
    needed.
- The parser holds exactly one token of lookahead (`self.current`) and pulls
    the next token from its `Scanner` whenever it consumes one. There is no
    token list and no backtracking.

Grammar:
    program    := expression*                      (until EOF/ERROR)
    expression := factor
    factor     := comment | identifier | integer | float | string
                | boolean | import | if | print
    import     := 'import' STRING
    if         := 'if' expression expression* 'else' expression*
    print      := 'print' expression*

    Every `expression*` above stops at EOF, ERROR or `else`.

Key points:
- Then-branches, else-branches and `print` argument lists run until the end
    of the token stream or the next `else`, whichever comes first. Nothing but
    `else` ends them, so a statement written after an `if ... else ...` or a
    `print` becomes part of it rather than a sibling in the program. An `else`
    closes the innermost open sequence, which is what lets
    `if c print "a" else print "b"` split at the `else`.
- Because of that nesting, a script of N statements after a `print` is N
    levels deep. `parse_factor` keeps the open `if`/`print` nodes on an
    explicit stack (`OpenNode`) rather than recursing into them.
- The parser never rejects input. A token that cannot start a factor becomes
    an `ErrorNode` inline, and the problem is recorded as a `ParseError` in
    `self.errors` (copied to `ProgramNode.errors`). With `strict=True` the
    first such problem is raised instead.
- `eat()` is best-effort: a mismatch leaves the lookahead alone. `expect()`
    is the checked variant used where a missing token must be reported.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional
from tokens import Token, TokenType
from ast_nodes import *
from errors import ParseError
from scanner import Scanner

logger = logging.getLogger(__name__)


@dataclass
class OpenNode:
    """An `if` or `print` whose body is still being parsed.

    `part` names the slot the next expression goes into: "condition",
    "then" or "else" for an `IfNode`, "arguments" for a `PrintNode`.
    """

    node: IfNode | PrintNode
    part: str

    def append(self, child: ASTNode) -> None:
        match self.part:
            case "condition":
                self.node.condition = child
                self.part = "then"
            case "then":
                self.node.then_branch.append(child)
            case "else":
                self.node.else_branch.append(child)
            case "arguments":
                self.node.arguments.append(child)


class Parser:
    def __init__(self, scanner: Scanner, *, strict: bool = False):
        self.scanner = scanner
        self.strict = strict
        self.errors: List[ParseError] = []
        self.current = self.scanner.next_token()

    def advance(self) -> Token:
        """Pull the next token from the scanner into the lookahead."""
        self.current = self.scanner.next_token()
        logger.debug(
            "lookahead %r at %d:%d", self.current, self.current.line, self.current.column
        )
        return self.current

    def at_end(self) -> bool:
        return self.current.is_terminal

    def eat(self, expected: Token) -> bool:
        """Consume the lookahead if it equals `expected` (kind and value)."""
        if self.current == expected:
            self.advance()
            return True

        if self.strict:
            raise ParseError.from_token(
                f"Expected {expected.lexeme}, got {self.current.lexeme}",
                self.current,
                expected=expected.type,
            )
        return False

    def expect(self, expected_type: TokenType, message: Optional[str] = None) -> Token:
        """Expect and consume token of given type."""
        if self.current.type == expected_type:
            token = self.current
            self.advance()
            return token

        msg = message or f"Expected {expected_type}, got {self.current.lexeme}"
        raise ParseError.from_token(msg, self.current, expected=expected_type)

    def report(self, error: ParseError) -> None:
        """Record a diagnostic, or raise it in strict mode."""
        if self.strict:
            raise error
        logger.debug("%s", error)
        self.errors.append(error)

    def error_node(
        self, message: str, expected: Optional[TokenType] = None
    ) -> ErrorNode:
        token = self.current
        self.report(ParseError.from_token(message, token, expected=expected))
        return ErrorNode(message=message, line=token.line, column=token.column)

    def parse_comment(self) -> ASTNode:
        token = self.current
        if token.type != TokenType.COMMENT:
            return self.error_node(
                f"Expected comment, got {token.lexeme}", TokenType.COMMENT
            )
        self.eat(token)
        return CommentNode(text=token.value, line=token.line, column=token.column)

    def parse_identifier(self) -> ASTNode:
        token = self.current
        if token.type != TokenType.IDENTIFIER:
            return self.error_node(
                f"Expected identifier, got {token.lexeme}", TokenType.IDENTIFIER
            )
        self.eat(token)
        return IdentifierNode(name=token.value, line=token.line, column=token.column)

    def parse_number(self) -> ASTNode:
        token = self.current
        match token.type:
            case TokenType.INTEGER:
                self.eat(token)
                return IntegerNode(
                    value=token.value, line=token.line, column=token.column
                )
            case TokenType.FLOAT:
                self.eat(token)
                return FloatNode(value=token.value, line=token.line, column=token.column)
            case _:
                return self.error_node(
                    f"Expected number, got {token.lexeme}", TokenType.INTEGER
                )

    def parse_string(self) -> ASTNode:
        token = self.current
        if token.type != TokenType.STRING:
            return self.error_node(
                f"Expected string, got {token.lexeme}", TokenType.STRING
            )
        self.eat(token)
        return StringNode(value=token.value, line=token.line, column=token.column)

    def parse_boolean(self) -> ASTNode:
        token = self.current
        if token.type != TokenType.BOOLEAN:
            return self.error_node(
                f"Expected boolean, got {token.lexeme}", TokenType.BOOLEAN
            )
        self.eat(token)
        return BooleanNode(value=token.value, line=token.line, column=token.column)

    def parse_import(self) -> ASTNode:
        """Parse import: 'import' STRING"""
        start = self.current
        self.eat(Token(TokenType.IMPORT))

        token = self.current
        if token.type != TokenType.STRING:
            # `import` stays consumed; the offending token is left for the
            # next statement.
            return self.error_node(
                f"Expected module string after 'import', got {token.lexeme}",
                TokenType.STRING,
            )
        self.eat(token)
        return ImportNode(module=token.value, line=start.line, column=start.column)

    def parse_if(self) -> OpenNode:
        """Start an if: 'if' expression expression* 'else' expression*

        Only the keyword is consumed here; `parse_factor` fills in the
        condition and both branches.
        """
        start = self.current
        self.eat(Token(TokenType.IF))
        return OpenNode(IfNode(line=start.line, column=start.column), "condition")

    def parse_print(self) -> OpenNode:
        """Start a print: 'print' expression*"""
        start = self.current
        self.eat(Token(TokenType.PRINT))
        return OpenNode(PrintNode(line=start.line, column=start.column), "arguments")

    def dispatch(self) -> ASTNode | OpenNode:
        """Dispatch on the lookahead kind."""
        match self.current.type:
            case TokenType.COMMENT:
                return self.parse_comment()
            case TokenType.IDENTIFIER:
                return self.parse_identifier()
            case TokenType.INTEGER | TokenType.FLOAT:
                return self.parse_number()
            case TokenType.STRING:
                return self.parse_string()
            case TokenType.BOOLEAN:
                return self.parse_boolean()
            case TokenType.IMPORT:
                return self.parse_import()
            case TokenType.IF:
                return self.parse_if()
            case TokenType.PRINT:
                return self.parse_print()
            case TokenType.EOF:
                return self.error_node("Expected expression, got end of input")
            case TokenType.ERROR:
                return self.error_node(self.current.value)
            case _:
                return self.error_node(f"Unexpected token: {self.current.lexeme}")

    def body_continues(self, open_node: OpenNode) -> bool:
        """Return True while `open_node` still takes expressions.

        Moves an `if` from its then-branch to its else-branch when the
        then-branch ends, consuming the `else`.
        """
        if open_node.part == "condition":
            return True
        if not self.at_end() and self.current.type != TokenType.ELSE:
            return True
        if open_node.part != "then":
            return False

        node = open_node.node
        try:
            self.expect(
                TokenType.ELSE,
                f"Expected 'else' to close 'if' at line {node.line}, column {node.column}",
            )
        except ParseError as e:
            self.report(e)
        open_node.part = "else"
        return not self.at_end() and self.current.type != TokenType.ELSE

    def parse_factor(self) -> ASTNode:
        """Parse one complete factor.

        `print` and `if` bodies run to the end of the input, so each later
        statement nests one level deeper. Open nodes are kept on an explicit
        stack instead of the call stack so that long scripts do not exhaust
        the interpreter's recursion limit.
        """
        pending: List[OpenNode] = []
        result = self.dispatch()

        while True:
            if isinstance(result, OpenNode):
                pending.append(result)
            elif pending:
                pending[-1].append(result)
            else:
                return result

            # Close every open node whose body has ended.
            while not self.body_continues(pending[-1]):
                done = pending.pop().node
                if not pending:
                    return done
                pending[-1].append(done)

            result = self.dispatch()

    def parse_expression(self) -> ASTNode:
        return self.parse_factor()

    def parse_sequence(self) -> List[ASTNode]:
        """Parse expressions until the token stream ends."""
        nodes: List[ASTNode] = []

        while not self.at_end():
            before = self.current
            nodes.append(self.parse_expression())
            if self.current is before:
                # Nothing could consume this token (a stray `else`); skip it
                # so the loop makes progress.
                self.advance()

        return nodes

    def parse(self) -> ProgramNode:
        """Parse a complete program (sequence of expressions)."""
        start = self.current
        statements = self.parse_sequence()

        # A lexical error stops the parse; record it unless a factor already did.
        if self.current.type == TokenType.ERROR and not any(
            e.found is self.current and e.expected is None
            for e in self.errors
        ):
            self.report(ParseError.from_token(self.current.value, self.current))

        return ProgramNode(
            statements=statements,
            errors=list(self.errors),
            line=start.line,
            column=start.column,
        )
