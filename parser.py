"""
Parser for the toy C-like language.

Overview and approach:
- This parser is a hand-written recursive-descent parser for statements and
    a precedence-climbing parser for expressions. Every decision is made by
    looking at the current token only (LL(1)); there is no backtracking.
- Operator binding strengths live in `tokens.TOKEN_INFO`; the parser never
    hard-codes a precedence.

Key points:
- Expression parsing:
    - `primary()` recognizes integer literals, identifiers, parenthesized
        expressions and prefix operators (`-`, `!`). A prefix operator applies
        to a single primary, so it binds tighter than any binary operator.
    - `expr(p)` parses a primary and then, while the current token is a
        binary operator with precedence greater than `p`, consumes it and
        parses the right operand with `expr(operator_precedence)`. Because
        the right operand only takes strictly tighter operators, equal
        precedence operators fold to the left: `1-2-3` is `(1-2)-3`.

- Statement parsing (`stmt()`):
    - `x = expr;`, `while (cond) stmt`, `if (cond) stmt [else stmt]`,
        `print(item, ...);`, `putc(expr)` and `{ stmt* }`.
    - An `else` always belongs to the nearest `if` still being parsed, since
        the inner `stmt()` call looks for it first.

- Tree shape:
    - Statement lists and print lists fold into left-leaning `Sequence`
        chains: `Sequence(Sequence(None, s1), s2)`.
    - `if` produces `If(cond, If(then, else_or_None))`.

Examples:
    - `x = 5;` -> `Sequence(None, Assign(Identifier x, Integer 5))`
    - `1+2*3`  -> `Add(Integer 1, Multiply(Integer 2, Integer 3))`

Notes:
- Errors are fatal: the first unexpected token raises `ParserError` and no
    partial tree is returned.
- In non-strict mode `putc(expr)` consumes no trailing `;`, matching the
    reference grammar. `strict=True` requires it.
"""

from __future__ import annotations
from typing import Iterable, Iterator, Optional
from ast_nodes import Node, NodeKind, make_leaf, make_node
from errors import ParserError
from tokens import TOKEN_INFO, Token, TokenKind


class Parser:
    def __init__(self, tokens: Iterable[Token], strict: bool = False):
        self.strict = strict
        self._tokens: Iterator[Token] = iter(tokens)
        self.pos = -1
        self.current = Token(TokenKind.END_OF_INPUT, "", 0, 0)
        self.advance()

    def advance(self) -> Token:
        """Move to next token.

        Running past the end of the stream keeps yielding End_of_input at the
        last known position.
        """
        self.pos += 1
        previous = self.current
        self.current = next(
            self._tokens,
            Token(TokenKind.END_OF_INPUT, "", previous.line, previous.column),
        )
        return self.current

    def error(self, message: str, token: Optional[Token] = None) -> ParserError:
        token = token or self.current
        return ParserError(message, token.line, token.column)

    def expect(self, context: str, expected: TokenKind) -> Token:
        """Expect and consume token of given kind."""
        if self.current.kind == expected:
            token = self.current
            self.advance()
            return token

        raise self.error(
            f"{context}: Expecting '{expected}', found: '{self.current.kind}'"
        )

    def expr(self, min_precedence: int) -> Node:
        """Parse an expression whose operators all bind tighter than `min_precedence`."""
        node = self.primary()
        while True:
            info = TOKEN_INFO[self.current.kind]
            if not info.is_binary or info.precedence <= min_precedence:
                break
            self.advance()
            right = self.expr(info.precedence)
            node = make_node(info.node_kind, node, right)
        return node

    def primary(self) -> Node:
        """Parse primary expressions (literals, identifiers, parenthesized, prefix)."""
        token = self.current
        info = TOKEN_INFO[token.kind]

        match token.kind:
            case TokenKind.INTEGER:
                self.advance()
                return make_leaf(NodeKind.INTEGER, token.text)

            case TokenKind.IDENTIFIER:
                self.advance()
                return make_leaf(NodeKind.IDENT, token.text)

            case TokenKind.LEFT_PAREN:
                return self.paren_expr()

            case TokenKind.OP_SUBTRACT:  # `-` in prefix position
                self.advance()
                return make_node(NodeKind.NEGATE, self.primary())

            case kind if info.is_unary and kind != TokenKind.OP_EQUAL:
                self.advance()
                return make_node(info.node_kind, self.primary())

            case _:
                raise self.error(
                    f"Expecting primary token, cannot use {token.kind}.", token
                )

    def paren_expr(self) -> Node:
        self.expect("paren_expr", TokenKind.LEFT_PAREN)
        node = self.expr(0)
        self.expect("paren_expr", TokenKind.RIGHT_PAREN)
        return node

    def print_item(self) -> Node:
        token = self.current
        match token.kind:
            case TokenKind.STRING:
                self.advance()
                return make_node(NodeKind.PRTS, make_leaf(NodeKind.STRING, token.text))
            case TokenKind.INTEGER:
                self.advance()
                return make_node(NodeKind.PRTI, make_leaf(NodeKind.INTEGER, token.text))
            case _:
                return make_node(NodeKind.PRTC, self.expr(0))

    def print_stmt(self) -> Node:
        """Parse `print(item, item, ...);` into a Sequence chain of Prts/Prti/Prtc."""
        self.expect("Print", TokenKind.KEYWORD_PRINT)
        self.expect("Print", TokenKind.LEFT_PAREN)

        node = make_node(NodeKind.SEQUENCE, None, self.print_item())
        while self.current.kind == TokenKind.COMMA:
            self.advance()
            node = make_node(NodeKind.SEQUENCE, node, self.print_item())

        self.expect("Print", TokenKind.RIGHT_PAREN)
        self.expect("Semicolon", TokenKind.SEMICOLON)
        return node

    def stmt(self) -> Optional[Node]:
        """Parse a statement."""
        token = self.current

        match token.kind:
            case TokenKind.IDENTIFIER:
                target = make_leaf(NodeKind.IDENT, token.text)
                self.advance()
                self.expect("Assign", TokenKind.OP_ASSIGN)
                value = self.expr(0)
                self.expect("Semicolon", TokenKind.SEMICOLON)
                return make_node(NodeKind.ASSIGN, target, value)

            case TokenKind.KEYWORD_WHILE:
                self.advance()
                condition = self.paren_expr()
                return make_node(NodeKind.WHILE, condition, self.stmt())

            case TokenKind.KEYWORD_IF:
                self.advance()
                condition = self.paren_expr()
                then_branch = self.stmt()
                else_branch = None
                if self.current.kind == TokenKind.KEYWORD_ELSE:
                    self.advance()
                    else_branch = self.stmt()
                return make_node(
                    NodeKind.IF, condition, make_node(NodeKind.IF, then_branch, else_branch)
                )

            case TokenKind.KEYWORD_PRINT:
                return self.print_stmt()

            case TokenKind.KEYWORD_PUTC:
                self.advance()
                node = make_node(NodeKind.PRTC, self.paren_expr())
                if self.strict:
                    self.expect("Semicolon", TokenKind.SEMICOLON)
                return node

            case TokenKind.LEFT_BRACE:
                self.advance()
                node = None
                while self.current.kind != TokenKind.RIGHT_BRACE:
                    node = make_node(NodeKind.SEQUENCE, node, self.stmt())
                self.advance()
                return node

            case _:
                raise self.error(f"Expecting statement, found: {token.kind}.", token)

    def parse(self) -> Optional[Node]:
        """Parse a complete program into a top-level Sequence chain.

        An empty program yields None. Nesting deeper than the interpreter's
        recursion limit is reported as a `ParserError` at the current token.
        """
        node = None
        try:
            while self.current.kind != TokenKind.END_OF_INPUT:
                node = make_node(NodeKind.SEQUENCE, node, self.stmt())
        except RecursionError:
            raise self.error("Expression nesting too deep") from None
        return node
