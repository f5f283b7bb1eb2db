"""Token definitions for the lexer.

This module defines the `TokenKind` enum for all token kinds recognized by
the lexer, the immutable `Token` dataclass and the static `TOKEN_INFO`
table describing how each kind behaves inside an expression. Tokens are the
atomic units produced by the lexer and consumed by the parser.

The enum values are the canonical token names used in token dumps
(`Op_multiply`, `Keyword_if`, `LeftParen`, ...), so `str(kind)` is exactly
what gets written to and read back from a dump.

`TOKEN_INFO` is the operator-precedence grammar of the language. The parser
only ever looks at this table; it never special-cases operator kinds.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass
from typing import Dict, NamedTuple
from ast_nodes import NodeKind


class TokenKind(Enum):
    END_OF_INPUT = "End_of_input"

    # Arithmetic operators
    OP_MULTIPLY = "Op_multiply"
    OP_DIVIDE = "Op_divide"
    OP_MOD = "Op_mod"
    OP_ADD = "Op_add"
    OP_SUBTRACT = "Op_subtract"
    OP_NEGATE = "Op_negate"

    # Logical / relational operators
    OP_NOT = "Op_not"
    OP_LESS = "Op_less"
    OP_LESSEQUAL = "Op_lessequal"
    OP_GREATER = "Op_greater"
    OP_GREATEREQUAL = "Op_greaterequal"
    OP_EQUAL = "Op_equal"
    OP_NOTEQUAL = "Op_notequal"
    OP_ASSIGN = "Op_assign"
    OP_AND = "Op_and"
    OP_OR = "Op_or"

    # Keywords
    KEYWORD_IF = "Keyword_if"
    KEYWORD_ELSE = "Keyword_else"
    KEYWORD_WHILE = "Keyword_while"
    KEYWORD_PRINT = "Keyword_print"
    KEYWORD_PUTC = "Keyword_putc"

    # Punctuation
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    SEMICOLON = "Semicolon"
    COMMA = "Comma"

    # Literals
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    STRING = "String"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "TokenKind":
        """Look up a kind by its dump name (e.g. `Op_add`)."""
        return cls(name)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, {self.line}:{self.column})"


class TokenInfo(NamedTuple):
    precedence: int
    is_binary: bool
    is_unary: bool
    right_assoc: bool
    node_kind: NodeKind | None


def _info(
    precedence: int = -1,
    is_binary: bool = False,
    is_unary: bool = False,
    node_kind: NodeKind | None = None,
) -> TokenInfo:
    # No operator in this grammar associates to the right.
    return TokenInfo(precedence, is_binary, is_unary, False, node_kind)


# Higher precedence binds tighter. Op_equal is flagged unary in the reference
# table; the parser never treats it as a prefix operator.
TOKEN_INFO: Dict[TokenKind, TokenInfo] = {
    TokenKind.END_OF_INPUT: _info(),
    TokenKind.OP_MULTIPLY: _info(13, is_binary=True, node_kind=NodeKind.MUL),
    TokenKind.OP_DIVIDE: _info(13, is_binary=True, node_kind=NodeKind.DIV),
    TokenKind.OP_MOD: _info(13, is_binary=True, node_kind=NodeKind.MOD),
    TokenKind.OP_ADD: _info(12, is_binary=True, node_kind=NodeKind.ADD),
    TokenKind.OP_SUBTRACT: _info(12, is_binary=True, node_kind=NodeKind.SUB),
    TokenKind.OP_NEGATE: _info(14, is_unary=True, node_kind=NodeKind.NEGATE),
    TokenKind.OP_NOT: _info(14, is_unary=True, node_kind=NodeKind.NOT),
    TokenKind.OP_LESS: _info(10, is_binary=True, node_kind=NodeKind.LSS),
    TokenKind.OP_LESSEQUAL: _info(10, is_binary=True, node_kind=NodeKind.LEQ),
    TokenKind.OP_GREATER: _info(10, is_binary=True, node_kind=NodeKind.GTR),
    TokenKind.OP_GREATEREQUAL: _info(10, is_binary=True, node_kind=NodeKind.GEQ),
    TokenKind.OP_EQUAL: _info(
        9, is_binary=True, is_unary=True, node_kind=NodeKind.EQL
    ),
    TokenKind.OP_NOTEQUAL: _info(9, is_binary=True, node_kind=NodeKind.NEQ),
    TokenKind.OP_ASSIGN: _info(node_kind=NodeKind.ASSIGN),
    TokenKind.OP_AND: _info(5, is_binary=True, node_kind=NodeKind.AND),
    TokenKind.OP_OR: _info(4, is_binary=True, node_kind=NodeKind.OR),
    TokenKind.KEYWORD_IF: _info(node_kind=NodeKind.IF),
    TokenKind.KEYWORD_ELSE: _info(),
    TokenKind.KEYWORD_WHILE: _info(node_kind=NodeKind.WHILE),
    TokenKind.KEYWORD_PRINT: _info(),
    TokenKind.KEYWORD_PUTC: _info(),
    TokenKind.LEFT_PAREN: _info(),
    TokenKind.RIGHT_PAREN: _info(),
    TokenKind.LEFT_BRACE: _info(),
    TokenKind.RIGHT_BRACE: _info(),
    TokenKind.SEMICOLON: _info(),
    TokenKind.COMMA: _info(),
    TokenKind.IDENTIFIER: _info(node_kind=NodeKind.IDENT),
    TokenKind.INTEGER: _info(node_kind=NodeKind.INTEGER),
    TokenKind.STRING: _info(node_kind=NodeKind.STRING),
}


KEYWORDS: Dict[str, TokenKind] = {
    "if": TokenKind.KEYWORD_IF,
    "else": TokenKind.KEYWORD_ELSE,
    "print": TokenKind.KEYWORD_PRINT,
    "putc": TokenKind.KEYWORD_PUTC,
    "while": TokenKind.KEYWORD_WHILE,
}
