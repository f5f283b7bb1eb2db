"""Fatal error types raised by the front end.

Every error is fatal: the first one aborts lexing or parsing and no partial
token stream or AST is returned. All of them derive from the builtin
`SyntaxError`, so a caller that already handles `SyntaxError` keeps working.
"""

from __future__ import annotations
from typing import Optional


class CompileError(SyntaxError):
    """Base class carrying the message and, when known, the source position."""

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    @property
    def has_position(self) -> bool:
        return bool(self.line and self.column and self.line > 0 and self.column > 0)

    def __str__(self) -> str:
        if self.has_position:
            return f"{self.message} in line {self.line}, pos {self.column}"
        return self.message


class LexerError(CompileError):
    """Unrecognized character, malformed operator or unterminated literal/comment."""


class ParserError(CompileError):
    """A token appeared where the grammar required something else."""


class TokenDumpError(CompileError):
    """A persisted token line could not be read back.

    `line` is the line number within the dump, not a source position.
    """
