"""
Lexer for the toy C-like language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`. Tokens are produced on demand by `get_next_token()`;
    `tokenize()` materializes the whole stream.
- It recognizes the keywords `if`, `else`, `while`, `print` and `putc`,
    identifiers, integer literals, character literals (emitted as Integer
    tokens holding the character code), string literals, single- and
    two-character operators and punctuation. Whitespace, `// line` comments
    and `/* block */` comments produce no tokens.

Examples:
    Input:  "count = count + 1;"
    Tokens: [Identifier('count'), Op_assign, Identifier('count'), Op_add,
             Integer('1'), Semicolon, End_of_input]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and
    `self.current_char`. `line`/`column` always describe `current_char`
    (both 1-based); advancing past a newline moves to column 1 of the next
    line.
- A token's position is the position of its first character, recorded after
    leading whitespace has been skipped.
- Two-character operators go through `follow()`: peek at the next character
    and either consume both or fall back to the one-character token. `&` and
    `|` have no one-character form.
- Any lexical error is fatal and raises `LexerError`.
"""

from __future__ import annotations
from typing import Iterator, List, Optional
from errors import LexerError
from tokens import KEYWORDS, Token, TokenKind

ESCAPES = {"n": "\n", "\\": "\\"}

SINGLE_CHAR_TOKENS = {
    "*": TokenKind.OP_MULTIPLY,
    "%": TokenKind.OP_MOD,
    "+": TokenKind.OP_ADD,
    "-": TokenKind.OP_SUBTRACT,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
}

# first char -> (expected second char, accept kind, fallback kind or None)
FOLLOW_TOKENS = {
    "<": ("=", TokenKind.OP_LESSEQUAL, TokenKind.OP_LESS),
    ">": ("=", TokenKind.OP_GREATEREQUAL, TokenKind.OP_GREATER),
    "=": ("=", TokenKind.OP_EQUAL, TokenKind.OP_ASSIGN),
    "!": ("=", TokenKind.OP_NOTEQUAL, TokenKind.OP_NOT),
    "&": ("&", TokenKind.OP_AND, None),
    "|": ("|", TokenKind.OP_OR, None),
}


class Lexer:
    def __init__(self, text: str, strict: bool = False):
        self.text = text
        self.strict = strict
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def error(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ) -> LexerError:
        return LexerError(
            message,
            self.line if line is None else line,
            self.column if column is None else column,
        )

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

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def skip_line_comment(self) -> None:
        """Skip `// ...` through the end of the line (or input)."""
        while self.current_char is not None and self.current_char != "\n":
            self.advance()

        if self.current_char == "\n":
            self.advance()

    def skip_block_comment(self, line: int, column: int) -> None:
        """Skip `/* ... */`. `current_char` is the first character after `/*`."""
        while self.current_char is not None:
            if self.current_char == "*" and self.peek_char() == "/":
                self.advance()
                self.advance()
                return
            self.advance()

        raise self.error("Unterminated block comment", line, column)

    def follow(
        self,
        expect: str,
        accept: TokenKind,
        fallback: Optional[TokenKind],
        line: int,
        column: int,
    ) -> Token:
        """Return `accept` if the next character is `expect`, else `fallback`."""
        first = self.current_char
        self.advance()
        if self.current_char == expect:
            self.advance()
            return Token(accept, "", line, column)

        if fallback is None:
            raise self.error(
                f"follow: unrecognized character: ({ord(first)}) '{first}'",
                line,
                column,
            )
        return Token(fallback, "", line, column)

    def char_literal(self, line: int, column: int) -> Token:
        """Scan `'c'` or `'\\n'` into an Integer token holding the character code."""
        self.advance()  # opening quote
        if self.current_char is None:
            raise self.error("Unterminated character literal", line, column)

        char = self.current_char
        self.advance()
        if char == "\\":
            if self.current_char is None:
                raise self.error("Unterminated character literal", line, column)
            char = ESCAPES.get(self.current_char, self.current_char)
            self.advance()

        # The closing quote is optional unless running strict.
        if self.current_char == "'":
            self.advance()
        elif self.strict:
            raise self.error("Missing closing quote in character literal", line, column)

        return Token(TokenKind.INTEGER, str(ord(char)), line, column)

    def string_literal(self, line: int, column: int) -> Token:
        """Scan a double-quoted string; escapes are kept verbatim."""
        quote = self.current_char
        self.advance()
        result = []

        while self.current_char != quote:
            if self.current_char is None:
                raise self.error("Unterminated string literal", line, column)
            result.append(self.current_char)
            self.advance()

        self.advance()  # closing quote
        return Token(TokenKind.STRING, "".join(result), line, column)

    def identifier_or_integer(self, line: int, column: int) -> Token:
        """Scan a run of letters, digits and underscores."""
        result = []
        is_integer = True

        while self.current_char is not None and (
            self.current_char.isalnum() or self.current_char == "_"
        ):
            if not self.current_char.isdigit():
                is_integer = False
            result.append(self.current_char)
            self.advance()

        if not result:
            char = self.current_char
            raise self.error(
                f"Unrecognized character: ({ord(char)}) '{char}'", line, column
            )

        text = "".join(result)
        if is_integer:
            return Token(TokenKind.INTEGER, text, line, column)
        if text in KEYWORDS:
            return Token(KEYWORDS[text], "", line, column)
        return Token(TokenKind.IDENTIFIER, text, line, column)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time.

        Once the input is exhausted every further call returns End_of_input.
        """
        while self.current_char is not None:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            line, column = self.line, self.column
            char = self.current_char

            if char == "/":
                match self.peek_char():
                    case "/":
                        self.skip_line_comment()
                        continue
                    case "*":
                        self.advance()
                        self.advance()
                        self.skip_block_comment(line, column)
                        continue
                    case _:
                        self.advance()
                        return Token(TokenKind.OP_DIVIDE, "", line, column)

            if char in SINGLE_CHAR_TOKENS:
                self.advance()
                return Token(SINGLE_CHAR_TOKENS[char], "", line, column)

            if char in FOLLOW_TOKENS:
                expect, accept, fallback = FOLLOW_TOKENS[char]
                return self.follow(expect, accept, fallback, line, column)

            if char == "'":
                return self.char_literal(line, column)

            if char == '"':
                return self.string_literal(line, column)

            return self.identifier_or_integer(line, column)

        return Token(TokenKind.END_OF_INPUT, "", self.line, self.column)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.get_next_token()
            yield token
            if token.kind == TokenKind.END_OF_INPUT:
                return

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, End_of_input included."""
        return list(self)
