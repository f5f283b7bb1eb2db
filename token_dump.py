"""Read and write token streams in the line-oriented dump format.

One token per line::

    <line> <column> <Kind> [payload]

`Kind` is the token's canonical name (`str(TokenKind)`). The payload is the
decimal value for `Integer`, the name for `Identifier` and the double-quoted
raw text for `String`; every other kind has none. The last line of a
complete dump is the `End_of_input` token.

`read_tokens` accepts what `format_tokens` writes, so a dumped stream can be
fed to the parser later and yields the same AST as parsing the source.
"""

from __future__ import annotations
from typing import Iterable, List
from errors import TokenDumpError
from tokens import Token, TokenKind


def format_token(token: Token) -> str:
    result = f"{token.line:<5d} {token.column:<5d} {str(token.kind):<15}"
    match token.kind:
        case TokenKind.INTEGER:
            result += f"{token.text:<4}"
        case TokenKind.IDENTIFIER:
            result += token.text
        case TokenKind.STRING:
            result += f'"{token.text}"'
    return result.rstrip()


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return one formatted line per token, newline terminated."""
    return "".join(format_token(token) + "\n" for token in tokens)


def parse_token_line(text: str, lineno: int = 0) -> Token:
    """Parse one dump line back into a `Token`."""
    fields = text.split(None, 3)
    if len(fields) < 3:
        raise TokenDumpError(f"line {lineno}: expected '<line> <column> <Kind>', got {text!r}")

    try:
        line, column = int(fields[0]), int(fields[1])
    except ValueError:
        raise TokenDumpError(f"line {lineno}: bad token position in {text!r}") from None

    try:
        kind = TokenKind.from_name(fields[2])
    except ValueError:
        raise TokenDumpError(f"line {lineno}: Token not found: '{fields[2]}'") from None

    payload = fields[3] if len(fields) == 4 else ""
    match kind:
        case TokenKind.INTEGER | TokenKind.IDENTIFIER:
            value = payload.strip()
        case TokenKind.STRING:
            value = payload.rstrip()
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
        case _:
            value = ""
    return Token(kind, value, line, column)


def read_tokens(text: str) -> List[Token]:
    """Parse a whole dump, skipping blank lines."""
    tokens = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        tokens.append(parse_token_line(line, lineno))
    return tokens
