"""Pretty-printer for the AST and token streams.

`PrettyPrinter.print_ast(node)` renders an AST in the canonical pre-order
text form, one node per line:

- an absent subtree prints as `;`
- a leaf prints its kind name left-justified to 14 columns, a space and its
  value (string values are re-quoted)
- any other node prints its kind name, then its left and right subtrees

The output is deterministic and whitespace-stable, so two trees print the
same text exactly when they have the same shape, kinds and values.

Examples:
    PrettyPrinter.print_ast(parse_text("x = 5;"))
    Sequence
    ;
    Assign
    Identifier     x
    Integer        5
"""

from __future__ import annotations
from typing import Iterable, List, Optional
from ast_nodes import Node, NodeKind
from tokens import Token
from token_dump import format_tokens

KIND_WIDTH = 14


class PrettyPrinter:
    @staticmethod
    def format_leaf(node: Node) -> str:
        value = node.value if node.value is not None else ""
        if node.kind == NodeKind.STRING:
            value = f'"{value}"'
        return f"{str(node.kind):<{KIND_WIDTH}} {value}"

    @staticmethod
    def ast_lines(node: Optional[Node]) -> List[str]:
        """Return the pre-order dump of `node` as a list of lines."""
        lines: List[str] = []
        # Explicit stack instead of recursion: long statement lists make deep
        # left-leaning Sequence chains.
        stack: List[Optional[Node]] = [node]
        while stack:
            current = stack.pop()
            if current is None:
                lines.append(";")
            elif current.is_leaf:
                lines.append(PrettyPrinter.format_leaf(current))
            else:
                lines.append(str(current.kind))
                stack.append(current.right)
                stack.append(current.left)
        return lines

    @staticmethod
    def print_ast(node: Optional[Node]) -> str:
        """Pretty print AST and return as string (newline terminated)."""
        return "\n".join(PrettyPrinter.ast_lines(node)) + "\n"

    @staticmethod
    def print_tokens(tokens: Iterable[Token]) -> str:
        """Render a token stream in the token dump format."""
        return format_tokens(tokens)
