"""AST node definitions for the toy C-like language.

The tree is a strict binary tree: every `Node` has a kind, an optional
`left` and `right` child and an optional string `value`. Leaves
(`Identifier`, `Integer`, `String`) carry a value and no children.

Conventions:
- Statement lists and `print` argument lists are left-leaning chains of
    `Sequence` nodes: `Sequence(Sequence(None, a), b)` for `a; b`. Printers
    and structural comparisons walk this shape directly, so it must not be
    flattened into a Python list.
- `if` statements are double wrapped: `If(cond, If(then, else_or_None))`.
- An absent subtree is plain `None`; there is no "empty" node object.
- Nodes are frozen dataclasses, so two trees compare equal exactly when
    their kinds, values and shapes are equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class NodeKind(Enum):
    IDENT = "Identifier"
    STRING = "String"
    INTEGER = "Integer"
    SEQUENCE = "Sequence"
    IF = "If"
    PRTC = "Prtc"
    PRTS = "Prts"
    PRTI = "Prti"
    WHILE = "While"
    ASSIGN = "Assign"
    NEGATE = "Negate"
    NOT = "Not"
    MUL = "Multiply"
    DIV = "Divide"
    MOD = "Mod"
    ADD = "Add"
    SUB = "Subtract"
    LSS = "Less"
    LEQ = "LessEqual"
    GTR = "Greater"
    GEQ = "GreaterEqual"
    EQL = "Equal"
    NEQ = "NotEqual"
    AND = "And"
    OR = "Or"

    def __str__(self) -> str:
        return self.value


LEAF_KINDS = frozenset({NodeKind.IDENT, NodeKind.INTEGER, NodeKind.STRING})


@dataclass(frozen=True)
class Node:
    kind: NodeKind
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    value: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return self.kind in LEAF_KINDS

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"{self.kind.name}({self.value!r})"
        return f"{self.kind.name}({self.left!r}, {self.right!r})"


def make_node(
    kind: NodeKind, left: Optional[Node] = None, right: Optional[Node] = None
) -> Node:
    return Node(kind, left, right)


def make_leaf(kind: NodeKind, value: str) -> Node:
    return Node(kind, value=value)


def sequence_items(node: Optional[Node]) -> Iterator[Optional[Node]]:
    """Yield the items of a left-leaning `Sequence` chain in source order."""
    # Walk down the left spine first, then replay the right children.
    spine = []
    while node is not None and node.kind == NodeKind.SEQUENCE:
        spine.append(node.right)
        node = node.left
    yield from reversed(spine)
