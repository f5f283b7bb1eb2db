"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every node becomes a box labelled with its kind (and value for
leaves). Absent subtrees are drawn as small `;` placeholders so the binary
shape of Sequence chains and double-wrapped Ifs stays visible. Edges are
labelled `L` and `R`.
"""

from __future__ import annotations
from itertools import count
from typing import List, Optional, Tuple
from graphviz import Digraph
from ast_nodes import Node, NodeKind


def _label(node: Node) -> str:
    if not node.is_leaf:
        return str(node.kind)
    value = node.value or ""
    if node.kind == NodeKind.STRING:
        value = f'"{value}"'
    return f"{node.kind}\n{value}"


def render_ast_dot(node: Optional[Node]) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="monospace")
    ids = count()
    # (node, parent name, edge label); explicit stack since Sequence chains
    # grow one level per statement.
    stack: List[Tuple[Optional[Node], Optional[str], str]] = [(node, None, "")]
    while stack:
        current, parent, edge_label = stack.pop()
        name = f"n{next(ids)}"
        if current is None:
            dot.node(name, ";", shape="plaintext")
        else:
            dot.node(name, _label(current))
            if not current.is_leaf:
                stack.append((current.right, name, "R"))
                stack.append((current.left, name, "L"))
        if parent is not None:
            dot.edge(parent, name, label=edge_label)

    return dot


def write_and_render(node: Optional[Node], out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
