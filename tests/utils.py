from lexer import Lexer
from parser import Parser
from ast_nodes import NodeKind, make_leaf, make_node


def lex(text: str, strict: bool = False):
    """Return a list of tokens for the given source text."""
    return Lexer(text, strict=strict).tokenize()


def parse_tokens(tokens, strict: bool = False):
    """Parse a list of tokens into an AST node."""
    return Parser(tokens, strict=strict).parse()


def parse_text(text: str, strict: bool = False):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text, strict=strict).tokenize(), strict=strict).parse()


# Tree builders for expected shapes
def ident(name):
    return make_leaf(NodeKind.IDENT, name)


def integer(value):
    return make_leaf(NodeKind.INTEGER, str(value))


def string(text):
    return make_leaf(NodeKind.STRING, text)


def seq(*items):
    """Fold items into a left-leaning Sequence chain, as the parser does."""
    node = None
    for item in items:
        node = make_node(NodeKind.SEQUENCE, node, item)
    return node


def assign(name, value):
    return make_node(NodeKind.ASSIGN, ident(name), value)


def binop(kind, left, right):
    return make_node(kind, left, right)
