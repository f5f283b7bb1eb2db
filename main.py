from __future__ import annotations
import sys
from typing import List, Optional
from ast_nodes import Node
from ast_viz import write_and_render
from lexer import Lexer
from parser import Parser
from pretty_printer import PrettyPrinter
from token_dump import read_tokens
from tokens import Token


def lex(text: str, strict: bool = False) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text, strict=strict)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token], strict: bool = False) -> Optional[Node]:
    """Parse tokens into AST."""
    parser = Parser(tokens, strict=strict)
    return parser.parse()


def parse_text(text: str, strict: bool = False) -> Optional[Node]:
    """Lex and parse source text, pulling tokens from the lexer on demand."""
    return Parser(Lexer(text, strict=strict), strict=strict).parse()


def process_program(
    text: str,
    *,
    tokens_in: bool = False,
    print_tokens: bool = False,
    print_ast: bool = True,
    strict: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> int:
    """Process a single program: lex (or read a token dump), parse, print stages.

    Returns the process exit status. Nothing is printed for a stage once an
    error has occurred.
    """
    try:
        tokens = read_tokens(text) if tokens_in else lex(text, strict=strict)
        ast = parse_tokens(tokens, strict=strict)
    except SyntaxError as e:
        print(f"Syntax Error: {e}")
        return 1

    if print_tokens:
        print(PrettyPrinter.print_tokens(tokens), end="")

    if print_ast:
        print(PrettyPrinter.print_ast(ast), end="")

    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Lex and parse one program, printing tokens and/or the AST"
    )
    parser.add_argument(
        "--file", "-f", dest="file", help="Path to source file (default: stdin)"
    )
    parser.add_argument(
        "--tokens-in",
        dest="tokens_in",
        action="store_true",
        help="Input is a token dump rather than source text",
    )
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Require closing quotes on char literals and ';' after putc(...)",
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args()

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            sys.exit(1)
    else:
        text = sys.stdin.read()

    sys.exit(
        process_program(
            text,
            tokens_in=args.tokens_in,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            strict=args.strict,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
        )
    )
