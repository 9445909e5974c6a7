from __future__ import annotations
from typing import List, Optional
import json
import sys

from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from errors import SourceLoadError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render

DEFAULT_SOURCE = "code.liml"


def load_source(path: str) -> str:
    """Read a source file, raising SourceLoadError if it cannot be read."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceLoadError(path, str(e)) from e


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> ASTNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def process_program(
    text: str,
    *,
    print_tokens: bool = True,
    print_ast: bool = True,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single statement: lex, parse and optionally print/export stages.

    Returns True when the statement was tokenized and parsed successfully.
    """
    try:
        tokens = lex(text)
        if print_tokens:
            print("Tokens:")
            print(PrettyPrinter.print_tokens(tokens))

        parser = Parser(tokens)
        ast = parser.parse()
        if print_ast:
            print("\nParsed AST:")
            print(PrettyPrinter.print_ast(ast))
    except SyntaxError as e:
        print(f"Error: {e}")
        return False

    leftover = parser.remaining()
    if leftover:
        print(
            f"\nWarning: {len(leftover)} token(s) after the first statement were not parsed"
        )

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(ast), fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")
        except RecursionError:
            print(f"Failed to write AST JSON to {dump_ast_path}: AST too deep")

    if viz_path:
        written = write_and_render(ast, viz_path, fmt=viz_format)
        print(f"Wrote AST visualization to {written}")

    return True


def interactive_mode(print_tokens: bool = False, print_ast: bool = True) -> None:
    """Run an interactive REPL reading one statement per line from stdin."""
    print("\nInteractive Limonaca Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter statement: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        process_program(text, print_tokens=print_tokens, print_ast=print_ast)


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Tokenize and parse a Limonaca source file or statements from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "file",
        nargs="?",
        default=None,
        help=f"Path to source file to process (default: {DEFAULT_SOURCE})",
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing options
    parser.add_argument(
        "--no-tokens",
        dest="print_tokens",
        action="store_false",
        help="Do not print tokens",
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
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

    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    path = args.file or DEFAULT_SOURCE
    try:
        text = load_source(path)
    except SourceLoadError as e:
        print(f"Error: {e}")
        return 1

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
