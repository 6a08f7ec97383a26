"""
WhyLang CLI Entrypoint.

This module provides the command-line interface for running the WhyLang front end
over source code. It supports printing tokens, expression trees, s-expressions
and JSON, plus an interactive REPL.

Features:
    - Read source from `.why` files or inline strings.
    - Tokenize, or tokenize and parse every expression in the input.
    - Output to console or file.
    - Report the first syntax error with its line and column.
    - Launch an interactive REPL.

Example usage:
    whylang hello.why
    whylang -s "print(42)" -m sexpr
    whylang hello.why -m json -o hello.json
    whylang --repl

Functions:
    run_whylang(source: str, is_string: bool = False, mode: str = "tree", out: str | None = None,
                indented: bool = False, comparison: TextComparison = DEFAULT_COMPARISON) -> str:
        Runs the pipeline (tokenize -> parse -> render) and writes the result.

    main(argv: list[str] | None = None) -> int:
        Parses CLI arguments and invokes the appropriate action (REPL or pipeline).
"""

import argparse
import json
import logging
import sys

from whylang.emitters.sexpr_emitter import SexprEmitter
from whylang.whylang_ast import Expression
from whylang.whylang_constants import DEFAULT_COMPARISON, TextComparison
from whylang.whylang_errors import WhySyntaxError
from whylang.whylang_lexer import Tokenizer, tokenize
from whylang.whylang_parser import Parser

logger = logging.getLogger(__name__)

MODES = ("tokens", "tree", "sexpr", "json")


def parse_all(source: str, comparison: TextComparison = DEFAULT_COMPARISON) -> list[Expression]:
    """Parses expressions from `source` until the input is exhausted."""
    parser = Parser(Tokenizer(source, comparison))
    expressions: list[Expression] = []
    while not parser.at_end():
        expressions.append(parser.parse_expression())
    return expressions


def render(
    source: str,
    mode: str = "tree",
    indented: bool = False,
    comparison: TextComparison = DEFAULT_COMPARISON,
) -> str:
    """
    Runs the front end over `source` and renders the result in the given mode.

    Args:
        source (str): WhyLang source text.
        mode (str): One of "tokens", "tree", "sexpr" or "json".
        indented (bool): Indent nested s-expressions (sexpr mode) or JSON.
        comparison (TextComparison): Payload comparison policy for the tokenizer.

    Returns:
        str: The rendered output, without a trailing newline.

    Raises:
        ValueError: If `mode` is unknown.
        WhySyntaxError: On the first lexical or syntactic error.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown output mode: {mode!r}")

    if mode == "tokens":
        tokens = list(tokenize(source, comparison))
        logger.info("tokenized %d tokens", len(tokens))
        return "\n".join(repr(tok) for tok in tokens)

    expressions = parse_all(source, comparison)
    logger.info("parsed %d expressions", len(expressions))
    if mode == "sexpr":
        return SexprEmitter(indented).emit_all(expressions)
    if mode == "json":
        return json.dumps([expr.to_dict() for expr in expressions], indent=2 if indented else None)
    return "\n".join(str(expr) for expr in expressions)


def load_source(source: str, is_string: bool = False) -> str:
    """Returns `source` itself, or the contents of the `.why` file it names.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.why'.
    """
    if is_string:
        return source
    if not source.endswith(".why"):
        raise ValueError("Only .why files are supported.")
    logger.info("reading %s", source)
    with open(source, encoding="utf-8") as f:
        return f.read()


def run_whylang(
    source: str,
    is_string: bool = False,
    mode: str = "tree",
    out: str | None = None,
    indented: bool = False,
    comparison: TextComparison = DEFAULT_COMPARISON,
) -> str:
    """
    Run the WhyLang front end and print or write the result.

    Args:
        source (str): The WhyLang source code or path to a `.why` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path. Defaults to False.
        mode (str): Output mode, see `render`. Defaults to "tree".
        out (str | None): Optional path to write the output to. If None, prints to stdout.
        indented (bool): Indented s-expression / JSON output.
        comparison (TextComparison): Payload comparison policy.

    Returns:
        str: The rendered output.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.why'.
        WhySyntaxError: On the first lexical or syntactic error.
    """
    source = load_source(source, is_string)
    output = render(source, mode=mode, indented=indented, comparison=comparison)

    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        logger.info("wrote %s", out)
    else:
        print(output)
    return output


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="whylang")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=MODES,
        default="tree",
        help="What to print (default: tree)",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "-i", "--indent", action="store_true", help="Indent s-expression or JSON output"
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Compare string and identifier payloads case-insensitively",
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of processing a source",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Verbose REPL mode (if --repl)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the WhyLang CLI.

    Launches the REPL if no source is given or `--repl` is specified; otherwise
    runs the pipeline over the source. A syntax error is printed to stderr
    together with its line and column, and yields exit status 1.
    """
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    comparison = TextComparison.IGNORE_CASE if args.ignore_case else DEFAULT_COMPARISON

    if args.repl or args.source is None:
        from whylang.whylang_repl import start_repl

        start_repl(mode=args.mode, verbose=args.verbose, comparison=comparison)
        return 0

    try:
        source_text = load_source(args.source, args.string)
        run_whylang(
            source=source_text,
            is_string=True,
            mode=args.mode,
            out=args.out,
            indented=args.indent,
            comparison=comparison,
        )
    except WhySyntaxError as e:
        print(f"error: {e.describe(source_text)}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
