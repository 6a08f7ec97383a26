"""
Interactive read-parse-print loop for WhyLang.

Each line entered is run through the front end and printed in the current
output mode. Commands:

    :tokens, :tree, :sexpr, :json   switch the output mode
    verbose-mode                    toggle printing the token stream before each result
    exit, quit                      leave the REPL

Syntax errors are reported with their column and do not end the session.

Run it directly with `python -m whylang.whylang_repl`; `whylang --repl` opens
the same loop with the command-line options applied.
"""

from whylang.whylang_cli import MODES, render
from whylang.whylang_constants import DEFAULT_COMPARISON, TextComparison
from whylang.whylang_errors import WhySyntaxError


def start_repl(
    mode: str = "tree",
    verbose: bool = False,
    comparison: TextComparison = DEFAULT_COMPARISON,
) -> None:
    print(f"WhyLang REPL [mode={mode}]. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            src = input(">>> ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\nExiting WhyLang REPL.")
            return

        if not src:
            continue
        if src in ("exit", "quit"):
            print("Exiting WhyLang REPL.")
            return
        if src.lower() == "verbose-mode":
            verbose = not verbose
            print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
            continue
        if src.startswith(":"):
            requested = src[1:]
            if requested in MODES:
                mode = requested
                print(f"[mode] >>> {mode}")
            else:
                print(f"[error] >>> Unknown mode: {requested}")
            continue

        try:
            if verbose and mode != "tokens":
                tokens = render(src, "tokens", comparison=comparison)
                print("[tokens] >>> " + tokens.replace("\n", " "))
            print(render(src, mode, comparison=comparison))
        except WhySyntaxError as e:
            print(f"[error] >>> {e.describe(src)}")


def main() -> None:
    """Entry point for `python -m whylang.whylang_repl`, using the default options."""
    start_repl()


if __name__ == "__main__":
    main()
