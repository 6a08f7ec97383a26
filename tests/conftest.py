import os
from typing import Any

from whylang.whylang_constants import TokenKind
from whylang.whylang_text import Span
from whylang.whylang_tokens import NULL, Token, TokenValue


def _start_subprocess_coverage() -> None:
    """Starts coverage measurement when a parent run asked for it.

    Containerized CI runs trip an assertion when a collector is stopped twice
    during interpreter shutdown, so stopping only unregisters the collector.
    """
    import coverage
    import coverage.collector

    coverage.process_startup()

    def unregister_collector(self: Any) -> None:
        active = getattr(self, "_collectors", [])
        if self in active:
            active.remove(self)

    coverage.collector.Collector.stop = unregister_collector  # type: ignore[method-assign]


if os.getenv("COVERAGE_PROCESS_START"):
    _start_subprocess_coverage()


class ListTokenSource:
    """Feeds a fixed list of tokens, then EndOfFile forever."""

    def __init__(self, *tokens: Token) -> None:
        self._tokens = iter(tokens)
        self.pulled = 0

    def next(self) -> Token:
        self.pulled += 1
        for tok in self._tokens:
            return tok
        return Token(Span(0, 0), TokenKind.END_OF_FILE)


def tok(start: int, length: int, kind: TokenKind, value: TokenValue = NULL) -> Token:
    return Token(Span(start, length), kind, value)
