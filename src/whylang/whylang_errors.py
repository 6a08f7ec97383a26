"""
Diagnostics raised by the WhyLang tokenizer, token buffer and parser.

There is a single diagnostic type, `WhySyntaxError`, carrying the source span
the problem was found at and a human-readable message. It is always terminal
for the current tokenize or parse attempt; nothing in the front end catches it.
"""

from whylang.whylang_text import LineMap, Span


class WhySyntaxError(SyntaxError):
    """A lexical or syntactic error tied to a span of the source buffer.

    Attributes:
        span (Span): Where in the source the error was detected.
        message (str): Description of the problem, e.g. "Unexpected end-of-file".
    """

    def __init__(self, span: Span, message: str) -> None:
        super().__init__(message)
        self.span = span
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"WhySyntaxError({self.span!r}, {self.message!r})"

    def describe(self, source: str) -> str:
        """Formats the error with a 1-based line and column resolved against `source`.

        Args:
            source (str): The buffer the error was raised for.

        Returns:
            str: e.g. ``Unexpected new line at line 2, col 5``.
        """
        line, col = LineMap.parse(source).map_offset(self.span.start)
        return f"{self.message} at line {line + 1}, col {col + 1}"


__all__ = ["WhySyntaxError"]
