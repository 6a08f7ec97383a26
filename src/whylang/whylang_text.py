"""
Source text primitives for the WhyLang front end.

Classes:
    Span: An immutable half-open range of character offsets.
    SourceCursor: A scanning window over an immutable source buffer.
    LineMap: Maps character offsets to zero-based (line, column) pairs.

The cursor is the only piece of mutable state below the tokenizer. It holds
two integers over a `str` that is never copied or modified, so accepting a
character is constant time and only `text()` allocates.

Example:
    >>> cursor = SourceCursor("foo bar")
    >>> cursor.take_while(str.isalpha)
    >>> cursor.text(), cursor.span()
    ('foo', Span(start=0, length=3))
"""

from bisect import bisect_left
from collections.abc import Callable
from dataclasses import dataclass

CharPredicate = Callable[[str | None], bool]
"""A test applied to the next character, which is None at end of buffer."""


@dataclass(frozen=True)
class Span:
    """A range ``[start, start + length)`` of character offsets into a buffer.

    Attributes:
        start (int): Offset of the first character.
        length (int): Number of characters covered.
    """

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError(
                f"Span offsets must be non-negative, got start={self.start}, length={self.length}"
            )

    @property
    def end(self) -> int:
        return self.start + self.length


class SourceCursor:
    """
    A window ``[start, start + length)`` sliding left to right over a source buffer.

    Characters are accepted into the window one at a time with the `take*`
    methods, then committed with `advance()`, which moves the start of the
    window to its end. Accepted characters are never pushed back; callers
    decide whether to accept a character by peeking at it first.

    Attributes:
        source (str): The immutable buffer being scanned.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._start = 0
        self._length = 0

    def __repr__(self) -> str:
        return f"SourceCursor(span={self.span()!r}, text={self.text()!r})"

    @property
    def _end(self) -> int:
        return self._start + self._length

    def peek(self) -> str | None:
        """Returns the character just past the window, or None at end of buffer."""
        if self._end >= len(self.source):
            return None
        return self.source[self._end]

    def peek_if(self, predicate: CharPredicate) -> bool:
        """Returns `predicate(peek())` without changing the window."""
        return predicate(self.peek())

    def last(self) -> str | None:
        """Returns the most recently accepted character, or None if the window is empty."""
        if self._length == 0:
            return None
        return self.source[self._end - 1]

    def take(self) -> bool:
        """Extends the window by one character.

        Returns:
            bool: False if the buffer is exhausted, True otherwise.
        """
        if self._end >= len(self.source):
            return False
        self._length += 1
        return True

    def take_if(self, predicate: CharPredicate) -> bool:
        """Extends the window by one character if it exists and satisfies `predicate`."""
        next_char = self.peek()
        if next_char is None or not predicate(next_char):
            return False
        self._length += 1
        return True

    def take_while(self, predicate: CharPredicate) -> None:
        """Accepts characters for as long as they satisfy `predicate`."""
        while self.take_if(predicate):
            pass

    def skip_while(self, predicate: CharPredicate) -> None:
        """Discards the run of characters satisfying `predicate`.

        Raises:
            AssertionError: If the window is not empty when called.
        """
        if self._length != 0:
            raise AssertionError(
                f"skip_while requires an empty window, found {self.text()!r} at {self._start}"
            )
        self.take_while(predicate)
        self.advance()

    def advance(self) -> None:
        """Commits the window: its end becomes the new start and it is emptied."""
        self._start = self._end
        self._length = 0

    def text(self) -> str:
        """Returns a copy of the characters currently inside the window."""
        return self.source[self._start : self._end]

    def span(self) -> Span:
        return Span(self._start, self._length)


class LineMap:
    """
    The offsets of every line break in a text, used to turn offsets into positions.

    `\\n` and a lone `\\r` each end a line; for `\\r\\n` only the `\\n` counts.
    A line-break character belongs to the line it ends.

    Attributes:
        line_breaks (list[int]): Ascending offsets of the line-break characters.
    """

    def __init__(self, line_breaks: list[int]) -> None:
        self.line_breaks = line_breaks

    @classmethod
    def parse(cls, text: str) -> "LineMap":
        """Scans `text` for line breaks and builds a LineMap from them."""
        line_breaks: list[int] = []
        last_char = ""
        last_idx = 0
        for idx, char in enumerate(text):
            if last_char == "\r" and char != "\n":
                line_breaks.append(last_idx)
            if char == "\n":
                line_breaks.append(idx)
            last_char = char
            last_idx = idx
        if last_char == "\r":
            line_breaks.append(last_idx)
        return cls(line_breaks)

    def map_offset(self, offset: int) -> tuple[int, int]:
        """Maps a character offset to a zero-based ``(line, column)`` pair."""
        line = bisect_left(self.line_breaks, offset)
        if line == 0:
            return line, offset
        return line, offset - self.line_breaks[line - 1] - 1


__all__ = ["CharPredicate", "LineMap", "SourceCursor", "Span"]
