"""
Token model for the WhyLang front end.

Classes:
    NullValue: Payload of tokens that carry none; use the `NULL` singleton.
    IntegerValue: A signed 64-bit integer literal.
    StringValue: The text of a string literal, without its quotes.
    IdentifierValue: The text of an identifier.
    Token: A lexical unit: its location, kind and payload.

`TokenValue` is the closed union of the four payload classes. String and
identifier payloads compare through the `TextComparison` policy they were
created with; payloads of different classes, or created under different
policies, are never equal.

Rendering (`str()`):
    - IntegerValue: decimal digits, e.g. ``-42``
    - StringValue: quoted, e.g. ``"abc"``
    - IdentifierValue: raw, e.g. ``abc``
    - NULL: empty string
"""

from dataclasses import dataclass, field
from typing import Any, Union

from whylang.whylang_constants import DEFAULT_COMPARISON, TextComparison, TokenKind
from whylang.whylang_text import Span


class NullValue:
    """The empty payload. Only one instance exists, `NULL`."""

    _instance: "NullValue | None" = None

    def __new__(cls) -> "NullValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __str__(self) -> str:
        return ""


NULL = NullValue()


@dataclass(frozen=True)
class IntegerValue:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=False)
class _TextValue:
    text: str
    comparison: TextComparison = field(default=DEFAULT_COMPARISON, repr=False)

    def __eq__(self, other: Any) -> bool:
        # Payloads scanned under different policies are never equal.
        if type(other) is not type(self) or other.comparison is not self.comparison:
            return False
        return self.comparison.key(self.text) == self.comparison.key(other.text)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.comparison, self.comparison.key(self.text)))


class StringValue(_TextValue):
    def __str__(self) -> str:
        return f'"{self.text}"'


class IdentifierValue(_TextValue):
    def __str__(self) -> str:
        return self.text


TokenValue = Union[NullValue, IntegerValue, StringValue, IdentifierValue]


@dataclass(frozen=True)
class Token:
    """A single lexical unit emitted by the tokenizer.

    Attributes:
        location (Span): The characters the token was scanned from.
        kind (TokenKind): The token's category.
        value (TokenValue): The typed payload, `NULL` when there is none.
    """

    location: Span
    kind: TokenKind
    value: TokenValue = NULL

    def __repr__(self) -> str:
        if self.value is NULL:
            return f"Token({self.kind}, {self.location.start}+{self.location.length})"
        return f"Token({self.kind}, {self.value!r}, {self.location.start}+{self.location.length})"

    def text(self, document: str) -> str:
        """Returns the slice of `document` covered by this token."""
        return document[self.location.start : self.location.end]


__all__ = [
    "NULL",
    "IdentifierValue",
    "IntegerValue",
    "NullValue",
    "StringValue",
    "Token",
    "TokenKind",
    "TokenValue",
]
