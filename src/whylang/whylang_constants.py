"""
Shared vocabulary, lookup tables and policies for the WhyLang front end.

Definitions:
    TokenKind: The closed set of token categories.
    TextComparison: How string and identifier payloads are compared.

Tables:
    KEYWORDS: Reserved words that never tokenize as identifiers.
    PUNCTUATION: Single-character tokens and the kind each one produces.

Both tables are keyed by exact source text. Keyword lookup is always
case-sensitive regardless of the comparison policy in effect.
"""

from enum import Enum


class TokenKind(Enum):
    """The category of a lexical unit.

    Each member's value is its display name, which is what diagnostics print
    (e.g. ``Expected LParen!``).
    """

    END_OF_FILE = "EndOfFile"
    INTEGER = "Integer"
    STRING = "String"
    IDENTIFIER = "Identifier"
    DEF = "Def"
    EXTERN = "Extern"
    LPAREN = "LParen"
    RPAREN = "RParen"
    COMMA = "Comma"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"
    ASSIGN = "Assign"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


class TextComparison(Enum):
    """Equality rule for string and identifier token payloads."""

    ORDINAL = "ordinal"
    IGNORE_CASE = "ignore-case"

    def key(self, text: str) -> str:
        """Returns the normalized form of `text` used for equality and hashing."""
        if self is TextComparison.IGNORE_CASE:
            return text.casefold()
        return text


DEFAULT_COMPARISON = TextComparison.ORDINAL

KEYWORDS: dict[str, TokenKind] = {
    "def": TokenKind.DEF,
    "extern": TokenKind.EXTERN,
}

PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.ASSIGN,
}

# Deepest nesting of calls the parser accepts; each level costs several
# interpreter frames.
MAX_NESTING_DEPTH = 200

# Signed 64-bit bounds for integer literals.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

__all__ = [
    "DEFAULT_COMPARISON",
    "INT64_MAX",
    "INT64_MIN",
    "KEYWORDS",
    "MAX_NESTING_DEPTH",
    "PUNCTUATION",
    "TextComparison",
    "TokenKind",
]
