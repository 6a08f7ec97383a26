"""
Lexical analyzer for the WhyLang programming language.

This module turns a source buffer into a stream of tokens:

Classes:
    Tokenizer: Pulls characters from a SourceCursor and emits one Token per `next()`.

Functions:
    tokenize(source): Iterates every token of `source` up to, not including, EndOfFile.

Features:
    - Skips whitespace between tokens
    - Recognizes:
        * Integers, with an optional leading `-` (signed 64-bit)
        * Identifiers and the keywords `def` and `extern`
        * Double-quoted single-line strings
        * Single-character punctuation: ( ) , + - * / =
    - Any other character becomes an `Unknown` token rather than an error

Raises:
    WhySyntaxError: On unterminated strings and out-of-range integers.

Example:
    >>> [t.kind for t in tokenize("print(42)")]
    [<TokenKind.IDENTIFIER: 'Identifier'>, <TokenKind.LPAREN: 'LParen'>, <TokenKind.INTEGER: 'Integer'>, <TokenKind.RPAREN: 'RParen'>]
"""

import logging
from collections.abc import Iterator

from whylang.whylang_constants import (
    DEFAULT_COMPARISON,
    INT64_MAX,
    INT64_MIN,
    KEYWORDS,
    PUNCTUATION,
    TextComparison,
    TokenKind,
)
from whylang.whylang_errors import WhySyntaxError
from whylang.whylang_text import SourceCursor
from whylang.whylang_tokens import (
    NULL,
    IdentifierValue,
    IntegerValue,
    StringValue,
    Token,
    TokenValue,
)

logger = logging.getLogger(__name__)


def is_whitespace(ch: str | None) -> bool:
    return ch is not None and ch.isspace()


def is_digit(ch: str | None) -> bool:
    return ch is not None and ch.isdecimal()


def is_identifier_start(ch: str | None) -> bool:
    return ch is not None and (ch.isalpha() or ch == "_")


def is_identifier_part(ch: str | None) -> bool:
    return ch is not None and (ch.isalnum() or ch == "_")


def is_newline(ch: str | None) -> bool:
    return ch in ("\n", "\r")


class Tokenizer:
    """Lexical analyzer for WhyLang.

    The tokenizer holds no state of its own beyond the cursor: between calls the
    cursor's window is always empty and positioned at the next unread character.
    Once the input is exhausted every call returns an EndOfFile token.

    Iterating a Tokenizer yields tokens until the first EndOfFile, which is not
    yielded. Iteration cannot be restarted; build a new Tokenizer instead.

    Attributes:
        cursor (SourceCursor): The scanning window over the source.
        comparison (TextComparison): Policy stamped into string and identifier payloads.
    """

    def __init__(
        self,
        source: str | SourceCursor,
        comparison: TextComparison = DEFAULT_COMPARISON,
    ) -> None:
        self.cursor = source if isinstance(source, SourceCursor) else SourceCursor(source)
        self.comparison = comparison

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token.kind is TokenKind.END_OF_FILE:
                return
            yield token

    def next(self) -> Token:
        """Scans and returns the next token.

        Raises:
            WhySyntaxError: If a string literal is unterminated or an integer overflows.
        """
        self.cursor.skip_while(is_whitespace)

        if not self.cursor.take():
            return self._emit(TokenKind.END_OF_FILE)

        ch = self.cursor.last()
        if is_digit(ch) or (ch == "-" and self.cursor.peek_if(is_digit)):
            return self._number()
        if is_identifier_start(ch):
            return self._identifier()
        if ch == '"':
            return self._string()
        if ch in PUNCTUATION:
            return self._emit(PUNCTUATION[ch])
        return self._emit(TokenKind.UNKNOWN)

    def _number(self) -> Token:
        # The sign or first digit is already in the window.
        self.cursor.take_while(is_digit)
        try:
            value = int(self.cursor.text())
        except ValueError as exc:
            # Digit runs past the interpreter's int conversion limit.
            raise WhySyntaxError(self.cursor.span(), "Integer literal out of range") from exc
        if not INT64_MIN <= value <= INT64_MAX:
            raise WhySyntaxError(self.cursor.span(), "Integer literal out of range")
        return self._emit(TokenKind.INTEGER, IntegerValue(value))

    def _identifier(self) -> Token:
        self.cursor.take_while(is_identifier_part)
        text = self.cursor.text()
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return self._emit(keyword)
        return self._emit(TokenKind.IDENTIFIER, IdentifierValue(text, self.comparison))

    def _string(self) -> Token:
        while True:
            ch = self.cursor.peek()
            if ch is None:
                raise WhySyntaxError(self.cursor.span(), "Unexpected end-of-file")
            if is_newline(ch):
                raise WhySyntaxError(self.cursor.span(), "Unexpected new line")
            self.cursor.take()
            if ch == '"':
                break
        text = self.cursor.text()[1:-1]
        return self._emit(TokenKind.STRING, StringValue(text, self.comparison))

    def _emit(self, kind: TokenKind, value: TokenValue = NULL) -> Token:
        token = Token(self.cursor.span(), kind, value)
        self.cursor.advance()
        logger.debug("emit %r", token)
        return token


def tokenize(source: str, comparison: TextComparison = DEFAULT_COMPARISON) -> Iterator[Token]:
    """Tokenizes all of `source`, stopping before the EndOfFile token."""
    return iter(Tokenizer(source, comparison))


__all__ = ["Tokenizer", "tokenize"]
