"""
One-token lookahead over a token source.

Classes:
    TokenSource (Protocol): Anything exposing `next() -> Token`, e.g. a Tokenizer.
    TokenBuffer: Presents a TokenSource as a stream with a current token and one peek slot.

The parser needs to see the token after the current one before it decides
how to continue (a comma means another argument follows), which is the only
lookahead the grammar requires.
"""

from typing import Protocol

from whylang.whylang_constants import TokenKind
from whylang.whylang_errors import WhySyntaxError
from whylang.whylang_tokens import Token


class TokenSource(Protocol):  # pragma: no cover
    """Protocol for producers of tokens.

    Implementations must keep returning an EndOfFile token once exhausted.
    """

    def next(self) -> Token: ...  # pragma: no cover


class TokenBuffer:
    """A token stream with exactly one token of lookahead.

    Construction pulls the first token into the peek slot. `current` is None
    until the first call to `next()`.

    Attributes:
        current (Token | None): The most recently consumed token.
    """

    def __init__(self, source: TokenSource) -> None:
        self._source = source
        self.current: Token | None = None
        self._peek = source.next()

    def next(self) -> Token:
        """Consumes the peeked token, refills the peek slot and returns the consumed token."""
        self.current = self._peek
        self._peek = self._source.next()
        return self.current

    def peek(self) -> Token:
        """Returns the upcoming token without consuming it."""
        return self._peek

    def expect(self, kind: TokenKind) -> Token:
        """Consumes the next token, requiring it to be of `kind`.

        Raises:
            WhySyntaxError: At the consumed token's location if its kind differs.
        """
        token = self.next()
        if token.kind is not kind:
            raise WhySyntaxError(token.location, f"Expected {kind}!")
        return token


__all__ = ["TokenBuffer", "TokenSource"]
