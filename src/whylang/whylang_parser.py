"""
WhyLang Expression Parser

Parses WhyLang tokens into expression trees by recursive descent.

Grammar
-------
    expression    := constant | call
    constant      := INTEGER | STRING
    call          := IDENTIFIER '(' argument_list ')'
    argument_list := expression ( ',' expression )*

A call always has at least one argument: `f()` is rejected at the `)`.

Parser Behavior
---------------
- Reads tokens through a one-token lookahead `TokenBuffer`.
- Stops at the first error; there is no recovery and no partial tree.
- Rejects calls nested deeper than `MAX_NESTING_DEPTH`.

Entry Points
------------
- `Parser.parse_expression()`: Parse the next expression from the token stream.
- `parse_expression(source)`: Parse a single expression from source text.

Raises
------
WhySyntaxError
    When a token cannot start an expression or mandatory punctuation is missing.
"""

from __future__ import annotations

import logging

from whylang.whylang_ast import Call, Constant, Expression
from whylang.whylang_buffer import TokenBuffer, TokenSource
from whylang.whylang_constants import (
    DEFAULT_COMPARISON,
    MAX_NESTING_DEPTH,
    TextComparison,
    TokenKind,
)
from whylang.whylang_errors import WhySyntaxError
from whylang.whylang_lexer import Tokenizer
from whylang.whylang_tokens import IdentifierValue, IntegerValue, StringValue, Token

logger = logging.getLogger(__name__)


class Parser:
    """
    WhyLang Parser Class

    Turns a token stream into `Constant` and `Call` nodes. Each grammar rule
    is one method; the dispatch is on the kind of the token just consumed.

    Attributes
    ----------
    tokens : TokenBuffer
        The lookahead buffer tokens are read from.

    Methods
    -------
    at_end() -> bool
        Whether the token stream is exhausted.
    parse_expression() -> Expression
        Parse one expression.
    parse_call(token) -> Call
        Parse the rest of a call whose name token was just consumed.
    parse_argument_list() -> list[Expression]
        Parse one or more comma-separated expressions.
    """

    def __init__(self, tokens: TokenBuffer | TokenSource | str) -> None:
        if isinstance(tokens, str):
            tokens = Tokenizer(tokens)
        if not isinstance(tokens, TokenBuffer):
            tokens = TokenBuffer(tokens)
        self.tokens: TokenBuffer = tokens
        self._depth = 0

    def at_end(self) -> bool:
        """Returns True once only EndOfFile remains."""
        return self.tokens.peek().kind is TokenKind.END_OF_FILE

    def parse_expression(self) -> Expression:
        token = self.tokens.next()
        if token.kind in (TokenKind.INTEGER, TokenKind.STRING):
            return self.parse_constant(token)
        if token.kind is TokenKind.IDENTIFIER:
            return self.parse_call(token)
        raise WhySyntaxError(token.location, f"Unexpected {token.kind}.")

    def parse_constant(self, token: Token) -> Constant:
        if not isinstance(token.value, (IntegerValue, StringValue)):
            raise WhySyntaxError(token.location, "Unexpected constant type.")
        node = Constant(token.value)
        logger.debug("constant %s at %d", node, token.location.start)
        return node

    def parse_call(self, token: Token) -> Call:
        if not isinstance(token.value, IdentifierValue):
            raise AssertionError(f"Identifier token without identifier payload: {token!r}")
        function = token.value.text
        if self._depth >= MAX_NESTING_DEPTH:
            raise WhySyntaxError(token.location, "Expression nested too deeply")

        self._depth += 1
        try:
            self.tokens.expect(TokenKind.LPAREN)
            arguments = self.parse_argument_list()
            self.tokens.expect(TokenKind.RPAREN)
        finally:
            self._depth -= 1

        node = Call(function, arguments)
        logger.debug("call %s/%d at %d", function, len(arguments), token.location.start)
        return node

    def parse_argument_list(self) -> list[Expression]:
        arguments = [self.parse_expression()]
        while self.tokens.peek().kind is TokenKind.COMMA:
            self.tokens.next()
            arguments.append(self.parse_expression())
        return arguments


def parse_expression(source: str, comparison: TextComparison = DEFAULT_COMPARISON) -> Expression:
    """Parses one expression from `source`.

    Tokens after the expression are left unread.

    Raises:
        WhySyntaxError: On the first lexical or syntactic error.
    """
    return Parser(Tokenizer(source, comparison)).parse_expression()


__all__ = ["Parser", "parse_expression"]
