import pytest
from hypothesis import given
from hypothesis import strategies as st

from whylang.whylang_constants import TextComparison, TokenKind
from whylang.whylang_errors import WhySyntaxError
from whylang.whylang_lexer import Tokenizer, tokenize
from whylang.whylang_text import SourceCursor, Span
from whylang.whylang_tokens import (
    NULL,
    IdentifierValue,
    IntegerValue,
    StringValue,
    Token,
    TokenValue,
)


def single_token_test(source: str, kind: TokenKind, value: TokenValue) -> None:
    tokens = list(tokenize(" \t\r\n" + source + "\n\t "))
    assert tokens == [Token(Span(4, len(source)), kind, value)]


@pytest.mark.parametrize(
    "source,value",
    [
        ("0", 0),
        ("42", 42),
        ("00001", 1),
        ("-0", 0),
        ("-42", -42),
        ("-00001", -1),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
    ],
)
def test_numbers(source: str, value: int) -> None:
    single_token_test(source, TokenKind.INTEGER, IntegerValue(value))


@pytest.mark.parametrize("source", ["9223372036854775808", "-9223372036854775809"])
def test_number_out_of_range(source: str) -> None:
    with pytest.raises(WhySyntaxError) as excinfo:
        list(tokenize(source))
    assert excinfo.value.span == Span(0, len(source))
    assert excinfo.value.message == "Integer literal out of range"


@pytest.mark.parametrize("source,value", [('""', ""), ('"abc"', "abc"), ('"a b,c"', "a b,c")])
def test_strings(source: str, value: str) -> None:
    single_token_test(source, TokenKind.STRING, StringValue(value))


@pytest.mark.parametrize(
    "source,length,message",
    [
        ('"foo', 4, "Unexpected end-of-file"),
        ('"foo\n', 4, "Unexpected new line"),
        ('"foo\r\n', 4, "Unexpected new line"),
        ('"', 1, "Unexpected end-of-file"),
    ],
)
def test_invalid_strings(source: str, length: int, message: str) -> None:
    with pytest.raises(WhySyntaxError) as excinfo:
        list(tokenize(source))
    assert excinfo.value.span == Span(0, length)
    assert str(excinfo.value) == message


@pytest.mark.parametrize("source,kind", [("def", TokenKind.DEF), ("extern", TokenKind.EXTERN)])
def test_keywords(source: str, kind: TokenKind) -> None:
    single_token_test(source, kind, NULL)


@pytest.mark.parametrize("source", ["defx", "x", "_", "extern_", "Def", "a1_b2", "_9"])
def test_identifiers(source: str) -> None:
    single_token_test(source, TokenKind.IDENTIFIER, IdentifierValue(source))


def test_keywords_ignore_comparison_policy() -> None:
    tokens = list(tokenize("DEF", TextComparison.IGNORE_CASE))
    assert tokens[0].kind is TokenKind.IDENTIFIER


def test_identifier_payload_uses_comparison_policy() -> None:
    [token] = tokenize("Print", TextComparison.IGNORE_CASE)
    assert token.value == IdentifierValue("PRINT", TextComparison.IGNORE_CASE)


@pytest.mark.parametrize(
    "source,kind",
    [
        ("(", TokenKind.LPAREN),
        (")", TokenKind.RPAREN),
        (",", TokenKind.COMMA),
        ("+", TokenKind.PLUS),
        ("-", TokenKind.MINUS),
        ("*", TokenKind.STAR),
        ("/", TokenKind.SLASH),
        ("=", TokenKind.ASSIGN),
        ("~", TokenKind.UNKNOWN),
        ("$", TokenKind.UNKNOWN),
        (".", TokenKind.UNKNOWN),
    ],
)
def test_operators(source: str, kind: TokenKind) -> None:
    single_token_test(source, kind, NULL)


def test_minus_not_followed_by_digit_is_operator() -> None:
    tokens = list(tokenize("- 1 -x"))
    assert [t.kind for t in tokens] == [
        TokenKind.MINUS,
        TokenKind.INTEGER,
        TokenKind.MINUS,
        TokenKind.IDENTIFIER,
    ]
    assert tokens[1].value == IntegerValue(1)


def test_sequence() -> None:
    tokens = list(tokenize("1 + x / def(extern)"))
    assert tokens == [
        Token(Span(0, 1), TokenKind.INTEGER, IntegerValue(1)),
        Token(Span(2, 1), TokenKind.PLUS),
        Token(Span(4, 1), TokenKind.IDENTIFIER, IdentifierValue("x")),
        Token(Span(6, 1), TokenKind.SLASH),
        Token(Span(8, 3), TokenKind.DEF),
        Token(Span(11, 1), TokenKind.LPAREN),
        Token(Span(12, 6), TokenKind.EXTERN),
        Token(Span(18, 1), TokenKind.RPAREN),
    ]


def test_adjacent_tokens_without_whitespace() -> None:
    tokens = list(tokenize('f(1,"a")'))
    assert [t.kind for t in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.LPAREN,
        TokenKind.INTEGER,
        TokenKind.COMMA,
        TokenKind.STRING,
        TokenKind.RPAREN,
    ]
    assert tokens[4].location == Span(4, 3)


@pytest.mark.parametrize("source", ["", "   ", "\n\t\r "])
def test_empty_input_yields_no_tokens(source: str) -> None:
    assert list(tokenize(source)) == []


def test_end_of_file_repeats_forever() -> None:
    tokenizer = Tokenizer("x ")
    assert tokenizer.next().kind is TokenKind.IDENTIFIER
    for _ in range(3):
        token = tokenizer.next()
        assert token == Token(Span(2, 0), TokenKind.END_OF_FILE)


def test_iteration_is_not_restartable() -> None:
    tokenizer = Tokenizer("a b")
    assert len(list(tokenizer)) == 2
    assert list(tokenizer) == []


def test_tokenizer_accepts_cursor() -> None:
    cursor = SourceCursor("42")
    tokenizer = Tokenizer(cursor)
    assert tokenizer.next().value == IntegerValue(42)
    assert cursor.span() == Span(2, 0)


@given(st.text(max_size=100))  # type: ignore[misc]
def test_tokenizing_is_deterministic(source: str) -> None:
    def run() -> list[Token] | str:
        try:
            return list(tokenize(source))
        except WhySyntaxError as e:
            return repr(e)

    assert run() == run()


@given(st.text(alphabet=st.characters(blacklist_categories=["Cs"]), max_size=100))  # type: ignore[misc]
def test_lexer_does_not_crash_on_random_input(source: str) -> None:
    try:
        tokens = list(tokenize(source))
    except WhySyntaxError as e:
        assert e.message in (
            "Unexpected end-of-file",
            "Unexpected new line",
            "Integer literal out of range",
        )
        assert e.span.end <= len(source)
        return
    previous_end = 0
    for token in tokens:
        assert token.kind is not TokenKind.END_OF_FILE
        assert token.location.start >= previous_end
        assert token.location.length > 0
        previous_end = token.location.end
    assert previous_end <= len(source)


@given(st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,15}", fullmatch=True))  # type: ignore[misc]
def test_words_are_keywords_or_identifiers(word: str) -> None:
    single_token_test(
        word,
        {"def": TokenKind.DEF, "extern": TokenKind.EXTERN}.get(word, TokenKind.IDENTIFIER),
        NULL if word in ("def", "extern") else IdentifierValue(word),
    )


@given(st.integers(min_value=-(2**63), max_value=2**63 - 1))  # type: ignore[misc]
def test_integers_in_range_tokenize_to_their_value(value: int) -> None:
    single_token_test(str(value), TokenKind.INTEGER, IntegerValue(value))
