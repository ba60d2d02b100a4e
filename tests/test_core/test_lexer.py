import pytest

from promptgen.core.errors import (
    InvalidLabelCharacter,
    ParseError,
    UnterminatedLabelLiteral,
    UnterminatedStringLiteral,
)
from promptgen.core.lexer import Span, TokenKind, scan


def kinds(tokens):
    return [t.kind for t in tokens]


def test_lex_a_line():
    source = '> (SYMBOL) "Hello World"'
    tokens = scan(source)

    assert kinds(tokens) == [
        TokenKind.PROMPT_MARKER,
        TokenKind.LABEL_LITERAL,
        TokenKind.STRING_LITERAL,
    ]
    assert tokens[0].text(source) is None
    assert tokens[1].text(source) == "SYMBOL"
    assert tokens[2].text(source) == "Hello World"


def test_response_marker():
    tokens = scan('< "ok"')
    assert kinds(tokens) == [TokenKind.RESPONSE_MARKER, TokenKind.STRING_LITERAL]


def test_multi_line_string_is_one_token():
    source = '> (SYMBOL) "Hello\nWorld"'
    tokens = scan(source)

    assert len(tokens) == 3
    assert tokens[2].text(source) == "Hello\nWorld"


def test_tokens_point_into_source():
    source = '> "a"'
    tokens = scan(source)

    assert tokens[0].offset == 0
    assert tokens[1].offset == 2
    assert tokens[1].span == Span(3, 4)
    assert tokens[0].is_marker
    assert not tokens[1].is_marker


def test_empty_label_is_empty_string():
    source = '> () "x"'
    tokens = scan(source)

    assert tokens[1].kind == TokenKind.LABEL_LITERAL
    assert tokens[1].text(source) == ""
    assert len(tokens[1].span) == 0


def test_stray_characters_are_skipped():
    source = 'comment > more ) text "t" ;'
    tokens = scan(source)

    assert kinds(tokens) == [TokenKind.PROMPT_MARKER, TokenKind.STRING_LITERAL]
    assert tokens[1].text(source) == "t"


def test_markers_inside_literals_are_text():
    source = '"a > b < c (d)"'
    tokens = scan(source)

    assert kinds(tokens) == [TokenKind.STRING_LITERAL]
    assert tokens[0].text(source) == "a > b < c (d)"


def test_empty_source():
    assert scan("") == []


def test_whitespace_in_label():
    with pytest.raises(InvalidLabelCharacter) as exc:
        scan('> (SYMBOL "Hello\nWorld"')

    assert exc.value.offset == 9
    assert (exc.value.line, exc.value.column) == (1, 10)


def test_newline_in_label():
    with pytest.raises(InvalidLabelCharacter):
        scan("> (SYMBOL\nBOO_BOO")


def test_unterminated_label():
    with pytest.raises(UnterminatedLabelLiteral):
        scan("> (SYMBOL_BOO_BOO")


def test_open_label_at_end_of_input():
    with pytest.raises(UnterminatedLabelLiteral) as exc:
        scan("> (")

    assert exc.value.offset == 2


def test_unterminated_string():
    with pytest.raises(UnterminatedStringLiteral) as exc:
        scan('x\n  "abc')

    assert exc.value.offset == 4
    assert (exc.value.line, exc.value.column) == (2, 3)
    assert str(exc.value) == "2:3: unterminated string literal"


def test_lex_errors_are_parse_errors():
    with pytest.raises(ParseError):
        scan('"Hello')
