"""Unit tests for the tokenizer."""

import pytest

from lintstyle.core.languages import get_profile
from lintstyle.core.tokenizer import iter_tokens, tokenize
from lintstyle.models import TokenKind


def _kinds(text: str) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.text) for t in tokenize(text)]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "var x = 1;\n",
        "if (a) {\r\n  b();\r\n}\r\n",
        "'unterminated\nnext line",
        "/* never closed\n * still comment",
        '"esc \\" quote" + \'it\\\'s\'\n',
        "`multi\nline ${x}` // trailing\n",
        "\t\t mixed\f\vspace\rlone cr\n",
        "€ ünïcödé ✓\n",
        "a\\",
    ],
)
def test_tokens_reconstruct_source(text: str) -> None:
    tokens = tokenize(text)
    assert "".join(t.text for t in tokens) == text
    position = 0
    for token in tokens:
        assert token.start == position
        assert token.end == position + len(token.text)
        position = token.end


def test_iter_tokens_is_lazy() -> None:
    stream = iter_tokens("a b c")
    first = next(stream)
    assert first.kind is TokenKind.IDENTIFIER
    assert first.text == "a"


def test_declaration_statement() -> None:
    assert _kinds("var x = 10;") == [
        (TokenKind.KEYWORD, "var"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.PUNCTUATION, "="),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.NUMBER, "10"),
        (TokenKind.PUNCTUATION, ";"),
    ]


def test_whitespace_runs_are_coalesced() -> None:
    tokens = tokenize(" \t  x")
    assert tokens[0].kind is TokenKind.WHITESPACE
    assert tokens[0].text == " \t  "


def test_crlf_is_single_newline_token() -> None:
    tokens = tokenize("a\r\nb")
    assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.NEWLINE, TokenKind.IDENTIFIER]
    assert tokens[1].text == "\r\n"


def test_line_comment_stops_before_newline() -> None:
    tokens = tokenize("x // note\ny")
    assert tokens[2].kind is TokenKind.COMMENT
    assert tokens[2].text == "// note"
    assert tokens[3].kind is TokenKind.NEWLINE


def test_block_comment_spans_lines() -> None:
    tokens = tokenize("/* a\n b */x")
    assert tokens[0].kind is TokenKind.COMMENT
    assert tokens[0].text == "/* a\n b */"
    assert tokens[1].text == "x"


def test_unterminated_block_comment_runs_to_end_of_file() -> None:
    tokens = tokenize("x /* open\nmore")
    assert tokens[-1].kind is TokenKind.COMMENT
    assert tokens[-1].end == len("x /* open\nmore")


def test_string_honors_escapes() -> None:
    tokens = tokenize('"a\\"b" c')
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].text == '"a\\"b"'
    assert tokens[0].body == 'a\\"b'
    assert tokens[0].terminated


def test_escaped_backslash_before_closing_quote() -> None:
    token = tokenize("'a\\\\' x")[0]
    assert token.text == "'a\\\\'"
    assert token.terminated


def test_unterminated_string_stops_at_end_of_line() -> None:
    tokens = tokenize("'open\nnext")
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].text == "'open"
    assert not tokens[0].terminated
    assert tokens[0].body == "open"
    assert tokens[1].kind is TokenKind.NEWLINE


def test_template_string_spans_lines() -> None:
    tokens = tokenize("`a\nb`;")
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].quote == "`"
    assert tokens[0].text == "`a\nb`"


def test_keywords_depend_on_profile() -> None:
    js = tokenize("let fn = 1", get_profile("javascript"))
    rust = tokenize("let fn = 1", get_profile("rust"))
    assert js[2].kind is TokenKind.IDENTIFIER
    assert rust[2].kind is TokenKind.KEYWORD


def test_unrecognized_characters_become_punctuation() -> None:
    tokens = tokenize("@#")
    assert [(t.kind, t.text) for t in tokens] == [(TokenKind.PUNCTUATION, "@"), (TokenKind.PUNCTUATION, "#")]


def test_identifiers_allow_dollar_and_underscore() -> None:
    assert _kinds("$el _private") == [
        (TokenKind.IDENTIFIER, "$el"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "_private"),
    ]
