"""Tests for scanner character dispatch and token production."""

import pytest

from nhtml.errors import (
    ErrorKind,
    InvalidCharacter,
    MalformedCSS,
    MalformedHTML,
    MalformedJS,
    MalformedString,
)
from nhtml.lexer import Scanner
from nhtml.tokens import TokenType


def kinds(source: str) -> list[TokenType]:
    return [t.type for t in Scanner(source)]


def lexemes(source: str) -> list[str]:
    return [t.lexeme for t in Scanner(source)]


class TestPunctuationAndNames:
    """Single-character tokens and identifier runs."""

    def test_tag_with_attribute(self) -> None:
        source = 'meta charset="UTF-8";'
        assert kinds(source) == [
            TokenType.TEXT,
            TokenType.TEXT,
            TokenType.EQUAL,
            TokenType.STRING,
            TokenType.SEMICOLON,
        ]
        assert lexemes(source) == ["meta", "charset", "=", '"UTF-8"', ";"]

    def test_braces(self) -> None:
        assert kinds("div{}") == [TokenType.TEXT, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE]

    def test_name_characters(self) -> None:
        """Names may contain digits, hyphens and underscores after the first character."""
        assert lexemes("h1 data-role _private -x") == ["h1", "data-role", "_private", "-x"]

    def test_digit_cannot_start_name(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            list(Scanner("1st"))
        assert exc_info.value.character == "1"

    def test_non_ascii_letter_is_invalid(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            list(Scanner("café;"))
        assert exc_info.value.character == "é"
        assert exc_info.value.position.idx == 3

    def test_empty_source(self) -> None:
        assert Scanner("").scan() is None

    def test_whitespace_only(self) -> None:
        assert Scanner(" \t\r\n  \n").scan() is None

    def test_exhausted_scanner_keeps_returning_none(self) -> None:
        scanner = Scanner("p;")
        assert scanner.scan() is not None
        assert scanner.scan() is not None
        assert scanner.scan() is None
        assert scanner.scan() is None


class TestStrings:
    """String literals keep their delimiters in the lexeme."""

    def test_double_quoted(self) -> None:
        assert lexemes('"Hello"') == ['"Hello"']

    def test_single_quoted(self) -> None:
        assert lexemes("'Hello'") == ["'Hello'"]

    def test_other_quote_inside(self) -> None:
        """A literal only ends at the delimiter it opened with."""
        assert lexemes("\"it's\" 'say \"hi\"'") == ["\"it's\"", "'say \"hi\"'"]

    def test_empty_string(self) -> None:
        assert lexemes('""') == ['""']

    def test_multiline_string(self) -> None:
        assert lexemes('"a\nb"') == ['"a\nb"']

    def test_comment_markers_inside_string(self) -> None:
        assert lexemes('"// not a comment /* */"') == ['"// not a comment /* */"']

    def test_unterminated_string(self) -> None:
        with pytest.raises(MalformedString) as exc_info:
            list(Scanner('div class="x'))
        err = exc_info.value
        assert err.kind is ErrorKind.MALFORMED_STRING
        # Span covers the opening quote through the end of input
        assert err.position.idx == 10
        assert err.position.length == 2

    def test_backslash_does_not_escape_quote(self) -> None:
        """Inside a literal a backslash is ordinary text."""
        scanner = Scanner('"a\\"b"')
        first = scanner.scan()
        assert first is not None
        assert first.lexeme == '"a\\"'
        second = scanner.scan()
        assert second is not None
        assert second.type == TokenType.TEXT
        assert second.lexeme == "b"
        with pytest.raises(MalformedString):
            scanner.scan()


class TestComments:
    """Comments never produce tokens."""

    def test_block_comment(self) -> None:
        assert lexemes("p /* note */ ;") == ["p", ";"]

    def test_multiline_block_comment(self) -> None:
        assert lexemes("/*\n * header\n */\np;") == ["p", ";"]

    def test_empty_block_comment(self) -> None:
        assert lexemes("/**/p;") == ["p", ";"]

    def test_unterminated_block_comment_swallows_rest(self) -> None:
        assert lexemes("p; /* never closed q;") == ["p", ";"]

    def test_line_comment(self) -> None:
        assert lexemes("p; // trailing\nq;") == ["p", ";", "q", ";"]

    def test_line_comment_at_end_of_input(self) -> None:
        assert lexemes("p; // last") == ["p", ";"]

    def test_lone_slash_is_invalid(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            list(Scanner("p / q"))
        assert exc_info.value.character == "/"

    def test_line_after_comment_has_correct_location(self) -> None:
        tokens = list(Scanner("// header\np;"))
        assert tokens[0].position.start_line == 2
        assert tokens[0].position.start_col == 1


class TestEscapes:
    """A backslash drops itself and the next character."""

    def test_escape_skips_significant_character(self) -> None:
        assert lexemes("p \\{ \"x\"") == ["p", '"x"']

    def test_escape_skips_invalid_character(self) -> None:
        assert lexemes("\\@p;") == ["p", ";"]

    def test_escape_at_end_of_input(self) -> None:
        assert lexemes("p;\\") == ["p", ";"]

    def test_escaped_quote_outside_string(self) -> None:
        assert lexemes('\\"x') == ["x"]


class TestRawHtml:
    """Balanced ``<...>`` passthrough."""

    def test_doctype(self) -> None:
        tokens = list(Scanner("<!DOCTYPE html>"))
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.HTML
        assert tokens[0].lexeme == "<!DOCTYPE html>"

    def test_nested_angle_brackets(self) -> None:
        assert lexemes("<a <b> c> p;") == ["<a <b> c>", "p", ";"]

    def test_empty_brackets(self) -> None:
        assert lexemes("<>") == ["<>"]

    def test_raw_html_spans_lines(self) -> None:
        assert lexemes("<div\n  id=x>") == ["<div\n  id=x>"]

    def test_unterminated(self) -> None:
        with pytest.raises(MalformedHTML):
            list(Scanner("<br"))

    def test_unbalanced_nested(self) -> None:
        with pytest.raises(MalformedHTML) as exc_info:
            list(Scanner("<a <b>"))
        assert exc_info.value.kind is ErrorKind.MALFORMED_HTML


class TestEmbeddedBlocks:
    """``js{...}`` and ``css{...}`` are captured opaquely."""

    def test_js_block(self) -> None:
        tokens = list(Scanner("js{ if (a) { b(); } }"))
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.JS
        assert tokens[0].lexeme == "js{ if (a) { b(); } }"
        assert tokens[0].embedded_body == " if (a) { b(); } "

    def test_css_block(self) -> None:
        tokens = list(Scanner("css{a{color:red}} p;"))
        assert [t.type for t in tokens] == [TokenType.CSS, TokenType.TEXT, TokenType.SEMICOLON]
        assert tokens[0].embedded_body == "a{color:red}"

    def test_contents_are_not_tokenized(self) -> None:
        """Characters invalid in the markup are fine inside a block."""
        tokens = list(Scanner("js{ let x = a @ b; // c\n }"))
        assert [t.type for t in tokens] == [TokenType.JS]

    def test_keyword_needs_adjacent_brace(self) -> None:
        assert kinds("js {}") == [TokenType.TEXT, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE]

    def test_longer_names_are_plain_text(self) -> None:
        assert kinds("jsx{}") == [TokenType.TEXT, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE]

    def test_keyword_as_attribute(self) -> None:
        assert lexemes('div js="1";') == ["div", "js", "=", '"1"', ";"]

    def test_unterminated_js(self) -> None:
        with pytest.raises(MalformedJS):
            list(Scanner("js{ function() {"))

    def test_unterminated_css(self) -> None:
        with pytest.raises(MalformedCSS) as exc_info:
            list(Scanner("css{"))
        assert exc_info.value.kind is ErrorKind.MALFORMED_CSS

    def test_embedded_body_rejects_other_tokens(self) -> None:
        token = Scanner("p").scan()
        assert token is not None
        with pytest.raises(ValueError):
            _ = token.embedded_body


class TestLexemeInvariant:
    """Every lexeme is the exact source text of its span."""

    @pytest.mark.parametrize(
        "source",
        [
            'html { head { meta charset="UTF-8"; } }',
            "<!DOCTYPE html>\np 'x'",
            "/* c */ a href='#' \"link\" // done",
            "style { css{ p { margin: 0 } } }",
        ],
    )
    def test_lexeme_matches_span(self, source: str) -> None:
        for token in Scanner(source):
            assert token.lexeme == source[token.position.idx : token.position.end_idx]
            assert token.position.end_idx <= len(source)
