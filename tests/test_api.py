"""Tests for the high-level nhtml API."""

import sys

import pytest

from nhtml import (
    MalformedString,
    RawHtml,
    Tag,
    Text,
    TokenType,
    TranspileError,
    emit,
    parse,
    scan,
    transpile,
)

GOLDEN_SOURCE = """\
<!DOCTYPE html>
html lang="en" {
    head {
        meta charset="UTF-8";
        link rel="stylesheet" href="style.css";
        title "Demo"
    }
    /* page body */
    body {
        h1 "Welcome" // heading
        p { "First" "Second" }
    }
}
"""

GOLDEN_HTML = """\
<!DOCTYPE html>
<html lang="en">
    <head>
        <meta charset="UTF-8">
        <link rel="stylesheet" href="style.css">
        <title>
            Demo
        </title>
    </head>
    <body>
        <h1>
            Welcome
        </h1>
        <p>
            First
            Second
        </p>
    </body>
</html>
"""


class TestTranspileScenarios:
    """End-to-end examples of the DSL."""

    def test_void_meta(self) -> None:
        assert transpile('meta charset="UTF-8";') == '<meta charset="UTF-8">\n'

    def test_single_element_body(self) -> None:
        assert transpile('p "Hello"') == "<p>\n    Hello\n</p>\n"

    def test_braced_siblings(self) -> None:
        assert transpile('div { span "a"; span "b"; }') == (
            "<div>\n"
            "    <span>\n"
            "        a\n"
            "    </span>\n"
            "    <span>\n"
            "        b\n"
            "    </span>\n"
            "</div>\n"
        )

    def test_unterminated_string(self) -> None:
        with pytest.raises(MalformedString):
            transpile('div class="x')

    def test_attribute_and_text_quotes(self) -> None:
        """Attribute values keep their quotes; text content loses them."""
        assert transpile("a class=\"test\" 'Hello'") == '<a class="test">\n    Hello\n</a>\n'

    def test_full_document(self) -> None:
        assert transpile(GOLDEN_SOURCE) == GOLDEN_HTML

    def test_script_block(self) -> None:
        source = "body { js{\n    go();\n} }"
        assert transpile(source) == (
            "<body>\n"
            "    <script>\n"
            "        go();\n"
            "    </script>\n"
            "</body>\n"
        )

    def test_empty_document(self) -> None:
        assert transpile("") == ""
        assert transpile("  // only a comment\n") == ""

    def test_deterministic(self) -> None:
        assert transpile(GOLDEN_SOURCE) == transpile(GOLDEN_SOURCE)


class TestStageFunctions:
    """scan(), parse() and emit() expose each stage."""

    def test_scan_is_lazy(self) -> None:
        tokens = scan("p; @")
        first = next(tokens)
        assert first.type == TokenType.TEXT
        assert next(tokens).type == TokenType.SEMICOLON
        with pytest.raises(TranspileError):
            next(tokens)

    def test_scan_error_carries_file(self) -> None:
        with pytest.raises(TranspileError) as exc_info:
            list(scan("@", source_file="index.nhtml"))
        assert exc_info.value.source_file == "index.nhtml"

    def test_parse(self) -> None:
        assert parse('<br> "x"') == (RawHtml("<br>"), Text("x"))

    def test_emit(self) -> None:
        assert emit((Tag("p", children=(Text("x"),)),)) == "<p>\n    x\n</p>\n"

    def test_parse_then_emit_matches_transpile(self) -> None:
        assert emit(parse(GOLDEN_SOURCE)) == transpile(GOLDEN_SOURCE)

    def test_error_message_names_file(self) -> None:
        with pytest.raises(TranspileError) as exc_info:
            transpile("p; }", source_file="page.nhtml")
        assert str(exc_info.value).startswith("page.nhtml:Expected tag at 1:4")

    def test_deep_nesting_is_a_transpile_error(self) -> None:
        depth = sys.getrecursionlimit()
        with pytest.raises(TranspileError):
            transpile("p {" * depth + "}" * depth)

    def test_no_partial_output(self) -> None:
        """A late error still rejects the whole document."""
        with pytest.raises(TranspileError):
            transpile(GOLDEN_SOURCE + "@")


class TestPublicNamespace:
    """Everything in __all__ is importable from the package root."""

    def test_all_exports_resolve(self) -> None:
        import nhtml

        for name in nhtml.__all__:
            assert hasattr(nhtml, name), name
