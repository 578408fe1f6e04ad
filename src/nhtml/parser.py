"""Recursive descent parser producing the element tree.

Grammar:
    elements   ::= element*
    element    ::= tag | string | raw-html | embedded
    tag        ::= name attribute* body
    attribute  ::= name ('=' string)?
    body       ::= ';' | '{' element* '}' | element ';'?

Tokens are pulled from the Scanner one at a time through the single-slot
lookahead buffer of TokenNavigationMixin, so scanning and parsing are
interleaved and a lexical error surfaces as soon as the parser reaches it.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
parse operation. The resulting tree is immutable and thread-safe.

"""

from __future__ import annotations

import textwrap

from nhtml.errors import ExpectedElement, ExpectedTag, NestingTooDeep
from nhtml.lexer import Scanner
from nhtml.nodes import Attribute, Element, RawHtml, Tag, Text
from nhtml.parsing import TokenNavigationMixin
from nhtml.tokens import Token, TokenType

# Element each embedded block type is wrapped in
EMBEDDED_ELEMENTS: dict[TokenType, str] = {
    TokenType.JS: "script",
    TokenType.CSS: "style",
}


class Parser(TokenNavigationMixin):
    """LL(1) recursive descent parser for the nhtml markup language.

    Usage:
        >>> Parser('p "Hello"').parse()
        (Tag(name='p', attributes=(), children=(Text(value='Hello'),)),)

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_scanner",
        "_lookahead",
        "_exhausted",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: DSL source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._scanner = Scanner(source, source_file)
        self._lookahead: Token | None = None
        self._exhausted = False

    def parse(self) -> tuple[Element, ...]:
        """Parse the whole source into its top-level elements.

        Raises:
            ScanError: On malformed input found while scanning.
            ParseError: On the first grammar violation, or NestingTooDeep
                when element nesting exhausts the recursion limit.
        """
        elements: list[Element] = []
        try:
            while (element := self._parse_element()) is not None:
                elements.append(element)
        except RecursionError:
            raise self._error(NestingTooDeep, "Nesting too deep") from None

        if self._peek() is not None:
            raise self._error(ExpectedTag, "Expected tag")
        return tuple(elements)

    def _parse_element(self) -> Element | None:
        """Parse one element, or return None if the next token cannot start one.

        None only means "no more elements here"; callers decide whether that
        is an error.
        """
        token = self._peek()
        if token is None:
            return None

        match token.type:
            case TokenType.TEXT:
                return self._parse_tag()
            case TokenType.STRING:
                self._take()
                return Text(value=token.lexeme[1:-1], location=token.position)
            case TokenType.HTML:
                self._take()
                return RawHtml(value=token.lexeme, location=token.position)
            case TokenType.JS | TokenType.CSS:
                self._take()
                return self._embedded_element(token)
            case _:
                return None

    def _parse_tag(self) -> Tag:
        name = self._expect(TokenType.TEXT, "Expected element name")

        attributes: list[Attribute] = []
        while self._is_next(TokenType.TEXT):
            attributes.append(self._parse_attribute())

        children = self._parse_body()
        return Tag(
            name=name.lexeme,
            attributes=tuple(attributes),
            children=children,
            location=name.position,
        )

    def _parse_attribute(self) -> Attribute:
        name = self._expect(TokenType.TEXT, "Expected attribute name")

        value = None
        if self._is_next(TokenType.EQUAL):
            self._take()
            value = self._expect(TokenType.STRING, "Expected string value").lexeme

        return Attribute(name=name.lexeme, value=value, location=name.position)

    def _parse_body(self) -> tuple[Element, ...]:
        """Parse ``;``, a braced element list, or a single element."""
        if self._is_next(TokenType.SEMICOLON):
            self._take()
            return ()

        if self._is_next(TokenType.LEFT_BRACE):
            self._take()
            children: list[Element] = []
            while not self._is_next(TokenType.RIGHT_BRACE):
                child = self._parse_element()
                if child is None:
                    raise self._error(ExpectedElement, "Expected element")
                children.append(child)
            self._take()
            return tuple(children)

        child = self._parse_element()
        if child is None:
            raise self._error(ExpectedElement, "Expected element")
        # Optional terminator after a single-element body
        if self._is_next(TokenType.SEMICOLON):
            self._take()
        return (child,)

    def _embedded_element(self, token: Token) -> Tag:
        """Wrap a JS/CSS block in its element, one raw line per source line.

        The first line shares the ``js{``/``css{`` line, so it is stripped on
        its own and only the following lines are dedented together.
        """
        first, _, rest = token.embedded_body.partition("\n")
        lines = [first.strip(), *textwrap.dedent(rest).splitlines()]
        children = tuple(
            RawHtml(value=line.rstrip(), location=token.position)
            for line in lines
            if line.strip()
        )
        return Tag(
            name=EMBEDDED_ELEMENTS[token.type],
            children=children,
            location=token.position,
        )
