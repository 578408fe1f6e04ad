"""
nhtml: brace-delimited markup to formatted HTML

Transpiles a small DSL of nested elements into indented HTML through a
scanner, a recursive descent parser and an HTML emitter.

Quick Start:
    >>> from nhtml import transpile
    >>> print(transpile('div { span "a"; span "b"; }'), end="")
    <div>
        <span>
            a
        </span>
        <span>
            b
        </span>
    </div>

Errors:
    >>> from nhtml import TranspileError
    >>> try:
    ...     transpile('div class="x')
    ... except TranspileError as err:
    ...     err.kind
    <ErrorKind.MALFORMED_STRING: 'malformed string'>
"""

import logging
from collections.abc import Iterator

from nhtml.config import (
    TranspileConfig,
    get_transpile_config,
    reset_transpile_config,
    set_transpile_config,
    transpile_config_context,
)
from nhtml.errors import (
    ErrorKind,
    ExpectedElement,
    ExpectedTag,
    InvalidCharacter,
    MalformedCSS,
    MalformedHTML,
    MalformedJS,
    MalformedString,
    NestingTooDeep,
    NhtmlError,
    ParseError,
    ScanError,
    TranspileError,
    UnexpectedToken,
)
from nhtml.lexer import Scanner
from nhtml.location import Position, render_diagnostic
from nhtml.nodes import Attribute, Element, RawHtml, Tag, Text, max_depth
from nhtml.parser import Parser
from nhtml.renderers.html import HtmlRenderer, emit
from nhtml.tokens import Token, TokenType
from nhtml.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def scan(source: str, *, source_file: str | None = None) -> Iterator[Token]:
    """Tokenize ``source`` lazily.

    Raises:
        ScanError: When iteration reaches malformed input.
    """
    return iter(Scanner(source, source_file))


def parse(source: str, *, source_file: str | None = None) -> tuple[Element, ...]:
    """Parse ``source`` into its top-level elements.

    Args:
        source: DSL source text
        source_file: Optional source file path for error messages

    Returns:
        Tuple of top-level Element nodes

    Example:
        >>> parse('meta charset="UTF-8";')
        (Tag(name='meta', attributes=(Attribute(name='charset', value='"UTF-8"'),), children=()),)
    """
    return Parser(source, source_file=source_file).parse()


def transpile(source: str, *, source_file: str | None = None) -> str:
    """Transpile DSL source to formatted HTML.

    Args:
        source: DSL source text
        source_file: Optional source file path for error messages

    Returns:
        HTML string

    Raises:
        TranspileError: On the first lexical or syntax error; no partial
            output is produced.
    """
    elements = parse(source, source_file=source_file)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Parsed %s: %d top-level elements, depth %d",
            source_file or "<string>",
            len(elements),
            max_depth(elements),
        )
    return emit(elements)


__all__ = [
    # API
    "emit",
    "parse",
    "scan",
    "transpile",
    # Pipeline
    "HtmlRenderer",
    "Parser",
    "Scanner",
    # Data model
    "Attribute",
    "Element",
    "Position",
    "RawHtml",
    "Tag",
    "Text",
    "Token",
    "TokenType",
    "max_depth",
    "render_diagnostic",
    # Configuration
    "TranspileConfig",
    "get_transpile_config",
    "reset_transpile_config",
    "set_transpile_config",
    "transpile_config_context",
    # Errors
    "ErrorKind",
    "ExpectedElement",
    "ExpectedTag",
    "InvalidCharacter",
    "MalformedCSS",
    "MalformedHTML",
    "MalformedJS",
    "MalformedString",
    "NestingTooDeep",
    "NhtmlError",
    "ParseError",
    "ScanError",
    "TranspileError",
    "UnexpectedToken",
]
