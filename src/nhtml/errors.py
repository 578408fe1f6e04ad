"""Exception classes for nhtml.

Two families cover everything the core can reject:

- ScanError: lexical problems found while tokenizing
- ParseError: grammar violations found while building the element tree

Both carry an ErrorKind and the Position that triggered them, so callers can
dispatch on ``err.kind`` and render the diagnostic with ``err.diagnostic()``.
"""

from __future__ import annotations

from enum import Enum

from nhtml.location import Position, render_diagnostic


class ErrorKind(Enum):
    """Every concrete error the transpiler can raise."""

    # Lexical
    INVALID_CHARACTER = "invalid character"
    MALFORMED_STRING = "malformed string"
    MALFORMED_HTML = "malformed HTML"
    MALFORMED_JS = "malformed JS"
    MALFORMED_CSS = "malformed CSS"

    # Syntactic
    UNEXPECTED_TOKEN = "unexpected token"
    EXPECTED_TAG = "expected tag"
    EXPECTED_ELEMENT = "expected element"
    NESTING_TOO_DEEP = "nesting too deep"


class NhtmlError(Exception):
    """Base exception for all nhtml errors.

    Subclass this for specific error categories.
    """

    pass


class TranspileError(NhtmlError):
    """Error that aborts a transpile pass.

    Carries the position of the offending input and, when available, the
    source text needed to render a diagnostic.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        position: Position,
        source: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize error with its location.

        Args:
            message: Error description
            position: Span that triggered the error
            source: Full source text (enables the rendered diagnostic)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.position = position
        self.source = source
        self.source_file = source_file
        super().__init__(self._format())

    @property
    def lineno(self) -> int:
        return self.position.start_line

    @property
    def col_offset(self) -> int:
        return self.position.start_col

    def diagnostic(self) -> str:
        """Return the rendered position report (``line:col`` without source)."""
        if self.source is None:
            return str(self.position)
        return render_diagnostic(self.position, self.source)

    def _format(self) -> str:
        location = f"{self.source_file}:" if self.source_file else ""
        return f"{location}{self.message} at {self.diagnostic()}"


class ScanError(TranspileError):
    """Lexical error raised by the scanner."""


class InvalidCharacter(ScanError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(
        self,
        character: str,
        position: Position,
        source: str | None = None,
        source_file: str | None = None,
    ) -> None:
        self.character = character
        super().__init__(f"Invalid character {character!r}", position, source, source_file)


class MalformedString(ScanError):
    kind = ErrorKind.MALFORMED_STRING


class MalformedHTML(ScanError):
    kind = ErrorKind.MALFORMED_HTML


class MalformedJS(ScanError):
    kind = ErrorKind.MALFORMED_JS


class MalformedCSS(ScanError):
    kind = ErrorKind.MALFORMED_CSS


class ParseError(TranspileError):
    """Syntax error raised by the parser."""


class UnexpectedToken(ParseError):
    kind = ErrorKind.UNEXPECTED_TOKEN


class ExpectedTag(ParseError):
    kind = ErrorKind.EXPECTED_TAG


class ExpectedElement(ParseError):
    kind = ErrorKind.EXPECTED_ELEMENT


class NestingTooDeep(ParseError):
    """Element nesting exceeded the interpreter recursion limit."""

    kind = ErrorKind.NESTING_TOO_DEEP


__all__ = [
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
