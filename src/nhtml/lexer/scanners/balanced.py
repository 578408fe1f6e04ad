"""Balanced-delimiter scanner mixin.

Covers the two constructs captured verbatim without tokenizing their
contents:

- ``<...>`` raw markup, balanced over nested ``<``/``>``
- ``js{...}`` and ``css{...}`` embedded blocks, balanced over ``{``/``}``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nhtml.errors import MalformedCSS, MalformedHTML, MalformedJS, ScanError
from nhtml.lexer.charsets import BLOCK_CLOSE, BLOCK_OPEN, HTML_CLOSE, HTML_OPEN
from nhtml.tokens import Token, TokenType

if TYPE_CHECKING:
    from nhtml.location import Position

_EMBEDDED_ERRORS: dict[TokenType, tuple[type[ScanError], str]] = {
    TokenType.JS: (MalformedJS, "Malformed JS"),
    TokenType.CSS: (MalformedCSS, "Malformed CSS"),
}


class BalancedScannerMixin:
    """Mixin scanning delimiter-balanced blocks."""

    # These will be set by the Scanner class
    _source: str
    _pos: Position

    def _peek_next(self) -> str:
        raise NotImplementedError

    def _extend(self) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _error(self, error_type: type[ScanError], message: str) -> ScanError:
        raise NotImplementedError

    def _extend_balanced(self, opener: str, closer: str) -> bool:
        """Extend the span through the ``closer`` matching the one already open.

        Nested ``opener`` characters raise the depth; a ``closer`` at depth 0
        ends the block.

        Returns:
            True if the closing delimiter was found and included in the span,
            False if the input ended first.
        """
        depth = 0
        while char := self._peek_next():
            if char == opener:
                depth += 1
            elif char == closer:
                if depth == 0:
                    break
                depth -= 1
            self._extend()

        if self._peek_next() != closer:
            return False
        self._extend()
        return True

    def _scan_html(self) -> Token:
        """Scan raw markup whose ``<`` is the current span.

        Raises:
            MalformedHTML: No balancing ``>`` before end of input.
        """
        if not self._extend_balanced(HTML_OPEN, HTML_CLOSE):
            raise self._error(MalformedHTML, "Malformed HTML")
        return self._emit(TokenType.HTML)

    def _scan_embedded(self, token_type: TokenType) -> Token:
        """Scan ``js{...}``/``css{...}`` once the keyword is the current span.

        The token covers the keyword, the braces and everything between them.

        Raises:
            MalformedJS, MalformedCSS: No matching ``}`` before end of input.
        """
        self._extend()  # opening brace
        if not self._extend_balanced(BLOCK_OPEN, BLOCK_CLOSE):
            error_type, message = _EMBEDDED_ERRORS[token_type]
            raise self._error(error_type, message)
        return self._emit(token_type)
