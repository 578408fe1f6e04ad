"""Token navigation for the nhtml parser.

Provides a mixin that pulls tokens from the scanner on demand through a
single-slot lookahead buffer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nhtml.errors import ParseError, UnexpectedToken
from nhtml.tokens import Token, TokenType

if TYPE_CHECKING:
    from nhtml.lexer import Scanner
    from nhtml.location import Position


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _scanner: Scanner
        - _lookahead: Token | None (the buffered token, if any)
        - _exhausted: bool (scanner has returned None)
        - _source: str
        - _source_file: str | None

    """

    _scanner: Scanner
    _lookahead: Token | None
    _exhausted: bool
    _source: str
    _source_file: str | None

    def _peek(self) -> Token | None:
        """Return the next token without consuming it (None at end of input)."""
        if self._lookahead is None and not self._exhausted:
            self._lookahead = self._scanner.scan()
            if self._lookahead is None:
                self._exhausted = True
        return self._lookahead

    def _take(self) -> Token | None:
        """Consume and return the next token (None at end of input)."""
        token = self._peek()
        self._lookahead = None
        return token

    def _is_next(self, token_type: TokenType) -> bool:
        token = self._peek()
        return token is not None and token.type == token_type

    def _expect(self, token_type: TokenType, message: str) -> Token:
        """Consume a token of ``token_type`` or raise UnexpectedToken."""
        if not self._is_next(token_type):
            raise self._error(UnexpectedToken, message)
        token = self._take()
        assert token is not None
        return token

    def _error_position(self) -> Position:
        """Position of the next token, or the scanner cursor at end of input."""
        token = self._peek()
        if token is not None:
            return token.position
        return self._scanner.position

    def _error(self, error_type: type[ParseError], message: str) -> ParseError:
        """Build a parse error located at the next token."""
        return error_type(message, self._error_position(), self._source, self._source_file)
