"""String literal scanner mixin."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from nhtml.errors import MalformedString, ScanError
from nhtml.tokens import Token, TokenType

if TYPE_CHECKING:
    from nhtml.location import Position


class StringScannerMixin:
    """Mixin scanning ``"..."`` and ``'...'`` literals.

    A literal runs to the next occurrence of the delimiter it opened with and
    may span lines. Backslashes have no special meaning inside it.

    """

    # These will be set by the Scanner class
    _source: str
    _pos: Position

    def _peek_next(self) -> str:
        raise NotImplementedError

    def _extend(self) -> None:
        raise NotImplementedError

    def _extend_while(self, predicate: Callable[[str], bool]) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _error(self, error_type: type[ScanError], message: str) -> ScanError:
        raise NotImplementedError

    def _scan_string(self, quote: str) -> Token:
        """Scan a string literal whose opening ``quote`` is the current span.

        Returns:
            STRING token including both delimiters.

        Raises:
            MalformedString: Input ends before the closing delimiter; the
                error covers everything from the opening quote.
        """
        self._extend_while(lambda char: char != quote)
        if self._peek_next() != quote:
            raise self._error(MalformedString, "Malformed string")
        self._extend()
        return self._emit(TokenType.STRING)
