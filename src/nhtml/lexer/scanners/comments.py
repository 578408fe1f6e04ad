"""Comment scanner mixin.

Comments are discarded: neither form ever produces a token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nhtml.location import Position


class CommentScannerMixin:
    """Mixin skipping ``/* ... */`` and ``// ...`` comments."""

    # These will be set by the Scanner class
    _source: str
    _pos: Position

    def _peek_next(self) -> str:
        raise NotImplementedError

    def _extend(self) -> None:
        raise NotImplementedError

    def _advance(self) -> None:
        raise NotImplementedError

    def _skip_block_comment(self) -> None:
        """Skip a block comment whose ``/*`` is the current span.

        An unterminated comment swallows the rest of the input.
        """
        while char := self._peek_next():
            self._extend()
            if char == "*" and self._peek_next() == "/":
                self._extend()
                break
        self._advance()

    def _skip_line_comment(self) -> None:
        """Skip a line comment whose ``//`` is the current span, newline included."""
        while char := self._peek_next():
            self._extend()
            if char == "\n":
                break
        self._advance()
