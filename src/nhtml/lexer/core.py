"""Pull-based scanner for the nhtml markup language.

The cursor is a single Position. Classifying a character either extends the
current span (the token grows) or advances past it (the span is committed and
collapses to the next character). Every emitted token's lexeme is exactly the
source text of its final span.

Whitespace, comments and escapes produce no token; they are skipped in a
loop so long runs of them never deepen the call stack.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from nhtml.errors import InvalidCharacter, ScanError
from nhtml.lexer.charsets import (
    COMMENT_START,
    ESCAPE,
    HTML_OPEN,
    NAME_CHARS,
    NAME_START,
    PUNCTUATION,
    QUOTES,
    WHITESPACE,
)
from nhtml.lexer.scanners import (
    BalancedScannerMixin,
    CommentScannerMixin,
    StringScannerMixin,
)
from nhtml.location import Position
from nhtml.tokens import EMBEDDED_KEYWORDS, Token, TokenType


class Scanner(
    StringScannerMixin,
    BalancedScannerMixin,
    CommentScannerMixin,
):
    """Character-class-driven tokenizer.

    Call ``scan()`` repeatedly; it returns the next Token, ``None`` once the
    source is exhausted, and raises a ScanError subclass on malformed input.

    Usage:
        >>> scanner = Scanner('p class="x";')
        >>> list(scanner)
        [Token(TEXT, 'p', 1:1), Token(TEXT, 'class', 1:3), Token(EQUAL, '=', 1:8),
         Token(STRING, '"x"', 1:9), Token(SEMICOLON, ';', 1:12)]

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_source_file",
        "_pos",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: DSL source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = Position()

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> Position:
        """Current cursor span (one past the end once the source is exhausted)."""
        return self._pos

    def __iter__(self) -> Iterator[Token]:
        while (token := self.scan()) is not None:
            yield token

    def scan(self) -> Token | None:
        """Scan the next token.

        Returns:
            The next Token, or None at end of input.

        Raises:
            ScanError: On an invalid character or an unterminated literal.
        """
        while True:
            char = self._current()
            if not char:
                return None

            if char in WHITESPACE:
                self._advance()
                continue

            if char in QUOTES:
                return self._scan_string(char)

            token_type = PUNCTUATION.get(char)
            if token_type is not None:
                return self._emit(token_type)

            if char == COMMENT_START:
                if self._match_next("*"):
                    self._skip_block_comment()
                    continue
                if self._match_next("/"):
                    self._skip_line_comment()
                    continue
                raise self._error(InvalidCharacter, char)

            if char == HTML_OPEN:
                return self._scan_html()

            if char == ESCAPE:
                # Drop the backslash and the one character it neutralizes
                if self._peek_next():
                    self._extend()
                self._advance()
                continue

            if char in NAME_START:
                return self._scan_name()

            raise self._error(InvalidCharacter, char)

    def _scan_name(self) -> Token:
        """Scan a tag/attribute name, or a ``js{``/``css{`` embedded block."""
        self._extend_while(NAME_CHARS.__contains__)
        embedded = EMBEDDED_KEYWORDS.get(self._pos.text(self._source))
        if embedded is not None and self._peek_next() == "{":
            return self._scan_embedded(embedded)
        return self._emit(TokenType.TEXT)

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _current(self) -> str:
        """Character at the end of the current span, or "" past the end."""
        idx = self._pos.end_idx - 1
        if idx >= self._source_len:
            return ""
        return self._source[idx]

    def _peek_next(self) -> str:
        """Character right after the current span, or "" at end of input."""
        idx = self._pos.end_idx
        if idx >= self._source_len:
            return ""
        return self._source[idx]

    def _extend(self) -> None:
        self._pos = self._pos.extend(self._source)

    def _advance(self) -> None:
        self._pos = self._pos.advance(self._source)

    def _extend_while(self, predicate: Callable[[str], bool]) -> None:
        """Extend the span while the next character satisfies ``predicate``."""
        while (char := self._peek_next()) and predicate(char):
            self._extend()

    def _match_next(self, expected: str) -> bool:
        """Extend over the next character if it is ``expected``."""
        if self._peek_next() == expected:
            self._extend()
            return True
        return False

    # =========================================================================
    # Token and error creation
    # =========================================================================

    def _emit(self, token_type: TokenType) -> Token:
        """Create a token from the current span and move the cursor past it."""
        token = Token(
            type=token_type,
            lexeme=self._pos.text(self._source),
            position=self._pos,
        )
        self._advance()
        return token

    def _error(self, error_type: type[ScanError], message: str) -> ScanError:
        """Build a scan error located at the current span."""
        return error_type(message, self._pos, self._source, self._source_file)
