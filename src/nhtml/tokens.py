"""Token and TokenType definitions for the nhtml scanner.

The scanner produces Token objects on demand; the parser consumes each one
immediately. A token's lexeme is always the exact source substring of its
position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from nhtml.location import Position


class TokenType(Enum):
    """Token types produced by the scanner."""

    TEXT = auto()  # tag or attribute name
    STRING = auto()  # "..." or '...'
    EQUAL = auto()  # =
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    SEMICOLON = auto()  # ;
    HTML = auto()  # <...> balanced raw passthrough

    # Embedded blocks, captured opaquely
    JS = auto()  # js{...}
    CSS = auto()  # css{...}


# Keyword that opens each embedded block type
EMBEDDED_KEYWORDS: dict[str, TokenType] = {
    "js": TokenType.JS,
    "css": TokenType.CSS,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type
        lexeme: Verbatim source text of the token
        position: Span the token covers

    """

    type: TokenType
    lexeme: str
    position: Position

    def __repr__(self) -> str:
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.position})"

    @property
    def embedded_body(self) -> str:
        """Inner content of a JS or CSS token, without ``js{``/``css{`` and ``}``."""
        if self.type not in (TokenType.JS, TokenType.CSS):
            raise ValueError(f"{self.type.name} token has no embedded body")
        opener = self.lexeme.index("{")
        return self.lexeme[opener + 1 : -1]
