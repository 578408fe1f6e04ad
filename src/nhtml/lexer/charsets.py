"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from nhtml.lexer.charsets import NAME_START

    if char in NAME_START:  # O(1) lookup
        ...
"""

import string

from nhtml.tokens import TokenType

# Skipped between tokens
WHITESPACE: frozenset[str] = frozenset("\n\r\t ")

# String literal delimiters; a literal ends at the same delimiter it opened with
QUOTES: frozenset[str] = frozenset("\"'")

# First character of a tag or attribute name
NAME_START: frozenset[str] = frozenset(string.ascii_letters + "_-")

# Remaining characters of a tag or attribute name
NAME_CHARS: frozenset[str] = NAME_START | frozenset(string.digits)

PUNCTUATION: dict[str, TokenType] = {
    "=": TokenType.EQUAL,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ";": TokenType.SEMICOLON,
}

ESCAPE = "\\"
COMMENT_START = "/"
HTML_OPEN = "<"
HTML_CLOSE = ">"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"
