"""Scanner for the nhtml markup language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (dispatch + cursor navigation)
├── charsets.py          # Character classes and punctuation table
└── scanners/            # Multi-character constructs
    ├── literal.py       # "..." and '...' strings
    ├── balanced.py      # <...> raw markup, js{...} / css{...}
    └── comments.py      # /* ... */ and // ...

Usage:
    >>> from nhtml.lexer import Scanner
    >>> scanner = Scanner('p "Hi"')
    >>> scanner.scan()
    Token(TEXT, 'p', 1:1)
    >>> scanner.scan()
    Token(STRING, '"Hi"', 1:3)
    >>> scanner.scan() is None
    True

"""

from nhtml.lexer.core import Scanner

__all__ = ["Scanner"]
