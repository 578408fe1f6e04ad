"""Parser building blocks for nhtml.

Provides:
- TokenNavigationMixin: single-slot lookahead over the scanner
"""

from nhtml.parsing.token_nav import TokenNavigationMixin

__all__ = ["TokenNavigationMixin"]
