"""Sub-scanners for the nhtml scanner.

Each scanner is a mixin that consumes one kind of multi-character
construct once the main dispatch has recognised its opening character.
"""

from __future__ import annotations

from nhtml.lexer.scanners.balanced import BalancedScannerMixin
from nhtml.lexer.scanners.comments import CommentScannerMixin
from nhtml.lexer.scanners.literal import StringScannerMixin

__all__ = [
    "BalancedScannerMixin",
    "CommentScannerMixin",
    "StringScannerMixin",
]
