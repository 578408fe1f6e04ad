"""Indentation-aware StringBuilder for HTML output.

Appends to a list and joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Indent prefixes are computed once per depth
and cached.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with depth-based indentation.

    Usage:
        >>> sb = StringBuilder(indent_width=4)
        >>> _ = sb.indent(1).append("<p>").newline()
        >>> sb.build()
        '    <p>\\n'

    """

    __slots__ = ("_parts", "_unit", "_prefixes")

    def __init__(self, indent_width: int = 4) -> None:
        self._parts: list[str] = []
        self._unit = " " * indent_width
        self._prefixes: list[str] = [""]

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def indent(self, depth: int) -> StringBuilder:
        """Append the indent prefix for ``depth`` nesting levels."""
        prefixes = self._prefixes
        while len(prefixes) <= depth:
            prefixes.append(prefixes[-1] + self._unit)
        return self.append(prefixes[depth])

    def newline(self) -> StringBuilder:
        self._parts.append("\n")
        return self

    def line(self, depth: int, s: str) -> StringBuilder:
        """Append an indented, newline-terminated line."""
        return self.indent(depth).append(s).newline()

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
