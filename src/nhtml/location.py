"""Source spans for cursor tracking and error diagnostics.

Provides the Position dataclass used by the scanner as its cursor and
attached to every Token and Element, plus the renderer that turns a
Position into a human-readable report for error messages.

All line and column numbers are 1-indexed; ``idx`` is a 0-based index
into the source's code points.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.
Cursor movement returns new Position values.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A span over the source text.

    The end coordinates point at the last character covered by the span,
    so a single-character span has ``(start_line, start_col) ==
    (end_line, end_col)``.

    Attributes:
        idx: Index of the first covered character (0-based)
        length: Number of covered characters
        start_line: Line of the first character
        start_col: Column of the first character
        end_line: Line of the last character
        end_col: Column of the last character

    Examples:
        >>> src = "p\\n;"
        >>> pos = Position()
        >>> pos.extend(src).extend(src)
        Position(idx=0, length=3, start_line=1, start_col=1, end_line=2, end_col=1)

    """

    idx: int = 0
    length: int = 1
    start_line: int = 1
    start_col: int = 1
    end_line: int = 1
    end_col: int = 1

    def __str__(self) -> str:
        return f"{self.start_line}:{self.start_col}"

    @property
    def end_idx(self) -> int:
        """Index one past the last covered character."""
        return self.idx + self.length

    @property
    def is_single_char(self) -> bool:
        return self.start_line == self.end_line and self.start_col == self.end_col

    def text(self, source: str) -> str:
        """Return the exact source substring covered by this span."""
        return source[self.idx : self.end_idx]

    def extend(self, source: str) -> Position:
        """Grow the span rightward by one character.

        Line and column roll forward past the character currently at the
        end of the span; a newline moves the end to column 1 of the next line.
        """
        last = self.end_idx - 1
        if last < len(source) and source[last] == "\n":
            end_line, end_col = self.end_line + 1, 1
        else:
            end_line, end_col = self.end_line, self.end_col + 1
        return Position(
            idx=self.idx,
            length=self.length + 1,
            start_line=self.start_line,
            start_col=self.start_col,
            end_line=end_line,
            end_col=end_col,
        )

    def advance(self, source: str) -> Position:
        """Commit the span and collapse to the character right after it."""
        grown = self.extend(source)
        return Position(
            idx=self.end_idx,
            length=1,
            start_line=grown.end_line,
            start_col=grown.end_col,
            end_line=grown.end_line,
            end_col=grown.end_col,
        )

    def render(self, source: str) -> str:
        """Render this span against ``source`` for an error report."""
        return render_diagnostic(self, source)


def _source_lines(source: str, first: int, last: int) -> list[str]:
    lines = source.split("\n")
    out = []
    for lineno in range(first, last + 1):
        line = lines[lineno - 1] if 0 < lineno <= len(lines) else ""
        out.append(line.rstrip("\r"))
    return out


def render_diagnostic(position: Position, source: str) -> str:
    """Format a position as a location header, pointer and quoted source.

    Example output for the ``@`` in ``p @``::

        1:3
          |   v -- here
        1 | p @
          |

    Args:
        position: Span to report
        source: Full source text the span refers to

    Returns:
        Multi-line report without a trailing newline
    """
    header = str(position)
    if not position.is_single_char:
        header += f" to {position.end_line}:{position.end_col}"

    width = len(str(position.end_line))
    gutter = " " * width

    if position.start_line == position.end_line:
        arrows = "v" * (position.end_col - position.start_col + 1)
    else:
        arrows = "v"

    parts = [header, f"{gutter} |{' ' * position.start_col}{arrows} -- here"]
    lines = _source_lines(source, position.start_line, position.end_line)
    for lineno, line in enumerate(lines, start=position.start_line):
        parts.append(f"{lineno:>{width}} | {line}")
    parts.append(f"{gutter} |")
    return "\n".join(parts)
