"""Typed element tree for nhtml.

All nodes are frozen dataclasses with slots, dispatched with ``match``:

Element
├── Tag       named element with attributes and children
├── Text      string literal content, quotes stripped
└── RawHtml   verbatim passthrough

Each node optionally records the Position of the token it was built from.
Locations are excluded from equality, so a hand-built tree compares equal
to the same tree produced by the parser.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from nhtml.location import Position


@dataclass(frozen=True, slots=True)
class Attribute:
    """A tag attribute.

    ``value`` keeps the quote characters it was written with
    (``'"UTF-8"'``); ``None`` marks a boolean attribute.

    """

    name: str
    value: str | None = None
    location: Position | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Tag:
    """A named element.

    DSL: ``div class="x" { ... }``
    HTML: ``<div class="x">...</div>``

    """

    name: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Element, ...] = ()
    location: Position | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text content.

    DSL: ``"Hello"`` or ``'Hello'``
    HTML: ``Hello``

    """

    value: str
    location: Position | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class RawHtml:
    """Markup emitted unmodified.

    DSL: ``<!DOCTYPE html>``
    HTML: ``<!DOCTYPE html>``

    """

    value: str
    location: Position | None = field(default=None, compare=False, repr=False)


Element: TypeAlias = Tag | Text | RawHtml


def max_depth(elements: tuple[Element, ...]) -> int:
    """Deepest level of Tag body nesting in ``elements``.

    Top-level elements sit at depth 0; each Tag body adds one level.
    """
    deepest = 0
    for element in elements:
        if isinstance(element, Tag) and element.children:
            deepest = max(deepest, 1 + max_depth(element.children))
    return deepest
