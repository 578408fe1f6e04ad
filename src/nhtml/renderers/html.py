"""HTML emitter using the StringBuilder pattern.

Pretty-prints an element tree as HTML: one line per text, raw fragment,
opening tag and closing tag, indented by nesting depth.

Thread Safety:
All per-render state (output buffer and depth) is local to each render()
call. Multiple threads can safely share a single HtmlRenderer instance.
"""

from __future__ import annotations

from collections.abc import Iterable

from nhtml.config import get_transpile_config
from nhtml.nodes import Attribute, Element, RawHtml, Tag, Text
from nhtml.stringbuilder import StringBuilder


class HtmlRenderer:
    """Render an element tree to formatted HTML.

    Settings not passed explicitly are taken from the active TranspileConfig
    when the renderer is created.

    Usage:
        >>> from nhtml.nodes import Tag, Text
        >>> HtmlRenderer().render((Tag("p", children=(Text("Hello"),)),))
        '<p>\\n    Hello\\n</p>\\n'

    Thread Safety:
        render() keeps no state on the instance between calls.
    """

    __slots__ = ("_indent_width", "_void_elements")

    def __init__(
        self,
        *,
        indent_width: int | None = None,
        void_elements: Iterable[str] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            indent_width: Spaces per nesting level (config default: 4)
            void_elements: Tag names that never get a closing tag
                (config default: meta, link)
        """
        config = get_transpile_config()
        self._indent_width = config.indent_width if indent_width is None else indent_width
        self._void_elements = (
            config.void_elements if void_elements is None else frozenset(void_elements)
        )

    def render(self, elements: Iterable[Element]) -> str:
        """Render top-level elements to an HTML string."""
        sb = StringBuilder(self._indent_width)
        for element in elements:
            self._render_element(element, sb, 0)
        return sb.build()

    def _render_element(self, element: Element, sb: StringBuilder, depth: int) -> None:
        match element:
            case Tag():
                self._render_tag(element, sb, depth)
            case Text():
                sb.line(depth, element.value)
            case RawHtml():
                sb.line(depth, element.value)
            case _:
                raise TypeError(f"cannot render {type(element).__name__}")

    def _render_tag(self, tag: Tag, sb: StringBuilder, depth: int) -> None:
        sb.indent(depth).append("<").append(tag.name)
        for attribute in tag.attributes:
            self._render_attribute(attribute, sb)
        sb.append(">")

        is_void = tag.name in self._void_elements
        if tag.children or is_void:
            sb.newline()

        for child in tag.children:
            self._render_element(child, sb, depth + 1)

        if is_void:
            return

        if tag.children:
            sb.indent(depth)
        sb.append("</").append(tag.name).append(">").newline()

    def _render_attribute(self, attribute: Attribute, sb: StringBuilder) -> None:
        sb.append(" ").append(attribute.name)
        if attribute.value is not None:
            sb.append("=").append(attribute.value)


def emit(elements: Iterable[Element]) -> str:
    """Render ``elements`` with the active configuration."""
    return HtmlRenderer().render(elements)
