"""nhtml renderers.

Renderers convert element trees into output text.

Available Renderers:
- HtmlRenderer: Pretty-prints the tree as indented HTML

Thread Safety:
Renderers use a StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from nhtml.renderers.html import HtmlRenderer, emit

__all__ = ["HtmlRenderer", "emit"]
