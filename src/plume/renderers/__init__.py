"""Plume renderers.

Renderers write render-tree nodes to a sink.

Available Renderers:
- HtmlRenderer: Renders nodes to HTML, escaping text and attribute values

Thread Safety:
Renderers hold no per-render state; each render owns its work stack
and sink. Safe for concurrent use from multiple threads.

"""

from plume.renderers.html import HtmlRenderer
from plume.renderers.protocol import Renderable, Sink

__all__ = ["HtmlRenderer", "Renderable", "Sink"]
