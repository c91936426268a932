"""HTML renderer for Plume render trees.

Renders a node tree to a sink in one depth-first pass, in document order.
The traversal uses an explicit work stack, so deeply nested trees (long
child lists reduce to deeply left-nested pairs) never hit the interpreter
recursion limit.

Escaping:
Text (``str``) and attribute values are escaped; ``Raw`` and numbers are
written as-is. Nothing else is escaped.

Thread Safety:
HtmlRenderer holds no per-render state. Each render() call owns its work
stack and StringBuilder, so one instance can be shared across threads.

"""

from collections.abc import Iterator, Mapping
from typing import Any

from plume.errors import RenderError
from plume.nodes import Err, Fragment, Ok, Raw, SimpleElement
from plume.renderers.protocol import Renderable, Sink
from plume.stringbuilder import StringBuilder
from plume.utils.text import escape_html, escape_into


class HtmlRenderer:
    """Render node trees to HTML.

    Usage:
        >>> from plume.nodes import SimpleElement
        >>> renderer = HtmlRenderer()
        >>> renderer.render(SimpleElement("p", {"class": "lead"}, "Fish & Chips"))
        '<p class="lead">Fish &amp; Chips</p>'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.

    """

    __slots__ = ()

    def render(self, node: Any) -> str:
        """Render a node tree to an HTML string.

        Args:
            node: Root of the render tree

        Returns:
            HTML string
        """
        sb = StringBuilder()
        self.render_into(node, sb)
        return sb.build()

    def render_into(self, node: Any, sink: Sink) -> None:
        """Render a node tree to a sink.

        Members of tuples, lists and iterators render strictly left to
        right. A sink exception aborts the traversal and propagates.

        Args:
            node: Root of the render tree
            sink: Output target

        Raises:
            RenderError: If the tree contains a value that is not renderable
        """
        write = sink.write
        stack: list[Any] = [node]
        while stack:
            value = stack.pop()
            match value:
                case None:
                    pass
                case str():
                    escape_into(value, sink)
                case Raw(html=markup):
                    if markup:
                        write(markup)
                case bool():
                    raise RenderError(
                        f"bool value {value!r} is not renderable; "
                        "use a conditional expression to choose a node"
                    )
                case int() | float():
                    write(str(value))
                case tuple() | list():
                    stack.extend(reversed(value))
                case SimpleElement():
                    self._open_element(value, write)
                    if value.self_closing:
                        write("/>")
                    else:
                        write(">")
                        stack.append(Raw(f"</{value.tag_name}>"))
                        stack.append(value.contents)
                case Fragment(children=children):
                    stack.append(children)
                case Ok(value=inner) | Err(error=inner):
                    stack.append(inner)
                case Iterator():
                    stack.extend(reversed(list(value)))
                case type():
                    raise RenderError(
                        f"Class {value.__name__} is not renderable; render an instance of it"
                    )
                case Renderable():
                    value.render_into(sink)
                case _:
                    raise RenderError(f"Value of type {type(value).__name__} is not renderable")

    def _open_element(self, element: SimpleElement, write: Any) -> None:
        """Write ``<tag`` and the attributes, without the closing bracket."""
        write(f"<{element.tag_name}")
        self._write_attributes(element.attributes, write)

    def _write_attributes(self, attributes: Mapping[str, Any], write: Any) -> None:
        # Mapping order is the output order; None omits the attribute.
        for key, value in attributes.items():
            if value is None:
                continue
            write(f' {key}="')
            write(escape_html(str(value)))
            write('"')


_DEFAULT_RENDERER = HtmlRenderer()


def get_default_renderer() -> HtmlRenderer:
    """Return the shared HtmlRenderer instance."""
    return _DEFAULT_RENDERER
