"""Renderable and Sink protocols.

A sink is anything with ``write(str)``: a StringBuilder, an io.StringIO,
an open text file. A Renderable is any object that knows how to write
itself to a sink; custom element types implement it (directly, or via
the @component decorator).

Example:
    from plume import SimpleElement, render_into
    from plume.renderers.protocol import Sink

    class Badge:
        def __init__(self, label: str) -> None:
            self.label = label

        def render_into(self, sink: Sink) -> None:
            render_into(SimpleElement("span", {"class": "badge"}, self.label), sink)

"""

from typing import Protocol, runtime_checkable


class Sink(Protocol):
    """Write target for rendering."""

    def write(self, s: str, /) -> object:
        """Write a chunk of output. Exceptions abort the render."""
        ...


@runtime_checkable
class Renderable(Protocol):
    """Protocol for host-defined renderable values.

    Implementations write their markup to the sink, typically by building
    a node tree and passing it to ``plume.render_into``.

    """

    def render_into(self, sink: Sink) -> None:
        """Render this value to the sink.

        Args:
            sink: Output target

        """
        ...
