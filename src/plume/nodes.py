"""Render-tree node types for Plume.

The render tree is what a compiled template builds and what the renderer
consumes. Most of it is made of ordinary Python values; the classes here
cover the shapes Python has no built-in value for.

Node Shapes:
Node
├── ()                  Unit: renders nothing
├── str                 Text: rendered escaped
├── Raw                 Raw markup: rendered verbatim
├── int | float         Numbers: canonical str() form, unescaped
├── tuple | list        Fixed tuples and sequences: members in order
├── Iterator            Consumed once, members in order
├── None                Empty Optional: renders nothing
├── Ok | Err            Result: renders whichever side is present
├── SimpleElement       <tag attr="...">contents</tag> or <tag/>
├── Fragment            Renders its children only
└── Renderable          Any object with render_into(sink)

Child lists are reduced to left-nested pairs: ``()`` for no children, the
child itself for one, ``((c0, c1), c2)`` for three. Render order is always
document order.

Thread Safety:
All node classes are frozen (immutable).

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from plume.renderers.protocol import Renderable

# The empty node.
UNIT = ()


@dataclass(frozen=True, slots=True)
class Raw:
    """Markup written verbatim, without escaping.

    The caller is responsible for the safety of the wrapped string.

    """

    html: str

    def __str__(self) -> str:
        return self.html


def raw(html: str) -> Raw:
    """Wrap a string as unescaped markup.

    Example:
        >>> from plume import render
        >>> render(raw("<b>bold</b>"))
        '<b>bold</b>'
    """
    return Raw(html)


@dataclass(frozen=True, slots=True)
class SimpleElement:
    """A markup element with a literal tag name.

    Attribute values are escaped at render time; a value of None omits
    the attribute. A self-closing element renders as ``<tag/>`` and has
    no contents.

    """

    tag_name: str
    attributes: Mapping[str, Any] = field(default_factory=dict)
    contents: Any = UNIT
    self_closing: bool = False


@dataclass(frozen=True, slots=True)
class Fragment:
    """Renders its children and nothing else.

    Also available to templates by name, so ``<Fragment>`` and ``<>`` are
    equivalent.

    """

    children: Any = UNIT


@dataclass(frozen=True, slots=True)
class Ok:
    """Success side of a Result node."""

    value: Any


@dataclass(frozen=True, slots=True)
class Err:
    """Failure side of a Result node; renders its error value as fallback markup."""

    error: Any


# PEP 695 type alias for anything the renderer accepts
type Node = (
    tuple[Any, ...]
    | list[Any]
    | str
    | Raw
    | int
    | float
    | None
    | Ok
    | Err
    | SimpleElement
    | Fragment
    | Iterator[Any]
    | Renderable
)


__all__ = [
    "UNIT",
    "Err",
    "Fragment",
    "Node",
    "Ok",
    "Raw",
    "SimpleElement",
    "raw",
]
