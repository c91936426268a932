"""Parse-time structures for Plume templates.

These are the transient shapes built by the Parser during a single parse
pass: tag names, attribute keys and sets, open/closing tags, children and
elements. The Emitter turns an Element into node descriptors; nothing
here is rendered directly.

Structure Hierarchy:
Element
├── tag: OpenTag
│   ├── name: TagName | None   (None is the Fragment sentinel)
│   └── attributes: AttributeSet
│       ├── PunnedAttribute
│       └── ValuedAttribute
└── children: tuple[Child, ...]
    ├── Element
    ├── RawBlock
    └── Literal

Thread Safety:
Structures are owned by the single parse call that builds them.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from types import CodeType

from plume.location import SourceLocation


class ElementKind(Enum):
    """How an element is emitted.

    - SIMPLE: a markup tag such as ``div`` with string attributes
    - CUSTOM: a host-defined component built from attributes-as-fields
    - FRAGMENT: the nameless ``<>`` wrapper, rendering only its children

    """

    SIMPLE = auto()
    CUSTOM = auto()
    FRAGMENT = auto()


@dataclass(frozen=True, slots=True)
class TagName:
    """A dotted element name such as ``div`` or ``ui.Card``.

    Two names are the same closing-tag match when their textual forms
    are equal.
    """

    segments: tuple[str, ...]
    location: SourceLocation = field(compare=False)

    def __str__(self) -> str:
        return ".".join(self.segments)

    @property
    def local(self) -> str:
        """The last (non-namespaced) segment."""
        return self.segments[-1]


def classify_tag_name(name: TagName | None) -> ElementKind:
    """Classify an element by its name.

    The local segment names a custom element when its first character is
    already uppercase (``first.upper() == first``). A missing name is the
    Fragment sentinel.

    Examples:
        >>> classify_tag_name(None)
        <ElementKind.FRAGMENT: 3>
    """
    if name is None:
        return ElementKind.FRAGMENT
    local = name.local
    if not local:
        return ElementKind.SIMPLE
    first = local[0]
    return ElementKind.CUSTOM if first.upper() == first else ElementKind.SIMPLE


@dataclass(frozen=True, slots=True)
class AttributeKey:
    """An attribute key made of one or more dash-delimited segments.

    ``data-test-id`` is ``AttributeKey(("data", "test", "id"))``.
    Keys compare structurally by their segments.
    """

    segments: tuple[str, ...]

    def __str__(self) -> str:
        return "-".join(self.segments)

    @property
    def is_dashed(self) -> bool:
        return len(self.segments) > 1


@dataclass(frozen=True, slots=True)
class Expression:
    """An embedded ``{ ... }`` Python expression, compiled once at parse time."""

    source: str
    code: CodeType = field(repr=False, compare=False)
    location: SourceLocation = field(compare=False)


@dataclass(frozen=True, slots=True, eq=False)
class Attribute:
    """Base attribute.

    Equality and hashing use the key only, never the value, so an
    attribute set can detect duplicate keys.
    """

    key: AttributeKey
    location: SourceLocation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


@dataclass(frozen=True, slots=True, eq=False)
class PunnedAttribute(Attribute):
    """``key`` alone: the value is the same-named variable in scope."""


@dataclass(frozen=True, slots=True, eq=False)
class ValuedAttribute(Attribute):
    """``key={expr}`` or ``key="text"``."""

    value: Expression | str


class AttributeSet:
    """Attributes keyed by AttributeKey, at most one per key.

    Adding a key that is already present keeps the existing attribute and
    returns it, so the caller can report the duplicate.
    """

    __slots__ = ("_attributes",)

    def __init__(self) -> None:
        self._attributes: dict[AttributeKey, Attribute] = {}

    def add(self, attribute: Attribute) -> Attribute | None:
        """Insert an attribute.

        Returns:
            The previous attribute with the same key (the new one is dropped),
            or None if the attribute was inserted.
        """
        previous = self._attributes.get(attribute.key)
        if previous is not None:
            return previous
        self._attributes[attribute.key] = attribute
        return None

    def discard(self, key: AttributeKey) -> None:
        self._attributes.pop(key, None)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(list(self._attributes.values()))

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeSet):
            return NotImplemented
        return self._attributes.keys() == other._attributes.keys()

    def __repr__(self) -> str:
        keys = ", ".join(str(key) for key in self._attributes)
        return f"AttributeSet({keys})"


@dataclass(frozen=True, slots=True)
class OpenTag:
    """``<name attr* >`` or ``<name attr* />``. A None name is a Fragment."""

    name: TagName | None
    attributes: AttributeSet
    self_closing: bool
    location: SourceLocation

    @property
    def display_name(self) -> str:
        return str(self.name) if self.name is not None else ""


@dataclass(frozen=True, slots=True)
class ClosingTag:
    """``</name>``, or ``</>`` closing a Fragment."""

    name: TagName | None
    location: SourceLocation

    @property
    def display_name(self) -> str:
        return str(self.name) if self.name is not None else ""


@dataclass(frozen=True, slots=True)
class RawBlock:
    """An embedded expression child, rendered through the render algebra."""

    expression: Expression


@dataclass(frozen=True, slots=True)
class Literal:
    """A whitespace-collapsed run of literal text. Escaped at render time."""

    text: str
    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Element:
    """A parsed element.

    The kind is derived from the tag name once, when the Element is
    created, and never changes afterwards.
    """

    tag: OpenTag
    children: tuple[Child, ...] = ()
    kind: ElementKind = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", classify_tag_name(self.tag.name))

    @property
    def name(self) -> TagName | None:
        return self.tag.name

    @property
    def attributes(self) -> AttributeSet:
        return self.tag.attributes

    @property
    def self_closing(self) -> bool:
        return self.tag.self_closing

    @property
    def location(self) -> SourceLocation:
        return self.tag.location


type Child = Element | RawBlock | Literal


__all__ = [
    "Attribute",
    "AttributeKey",
    "AttributeSet",
    "Child",
    "ClosingTag",
    "Element",
    "ElementKind",
    "Expression",
    "Literal",
    "OpenTag",
    "PunnedAttribute",
    "RawBlock",
    "TagName",
    "ValuedAttribute",
    "classify_tag_name",
]
