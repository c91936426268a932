"""Node descriptors: the compiled, reusable form of a template.

The Emitter turns a parsed Element into a tree of descriptors. A
descriptor tree is immutable and holds no scope values; calling
``build(namespace)`` evaluates it against one scope and returns a fresh
render tree (see plume.nodes). One compiled template can therefore be
built many times, from many threads.

Descriptor Hierarchy:
Descriptor
├── Constant             literal text, quoted attribute values
├── Evaluate             { expression }
├── Lookup               punned attribute (name looked up in scope)
├── Children             ordered children, reduced to left-nested pairs
├── SimpleElementNode    -> SimpleElement
├── CustomElementNode    -> value built by calling the named component
└── FragmentNode         -> Fragment

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from plume.errors import TemplateEvaluationError, TemplateNameError
from plume.location import SourceLocation
from plume.nodes import UNIT, Fragment, SimpleElement
from plume.syntax import Expression


@dataclass(frozen=True, slots=True)
class Constant:
    """A value known at compile time."""

    value: Any

    def build(self, namespace: dict[str, Any]) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class Evaluate:
    """An embedded expression, evaluated against the scope."""

    expression: Expression

    def build(self, namespace: dict[str, Any]) -> Any:
        try:
            return eval(self.expression.code, namespace)
        except Exception as exc:
            raise TemplateEvaluationError(
                f"Error evaluating {{{self.expression.source}}}: {type(exc).__name__}: {exc}",
                self.expression.location,
            ) from exc


@dataclass(frozen=True, slots=True)
class Lookup:
    """A punned attribute value: the scope entry with the key's name.

    Looked up directly, not evaluated, so keys that are Python keywords
    (``class``, ``for``) can be punned from a scope mapping.
    """

    name: str
    location: SourceLocation

    def build(self, namespace: dict[str, Any]) -> Any:
        try:
            return namespace[self.name]
        except KeyError:
            raise TemplateNameError(self.name, self.location) from None


@dataclass(frozen=True, slots=True)
class Children:
    """Ordered children.

    Builds to ``()`` for no children, the child itself for one, and
    left-nested pairs ``((c0, c1), c2)`` for more.
    """

    items: tuple[Descriptor, ...] = ()

    def build(self, namespace: dict[str, Any]) -> Any:
        return build_tree(self, namespace)

    def _open(self, namespace: dict[str, Any]) -> None:
        return None

    def _close(self, state: None, built: list[Any]) -> Any:
        return _pair_up(built)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class SimpleElementNode:
    """Descriptor for a markup element such as ``div``."""

    tag_name: str
    attributes: tuple[tuple[str, Descriptor], ...]
    contents: Children
    self_closing: bool

    def build(self, namespace: dict[str, Any]) -> SimpleElement:
        return build_tree(self, namespace)

    @property
    def items(self) -> tuple[Descriptor, ...]:
        return self.contents.items

    def _open(self, namespace: dict[str, Any]) -> dict[str, Any]:
        return {name: value.build(namespace) for name, value in self.attributes}

    def _close(self, attributes: dict[str, Any], built: list[Any]) -> SimpleElement:
        return SimpleElement(
            tag_name=self.tag_name,
            attributes=attributes,
            contents=_pair_up(built),
            self_closing=self.self_closing,
        )


@dataclass(frozen=True, slots=True)
class CustomElementNode:
    """Descriptor for a component reference such as ``ui.Card``.

    Attributes become keyword fields; a non-empty body adds a
    ``children`` field. With no fields at all the element is a bare
    reference: a class is instantiated without arguments, any other
    object is used as is.
    """

    path: tuple[str, ...]
    fields: tuple[tuple[str, Descriptor], ...]
    children: Children | None
    location: SourceLocation

    def build(self, namespace: dict[str, Any]) -> Any:
        return build_tree(self, namespace)

    @property
    def items(self) -> tuple[Descriptor, ...]:
        return self.children.items if self.children is not None else ()

    def _open(self, namespace: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        target = self._resolve(namespace)
        return target, {name: value.build(namespace) for name, value in self.fields}

    def _close(self, state: tuple[Any, dict[str, Any]], built: list[Any]) -> Any:
        target, kwargs = state
        if self.children is not None:
            kwargs["children"] = _pair_up(built)

        if not kwargs and not isinstance(target, type):
            return target
        name = ".".join(self.path)
        if not callable(target):
            raise TemplateEvaluationError(
                f"<{name}> refers to a {type(target).__name__}, which cannot take fields",
                self.location,
            )
        try:
            return target(**kwargs)
        except Exception as exc:
            raise TemplateEvaluationError(
                f"Error constructing <{name}>: {type(exc).__name__}: {exc}",
                self.location,
            ) from exc

    def _resolve(self, namespace: Mapping[str, Any]) -> Any:
        head, *rest = self.path
        try:
            target = namespace[head]
        except KeyError:
            raise TemplateNameError(head, self.location) from None
        for segment in rest:
            try:
                target = getattr(target, segment)
            except AttributeError:
                raise TemplateNameError(".".join(self.path), self.location) from None
        return target


@dataclass(frozen=True, slots=True)
class FragmentNode:
    """Descriptor for ``<>...</>``; builds a Fragment directly."""

    children: Children

    def build(self, namespace: dict[str, Any]) -> Fragment:
        return build_tree(self, namespace)

    @property
    def items(self) -> tuple[Descriptor, ...]:
        return self.children.items

    def _open(self, namespace: dict[str, Any]) -> None:
        return None

    def _close(self, state: None, built: list[Any]) -> Fragment:
        return Fragment(_pair_up(built))


def _pair_up(built: list[Any]) -> Any:
    if not built:
        return UNIT
    result = built[0]
    for value in built[1:]:
        result = (result, value)
    return result


type _Nested = Children | SimpleElementNode | CustomElementNode | FragmentNode

_NESTED = (Children, SimpleElementNode, CustomElementNode, FragmentNode)


def build_tree(root: _Nested, namespace: dict[str, Any]) -> Any:
    """Build a descriptor tree against namespace.

    Nested descriptors wait on an explicit stack while their children are
    built, so deep templates do not hit the recursion limit. A node's own
    attribute or field values are evaluated before its children.
    """
    stack: list[tuple[_Nested, Any, list[Any]]] = [(root, root._open(namespace), [])]
    while True:
        node, state, built = stack[-1]
        items = node.items
        if len(built) < len(items):
            item = items[len(built)]
            if isinstance(item, _NESTED):
                stack.append((item, item._open(namespace), []))
            else:
                built.append(item.build(namespace))
            continue
        stack.pop()
        value = node._close(state, built)
        if not stack:
            return value
        stack[-1][2].append(value)


# PEP 695 type alias for descriptor nodes
type Descriptor = (
    Constant | Evaluate | Lookup | Children | SimpleElementNode | CustomElementNode | FragmentNode
)
