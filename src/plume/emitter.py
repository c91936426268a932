"""Element emitter: parse-time Elements to node descriptors.

Decides per element, from its classified kind, what to emit:

- SIMPLE: a SimpleElementNode with the tag name, attribute values keyed
  by the dash-joined attribute key, the self-closing flag and the
  children.
- CUSTOM: a CustomElementNode addressed by the element's dotted name,
  with one field per attribute and a ``children`` field only when the
  body is non-empty.
- FRAGMENT: a FragmentNode wrapping the children.

Field matching and type checking for custom elements are left to the
component being called.

"""

from __future__ import annotations

from plume.descriptors import (
    Children,
    Constant,
    CustomElementNode,
    Descriptor,
    Evaluate,
    FragmentNode,
    Lookup,
    SimpleElementNode,
)
from plume.syntax import (
    Attribute,
    Element,
    ElementKind,
    Literal,
    PunnedAttribute,
    RawBlock,
    ValuedAttribute,
)


class Emitter:
    """Emit descriptors for a parsed element tree.

    Usage:
        >>> from plume.parser import Parser
        >>> root = Parser("<p>{x}</p>").parse()
        >>> Emitter().emit(root).tag_name
        'p'

    Thread Safety:
        Emitter is stateless; one instance can be shared.

    """

    __slots__ = ()

    def emit(self, element: Element) -> Descriptor:
        """Emit the descriptor for one element and everything nested in it.

        Elements are finished children-first from an explicit stack; each
        stack entry collects the descriptors of its element's children.
        """
        stack: list[tuple[Element, list[Descriptor]]] = [(element, [])]
        while True:
            current, emitted = stack[-1]
            if len(emitted) < len(current.children):
                child = current.children[len(emitted)]
                if isinstance(child, Element):
                    stack.append((child, []))
                else:
                    emitted.append(self._emit_leaf(child))
                continue
            stack.pop()
            descriptor = self._finish(current, Children(tuple(emitted)))
            if not stack:
                return descriptor
            stack[-1][1].append(descriptor)

    def _finish(self, element: Element, children: Children) -> Descriptor:
        match element.kind:
            case ElementKind.SIMPLE:
                return self._emit_simple(element, children)
            case ElementKind.CUSTOM:
                return self._emit_custom(element, children)
            case ElementKind.FRAGMENT:
                return FragmentNode(children)

    def _emit_leaf(self, child: RawBlock | Literal) -> Descriptor:
        match child:
            case RawBlock(expression=expression):
                return Evaluate(expression)
            case Literal(text=text):
                return Constant(text)

    def _emit_simple(self, element: Element, children: Children) -> SimpleElementNode:
        return SimpleElementNode(
            tag_name=str(element.name),
            attributes=tuple(
                (str(attribute.key), self._emit_value(attribute))
                for attribute in element.attributes
            ),
            contents=children,
            self_closing=element.self_closing,
        )

    def _emit_custom(self, element: Element, children: Children) -> CustomElementNode:
        assert element.name is not None
        return CustomElementNode(
            path=element.name.segments,
            fields=tuple(
                (attribute.key.segments[0], self._emit_value(attribute))
                for attribute in element.attributes
            ),
            children=children if len(children) else None,
            location=element.location,
        )

    def _emit_value(self, attribute: Attribute) -> Descriptor:
        match attribute:
            case PunnedAttribute(key=key):
                return Lookup(key.segments[0], attribute.location)
            case ValuedAttribute(value=str() as text):
                return Constant(text)
            case ValuedAttribute(value=expression):
                return Evaluate(expression)
        raise TypeError(f"Unknown attribute type {type(attribute).__name__}")
