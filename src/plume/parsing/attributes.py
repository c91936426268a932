"""Attribute parsing and validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plume.diagnostics import Diagnostic
from plume.syntax import (
    Attribute,
    AttributeKey,
    AttributeSet,
    ElementKind,
    Expression,
    PunnedAttribute,
    ValuedAttribute,
)
from plume.tokens import TokenType

if TYPE_CHECKING:
    from plume.parsing.protocols import ParserHost


class AttributeParsingMixin:
    """Mixin for ``key``, ``key={expr}`` and ``key="text"`` attributes.

    Duplicate keys and invalid dashed keys are recoverable: they produce a
    warning diagnostic and the offending attribute is dropped.

    Required Host Attributes/Methods: see ParserHost.

    """

    def _parse_attributes(self: ParserHost, kind: ElementKind) -> AttributeSet:
        """Parse attributes until a token that cannot start one.

        Args:
            kind: Classified element kind, used for post-parse validation
        """
        attributes = AttributeSet()
        while self._check(TokenType.IDENT):
            attribute = self._parse_attribute()
            previous = attributes.add(attribute)
            if previous is not None:
                self._diagnostics.append(
                    Diagnostic.warning(
                        f"There is a previous definition of the {attribute.key} attribute",
                        attribute.location,
                    )
                )

        for attribute in attributes:
            message = self._validate_attribute(attribute, kind)
            if message is not None:
                self._diagnostics.append(
                    Diagnostic.warning(f"Invalid attribute: {message}", attribute.location)
                )
                attributes.discard(attribute.key)
        return attributes

    def _parse_attribute(self: ParserHost) -> Attribute:
        """Parse one attribute starting at an IDENT token."""
        key_token = self._advance()
        segments = [key_token.value]
        last = key_token
        while self._match(TokenType.DASH) is not None:
            last = self._expect(TokenType.IDENT, "after '-' in attribute name")
            segments.append(last.value)
        key = AttributeKey(tuple(segments))

        if self._match(TokenType.EQUALS) is None:
            return PunnedAttribute(key=key, location=key_token.location.span_to(last.location))

        value_token = self._current
        if value_token.type == TokenType.EXPRESSION:
            self._advance()
            value: Expression | str = self._compile_expression(value_token)
        elif value_token.type == TokenType.STRING:
            self._advance()
            value = value_token.value
        else:
            raise self._error(f"Expected '{{' or a quoted string after '{key}='")
        return ValuedAttribute(
            key=key,
            location=key_token.location.span_to(value_token.location),
            value=value,
        )

    def _validate_attribute(self, attribute: Attribute, kind: ElementKind) -> str | None:
        """Return a problem description, or None when the attribute is valid."""
        if not attribute.key.is_dashed:
            return None
        if kind is ElementKind.CUSTOM:
            alternative = "_".join(attribute.key.segments)
            return (
                "Can't use dash-delimited names on custom elements; "
                f"use underscore_name instead ({alternative})"
            )
        if isinstance(attribute, PunnedAttribute):
            return f"Can't use punning with dash-delimited names ({attribute.key})"
        return None
