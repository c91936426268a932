"""Open and closing tag parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plume.diagnostics import Diagnostic
from plume.syntax import (
    AttributeSet,
    ClosingTag,
    ElementKind,
    OpenTag,
    TagName,
    classify_tag_name,
)
from plume.tokens import TokenType

if TYPE_CHECKING:
    from plume.parsing.protocols import ParserHost


class TagParsingMixin:
    """Mixin for ``<name attr* [/]>`` and ``</name>``.

    Required Host Attributes/Methods: see ParserHost.

    """

    def _parse_tag_name(self: ParserHost) -> TagName | None:
        """Parse ``ident(.ident)*``; None when no name is present (Fragment).

        An identifier followed by ``=`` is an attribute, not a name:
        ``<key="v">`` is a Fragment carrying an attribute.
        """
        if self._check(TokenType.IDENT) and self._peek().type == TokenType.EQUALS:
            return None
        first = self._match(TokenType.IDENT)
        if first is None:
            return None
        segments = [first.value]
        last = first
        while self._match(TokenType.DOT) is not None:
            last = self._expect(TokenType.IDENT, "after '.' in element name")
            segments.append(last.value)
        return TagName(tuple(segments), first.location.span_to(last.location))

    def _parse_open_tag(self: ParserHost) -> OpenTag:
        """Parse an opening tag.

        The element kind is decided from the name before attributes are
        parsed, because attribute validation depends on it.
        """
        lt = self._expect(TokenType.LT, "to open a tag")
        name = self._parse_tag_name()
        kind = classify_tag_name(name)
        attributes = self._parse_attributes(kind)

        if kind is ElementKind.FRAGMENT and len(attributes):
            for attribute in attributes:
                self._diagnostics.append(
                    Diagnostic.warning(
                        f"Fragments cannot have attributes; {attribute.key} is ignored",
                        attribute.location,
                    )
                )
            attributes = AttributeSet()

        self_closing = self._match(TokenType.SLASH) is not None
        gt = self._expect(TokenType.GT, "to end the opening tag")
        return OpenTag(
            name=name,
            attributes=attributes,
            self_closing=self_closing,
            location=lt.location.span_to(gt.location),
        )

    def _parse_closing_tag(self: ParserHost) -> ClosingTag:
        """Parse ``</name>``; closing tags take no attributes."""
        lt = self._expect(TokenType.LT, "to open a closing tag")
        self._expect(TokenType.SLASH, "in closing tag")
        name = self._parse_tag_name()
        gt = self._expect(TokenType.GT, "to end the closing tag")
        return ClosingTag(name=name, location=lt.location.span_to(gt.location))

    def _validate_closing_tag(
        self: ParserHost, open_tag: OpenTag, closing_tag: ClosingTag
    ) -> None:
        """Compare names by their textual form; report a mismatch and continue."""
        if open_tag.display_name != closing_tag.display_name:
            self._diagnostics.append(
                Diagnostic.warning(
                    f"Expected closing tag for <{open_tag.display_name}>",
                    closing_tag.location,
                )
            )
