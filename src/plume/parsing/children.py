"""Children parsing.

Children are a mixed, ordered run of nested elements, embedded expression
blocks and literal text, ending right before a closing tag. Nested
elements are handed back to the parser, which keeps open elements on a
stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plume.syntax import Child, Literal, OpenTag, RawBlock
from plume.tokens import TokenType

if TYPE_CHECKING:
    from plume.parsing.protocols import ParserHost


class ChildrenParsingMixin:
    """Mixin for the body of a non-self-closing element.

    Required Host Attributes/Methods: see ParserHost.

    """

    def _parse_children(self: ParserHost, open_tag: OpenTag, children: list[Child]) -> bool:
        """Parse children of open_tag into children, stopping before a nested element.

        Returns:
            True when a nested element opens next, False at the closing tag.

        Raises:
            TemplateSyntaxError: If input ends before a closing tag.
        """
        while not self._at_closing_tag():
            if self._at_end():
                raise self._error(
                    f"Unclosed element <{open_tag.display_name}>: "
                    "expected a closing tag before end of input"
                )
            token = self._current
            if token.type == TokenType.LT:
                return True
            if token.type == TokenType.EXPRESSION:
                self._advance()
                children.append(RawBlock(self._compile_expression(token)))
            else:
                children.append(self._parse_literal())
        return False

    def _parse_literal(self: ParserHost) -> Literal:
        """Join a run of TEXT tokens.

        Tokens that touched in the source are joined directly; any
        whitespace between two tokens becomes a single space.
        """
        first = self._advance()
        parts = [first.value]
        last = first
        while self._current.type == TokenType.TEXT:
            token = self._advance()
            if token.start != last.end:
                parts.append(" ")
            parts.append(token.value)
            last = token
        return Literal("".join(parts), first.location.span_to(last.location))
