"""Parser producing parse-time Element structures.

Consumes the token stream from Lexer and builds an Element tree.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal and lookahead
- `ExpressionParsingMixin`: ``{ ... }`` blocks compiled as Python expressions
- `TagParsingMixin`: Opening/closing tags and closing-tag validation
- `AttributeParsingMixin`: Attribute keys, values, duplicates, validation
- `ChildrenParsingMixin`: Element bodies up to the next nested element

Error Handling:
Grammar violations raise TemplateSyntaxError immediately. Recoverable
problems are appended to ``diagnostics`` and parsing continues, so one
parse reports every such problem in the source.

"""

from __future__ import annotations

from plume.diagnostics import Diagnostic
from plume.lexer import Lexer
from plume.parsing import (
    AttributeParsingMixin,
    ChildrenParsingMixin,
    ExpressionParsingMixin,
    TagParsingMixin,
    TokenNavigationMixin,
)
from plume.syntax import (
    Child,
    Element,
    ElementKind,
    OpenTag,
    ValuedAttribute,
    classify_tag_name,
)
from plume.tokens import Token, TokenType


class Parser(
    TokenNavigationMixin,
    ExpressionParsingMixin,
    TagParsingMixin,
    AttributeParsingMixin,
    ChildrenParsingMixin,
):
    """Parser for template source.

    A template is exactly one root element, optionally surrounded by
    whitespace.

    Usage:
        >>> parser = Parser("<ul><li>{item}</li></ul>")
        >>> root = parser.parse()
        >>> str(root.name)
        'ul'
        >>> parser.diagnostics
        ()

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Independent sources can be parsed on independent
        threads.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_tokens",
        "_pos",
        "_current",
        "_diagnostics",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Template source text
            source_file: Optional template file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._tokens: list[Token] = []
        self._pos = 0
        self._current: Token
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Recoverable problems found by the last parse()."""
        return tuple(self._diagnostics)

    def parse(self) -> Element:
        """Parse source into the root Element.

        Returns:
            The root Element

        Raises:
            TemplateSyntaxError: On any unrecoverable grammar violation
        """
        self._tokens = list(Lexer(self._source, self._source_file).tokenize())
        self._pos = 0
        self._current = self._tokens[0]
        self._diagnostics = []

        if not self._check(TokenType.LT):
            raise self._error("Expected a template element starting with '<'")
        root = self._parse_element()
        if not self._at_end():
            raise self._error("Unexpected content after the root element")
        return root

    def _parse_element(self) -> Element:
        """Parse an element and everything nested inside it.

        Open elements wait on an explicit stack while their children are
        parsed, so nesting depth is not limited by the interpreter's
        recursion limit.
        """
        stack: list[tuple[OpenTag, list[Child]]] = []
        while True:
            open_tag = self._parse_open_tag()
            element: Element | None = None
            if open_tag.self_closing:
                element = Element(tag=open_tag)
            else:
                stack.append((open_tag, []))
            while stack:
                if element is not None:
                    stack[-1][1].append(element)
                if self._parse_children(*stack[-1]):
                    break
                element = self._close_element(*stack.pop())
            else:
                assert element is not None
                return element

    def _close_element(self, open_tag: OpenTag, children: list[Child]) -> Element:
        """Consume the closing tag of open_tag and build its Element."""
        closing_tag = self._parse_closing_tag()
        self._validate_closing_tag(open_tag, closing_tag)
        if children and classify_tag_name(open_tag.name) is ElementKind.CUSTOM:
            self._drop_explicit_children(open_tag)
        return Element(tag=open_tag, children=tuple(children))

    def _drop_explicit_children(self, open_tag: OpenTag) -> None:
        """A custom element with a body gets ``children`` from the body."""
        for attribute in open_tag.attributes:
            if attribute.key.segments == ("children",):
                kind = "value" if isinstance(attribute, ValuedAttribute) else "punned name"
                self._diagnostics.append(
                    Diagnostic.warning(
                        f"The children {kind} is ignored: <{open_tag.display_name}> "
                        "has a body, which supplies children",
                        attribute.location,
                    )
                )
                open_tag.attributes.discard(attribute.key)
