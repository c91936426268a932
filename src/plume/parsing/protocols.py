"""Protocol defining the parser mixin contract.

Mixin methods that call across mixin boundaries annotate ``self`` as
ParserHost, so type checkers verify that the composed Parser provides
everything each mixin relies on.

Thread Safety:
    Protocols are purely structural; no runtime overhead.
"""

from collections.abc import Sequence
from typing import Protocol

from plume.diagnostics import Diagnostic
from plume.errors import TemplateSyntaxError
from plume.syntax import (
    Attribute,
    AttributeSet,
    Child,
    ClosingTag,
    Element,
    ElementKind,
    Expression,
    Literal,
    OpenTag,
    TagName,
)
from plume.tokens import Token, TokenType


class ParserHost(Protocol):
    """Contract satisfied by the composed Parser."""

    _tokens: Sequence[Token]
    _pos: int
    _current: Token
    _source_file: str | None
    _diagnostics: list[Diagnostic]

    def _at_end(self) -> bool: ...

    def _advance(self) -> Token: ...

    def _peek(self, offset: int = 1) -> Token: ...

    def _check(self, token_type: TokenType) -> bool: ...

    def _match(self, token_type: TokenType) -> Token | None: ...

    def _expect(self, token_type: TokenType, context: str) -> Token: ...

    def _at_closing_tag(self) -> bool: ...

    def _error(self, message: str, token: Token | None = None) -> TemplateSyntaxError: ...

    def _compile_expression(self, token: Token) -> Expression: ...

    def _parse_attributes(self, kind: ElementKind) -> AttributeSet: ...

    def _parse_element(self) -> Element: ...

    def _parse_tag_name(self) -> TagName | None: ...

    def _parse_open_tag(self) -> OpenTag: ...

    def _parse_closing_tag(self) -> ClosingTag: ...

    def _validate_closing_tag(self, open_tag: OpenTag, closing_tag: ClosingTag) -> None: ...

    def _parse_attribute(self) -> Attribute: ...

    def _validate_attribute(self, attribute: Attribute, kind: ElementKind) -> str | None: ...

    def _parse_children(self, open_tag: OpenTag, children: list[Child]) -> bool: ...

    def _parse_literal(self) -> Literal: ...
