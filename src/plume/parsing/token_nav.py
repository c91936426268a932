"""Token navigation utilities for the Plume parser.

Provides mixin for token stream navigation and basic parsing operations.
Lookahead never consumes: the token list is fully materialized, so a
peek that does not match leaves the cursor where it was.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plume.errors import TemplateSyntaxError
from plume.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


_DESCRIPTIONS = {
    TokenType.EOF: "end of input",
    TokenType.LT: "'<'",
    TokenType.GT: "'>'",
    TokenType.SLASH: "'/'",
    TokenType.EQUALS: "'='",
    TokenType.DASH: "'-'",
    TokenType.DOT: "'.'",
    TokenType.IDENT: "a name",
    TokenType.STRING: "a quoted string",
    TokenType.EXPRESSION: "an expression block",
    TokenType.TEXT: "text",
}


def describe(token: Token) -> str:
    """Describe a token for error messages."""
    if token.type in (TokenType.IDENT, TokenType.TEXT):
        return repr(token.value)
    return _DESCRIPTIONS[token.type]


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token] (always ends with an EOF token)
        - _pos: int
        - _current: Token

    """

    _tokens: Sequence[Token]
    _pos: int
    _current: Token

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current.type == TokenType.EOF

    def _advance(self) -> Token:
        """Consume the current token and return it.

        The cursor never moves past the final EOF token.
        """
        token = self._current
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
            self._current = self._tokens[self._pos]
        return token

    def _peek(self, offset: int = 1) -> Token:
        """Peek at token at offset from current position (clamped to EOF)."""
        pos = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[pos]

    def _check(self, token_type: TokenType) -> bool:
        """Check the current token type without consuming."""
        return self._current.type == token_type

    def _match(self, token_type: TokenType) -> Token | None:
        """Consume and return the current token if it has the given type."""
        if self._current.type == token_type:
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, context: str) -> Token:
        """Consume a token of the given type or raise a syntax error.

        Args:
            token_type: Required token type
            context: What was being parsed, for the error message

        Raises:
            TemplateSyntaxError: If the current token has another type
        """
        if self._current.type != token_type:
            raise self._error(
                f"Expected {_DESCRIPTIONS[token_type]} {context}, found {describe(self._current)}"
            )
        return self._advance()

    def _at_closing_tag(self) -> bool:
        """True when the lookahead is ``<`` followed by ``/``."""
        return self._current.type == TokenType.LT and self._peek().type == TokenType.SLASH

    def _error(self, message: str, token: Token | None = None) -> TemplateSyntaxError:
        """Build a syntax error positioned at token (default: current)."""
        return TemplateSyntaxError.at(message, (token or self._current).location)
