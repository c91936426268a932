"""Two-mode state-machine lexer with O(n) guaranteed performance.

Every scan step consumes at least one character, so the lexer always
makes forward progress. No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from plume.lexer.modes import LexerMode
from plume.lexer.scanners import (
    ContentScannerMixin,
    ExpressionScannerMixin,
    TagScannerMixin,
)
from plume.tokens import Token, TokenType


class Lexer(
    ContentScannerMixin,
    TagScannerMixin,
    ExpressionScannerMixin,
):
    """Two-mode state-machine lexer for template source.

    Whitespace separates tokens and is never emitted; the parser recovers
    "were these adjacent?" from token offsets when joining text runs.

    Usage:
        >>> lexer = Lexer("<p>Hi {name}</p>")
        >>> for token in lexer.tokenize():
        ...     print(token)
        Token(LT, '<', 1:1)
        Token(IDENT, 'p', 1:2)
        Token(GT, '>', 1:3)
        Token(TEXT, 'Hi', 1:4)
        Token(EXPRESSION, 'name', 1:7)
        Token(LT, '<', 1:13)
        Token(SLASH, '/', 1:14)
        Token(IDENT, 'p', 1:15)
        Token(GT, '>', 1:16)
        Token(EOF, '', 1:17)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_mode",
        "_source_file",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Template source text
            source_file: Optional template file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._mode = LexerMode.CONTENT
        self._source_file = source_file
        self._saved_lineno = 1
        self._saved_col = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF token

        Raises:
            TemplateSyntaxError: On an unterminated string or expression
                block, or an unexpected character inside a tag
        """
        while True:
            self._skip_whitespace()
            if self._pos >= self._source_len:
                break
            self._save_location()
            if self._mode == LexerMode.CONTENT:
                yield self._scan_content()
            else:
                yield self._scan_tag()

        self._save_location()
        yield self._make_token(TokenType.EOF, "", self._pos)

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character without advancing.

        Returns:
            Character at current position + offset, or "" past the end.
        """
        pos = self._pos + offset
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _skip_whitespace(self) -> None:
        pos = self._pos
        source = self._source
        while pos < self._source_len and source[pos].isspace():
            pos += 1
        self._commit_to(pos)

    def _commit_to(self, end: int) -> None:
        """Advance position to end, updating line/column tracking.

        Uses str.count/rfind over the skipped segment instead of a
        per-character loop.
        """
        if end <= self._pos:
            return
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count:
            self._lineno += newline_count
            self._col = len(segment) - segment.rfind("\n")
        else:
            self._col += len(segment)
        self._pos = end

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create a Token spanning start_pos to the current position.

        Args:
            token_type: The token type.
            value: The token value.
            start_pos: Start position in source.

        Returns:
            Token with raw coordinates for lazy location creation.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=start_pos,
            _end_offset=self._pos,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )
