"""CONTENT mode scanner mixin."""

from __future__ import annotations

from plume.lexer.modes import CONTENT_DELIMITERS, LexerMode
from plume.tokens import Token, TokenType


class ContentScannerMixin:
    """Mixin providing CONTENT mode scanning logic.

    Between tags the lexer recognizes three things: ``<`` (switches to TAG
    mode), ``{`` (an embedded expression block) and runs of other
    non-whitespace characters. Quotes, ``>``, ``/`` and ``}`` are plain text
    here.

    """

    _source: str
    _source_len: int
    _pos: int
    _mode: LexerMode

    def _commit_to(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        raise NotImplementedError

    def _scan_content(self) -> Token:
        """Scan one token in CONTENT mode."""
        start = self._pos
        char = self._source[start]

        if char == "<":
            self._commit_to(start + 1)
            self._mode = LexerMode.TAG
            return self._make_token(TokenType.LT, "<", start)

        if char == "{":
            return self._scan_expression()

        end = start
        source = self._source
        while end < self._source_len:
            char = source[end]
            if char in CONTENT_DELIMITERS or char.isspace():
                break
            end += 1
        self._commit_to(end)
        return self._make_token(TokenType.TEXT, source[start:end], start)
