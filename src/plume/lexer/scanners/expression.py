"""Expression block scanner mixin.

An expression block is ``{`` ... ``}`` with balanced braces. Its body is
Python source and is otherwise opaque to the lexer: braces inside string
literals and comments do not count toward the balance.
"""

from __future__ import annotations

from plume.errors import TemplateSyntaxError
from plume.lexer.modes import QUOTES
from plume.tokens import Token, TokenType


class ExpressionScannerMixin:
    """Mixin providing ``{ ... }`` block scanning, shared by both modes."""

    _source: str
    _source_len: int
    _source_file: str | None
    _pos: int
    _lineno: int
    _col: int

    def _commit_to(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        raise NotImplementedError

    def _scan_expression(self) -> Token:
        """Scan a balanced expression block starting at ``{``.

        Returns:
            EXPRESSION token whose value is the text between the braces.

        Raises:
            TemplateSyntaxError: If the block is never closed.
        """
        start = self._pos
        source = self._source
        depth = 0
        pos = start
        while pos < self._source_len:
            char = source[pos]
            if char in QUOTES:
                pos = self._skip_string_literal(pos)
                continue
            if char == "#":
                newline = source.find("\n", pos)
                pos = self._source_len if newline == -1 else newline
                continue
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    self._commit_to(pos + 1)
                    return self._make_token(TokenType.EXPRESSION, source[start + 1 : pos], start)
            pos += 1

        raise TemplateSyntaxError(
            "Unterminated expression block: missing '}'",
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )

    def _skip_string_literal(self, pos: int) -> int:
        """Return the position just past the Python string literal at pos.

        Handles single and triple quotes and backslash escapes. An
        unterminated literal runs to the end of the source, which then
        surfaces as an unterminated expression block.
        """
        source = self._source
        quote = source[pos]
        delimiter = quote * 3 if source.startswith(quote * 3, pos) else quote
        pos += len(delimiter)
        while pos < self._source_len:
            char = source[pos]
            if char == "\\":
                pos += 2
                continue
            if source.startswith(delimiter, pos):
                return pos + len(delimiter)
            pos += 1
        return self._source_len
