"""TAG mode scanner mixin."""

from __future__ import annotations

from plume.errors import TemplateSyntaxError
from plume.lexer.modes import QUOTES, LexerMode
from plume.tokens import Token, TokenType

_PUNCTUATION_TYPES = {
    "<": TokenType.LT,
    ">": TokenType.GT,
    "/": TokenType.SLASH,
    "=": TokenType.EQUALS,
    "-": TokenType.DASH,
    ".": TokenType.DOT,
}


def is_ident_start(char: str) -> bool:
    return char == "_" or char.isalpha()


def is_ident_char(char: str) -> bool:
    return char == "_" or char.isalnum()


class TagScannerMixin:
    """Mixin providing TAG mode scanning logic.

    Inside a tag the lexer produces identifiers, single-character
    punctuation, quoted strings and expression blocks. ``>`` returns the
    lexer to CONTENT mode.

    """

    _source: str
    _source_len: int
    _source_file: str | None
    _pos: int
    _lineno: int
    _col: int
    _mode: LexerMode

    def _commit_to(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        raise NotImplementedError

    def _scan_tag(self) -> Token:
        """Scan one token in TAG mode."""
        start = self._pos
        char = self._source[start]

        token_type = _PUNCTUATION_TYPES.get(char)
        if token_type is not None:
            self._commit_to(start + 1)
            if token_type is TokenType.GT:
                self._mode = LexerMode.CONTENT
            return self._make_token(token_type, char, start)

        if char == "{":
            return self._scan_expression()

        if char in QUOTES:
            return self._scan_string(char)

        if is_ident_start(char):
            end = start + 1
            while end < self._source_len and is_ident_char(self._source[end]):
                end += 1
            self._commit_to(end)
            return self._make_token(TokenType.IDENT, self._source[start:end], start)

        raise TemplateSyntaxError(
            f"Unexpected character {char!r} in tag",
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )

    def _scan_string(self, quote: str) -> Token:
        """Scan a quoted attribute value. No escape sequences are recognized."""
        start = self._pos
        close = self._source.find(quote, start + 1)
        if close == -1:
            raise TemplateSyntaxError(
                "Unterminated string in tag",
                lineno=self._lineno,
                col_offset=self._col,
                source_file=self._source_file,
            )
        self._commit_to(close + 1)
        return self._make_token(TokenType.STRING, self._source[start + 1 : close], start)
