"""Lexer operating modes and character classes."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - CONTENT: Between tags, scanning text runs and expression blocks
    - TAG: After ``<`` until the matching ``>``, scanning names and attributes

    """

    CONTENT = auto()
    TAG = auto()


# Characters that end a text run in CONTENT mode
CONTENT_DELIMITERS = frozenset("<{")

QUOTES = frozenset("\"'")
