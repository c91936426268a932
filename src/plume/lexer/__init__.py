"""Two-mode lexer for Plume template source.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + navigation)
├── modes.py             # LexerMode enum, character classes
└── scanners/            # Mode-specific scanners
    ├── content.py       # Text runs between tags
    ├── tag.py           # Names, attribute punctuation, quoted strings
    └── expression.py    # Balanced { ... } blocks (both modes)

Usage:
    >>> from plume.lexer import Lexer
    >>> [t.type.name for t in Lexer("<br/>").tokenize()]
    ['LT', 'IDENT', 'SLASH', 'GT', 'EOF']

"""

from plume.lexer.core import Lexer
from plume.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
