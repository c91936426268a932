"""Mode-specific scanner mixins for the Lexer."""

from plume.lexer.scanners.content import ContentScannerMixin
from plume.lexer.scanners.expression import ExpressionScannerMixin
from plume.lexer.scanners.tag import TagScannerMixin

__all__ = [
    "ContentScannerMixin",
    "ExpressionScannerMixin",
    "TagScannerMixin",
]
