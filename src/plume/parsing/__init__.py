"""Parsing subsystem for the Plume template parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal and lookahead
- `ExpressionParsingMixin`: Compiling ``{ ... }`` blocks
- `TagParsingMixin`: Opening and closing tags
- `AttributeParsingMixin`: Attribute keys, values and validation
- `ChildrenParsingMixin`: Element bodies

The Parser composes all of them and keeps open elements on an explicit
stack in ``_parse_element``.

"""

from plume.parsing.attributes import AttributeParsingMixin
from plume.parsing.children import ChildrenParsingMixin
from plume.parsing.expressions import ExpressionParsingMixin
from plume.parsing.tags import TagParsingMixin
from plume.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "AttributeParsingMixin",
    "ChildrenParsingMixin",
    "ExpressionParsingMixin",
    "TagParsingMixin",
    "TokenNavigationMixin",
]
