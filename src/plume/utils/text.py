"""Text processing utilities for Plume.

Provides the HTML escaper used for literal text children, string values
and attribute values.

Example:
    >>> from plume.utils.text import escape_html
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plume.renderers.protocol import Sink

# Exactly five characters are replaced; everything else passes through.
_HTML_ESCAPES = str.maketrans(
    {
        ">": "&gt;",
        "<": "&lt;",
        '"': "&quot;",
        "&": "&amp;",
        "'": "&apos;",
    }
)


def escape_html(text: str) -> str:
    """Escape the five reserved markup characters.

    Total (never fails); the result is never shorter than the input.
    ``'`` becomes ``&apos;`` (not ``&#x27;`` as with html.escape).

    Examples:
        >>> escape_html("Tom & Jerry's")
        'Tom &amp; Jerry&apos;s'
        >>> escape_html("plain text")
        'plain text'
    """
    return text.translate(_HTML_ESCAPES)


def escape_into(text: str, sink: Sink) -> None:
    """Write the escaped form of text to a sink."""
    if text:
        sink.write(text.translate(_HTML_ESCAPES))
