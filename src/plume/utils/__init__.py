"""Utility modules for Plume.

Provides:
- text: escape_html, escape_into for markup escaping
- hashing: hash_str, hash_parts for cache keys
- logger: get_logger for logging
"""

from plume.utils.hashing import hash_parts, hash_str
from plume.utils.logger import get_logger
from plume.utils.text import escape_html, escape_into

__all__ = [
    "escape_html",
    "escape_into",
    "get_logger",
    "hash_parts",
    "hash_str",
]
