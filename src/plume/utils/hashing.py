"""Digest helpers for template cache keys.

Example:
    >>> from plume.utils.hashing import hash_parts
    >>> hash_parts("page.plume", "<br/>") == hash_parts("page.plume", "<br/>")
    True
"""

import hashlib


def hash_str(content: str) -> str:
    """SHA-256 hex digest of a string's UTF-8 encoding."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def hash_parts(*parts: str) -> str:
    """Digest several strings as one key.

    Parts are NUL-separated, so ``("ab", "c")`` and ``("a", "bc")`` differ.
    """
    return hash_str("\0".join(parts))
