"""Content-addressed template cache for Plume.

Maps (content_hash, config_hash) -> Template so that identical template
source is compiled once. ``rsx()`` and ``html()`` share a module-level
DictTemplateCache bounded to DEFAULT_CACHE_SIZE entries;
``compile_template(cache=...)`` accepts any TemplateCache.

Thread Safety:
    Templates are immutable and safe to share. DictTemplateCache does no
    locking: concurrent misses on the same key may each compile, and the
    last put wins, which is harmless because both results are equivalent.

Example:
    >>> from plume import compile_template, DictTemplateCache
    >>> cache = DictTemplateCache()
    >>> t1 = compile_template("<br/>", cache=cache)
    >>> t2 = compile_template("<br/>", cache=cache)  # Cache hit
    >>> t1 is t2
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from plume.utils.hashing import hash_parts

DEFAULT_CACHE_SIZE = 512

if TYPE_CHECKING:
    from plume.config import CompileConfig
    from plume.template import Template


class TemplateCache(Protocol):
    """Protocol for content-addressed template caches."""

    def get(self, content_hash: str, config_hash: str) -> Template | None:
        """Return cached Template if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, template: Template) -> None:
        """Store Template in cache."""
        ...


class DictTemplateCache:
    """In-memory template cache using a dict.

    With ``maxsize`` set the cache keeps at most that many templates and
    evicts the least recently used one on put.
    """

    __slots__ = ("_data", "maxsize")

    def __init__(self, maxsize: int | None = None) -> None:
        self._data: dict[tuple[str, str], Template] = {}
        self.maxsize = maxsize

    def get(self, content_hash: str, config_hash: str) -> Template | None:
        """Return cached Template if present, else None."""
        key = (content_hash, config_hash)
        template = self._data.pop(key, None)
        if template is not None:
            # Reinsert so iteration order runs from least to most recently used.
            self._data[key] = template
        return template

    def put(self, content_hash: str, config_hash: str, template: Template) -> None:
        """Store Template in cache, evicting the oldest entry when full."""
        key = (content_hash, config_hash)
        self._data.pop(key, None)
        self._data[key] = template
        if self.maxsize is not None:
            while len(self._data) > self.maxsize:
                del self._data[next(iter(self._data))]

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str, source_file: str | None = None) -> str:
    """Compute SHA256 hash of template source (and file name) for cache key.

    The file name is part of the key because it appears in diagnostics
    and error locations.
    """
    return hash_parts(source_file or "", source)


def hash_config(config: CompileConfig) -> str:
    """Compute hash of CompileConfig for cache key."""
    return hash_parts(str(config.strict), str(config.log_diagnostics))


__all__ = [
    "DEFAULT_CACHE_SIZE",
    "DictTemplateCache",
    "TemplateCache",
    "hash_config",
    "hash_content",
]
