"""Token and TokenType definitions for the Plume lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, value, and source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most tokens never have their location read; only diagnostics and errors do.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plume.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Document structure (EOF)
    - Tag punctuation (only produced inside a tag)
    - Values (identifiers, quoted strings, embedded expressions)
    - Content (text runs between tags)

    """

    # Document structure
    EOF = auto()

    # Tag punctuation
    LT = auto()  # <
    GT = auto()  # >
    SLASH = auto()  # /
    EQUALS = auto()  # =
    DASH = auto()  # - (between attribute key segments)
    DOT = auto()  # . (between qualified name segments)

    # Values
    IDENT = auto()  # div, Card, data
    STRING = auto()  # "text" or 'text' (value excludes the quotes)
    EXPRESSION = auto()  # { ... } (value excludes the braces)

    # Content
    TEXT = auto()  # Run of non-whitespace characters between tags


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The token value (inner text for STRING and EXPRESSION)
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _end_lineno: End line number (for multi-line tokens)
        _end_col: End column offset
        _source_file: Optional template file path

    The start/end offsets let the parser tell whether two tokens were
    adjacent in the source or separated by whitespace.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from plume.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def start(self) -> int:
        """Absolute start offset in source."""
        return self._start_offset

    @property
    def end(self) -> int:
        """Absolute end offset in source."""
        return self._end_offset
