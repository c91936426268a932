"""Compile-time diagnostics.

Recoverable problems found while parsing a template are collected as
Diagnostic values rather than raised, so that one compile reports every
issue in the source at once. Parsing continues with a best-effort
recovery (the first definition of a duplicate attribute wins, an invalid
attribute is dropped, a mismatched closing tag keeps the opening name).

Thread Safety:
Diagnostic is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from plume.location import SourceLocation


class Severity(Enum):
    """Diagnostic severity.

    WARNING diagnostics let compilation continue. ERROR describes a fatal
    problem; see TemplateSyntaxError.diagnostic.
    """

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A message attached to a span of template source.

    Attributes:
        severity: WARNING (compilation continues) or ERROR
        message: Human readable description
        location: Span of the offending source

    """

    severity: Severity
    message: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.location}: {self.severity.value}: {self.message}"

    @classmethod
    def warning(cls, message: str, location: SourceLocation) -> Diagnostic:
        """Create a warning-class diagnostic."""
        return cls(Severity.WARNING, message, location)

    @classmethod
    def error(cls, message: str, location: SourceLocation) -> Diagnostic:
        """Create an error-class diagnostic."""
        return cls(Severity.ERROR, message, location)


__all__ = ["Diagnostic", "Severity"]
