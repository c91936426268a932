"""Exception classes for Plume.

Fatal problems raise exceptions from this module. Recoverable problems
(closing-tag mismatch, duplicate attributes, misused dashed keys) are
reported as Diagnostic values instead; see plume.diagnostics.
"""

from __future__ import annotations

from plume.diagnostics import Diagnostic
from plume.location import SourceLocation


def _format_location(
    lineno: int | None,
    col_offset: int | None,
    source_file: str | None,
) -> str:
    location = ""
    if source_file:
        location = f"{source_file}:"
    if lineno is not None:
        location += f"{lineno}:"
        if col_offset is not None:
            location += f"{col_offset}:"
    if location:
        location = location.rstrip(":") + " "
    return location


class PlumeError(Exception):
    """Base exception for all Plume errors.

    Subclass this for specific error categories.
    """

    pass


class TemplateSyntaxError(PlumeError):
    """Unrecoverable grammar violation in template source.

    Raised for unterminated tags, missing closing tags, malformed attributes
    and embedded expressions that are not valid Python expressions.
    No template is produced for the unit that raised it.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize syntax error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to template file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        super().__init__(f"{_format_location(lineno, col_offset, source_file)}{message}")

    @classmethod
    def at(cls, message: str, location: SourceLocation) -> TemplateSyntaxError:
        """Build an error positioned at a source location."""
        return cls(
            message,
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=location.source_file,
        )

    @property
    def diagnostic(self) -> Diagnostic:
        """This error as an error-class Diagnostic."""
        location = SourceLocation(
            lineno=self.lineno or 0,
            col_offset=self.col_offset or 0,
            source_file=self.source_file,
        )
        return Diagnostic.error(self.message, location)


class TemplateCompileError(PlumeError):
    """Compilation produced diagnostics while strict mode was enabled."""

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        self.diagnostics = diagnostics
        lines = "\n".join(f"  {d}" for d in diagnostics)
        noun = "diagnostic" if len(diagnostics) == 1 else "diagnostics"
        super().__init__(f"Template compiled with {len(diagnostics)} {noun}:\n{lines}")


class TemplateNameError(PlumeError):
    """A punned attribute or custom element name is missing from the scope."""

    def __init__(self, name: str, location: SourceLocation | None = None) -> None:
        self.name = name
        self.location = location
        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}Name {name!r} is not defined in the template scope")


class TemplateEvaluationError(PlumeError):
    """An embedded expression or custom element constructor raised.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        self.location = location
        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")


class RenderError(PlumeError):
    """A value in the node tree cannot be rendered.

    Raised when the renderer meets a value that implements none of the
    canonical renderable shapes and no ``render_into`` method.
    """

    pass


class ComponentError(PlumeError):
    """Invalid component definition.

    Raised by the @component decorator when the decorated function
    cannot be expressed as a set of named fields.
    """

    def __init__(self, component_name: str, message: str) -> None:
        """Initialize component error.

        Args:
            component_name: Name of the offending component function
            message: Description of the problem
        """
        self.component_name = component_name
        super().__init__(f"Component '{component_name}': {message}")
