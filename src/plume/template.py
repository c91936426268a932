"""Compiled templates.

A Template is the durable artifact of compilation: an immutable
descriptor tree plus the diagnostics reported while compiling it. Build
it against a scope to get a render tree, or render it directly.

Thread Safety:
Template is frozen. build() creates a fresh namespace per call, so one
Template can be built and rendered concurrently from many threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from plume.components import HTML5Doctype
from plume.descriptors import Descriptor
from plume.diagnostics import Diagnostic
from plume.nodes import Err, Fragment, Ok, Raw, raw
from plume.renderers.html import get_default_renderer
from plume.renderers.protocol import Sink

# Names every template can use without passing them in the scope.
# Scope entries with the same name take precedence.
BUILTIN_NAMES: Mapping[str, Any] = {
    "Err": Err,
    "Fragment": Fragment,
    "HTML5Doctype": HTML5Doctype,
    "Ok": Ok,
    "Raw": Raw,
    "raw": raw,
}


@dataclass(frozen=True, slots=True)
class Template:
    """A compiled template.

    Attributes:
        root: Descriptor for the root element
        diagnostics: Warnings reported while compiling
        source_file: Template file path, if known

    Usage:
        >>> from plume import compile_template
        >>> template = compile_template("<li>{item}</li>")
        >>> template.render(item="Tea & cake")
        '<li>Tea &amp; cake</li>'

    """

    root: Descriptor
    diagnostics: tuple[Diagnostic, ...] = ()
    source_file: str | None = None

    @property
    def ok(self) -> bool:
        """True when compilation reported no diagnostics."""
        return not self.diagnostics

    def build(self, scope: Mapping[str, Any] | None = None, /, **names: Any) -> Any:
        """Evaluate the template against a scope.

        Args:
            scope: Mapping of names visible to expressions and punned attributes
            **names: More names; these override scope entries

        Returns:
            A render tree

        Raises:
            TemplateNameError: A punned name or component is not in scope
            TemplateEvaluationError: An expression or component constructor raised
        """
        namespace: dict[str, Any] = dict(BUILTIN_NAMES)
        if scope:
            namespace.update(scope)
        namespace.update(names)
        return self.root.build(namespace)

    def render(self, scope: Mapping[str, Any] | None = None, /, **names: Any) -> str:
        """Build against a scope and render to an HTML string."""
        return get_default_renderer().render(self.build(scope, **names))

    def render_into(
        self, sink: Sink, scope: Mapping[str, Any] | None = None, /, **names: Any
    ) -> None:
        """Build against a scope and render to a sink."""
        get_default_renderer().render_into(self.build(scope, **names), sink)
