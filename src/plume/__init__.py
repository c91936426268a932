"""
Plume: JSX-like HTML templates for Python

Templates are markup with embedded Python expressions. A template is
compiled once into an immutable Template, built against a scope into a
render tree, and rendered to HTML with escaping applied to text.

Quick Start:
    >>> from plume import html
    >>> html('<ul class={cls}><li>{first}</li><li>{second}</li></ul>',
    ...      cls="menu", first="Home", second="Tea & cake")
    '<ul class="menu"><li>Home</li><li>Tea &amp; cake</li></ul>'

Components:
    >>> from plume import SimpleElement, component, html
    >>> @component
    ... def Card(title, children=()):
    ...     return SimpleElement("section", {"class": "card"},
    ...                          (SimpleElement("h2", {}, title), children))
    >>> html("<Card title={t}>Body</Card>", Card=Card, t="Hi")
    '<section class="card"><h2>Hi</h2>Body</section>'

Compile Once:
    >>> from plume import compile_template
    >>> row = compile_template("<tr><td>{name}</td><td>{qty}</td></tr>")
    >>> row.render(name="Pears", qty=3)
    '<tr><td>Pears</td><td>3</td></tr>'
"""

from collections.abc import Mapping
from typing import Any

from plume.cache import (
    DEFAULT_CACHE_SIZE,
    DictTemplateCache,
    TemplateCache,
    hash_config,
    hash_content,
)
from plume.compiler import compile_template
from plume.components import HTML5Doctype, component
from plume.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from plume.diagnostics import Diagnostic, Severity
from plume.errors import (
    ComponentError,
    PlumeError,
    RenderError,
    TemplateCompileError,
    TemplateEvaluationError,
    TemplateNameError,
    TemplateSyntaxError,
)
from plume.lexer import Lexer
from plume.location import SourceLocation
from plume.nodes import UNIT, Err, Fragment, Ok, Raw, SimpleElement, raw
from plume.parser import Parser
from plume.renderers.html import HtmlRenderer, get_default_renderer
from plume.renderers.protocol import Renderable, Sink
from plume.stringbuilder import StringBuilder
from plume.template import Template
from plume.tokens import Token, TokenType
from plume.utils.text import escape_html

__version__ = "0.1.0"

# Shared by rsx() and html(); least recently used templates are evicted.
_default_cache = DictTemplateCache(maxsize=DEFAULT_CACHE_SIZE)


def rsx(source: str, scope: Mapping[str, Any] | None = None, /, **names: Any) -> Any:
    """Compile a template (cached) and build it into a render tree.

    Args:
        source: Template source text
        scope: Mapping of names visible to the template
        **names: More names; these override scope entries

    Returns:
        Render tree, ready for render() or for use as a child of another tree

    Example:
        >>> item = rsx("<li>{text}</li>", text="one")
        >>> render(rsx("<ul>{items}</ul>", items=[item, item]))
        '<ul><li>one</li><li>one</li></ul>'
    """
    return compile_template(source, cache=_default_cache).build(scope, **names)


def html(source: str, scope: Mapping[str, Any] | None = None, /, **names: Any) -> str:
    """Compile a template (cached), build it, and render it to an HTML string."""
    return render(rsx(source, scope, **names))


def render(node: Any) -> str:
    """Render a node tree to an HTML string.

    Example:
        >>> render(SimpleElement("br", self_closing=True))
        '<br/>'
    """
    return get_default_renderer().render(node)


def render_into(node: Any, sink: Sink) -> None:
    """Render a node tree to a sink (any object with ``write(str)``).

    Sink exceptions propagate unchanged and abort rendering.
    """
    get_default_renderer().render_into(node, sink)


def render_bytes(node: Any, encoding: str = "utf-8") -> bytes:
    """Render a node tree and encode the HTML."""
    return render(node).encode(encoding)


__all__ = [
    # Compile / build / render
    "compile_template",
    "Template",
    "rsx",
    "html",
    "render",
    "render_into",
    "render_bytes",
    "escape_html",
    # Render tree
    "UNIT",
    "Raw",
    "raw",
    "SimpleElement",
    "Fragment",
    "Ok",
    "Err",
    "HTML5Doctype",
    "component",
    "Renderable",
    "Sink",
    "HtmlRenderer",
    "StringBuilder",
    # Front end
    "Parser",
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "Severity",
    # Configuration
    "CompileConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
    # Caching
    "DictTemplateCache",
    "TemplateCache",
    "hash_config",
    "hash_content",
    # Errors
    "PlumeError",
    "TemplateSyntaxError",
    "TemplateCompileError",
    "TemplateNameError",
    "TemplateEvaluationError",
    "RenderError",
    "ComponentError",
]
