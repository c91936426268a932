"""Compile entry point: template source to Template.

Pipeline: Lexer -> Parser (Element tree + diagnostics) -> Emitter
(descriptor tree) -> Template.

Recoverable problems (duplicate attributes, invalid attribute keys,
mismatched closing tags, ignored fragment attributes) are collected as
Diagnostic records and carried on the Template. They are logged at
WARNING level unless CompileConfig.log_diagnostics is off, and strict
mode turns them into TemplateCompileError.

"""

from __future__ import annotations

from plume.cache import TemplateCache, hash_config, hash_content
from plume.config import get_compile_config
from plume.emitter import Emitter
from plume.errors import TemplateCompileError
from plume.parser import Parser
from plume.template import Template
from plume.utils.logger import get_logger

logger = get_logger(__name__)

_EMITTER = Emitter()


def compile_template(
    source: str,
    *,
    source_file: str | None = None,
    cache: TemplateCache | None = None,
) -> Template:
    """Compile template source into a reusable Template.

    Args:
        source: Template source text; exactly one root element
        source_file: Optional template file path for error messages
        cache: Optional content-addressed template cache. When provided,
            checks cache before compiling; on miss, compiles and stores
            the result.

    Returns:
        Compiled Template

    Raises:
        TemplateSyntaxError: The source is not a well-formed template
        TemplateCompileError: Strict mode is on and compilation reported
            diagnostics

    Example:
        >>> template = compile_template('<a href={url}>{label}</a>')
        >>> template.render(url="/home", label="Home")
        '<a href="/home">Home</a>'
    """
    config = get_compile_config()

    content_hash = config_hash = ""
    if cache is not None:
        content_hash = hash_content(source, source_file)
        config_hash = hash_config(config)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            logger.debug("Template cache hit for %s", source_file or content_hash[:12])
            return cached

    parser = Parser(source, source_file=source_file)
    root = parser.parse()
    diagnostics = parser.diagnostics

    if config.log_diagnostics:
        for diagnostic in diagnostics:
            logger.warning("%s", diagnostic)
    if config.strict and diagnostics:
        raise TemplateCompileError(diagnostics)

    template = Template(
        root=_EMITTER.emit(root),
        diagnostics=diagnostics,
        source_file=source_file,
    )
    logger.debug(
        "Compiled template %s (%d diagnostics)",
        source_file or "<template>",
        len(diagnostics),
    )

    if cache is not None:
        cache.put(content_hash, config_hash, template)
    return template
