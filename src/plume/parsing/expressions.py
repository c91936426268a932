"""Embedded expression compilation.

The body of a ``{ ... }`` block is handed whole to the Python compiler in
``eval`` mode. Its grammar is otherwise opaque to the template parser.
"""

from __future__ import annotations

from plume.errors import TemplateSyntaxError
from plume.syntax import Expression
from plume.tokens import Token


class ExpressionParsingMixin:
    """Mixin compiling EXPRESSION tokens into Expression values."""

    _source_file: str | None

    def _compile_expression(self, token: Token) -> Expression:
        """Compile an EXPRESSION token.

        Raises:
            TemplateSyntaxError: If the block is empty or is not a valid
                Python expression.
        """
        source = token.value.strip()
        if not source:
            raise TemplateSyntaxError.at("Empty expression block", token.location)
        try:
            code = compile(source, self._source_file or "<template>", "eval")
        except SyntaxError as exc:
            raise TemplateSyntaxError.at(
                f"Invalid expression {{{source}}}: {exc.msg}", token.location
            ) from exc
        return Expression(source=source, code=code, location=token.location)
