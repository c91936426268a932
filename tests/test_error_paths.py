"""Error-path tests.

Exercises the exception hierarchy, error formatting and the build-time
failures of compiled templates. Grammar errors are covered in
test_parser.py.
"""

import pytest

from plume import compile_template, html
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
from plume.location import SourceLocation

# =========================================================================
# Exception construction and formatting
# =========================================================================


class TestTemplateSyntaxErrorFormatting:
    """Verify TemplateSyntaxError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = TemplateSyntaxError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = TemplateSyntaxError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = TemplateSyntaxError("missing '>'", lineno=10, col_offset=5)
        assert str(err) == "10:5 missing '>'"

    def test_with_source_file(self) -> None:
        err = TemplateSyntaxError("error", lineno=1, col_offset=1, source_file="page.plume")
        assert str(err) == "page.plume:1:1 error"
        assert err.message == "error"

    def test_at_location(self) -> None:
        err = TemplateSyntaxError.at("oops", SourceLocation(3, 4, source_file="x.plume"))
        assert (err.lineno, err.col_offset, err.source_file) == (3, 4, "x.plume")

    def test_as_error_diagnostic(self) -> None:
        err = TemplateSyntaxError("Empty expression block", lineno=2, col_offset=7)
        diagnostic = err.diagnostic
        assert diagnostic.severity is Severity.ERROR
        assert str(diagnostic) == "2:7: error: Empty expression block"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            TemplateSyntaxError("x"),
            TemplateCompileError(()),
            TemplateNameError("x"),
            TemplateEvaluationError("x"),
            RenderError("x"),
            ComponentError("C", "x"),
        ],
    )
    def test_is_plume_error(self, error: Exception) -> None:
        assert isinstance(error, PlumeError)

    def test_compile_error_lists_diagnostics(self) -> None:
        diagnostic = Diagnostic.warning("Expected closing tag for <p>", SourceLocation(1, 8))
        err = TemplateCompileError((diagnostic,))
        assert err.diagnostics == (diagnostic,)
        assert str(err) == (
            "Template compiled with 1 diagnostic:\n  1:8: warning: Expected closing tag for <p>"
        )

    def test_name_error_without_location(self) -> None:
        assert str(TemplateNameError("user")) == "Name 'user' is not defined in the template scope"

    def test_component_error(self) -> None:
        err = ComponentError("Card", "bad parameter")
        assert err.component_name == "Card"
        assert str(err) == "Component 'Card': bad parameter"


# =========================================================================
# Build-time failures
# =========================================================================


class TestBuildFailures:
    """Failures that surface when a compiled template meets a scope."""

    def test_missing_punned_name(self) -> None:
        template = compile_template("<div\n  hidden/>", source_file="page.plume")
        with pytest.raises(TemplateNameError) as exc_info:
            template.build()
        assert exc_info.value.name == "hidden"
        assert str(exc_info.value).startswith("page.plume:2:3 ")

    def test_missing_expression_name(self) -> None:
        with pytest.raises(TemplateEvaluationError, match="NameError") as exc_info:
            html("<p>{user.name}</p>")
        assert isinstance(exc_info.value.__cause__, NameError)

    def test_missing_component(self) -> None:
        with pytest.raises(TemplateNameError, match="'Card'"):
            html("<Card/>")

    def test_missing_component_attribute(self) -> None:
        class ui:
            pass

        with pytest.raises(TemplateNameError, match="'ui.Card'"):
            html("<ui.Card/>", ui=ui)

    def test_fields_on_non_callable(self) -> None:
        with pytest.raises(TemplateEvaluationError, match="cannot take fields"):
            html("<Logo alt={'x'}/>", Logo="not callable")

    def test_component_raising(self) -> None:
        def Broken(value):
            raise ValueError(f"bad value {value}")

        with pytest.raises(TemplateEvaluationError, match="bad value 3") as exc_info:
            html("<Broken value={3}/>", Broken=Broken)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unrenderable_value(self) -> None:
        with pytest.raises(RenderError, match="bool"):
            html("<p>{flag}</p>", flag=True)

    def test_unrenderable_object(self) -> None:
        with pytest.raises(RenderError, match="object"):
            html("<p>{thing}</p>", thing=object())

    def test_plume_errors_are_catchable_together(self) -> None:
        for source in ("<p>", "<p>{missing}</p>", "<Missing/>"):
            with pytest.raises(PlumeError):
                html(source)
