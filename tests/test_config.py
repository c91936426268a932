"""Tests for ContextVar-based compile configuration.

Validates defaults, thread isolation, context manager behavior and the
effect of each option on compile_template().
"""

import logging
from threading import Thread

import pytest

from plume import (
    CompileConfig,
    TemplateCompileError,
    compile_config_context,
    compile_template,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_compile_config()


class TestCompileConfigDataclass:
    """Test CompileConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = CompileConfig()
        assert config.strict is False
        assert config.log_diagnostics is True

    def test_immutability(self) -> None:
        config = CompileConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_from_dict_filters_unknown_keys(self) -> None:
        config = CompileConfig.from_dict({"strict": True, "colour": "red"})
        assert config == CompileConfig(strict=True)

    def test_from_dict_empty(self) -> None:
        assert CompileConfig.from_dict({}) == CompileConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_get_returns_default(self) -> None:
        assert get_compile_config() == CompileConfig()

    def test_set_and_reset(self) -> None:
        set_compile_config(CompileConfig(strict=True))
        assert get_compile_config().strict is True
        reset_compile_config()
        assert get_compile_config().strict is False

    def test_context_manager_restores(self) -> None:
        with compile_config_context(CompileConfig(strict=True)):
            assert get_compile_config().strict is True
        assert get_compile_config().strict is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with compile_config_context(CompileConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_compile_config().strict is False

    def test_nested_contexts(self) -> None:
        with compile_config_context(CompileConfig(strict=True)):
            with compile_config_context(CompileConfig(log_diagnostics=False)):
                assert get_compile_config() == CompileConfig(log_diagnostics=False)
            assert get_compile_config() == CompileConfig(strict=True)

    def test_thread_isolation(self) -> None:
        seen: list[bool] = []

        def worker() -> None:
            seen.append(get_compile_config().strict)
            set_compile_config(CompileConfig(strict=True))
            seen.append(get_compile_config().strict)

        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert seen == [False, True]
        assert get_compile_config().strict is False


class TestStrictMode:
    """strict=True turns diagnostics into TemplateCompileError."""

    def test_clean_template_compiles(self) -> None:
        with compile_config_context(CompileConfig(strict=True)):
            assert compile_template("<div id={x}/>").ok

    def test_diagnostics_raise(self) -> None:
        with compile_config_context(CompileConfig(strict=True)):
            with pytest.raises(TemplateCompileError) as exc_info:
                compile_template('<div a="1" a="2"></span>')
        error = exc_info.value
        assert len(error.diagnostics) == 2
        assert "2 diagnostics" in str(error)
        assert "Expected closing tag for <div>" in str(error)

    def test_lenient_by_default(self) -> None:
        template = compile_template('<div a="1" a="2"/>')
        assert len(template.diagnostics) == 1


class TestDiagnosticLogging:
    """Diagnostics are logged as warnings on the plume.compiler logger."""

    def test_warnings_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="plume.compiler"):
            compile_template("<div>x</span>", source_file="page.plume")
        messages = [r.getMessage() for r in caplog.records if r.name == "plume.compiler"]
        assert messages == ["page.plume:1:7: warning: Expected closing tag for <div>"]
        assert all(r.levelno == logging.WARNING for r in caplog.records)

    def test_logging_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="plume.compiler"):
            with compile_config_context(CompileConfig(log_diagnostics=False)):
                template = compile_template("<div>x</span>")
        assert not [r for r in caplog.records if r.name == "plume.compiler"]
        assert len(template.diagnostics) == 1

    def test_clean_compile_logs_no_warnings(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="plume.compiler"):
            compile_template("<p>{x}</p>")
        assert not caplog.records
