"""ContextVar-based compile configuration for Plume.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from plume.config import CompileConfig, compile_config_context

    with compile_config_context(CompileConfig(strict=True)):
        template = compile_template(source)  # raises on any diagnostic

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    Attributes:
        strict: Raise TemplateCompileError when compilation reports any
            diagnostic, instead of returning a Template that carries them
        log_diagnostics: Log each diagnostic at WARNING level on the
            ``plume.compiler`` logger

    """

    strict: bool = False
    log_diagnostics: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "CompileConfig":
        """Create CompileConfig from dictionary.

        Only includes keys that are valid CompileConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> CompileConfig.from_dict({"strict": True, "unknown_key": 1}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CompileConfig = CompileConfig()

_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get current compile configuration (thread-local)."""
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set compile configuration for current context.

    Only affects the current thread's context.
    """
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset to default configuration."""
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with compile_config_context(CompileConfig(strict=True)):
        ...     get_compile_config().strict
        True

    """
    previous = _compile_config.get()
    _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.set(previous)


__all__ = [
    "CompileConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
]
