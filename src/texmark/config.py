"""ContextVar-based conversion configuration for texmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by the parser and the top-level conversion functions; there
is no process-wide mutable state.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from texmark.config import ConvertConfig, convert_config_context

    with convert_config_context(ConvertConfig(strict_commands=True)):
        mathml = convert(r"\\foo x")  # raises UnknownCommandError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from texmark.renderers.mathml import MATHML_NAMESPACE


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Attributes:
        strict_commands: Raise UnknownCommandError for unknown multi-letter
            commands instead of rendering a visible placeholder
        namespace: ``xmlns`` of the root ``<math>`` element

    """

    strict_commands: bool = False
    namespace: str = MATHML_NAMESPACE

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ConvertConfig":
        """Create ConvertConfig from dictionary.

        Only includes keys that are valid ConvertConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ConvertConfig.from_dict({
            ...     "strict_commands": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_commands
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get current conversion configuration (thread-local)."""
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set conversion configuration for current context.

    Args:
        config: ConvertConfig instance to use for this context.

    """
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to default configuration."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with convert_config_context(ConvertConfig(strict_commands=True)):
        ...     get_convert_config().strict_commands
        True
        >>> get_convert_config().strict_commands
        False

    """
    previous = _convert_config.get()
    _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.set(previous)


__all__ = [
    "ConvertConfig",
    "convert_config_context",
    "get_convert_config",
    "reset_convert_config",
    "set_convert_config",
]
