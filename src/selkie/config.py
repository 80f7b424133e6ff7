"""ContextVar-based configuration for Selkie.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Builders and serialization helpers read the active config at call time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from selkie.config import BuilderConfig, config_context

    with config_context(BuilderConfig(strict_combinators=True)):
        combine(element("ul"), ">", element("li"))  # validated

    # Or set/reset explicitly
    set_config(BuilderConfig(json_indent=2))
    try:
        text = to_json(rect)
    finally:
        reset_config()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable library configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).
    The defaults reproduce the plain builder behavior: combinators are
    opaque strings and JSON output is compact in insertion order.

    Attributes:
        strict_combinators: Reject combinators other than ' ', '+', '~', '>'
        json_indent: Default indentation for to_json (None for compact)
        json_sort_keys: Default key sorting for to_json

    """

    strict_combinators: bool = False
    json_indent: int | None = None
    json_sort_keys: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuilderConfig":
        """Create BuilderConfig from dictionary.

        Only includes keys that are valid BuilderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                BuilderConfig attribute names.

        Returns:
            New BuilderConfig instance with values from dict.

        Example:
            >>> config = BuilderConfig.from_dict({
            ...     "strict_combinators": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_combinators
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_config: ContextVar[BuilderConfig] = ContextVar(
    "selkie_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> BuilderConfig:
    """Get current configuration (thread-local).

    Returns:
        The active BuilderConfig for this thread/context.

    """
    return _config.get()


def set_config(config: BuilderConfig) -> None:
    """Set configuration for current context.

    Args:
        config: BuilderConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _config.set(config)


def reset_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: BuilderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: BuilderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with config_context(BuilderConfig(strict_combinators=True)):
        ...     get_config().strict_combinators
        True
        >>> get_config().strict_combinators
        False

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "BuilderConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
