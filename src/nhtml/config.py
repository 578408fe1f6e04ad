"""ContextVar-based transpile configuration for nhtml.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The renderer reads the active config when it is not given explicit settings.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from nhtml.config import TranspileConfig, transpile_config_context

    with transpile_config_context(TranspileConfig(indent_width=2)):
        html = transpile(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_INDENT_WIDTH = 4

# Elements that never receive a closing tag
DEFAULT_VOID_ELEMENTS: frozenset[str] = frozenset({"meta", "link"})


@dataclass(frozen=True, slots=True)
class TranspileConfig:
    """Immutable output configuration.

    Attributes:
        indent_width: Spaces per nesting level in the emitted HTML
        void_elements: Tag names emitted without a closing tag

    """

    indent_width: int = DEFAULT_INDENT_WIDTH
    void_elements: frozenset[str] = DEFAULT_VOID_ELEMENTS

    def __post_init__(self) -> None:
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be >= 0, got {self.indent_width}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TranspileConfig":
        """Create TranspileConfig from dictionary.

        Only includes keys that are valid TranspileConfig fields; unknown keys
        are silently ignored. A list or set of ``void_elements`` is frozen.

        Example:
            >>> config = TranspileConfig.from_dict({
            ...     "indent_width": 2,
            ...     "void_elements": ["meta", "link", "br"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.indent_width
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "void_elements" in filtered:
            filtered["void_elements"] = frozenset(filtered["void_elements"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TranspileConfig = TranspileConfig()

_transpile_config: ContextVar[TranspileConfig] = ContextVar(
    "transpile_config",
    default=_DEFAULT_CONFIG,
)


def get_transpile_config() -> TranspileConfig:
    """Get current transpile configuration (thread-local)."""
    return _transpile_config.get()


def set_transpile_config(config: TranspileConfig) -> None:
    """Set transpile configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _transpile_config.set(config)


def reset_transpile_config() -> None:
    """Reset to default configuration."""
    _transpile_config.set(_DEFAULT_CONFIG)


@contextmanager
def transpile_config_context(config: TranspileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with transpile_config_context(TranspileConfig(indent_width=2)):
        ...     get_transpile_config().indent_width
        2
        >>> get_transpile_config().indent_width
        4

    """
    previous = _transpile_config.get()
    _transpile_config.set(config)
    try:
        yield
    finally:
        _transpile_config.set(previous)


__all__ = [
    "DEFAULT_INDENT_WIDTH",
    "DEFAULT_VOID_ELEMENTS",
    "TranspileConfig",
    "get_transpile_config",
    "reset_transpile_config",
    "set_transpile_config",
    "transpile_config_context",
]
