"""ContextVar-based encoding configuration for lexenc.

Provides context-local configuration using Python's ContextVars (PEP 567):
which registry to resolve names in, and which encoding to use when a source
declares none.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from lexenc.config import EncodingConfig, encoding_config_context, resolve_encoding

    with encoding_config_context(EncodingConfig(default_encoding="GBK")):
        encoding = resolve_encoding()        # GBK
        encoding = resolve_encoding("utf-8")  # explicit name wins

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lexenc.registry import create_default_registry

if TYPE_CHECKING:
    from lexenc.protocols import EncodingHandler
    from lexenc.registry import EncodingRegistry


@dataclass(frozen=True, slots=True)
class EncodingConfig:
    """Immutable encoding configuration.

    Attributes:
        default_encoding: Encoding name used when a source declares none
        registry: Registry to resolve names in (None = built-in defaults)

    """

    default_encoding: str = "UTF-8"
    registry: "EncodingRegistry | None" = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EncodingConfig":
        """Create EncodingConfig from dictionary.

        Only includes keys that are valid EncodingConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = EncodingConfig.from_dict({
            ...     "default_encoding": "Shift_JIS",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.default_encoding
            'Shift_JIS'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def get_registry(self) -> "EncodingRegistry":
        """Configured registry, or the built-in default registry."""
        if self.registry is not None:
            return self.registry
        return create_default_registry()


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: EncodingConfig = EncodingConfig()

_encoding_config: ContextVar[EncodingConfig] = ContextVar(
    "encoding_config",
    default=_DEFAULT_CONFIG,
)


def get_encoding_config() -> EncodingConfig:
    """Get current encoding configuration (context-local)."""
    return _encoding_config.get()


def set_encoding_config(config: EncodingConfig) -> None:
    """Set encoding configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _encoding_config.set(config)


def reset_encoding_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _encoding_config.set(_DEFAULT_CONFIG)


@contextmanager
def encoding_config_context(config: EncodingConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with encoding_config_context(EncodingConfig(default_encoding="GBK")):
        ...     resolve_encoding().name
        'GBK'

    """
    previous = _encoding_config.get()
    _encoding_config.set(config)
    try:
        yield
    finally:
        _encoding_config.set(previous)


def resolve_encoding(name: str | None = None) -> "EncodingHandler":
    """Look up a handler in the configured registry.

    Args:
        name: Declared encoding name, or None for the configured default

    Returns:
        The registered handler

    Raises:
        UnknownEncodingError: If the name is not registered
    """
    config = _encoding_config.get()
    return config.get_registry().find(name if name is not None else config.default_encoding)


__all__ = [
    "EncodingConfig",
    "encoding_config_context",
    "get_encoding_config",
    "reset_encoding_config",
    "resolve_encoding",
    "set_encoding_config",
]
