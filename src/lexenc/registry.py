"""Encoding registry for handler lookup by name.

The registry maps declared encoding names (e.g. from a source file's
encoding comment) and their aliases to handlers. Lookup is
case-insensitive.

Thread Safety:
EncodingRegistry is immutable after creation. Safe to share.
Use EncodingRegistryBuilder for mutable construction.

Example:
    >>> builder = EncodingRegistryBuilder()
    >>> builder.register(GBK, aliases=("CP936",))
    >>> registry = builder.build()
    >>> registry.get("cp936") is GBK
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from lexenc.errors import UnknownEncodingError
from lexenc.utils.logger import get_logger

if TYPE_CHECKING:
    from lexenc.protocols import EncodingHandler

logger = get_logger(__name__)

_REQUIRED_ATTRIBUTES = (
    "name",
    "multibyte",
    "char_width",
    "alnum_char",
    "alpha_char",
    "isupper_char",
)


def normalize_name(name: str) -> str:
    """Normalize an encoding name for lookup ("  Shift_JIS " -> "shift_jis")."""
    return name.strip().casefold()


class EncodingRegistry:
    """Immutable registry of encoding handlers.

    Maps normalized encoding names and aliases to handlers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_encodings", "_by_name")

    def __init__(
        self,
        encodings: tuple[EncodingHandler, ...],
        by_name: dict[str, EncodingHandler],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use EncodingRegistryBuilder to create instances.
        """
        self._encodings = encodings
        self._by_name = by_name

    def get(self, name: str) -> EncodingHandler | None:
        """Get handler for an encoding name or alias.

        Args:
            name: Encoding name, any case (e.g. "gbk", "UTF-8")

        Returns:
            Handler if registered, None otherwise
        """
        return self._by_name.get(normalize_name(name))

    def find(self, name: str) -> EncodingHandler:
        """Get handler for an encoding name, raising if unknown.

        Raises:
            UnknownEncodingError: If no handler is registered under name
        """
        encoding = self.get(name)
        if encoding is None:
            logger.debug("Unknown encoding %r", name)
            raise UnknownEncodingError(name, frozenset(e.name for e in self._encodings))
        return encoding

    def has(self, name: str) -> bool:
        """Check if encoding name is registered."""
        return normalize_name(name) in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """Get all registered names and aliases (normalized)."""
        return frozenset(self._by_name.keys())

    @property
    def encodings(self) -> tuple[EncodingHandler, ...]:
        """Get all registered handlers, in registration order."""
        return self._encodings

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        """Number of registered handlers."""
        return len(self._encodings)


class EncodingRegistryBuilder:
    """Mutable builder for EncodingRegistry.

    Use this to register handlers, then call build() to create
    an immutable registry.

    Example:
        >>> builder = EncodingRegistryBuilder()
        >>> builder.register(ASCII, aliases=("ASCII",)).register(GBK)
        >>> registry = builder.build()
    """

    __slots__ = ("_encodings", "_by_name")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._encodings: list[EncodingHandler] = []
        self._by_name: dict[str, EncodingHandler] = {}

    def register(
        self,
        encoding: EncodingHandler,
        aliases: Iterable[str] = (),
    ) -> EncodingRegistryBuilder:
        """Register an encoding handler under its name and aliases.

        Args:
            encoding: Handler implementing EncodingHandler protocol
            aliases: Additional names that resolve to this handler

        Returns:
            Self for chaining

        Raises:
            TypeError: If the handler is missing a required attribute
            ValueError: If a name or alias is already registered
        """
        for attribute in _REQUIRED_ATTRIBUTES:
            if not hasattr(encoding, attribute):
                msg = f"Handler {type(encoding).__name__} missing '{attribute}' attribute"
                raise TypeError(msg)

        keys = [normalize_name(encoding.name)]
        keys.extend(normalize_name(alias) for alias in aliases)

        for key in keys:
            if key in self._by_name:
                existing = self._by_name[key]
                msg = f"Encoding '{key}' already registered by {existing.name}"
                raise ValueError(msg)

        for key in keys:
            self._by_name[key] = encoding

        self._encodings.append(encoding)
        return self

    def register_all(self, encodings: Iterable[EncodingHandler]) -> EncodingRegistryBuilder:
        """Register multiple handlers without aliases.

        Returns:
            Self for chaining
        """
        for encoding in encodings:
            self.register(encoding)
        return self

    def build(self) -> EncodingRegistry:
        """Build immutable registry from registered handlers.

        Returns:
            Immutable EncodingRegistry
        """
        logger.debug(
            "Built encoding registry: %d encodings, %d names",
            len(self._encodings),
            len(self._by_name),
        )
        return EncodingRegistry(
            encodings=tuple(self._encodings),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered handlers."""
        return len(self._encodings)


def create_registry_with_defaults() -> EncodingRegistryBuilder:
    """Create a builder pre-populated with the built-in encodings.

    Use this to extend the default set with custom handlers:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(my_encoding, aliases=("x-mine",))
        >>> registry = builder.build()

    Returns:
        EncodingRegistryBuilder with defaults already registered
    """
    from lexenc.encodings import (
        ASCII,
        ASCII_8BIT,
        BIG5,
        EUC_JP,
        GBK,
        SHIFT_JIS,
        SINGLE_BYTE_ENCODINGS,
        UTF_8,
        WINDOWS_31J,
    )

    builder = EncodingRegistryBuilder()

    builder.register(ASCII, aliases=("ASCII", "ANSI_X3.4-1968", "646"))
    builder.register(ASCII_8BIT, aliases=("BINARY",))
    builder.register(UTF_8, aliases=("UTF8", "CP65001"))

    # CJK
    builder.register(GBK, aliases=("CP936",))
    builder.register(BIG5, aliases=("CP950",))
    builder.register(EUC_JP, aliases=("eucJP",))
    builder.register(SHIFT_JIS)
    builder.register(WINDOWS_31J, aliases=("CP932", "csWindows31J", "SJIS", "PCK"))

    # Single-byte tables
    for encoding in SINGLE_BYTE_ENCODINGS:
        builder.register(encoding, aliases=_single_byte_aliases(encoding.name))

    return builder


def _single_byte_aliases(name: str) -> tuple[str, ...]:
    if name.startswith("ISO-8859-"):
        return (f"ISO8859-{name.removeprefix('ISO-8859-')}",)
    if name.startswith("Windows-"):
        return (f"CP{name.removeprefix('Windows-')}",)
    return ()


# Cached singleton, shared safely because EncodingRegistry is immutable
_DEFAULT_REGISTRY: EncodingRegistry | None = None


def create_default_registry() -> EncodingRegistry:
    """Get the default encoding registry (cached singleton).

    Returns:
        Registry with every built-in handler and its common aliases

    Thread Safety:
        Returns a cached immutable registry. Safe for concurrent access.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


__all__ = [
    "EncodingRegistry",
    "EncodingRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    "normalize_name",
]
