"""Protocols for lexenc.

Defines the contracts an encoding handler satisfies to be pluggable into a
lexer, and the capabilities a handler may compose with.

Every operation takes the same byte window, passed positionally:

    source: the complete source buffer (read-only, borrowed for the call)
    pos:    offset of the character being queried
    n:      remaining length; the operation never reads source[pos + n]

Thread Safety:
    Implementations must be stateless or read only immutable tables.
    The same handler is shared by every lexer in the process.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

ByteSource = bytes | bytearray | memoryview
"""Anything indexable to unsigned byte values."""

CodepointDecoder = Callable[[ByteSource, int, int], tuple[int, int]]
"""Decode one character: (source, pos, n) -> (codepoint, width).

Width 0 (with codepoint 0) means no character could be decoded at pos.
"""


@runtime_checkable
class ByteClassifier(Protocol):
    """Single-byte classification capability.

    Takes a one-byte window. ``alpha_char`` and ``alnum_char`` answer with a
    width (1 if the byte is in the class, else 0) so callers can advance by
    the result; ``isupper_char`` answers with a bool.
    """

    def alpha_char(self, source: ByteSource, pos: int, n: int) -> int: ...

    def alnum_char(self, source: ByteSource, pos: int, n: int) -> int: ...

    def isupper_char(self, source: ByteSource, pos: int, n: int) -> bool: ...


@runtime_checkable
class CodepointClassifier(Protocol):
    """Classification of decoded multi-byte codepoints.

    Handlers built without one treat every multi-byte codepoint as neither
    alphabetic, alphanumeric nor uppercase.
    """

    def is_alpha(self, codepoint: int) -> bool: ...

    def is_alnum(self, codepoint: int) -> bool: ...

    def is_upper(self, codepoint: int) -> bool: ...


@runtime_checkable
class EncodingHandler(ByteClassifier, Protocol):
    """Protocol for per-encoding character queries.

    Attributes:
        name: Display name, also the registry key (e.g. "GBK")
        multibyte: False when every character is exactly one byte wide,
            letting the lexer skip per-character dispatch

    Example:
        >>> width = handler.char_width(source, pos, len(source) - pos)
        >>> if width == 0:
        ...     ...  # invalid byte: stop advancing

    """

    name: str
    multibyte: bool

    def char_width(self, source: ByteSource, pos: int, n: int) -> int:
        """Width in bytes of the character at pos, 0 if none decodes.

        Complexity: O(1)
        """
        ...
