"""Lexer-side helpers that walk a byte buffer through an encoding handler.

These are the loops a lexer writes around the handler queries: advance by
char_width, stop on width 0, never pass ``end``.

Thread Safety:
    Pure functions over their arguments. The source buffer is only read.

Example:
    >>> from lexenc.encodings import GBK
    >>> list(iter_chars(b"a\\xb0\\xa1b", GBK))
    [(0, 1), (1, 2), (3, 1)]
    >>> identifier_width(b"foo_\\xb0\\xa1 = 1", GBK)
    6

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from lexenc.charsets import ASCII_LIMIT, UNDERSCORE

if TYPE_CHECKING:
    from lexenc.protocols import ByteSource, EncodingHandler


def iter_chars(
    source: ByteSource,
    encoding: EncodingHandler,
    pos: int = 0,
    end: int | None = None,
) -> Iterator[tuple[int, int]]:
    """Yield (offset, width) for each character from pos to end.

    Stops at the first byte that does not decode (width 0); the caller can
    compare the last offset + width against ``end`` to detect that.

    Complexity: O(end - pos)
    """
    if end is None:
        end = len(source)
    while pos < end:
        width = encoding.char_width(source, pos, end - pos)
        if width == 0:
            return
        yield pos, width
        pos += width


def identifier_width(
    source: ByteSource,
    encoding: EncodingHandler,
    pos: int = 0,
    end: int | None = None,
) -> int:
    """Byte length of the identifier starting at pos (0 if none).

    Identifier characters are alphanumerics and ``_``. For multibyte
    encodings, any decodable non-ASCII character also counts, so CJK
    identifiers scan whole.
    """
    if end is None:
        end = len(source)
    start = pos
    while pos < end:
        n = end - pos
        width = encoding.alnum_char(source, pos, n)
        if not width:
            byte = source[pos]
            if byte == UNDERSCORE:
                width = 1
            elif encoding.multibyte and byte >= ASCII_LIMIT:
                width = encoding.char_width(source, pos, n)
            if not width:
                break
        pos += width
    return pos - start


def is_constant_start(
    source: ByteSource,
    encoding: EncodingHandler,
    pos: int = 0,
    end: int | None = None,
) -> bool:
    """Check whether the character at pos is uppercase."""
    if end is None:
        end = len(source)
    return pos < end and encoding.isupper_char(source, pos, end - pos)


__all__ = [
    "identifier_width",
    "is_constant_start",
    "iter_chars",
]
