"""ASCII and ASCII-8BIT handlers.

US-ASCII accepts only 7-bit bytes. ASCII-8BIT (binary) accepts every byte
as a one-byte character but classifies with the same ASCII tables, so bytes
>= 0x80 are never letters.

These handlers are also the single-byte classifier the multi-byte handlers
delegate to for their ASCII-compatible low half.
"""

from __future__ import annotations

from lexenc.charsets import ASCII_ALNUM, ASCII_ALPHA, ASCII_LIMIT, ASCII_UPPER
from lexenc.encoding import Encoding
from lexenc.protocols import ByteSource


def ascii_char_width(source: ByteSource, pos: int, n: int) -> int:
    return 1 if n > 0 and source[pos] < ASCII_LIMIT else 0


def ascii_alpha_char(source: ByteSource, pos: int, n: int) -> int:
    return 1 if n > 0 and source[pos] in ASCII_ALPHA else 0


def ascii_alnum_char(source: ByteSource, pos: int, n: int) -> int:
    return 1 if n > 0 and source[pos] in ASCII_ALNUM else 0


def ascii_isupper_char(source: ByteSource, pos: int, n: int) -> bool:
    return n > 0 and source[pos] in ASCII_UPPER


def binary_char_width(source: ByteSource, pos: int, n: int) -> int:
    return 1 if n > 0 else 0


ASCII = Encoding(
    name="US-ASCII",
    char_width=ascii_char_width,
    alnum_char=ascii_alnum_char,
    alpha_char=ascii_alpha_char,
    isupper_char=ascii_isupper_char,
    multibyte=False,
)

ASCII_8BIT = Encoding(
    name="ASCII-8BIT",
    char_width=binary_char_width,
    alnum_char=ascii_alnum_char,
    alpha_char=ascii_alpha_char,
    isupper_char=ascii_isupper_char,
    multibyte=False,
)
