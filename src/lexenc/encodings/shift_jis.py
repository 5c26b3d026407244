"""Shift_JIS and Windows-31J handlers.

Both map A1-DF to one-byte half-width katakana; those bytes decode with
width 1 and go to the ASCII classifier, which never counts them as letters.
Double-byte characters pair a lead byte with a trail byte in 40-FC, except
7F. Windows-31J (CP932) extends the upper lead range from EF to FC for
vendor and user-defined characters.
"""

from __future__ import annotations

from lexenc.charsets import ASCII_LIMIT
from lexenc.encoding import from_codepoint_decoder
from lexenc.encodings.ascii import ASCII
from lexenc.encodings.bands import DoubleByteBand, in_bands
from lexenc.protocols import ByteSource

HALF_WIDTH_KATAKANA_MIN = 0xA1
HALF_WIDTH_KATAKANA_MAX = 0xDF

SHIFT_JIS_BANDS: tuple[DoubleByteBand, ...] = (
    DoubleByteBand(0x81, 0x9F, 0x40, 0xFC, excluded_trail=0x7F),
    DoubleByteBand(0xE0, 0xEF, 0x40, 0xFC, excluded_trail=0x7F),
)

WINDOWS_31J_BANDS: tuple[DoubleByteBand, ...] = (
    DoubleByteBand(0x81, 0x9F, 0x40, 0xFC, excluded_trail=0x7F),
    DoubleByteBand(0xE0, 0xFC, 0x40, 0xFC, excluded_trail=0x7F),
)


def _decode(
    bands: tuple[DoubleByteBand, ...], source: ByteSource, pos: int, n: int
) -> tuple[int, int]:
    if n <= 0:
        return 0, 0

    lead = source[pos]
    if lead < ASCII_LIMIT:
        return lead, 1
    if HALF_WIDTH_KATAKANA_MIN <= lead <= HALF_WIDTH_KATAKANA_MAX:
        return lead, 1

    if n > 1:
        trail = source[pos + 1]
        if in_bands(bands, lead, trail):
            return lead << 8 | trail, 2

    return 0, 0


def shift_jis_codepoint(source: ByteSource, pos: int, n: int) -> tuple[int, int]:
    return _decode(SHIFT_JIS_BANDS, source, pos, n)


def windows_31j_codepoint(source: ByteSource, pos: int, n: int) -> tuple[int, int]:
    return _decode(WINDOWS_31J_BANDS, source, pos, n)


SHIFT_JIS = from_codepoint_decoder("Shift_JIS", shift_jis_codepoint, fallback=ASCII)

WINDOWS_31J = from_codepoint_decoder("Windows-31J", windows_31j_codepoint, fallback=ASCII)
