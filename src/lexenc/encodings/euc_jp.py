"""EUC-JP handler.

Three kinds of non-ASCII characters:

    8E + A1-DF          half-width katakana (SS2), 2 bytes
    A1-FE + A1-FE       JIS X 0208, 2 bytes
    8F + A1-FE + A1-FE  JIS X 0212 (SS3), 3 bytes

Three-byte codepoints are ``b0 << 16 | b1 << 8 | b2``.
"""

from __future__ import annotations

from lexenc.charsets import ASCII_LIMIT
from lexenc.encoding import from_codepoint_decoder
from lexenc.encodings.ascii import ASCII
from lexenc.encodings.bands import DoubleByteBand, in_bands
from lexenc.protocols import ByteSource

SS2 = 0x8E
SS3 = 0x8F

EUC_JP_BANDS: tuple[DoubleByteBand, ...] = (
    DoubleByteBand(SS2, SS2, 0xA1, 0xDF),
    DoubleByteBand(0xA1, 0xFE, 0xA1, 0xFE),
)


def _is_euc_byte(byte: int) -> bool:
    return 0xA1 <= byte <= 0xFE


def euc_jp_codepoint(source: ByteSource, pos: int, n: int) -> tuple[int, int]:
    if n <= 0:
        return 0, 0

    lead = source[pos]
    if lead < ASCII_LIMIT:
        return lead, 1

    if n > 1:
        second = source[pos + 1]
        if in_bands(EUC_JP_BANDS, lead, second):
            return lead << 8 | second, 2

        if lead == SS3 and n > 2 and _is_euc_byte(second):
            third = source[pos + 2]
            if _is_euc_byte(third):
                return lead << 16 | second << 8 | third, 3

    return 0, 0


EUC_JP = from_codepoint_decoder("EUC-JP", euc_jp_codepoint, fallback=ASCII)
