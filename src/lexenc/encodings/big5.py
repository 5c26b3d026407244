"""Big5 handler.

Traditional Chinese double-byte encoding: lead 81-FE with a trail byte in
40-7E or A1-FE. Bytes < 0x80 are ASCII.
"""

from __future__ import annotations

from lexenc.charsets import ASCII_LIMIT
from lexenc.encoding import from_codepoint_decoder
from lexenc.encodings.ascii import ASCII
from lexenc.encodings.bands import DoubleByteBand, in_bands
from lexenc.protocols import ByteSource

BIG5_BANDS: tuple[DoubleByteBand, ...] = (
    DoubleByteBand(0x81, 0xFE, 0x40, 0x7E),
    DoubleByteBand(0x81, 0xFE, 0xA1, 0xFE),
)


def big5_codepoint(source: ByteSource, pos: int, n: int) -> tuple[int, int]:
    if n <= 0:
        return 0, 0

    lead = source[pos]
    if lead < ASCII_LIMIT:
        return lead, 1

    if n > 1:
        trail = source[pos + 1]
        if in_bands(BIG5_BANDS, lead, trail):
            return lead << 8 | trail, 2

    return 0, 0


BIG5 = from_codepoint_decoder("Big5", big5_codepoint, fallback=ASCII)
