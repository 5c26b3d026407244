"""GBK handler.

GBK is a double-byte CJK encoding whose low half is ASCII. A byte < 0x80 is
a one-byte character; anything else must pair with a trail byte inside one
of the five GBK regions:

    GBK/1  lead A1-A9  trail A1-FE          (symbols)
    GBK/2  lead B0-F7  trail A1-FE          (GB 2312 hanzi)
    GBK/3  lead 81-A0  trail 40-FE, not 7F  (extension hanzi)
    GBK/4  lead AA-FE  trail 40-A0, not 7F  (extension hanzi)
    GBK/5  lead A8-A9  trail 40-A0, not 7F  (extension symbols)

Trail 0x7F is unassigned in every extension region.

Single-byte characters are classified by the ASCII handler. No double-byte
codepoint counts as alphabetic, alphanumeric or uppercase.

Example:
    >>> gbk_codepoint(b"\\xb0\\xa1", 0, 2)
    (45217, 2)
    >>> gbk_codepoint(b"\\xb0", 0, 1)
    (0, 0)

"""

from __future__ import annotations

from lexenc.charsets import ASCII_LIMIT
from lexenc.encoding import from_codepoint_decoder
from lexenc.encodings.ascii import ASCII
from lexenc.encodings.bands import DoubleByteBand, in_bands
from lexenc.protocols import ByteSource

GBK_BANDS: tuple[DoubleByteBand, ...] = (
    DoubleByteBand(0xA1, 0xA9, 0xA1, 0xFE),  # GBK/1
    DoubleByteBand(0xB0, 0xF7, 0xA1, 0xFE),  # GBK/2
    DoubleByteBand(0x81, 0xA0, 0x40, 0xFE, excluded_trail=0x7F),  # GBK/3
    DoubleByteBand(0xAA, 0xFE, 0x40, 0xA0, excluded_trail=0x7F),  # GBK/4
    DoubleByteBand(0xA8, 0xA9, 0x40, 0xA0, excluded_trail=0x7F),  # GBK/5
)


def gbk_codepoint(source: ByteSource, pos: int, n: int) -> tuple[int, int]:
    """Decode the GBK character at pos.

    Args:
        source: Source buffer
        pos: Offset of the lead byte
        n: Remaining length; the trail byte is read only when n > 1

    Returns:
        (codepoint, width). Single bytes decode to themselves, pairs to
        ``lead << 8 | trail``. (0, 0) when no character decodes, including
        a lead byte >= 0x80 at the end of the buffer.
    """
    if n <= 0:
        return 0, 0

    lead = source[pos]
    if lead < ASCII_LIMIT:
        return lead, 1

    if n > 1:
        trail = source[pos + 1]
        if in_bands(GBK_BANDS, lead, trail):
            return lead << 8 | trail, 2

    return 0, 0


GBK = from_codepoint_decoder("GBK", gbk_codepoint, fallback=ASCII)
