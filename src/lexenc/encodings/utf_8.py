"""UTF-8 handler.

Accepts well-formed UTF-8 only: no overlong forms, no surrogates, nothing
above U+10FFFF. Multi-byte characters are classified by their Unicode
character properties; ASCII goes to the ASCII classifier like every other
handler.

Complexity: O(1) per call (at most four bytes read).
"""

from __future__ import annotations

from lexenc.charsets import ASCII_LIMIT
from lexenc.encoding import from_codepoint_decoder
from lexenc.encodings.ascii import ASCII
from lexenc.protocols import ByteSource


def _build_lead_shapes() -> dict[int, tuple[int, int, int]]:
    """Map each valid lead byte to (length, second_min, second_max).

    The second byte's range is narrowed where the lead alone would allow
    overlongs (E0, F0), surrogates (ED) or values past U+10FFFF (F4).
    """
    shapes: dict[int, tuple[int, int, int]] = {}
    for lead in range(0xC2, 0xE0):
        shapes[lead] = (2, 0x80, 0xBF)
    for lead in range(0xE0, 0xF0):
        shapes[lead] = (3, 0x80, 0xBF)
    for lead in range(0xF0, 0xF5):
        shapes[lead] = (4, 0x80, 0xBF)
    shapes[0xE0] = (3, 0xA0, 0xBF)
    shapes[0xED] = (3, 0x80, 0x9F)
    shapes[0xF0] = (4, 0x90, 0xBF)
    shapes[0xF4] = (4, 0x80, 0x8F)
    return shapes


_LEAD_SHAPES: dict[int, tuple[int, int, int]] = _build_lead_shapes()

# Payload bits of the lead byte, by sequence length
_LEAD_MASKS: dict[int, int] = {2: 0x1F, 3: 0x0F, 4: 0x07}


def utf_8_codepoint(source: ByteSource, pos: int, n: int) -> tuple[int, int]:
    if n <= 0:
        return 0, 0

    lead = source[pos]
    if lead < ASCII_LIMIT:
        return lead, 1

    shape = _LEAD_SHAPES.get(lead)
    if shape is None:
        return 0, 0

    length, second_min, second_max = shape
    if n < length:
        return 0, 0

    second = source[pos + 1]
    if not second_min <= second <= second_max:
        return 0, 0

    codepoint = (lead & _LEAD_MASKS[length]) << 6 | (second & 0x3F)
    for offset in range(2, length):
        byte = source[pos + offset]
        if byte >> 6 != 0b10:
            return 0, 0
        codepoint = codepoint << 6 | (byte & 0x3F)

    return codepoint, length


class UnicodeClassifier:
    """Classify codepoints by Unicode character properties."""

    __slots__ = ()

    def is_alpha(self, codepoint: int) -> bool:
        return chr(codepoint).isalpha()

    def is_alnum(self, codepoint: int) -> bool:
        return chr(codepoint).isalnum()

    def is_upper(self, codepoint: int) -> bool:
        return chr(codepoint).isupper()


UTF_8 = from_codepoint_decoder(
    "UTF-8",
    utf_8_codepoint,
    fallback=ASCII,
    classifier=UnicodeClassifier(),
)
