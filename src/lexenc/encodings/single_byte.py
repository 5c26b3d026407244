"""Single-byte table handlers (ISO-8859-x, KOI8-R, Windows-125x).

Every byte is a one-byte character. Classification tables are derived once
at import time from Python's own codec for the encoding: each byte is
decoded and tested against Unicode character properties. Bytes the codec
leaves undefined are never letters.

Thread Safety:
    Tables are frozen sets built at import time. Safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass

from lexenc.encoding import Encoding
from lexenc.encodings.ascii import binary_char_width
from lexenc.protocols import ByteSource


@dataclass(frozen=True, slots=True)
class SingleByteTable:
    """Byte classification for one single-byte encoding.

    Attributes:
        alpha: Bytes that decode to alphabetic characters
        alnum: Bytes that decode to alphanumeric characters
        upper: Bytes that decode to uppercase characters

    """

    alpha: frozenset[int]
    alnum: frozenset[int]
    upper: frozenset[int]

    @classmethod
    def from_codec(cls, codec: str) -> SingleByteTable:
        """Build the table by decoding all 256 bytes with ``codec``.

        Args:
            codec: Python codec name (e.g. "iso8859_5", "cp1251")

        Returns:
            New SingleByteTable
        """
        alpha: set[int] = set()
        alnum: set[int] = set()
        upper: set[int] = set()
        for byte in range(256):
            try:
                char = bytes((byte,)).decode(codec)
            except UnicodeDecodeError:
                continue
            if char.isalpha():
                alpha.add(byte)
            if char.isalnum():
                alnum.add(byte)
            if char.isupper():
                upper.add(byte)
        return cls(frozenset(alpha), frozenset(alnum), frozenset(upper))

    def alpha_char(self, source: ByteSource, pos: int, n: int) -> int:
        return 1 if n > 0 and source[pos] in self.alpha else 0

    def alnum_char(self, source: ByteSource, pos: int, n: int) -> int:
        return 1 if n > 0 and source[pos] in self.alnum else 0

    def isupper_char(self, source: ByteSource, pos: int, n: int) -> bool:
        return n > 0 and source[pos] in self.upper


def single_byte_encoding(name: str, codec: str) -> Encoding:
    """Create a handler for a single-byte encoding backed by a Python codec."""
    table = SingleByteTable.from_codec(codec)
    return Encoding(
        name=name,
        char_width=binary_char_width,
        alnum_char=table.alnum_char,
        alpha_char=table.alpha_char,
        isupper_char=table.isupper_char,
        multibyte=False,
    )


# (display name, Python codec). ISO-8859-12 was never published.
SINGLE_BYTE_CODECS: tuple[tuple[str, str], ...] = (
    *((f"ISO-8859-{part}", f"iso8859_{part}") for part in (*range(1, 12), *range(13, 17))),
    ("KOI8-R", "koi8_r"),
    ("Windows-1251", "cp1251"),
    ("Windows-1252", "cp1252"),
)

SINGLE_BYTE_ENCODINGS: tuple[Encoding, ...] = tuple(
    single_byte_encoding(name, codec) for name, codec in SINGLE_BYTE_CODECS
)

_BY_NAME: dict[str, Encoding] = {encoding.name: encoding for encoding in SINGLE_BYTE_ENCODINGS}

ISO_8859_1 = _BY_NAME["ISO-8859-1"]
KOI8_R = _BY_NAME["KOI8-R"]
WINDOWS_1251 = _BY_NAME["Windows-1251"]
WINDOWS_1252 = _BY_NAME["Windows-1252"]
