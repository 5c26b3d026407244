"""Built-in encoding handlers.

Each module exposes its handler as a module-level constant, plus the
codepoint decoder it was composed from where there is one.

Available handlers:
    ASCII, ASCII_8BIT: 7-bit ASCII and binary
    GBK, BIG5: Chinese double-byte encodings
    EUC_JP, SHIFT_JIS, WINDOWS_31J: Japanese multi-byte encodings
    UTF_8: Unicode
    SINGLE_BYTE_ENCODINGS: ISO-8859-x, KOI8-R, Windows-1251/1252
"""

from lexenc.encodings.ascii import ASCII, ASCII_8BIT
from lexenc.encodings.big5 import BIG5, big5_codepoint
from lexenc.encodings.euc_jp import EUC_JP, euc_jp_codepoint
from lexenc.encodings.gbk import GBK, gbk_codepoint
from lexenc.encodings.shift_jis import (
    SHIFT_JIS,
    WINDOWS_31J,
    shift_jis_codepoint,
    windows_31j_codepoint,
)
from lexenc.encodings.single_byte import (
    ISO_8859_1,
    KOI8_R,
    SINGLE_BYTE_ENCODINGS,
    WINDOWS_1251,
    WINDOWS_1252,
)
from lexenc.encodings.utf_8 import UTF_8, utf_8_codepoint

__all__ = [
    "ASCII",
    "ASCII_8BIT",
    "BIG5",
    "EUC_JP",
    "GBK",
    "ISO_8859_1",
    "KOI8_R",
    "SHIFT_JIS",
    "SINGLE_BYTE_ENCODINGS",
    "UTF_8",
    "WINDOWS_1251",
    "WINDOWS_1252",
    "WINDOWS_31J",
    "big5_codepoint",
    "euc_jp_codepoint",
    "gbk_codepoint",
    "shift_jis_codepoint",
    "utf_8_codepoint",
    "windows_31j_codepoint",
]
