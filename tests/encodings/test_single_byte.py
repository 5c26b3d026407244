"""Tests for the codec-derived single-byte table handlers."""

import pytest

from lexenc.encodings import ISO_8859_1, KOI8_R, SINGLE_BYTE_ENCODINGS, WINDOWS_1251, WINDOWS_1252
from lexenc.encodings.single_byte import SINGLE_BYTE_CODECS, SingleByteTable


class TestSingleByteTable:
    def test_latin_1_table(self) -> None:
        table = SingleByteTable.from_codec("latin-1")
        assert 0xC9 in table.alpha  # É
        assert 0xC9 in table.upper
        assert 0xE9 not in table.upper  # é
        assert 0xD7 not in table.alpha  # ×
        assert 0x31 in table.alnum
        assert 0x31 not in table.alpha

    def test_undefined_bytes_are_not_letters(self) -> None:
        table = SingleByteTable.from_codec("cp1252")
        assert 0x81 not in table.alpha
        assert 0x81 not in table.alnum

    def test_alpha_is_subset_of_alnum(self) -> None:
        for _, codec in SINGLE_BYTE_CODECS:
            table = SingleByteTable.from_codec(codec)
            assert table.alpha <= table.alnum
            assert table.upper <= table.alpha

    def test_table_is_frozen(self) -> None:
        table = SingleByteTable.from_codec("latin-1")
        with pytest.raises(AttributeError):
            table.alpha = frozenset()  # type: ignore[misc]


class TestHandlers:
    def test_registered_set(self) -> None:
        names = [encoding.name for encoding in SINGLE_BYTE_ENCODINGS]
        assert "ISO-8859-12" not in names
        assert names[0] == "ISO-8859-1"
        assert names[-3:] == ["KOI8-R", "Windows-1251", "Windows-1252"]
        assert len(names) == 18

    @pytest.mark.parametrize("encoding", SINGLE_BYTE_ENCODINGS, ids=lambda e: e.name)
    def test_every_byte_is_one_wide(self, encoding) -> None:
        assert encoding.multibyte is False
        for byte in range(0x100):
            assert encoding.char_width(bytes((byte,)), 0, 1) == 1
        assert encoding.char_width(b"", 0, 0) == 0

    @pytest.mark.parametrize("encoding", SINGLE_BYTE_ENCODINGS, ids=lambda e: e.name)
    def test_ascii_half_matches_ascii(self, encoding) -> None:
        for byte in range(0x80):
            char = chr(byte)
            source = bytes((byte,))
            assert encoding.alpha_char(source, 0, 1) == int(char.isalpha())
            assert encoding.isupper_char(source, 0, 1) == char.isupper()

    def test_latin_1(self) -> None:
        assert ISO_8859_1.alpha_char(b"\xc9", 0, 1) == 1
        assert ISO_8859_1.isupper_char(b"\xc9", 0, 1) is True
        assert ISO_8859_1.isupper_char(b"\xe9", 0, 1) is False
        assert ISO_8859_1.alpha_char(b"\xd7", 0, 1) == 0

    def test_koi8_r_cyrillic_case(self) -> None:
        """KOI8-R puts lowercase at C0-DF and uppercase at E0-FF."""
        assert KOI8_R.alpha_char(b"\xc1", 0, 1) == 1
        assert KOI8_R.isupper_char(b"\xc1", 0, 1) is False
        assert KOI8_R.isupper_char(b"\xe1", 0, 1) is True

    def test_windows_1251(self) -> None:
        source = "Ж".encode("cp1251")
        assert WINDOWS_1251.alpha_char(source, 0, 1) == 1
        assert WINDOWS_1251.isupper_char(source, 0, 1) is True

    def test_windows_1252(self) -> None:
        source = "Š".encode("cp1252")
        assert WINDOWS_1252.isupper_char(source, 0, 1) is True
        assert WINDOWS_1252.alpha_char(b"\x81", 0, 1) == 0
        assert WINDOWS_1252.char_width(b"\x81", 0, 1) == 1
