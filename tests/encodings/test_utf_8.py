"""Tests for the UTF-8 handler.

Decoding is cross-checked against Python's strict UTF-8 codec with
Hypothesis.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lexenc.encodings import UTF_8, utf_8_codepoint


class TestDecoding:
    @pytest.mark.parametrize("char", ["A", "é", "中", "😀", "߿", "￿", "\U0010ffff"])
    def test_valid_characters(self, char: str) -> None:
        source = char.encode("utf-8")
        assert utf_8_codepoint(source, 0, len(source)) == (ord(char), len(source))

    @pytest.mark.parametrize(
        "source",
        [
            b"\x80",  # lone continuation byte
            b"\xc0\x80",  # overlong NUL
            b"\xc1\xbf",  # overlong
            b"\xe0\x80\x80",  # overlong three-byte
            b"\xed\xa0\x80",  # surrogate
            b"\xf0\x80\x80\x80",  # overlong four-byte
            b"\xf4\x90\x80\x80",  # above U+10FFFF
            b"\xf5\x80\x80\x80",  # invalid lead
            b"\xff",
            b"\xe4\xb8",  # truncated
            b"\xe4\x41\x80",  # bad continuation
        ],
    )
    def test_invalid_sequences(self, source: bytes) -> None:
        assert utf_8_codepoint(source, 0, len(source)) == (0, 0)
        assert UTF_8.char_width(source, 0, len(source)) == 0

    def test_window_truncates_sequence(self) -> None:
        source = "中".encode("utf-8")
        assert UTF_8.char_width(source, 0, 2) == 0
        assert UTF_8.char_width(source, 0, 3) == 3

    @given(char=st.characters(exclude_categories=("Cs",)))
    @settings(max_examples=300)
    def test_encoded_characters_round_trip(self, char: str) -> None:
        source = char.encode("utf-8")
        assert utf_8_codepoint(source, 0, len(source)) == (ord(char), len(source))

    @given(source=st.binary(min_size=1, max_size=4))
    @settings(max_examples=500)
    def test_agrees_with_strict_codec(self, source: bytes) -> None:
        """Width is the length of the shortest prefix that decodes to one character."""
        expected = 0
        for length in range(1, len(source) + 1):
            try:
                text = source[:length].decode("utf-8")
            except UnicodeDecodeError:
                continue
            if len(text) == 1:
                expected = length
                break
        codepoint, width = utf_8_codepoint(source, 0, len(source))
        assert width == expected
        if width:
            assert chr(codepoint) == source[:width].decode("utf-8")


class TestClassification:
    def test_accented_letters(self) -> None:
        lower = "é".encode("utf-8")
        upper = "É".encode("utf-8")
        assert UTF_8.alpha_char(lower, 0, 2) == 2
        assert UTF_8.alnum_char(lower, 0, 2) == 2
        assert UTF_8.isupper_char(lower, 0, 2) is False
        assert UTF_8.isupper_char(upper, 0, 2) is True

    def test_cjk_is_alphabetic(self) -> None:
        source = "中".encode("utf-8")
        assert UTF_8.alpha_char(source, 0, 3) == 3
        assert UTF_8.isupper_char(source, 0, 3) is False

    def test_non_ascii_digit_is_alnum_not_alpha(self) -> None:
        source = "٣".encode("utf-8")
        assert UTF_8.alpha_char(source, 0, 2) == 0
        assert UTF_8.alnum_char(source, 0, 2) == 2

    def test_emoji_is_not_a_letter(self) -> None:
        source = "😀".encode("utf-8")
        assert UTF_8.char_width(source, 0, 4) == 4
        assert UTF_8.alpha_char(source, 0, 4) == 0
        assert UTF_8.alnum_char(source, 0, 4) == 0

    def test_ascii_delegation(self) -> None:
        assert UTF_8.alpha_char(b"z", 0, 1) == 1
        assert UTF_8.isupper_char(b"Z", 0, 1) is True
        assert UTF_8.alnum_char(b"_", 0, 1) == 0

    def test_invalid_is_not_classified(self) -> None:
        assert UTF_8.alpha_char(b"\xc3", 0, 1) == 0
        assert UTF_8.isupper_char(b"\xc3", 0, 1) is False
