"""Property-based tests for handler invariants using Hypothesis.

These hold for every registered encoding and every byte window, valid or
not: handlers are total, never read past the window, and their answers are
consistent with each other.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lexenc import create_default_registry, identifier_width, iter_chars

ENCODINGS = create_default_registry().encodings


@st.composite
def windows(draw: st.DrawFn) -> tuple[bytes, int, int]:
    """Draw (source, pos, n) with 0 <= pos <= len(source) and pos + n <= len(source)."""
    source = draw(st.binary(max_size=12))
    pos = draw(st.integers(0, len(source)))
    n = draw(st.integers(0, len(source) - pos))
    return source, pos, n


@pytest.mark.parametrize("encoding", ENCODINGS, ids=lambda e: e.name)
class TestHandlerInvariants:
    @given(window=windows())
    @settings(max_examples=150)
    def test_width_fits_window(self, encoding, window) -> None:
        source, pos, n = window
        width = encoding.char_width(source, pos, n)
        assert 0 <= width <= n

    @given(window=windows())
    @settings(max_examples=150)
    def test_never_reads_past_window(self, encoding, window) -> None:
        """Answers depend only on the n bytes at pos."""
        source, pos, n = window
        clipped = source[pos : pos + n]
        assert encoding.char_width(source, pos, n) == encoding.char_width(clipped, 0, n)
        assert encoding.alpha_char(source, pos, n) == encoding.alpha_char(clipped, 0, n)
        assert encoding.alnum_char(source, pos, n) == encoding.alnum_char(clipped, 0, n)
        assert encoding.isupper_char(source, pos, n) == encoding.isupper_char(clipped, 0, n)

    @given(window=windows())
    @settings(max_examples=150)
    def test_classification_is_consistent(self, encoding, window) -> None:
        source, pos, n = window
        width = encoding.char_width(source, pos, n)
        alpha = encoding.alpha_char(source, pos, n)
        alnum = encoding.alnum_char(source, pos, n)
        assert alpha in (0, width)
        assert alnum in (0, width)
        if alpha:
            assert alnum
        if encoding.isupper_char(source, pos, n):
            assert width > 0

    @given(source=st.binary(max_size=32))
    @settings(max_examples=100)
    def test_iter_chars_advances(self, encoding, source: bytes) -> None:
        end = 0
        for offset, width in iter_chars(source, encoding):
            assert offset == end
            assert width > 0
            end = offset + width
        assert end <= len(source)

    @given(source=st.binary(max_size=32))
    @settings(max_examples=100)
    def test_identifier_width_in_bounds(self, encoding, source: bytes) -> None:
        assert 0 <= identifier_width(source, encoding) <= len(source)

    def test_single_byte_flag(self, encoding) -> None:
        """Handlers that claim single-byte never report wider characters."""
        if encoding.multibyte:
            return
        for byte in range(0x100):
            assert encoding.char_width(bytes((byte, byte)), 0, 2) <= 1
