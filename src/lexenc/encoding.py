"""Encoding handler descriptor and handler composition.

An Encoding is a named bundle of the four per-character queries a lexer
needs. Handlers are plain data: new encodings are added by building a
descriptor, never by subclassing.

Most multi-byte handlers are composed from a codepoint decoder with
from_codepoint_decoder(): single-byte results are classified by a
ByteClassifier (usually the ASCII handler), multi-byte results by an
optional CodepointClassifier.

Thread Safety:
    Encoding is frozen and its callables are pure. Descriptors are built
    once at import time and shared by every lexer and thread.

Example:
    >>> from lexenc.encodings import GBK
    >>> GBK.char_width(b"\\xb0\\xa1", 0, 2)
    2
    >>> GBK.alpha_char(b"\\xb0\\xa1", 0, 2)
    0

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from lexenc.protocols import (
    ByteClassifier,
    ByteSource,
    CodepointClassifier,
    CodepointDecoder,
)

WidthQuery = Callable[[ByteSource, int, int], int]
BoolQuery = Callable[[ByteSource, int, int], bool]


@dataclass(frozen=True, slots=True)
class Encoding:
    """Immutable encoding handler descriptor.

    Attributes:
        name: Display name and registry key (e.g. "GBK", "Shift_JIS")
        char_width: Bytes consumed by the character at pos (0 = invalid)
        alnum_char: Width of the character if alphanumeric, else 0
        alpha_char: Width of the character if alphabetic, else 0
        isupper_char: True if the character is uppercase
        multibyte: False if every character is one byte wide

    """

    name: str
    char_width: WidthQuery = field(repr=False)
    alnum_char: WidthQuery = field(repr=False)
    alpha_char: WidthQuery = field(repr=False)
    isupper_char: BoolQuery = field(repr=False)
    multibyte: bool = False

    def __str__(self) -> str:
        return self.name


def from_codepoint_decoder(
    name: str,
    decoder: CodepointDecoder,
    *,
    fallback: ByteClassifier,
    classifier: CodepointClassifier | None = None,
    multibyte: bool = True,
) -> Encoding:
    """Compose a handler from a codepoint decoder.

    Width-1 results are re-read as a one-byte window and handed to
    ``fallback``. Wider results go to ``classifier``; without one they are
    never alphabetic, alphanumeric or uppercase. Width 0 answers 0/False.

    Args:
        name: Display name for the handler
        decoder: (source, pos, n) -> (codepoint, width)
        fallback: Single-byte classifier for width-1 characters
        classifier: Classifier for decoded multi-byte codepoints (optional)
        multibyte: Value of the descriptor's multibyte flag

    Returns:
        Immutable Encoding descriptor
    """

    def char_width(source: ByteSource, pos: int, n: int) -> int:
        return decoder(source, pos, n)[1]

    def alpha_char(source: ByteSource, pos: int, n: int) -> int:
        codepoint, width = decoder(source, pos, n)
        if width == 1:
            return fallback.alpha_char(source, pos, 1)
        if width and classifier is not None and classifier.is_alpha(codepoint):
            return width
        return 0

    def alnum_char(source: ByteSource, pos: int, n: int) -> int:
        codepoint, width = decoder(source, pos, n)
        if width == 1:
            return fallback.alnum_char(source, pos, 1)
        if width and classifier is not None and classifier.is_alnum(codepoint):
            return width
        return 0

    def isupper_char(source: ByteSource, pos: int, n: int) -> bool:
        codepoint, width = decoder(source, pos, n)
        if width == 1:
            return fallback.isupper_char(source, pos, 1)
        if width and classifier is not None:
            return classifier.is_upper(codepoint)
        return False

    return Encoding(
        name=name,
        char_width=char_width,
        alnum_char=alnum_char,
        alpha_char=alpha_char,
        isupper_char=isupper_char,
        multibyte=multibyte,
    )


__all__ = [
    "BoolQuery",
    "Encoding",
    "WidthQuery",
    "from_codepoint_decoder",
]
