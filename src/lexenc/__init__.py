"""
lexenc: pluggable character encodings for source-text lexers

Per-encoding character queries that let a lexer segment a raw byte buffer
into characters and classify them (alphabetic, alphanumeric, uppercase)
without knowing anything about specific encodings.

Quick Start:
    >>> from lexenc import GBK
    >>> source = b"\\xb0\\xa1A"
    >>> GBK.char_width(source, 0, len(source))
    2
    >>> GBK.isupper_char(source, 2, 1)
    True

    >>> # Look up the handler for a declared encoding name
    >>> from lexenc import create_default_registry
    >>> create_default_registry().find("cp936") is GBK
    True

Custom Encodings:
    >>> from lexenc import ASCII, create_registry_with_defaults, from_codepoint_decoder
    >>>
    >>> mine = from_codepoint_decoder("X-Mine", my_decoder, fallback=ASCII)
    >>> builder = create_registry_with_defaults()
    >>> builder.register(mine, aliases=("mine",))
    >>> registry = builder.build()

Installation:
    pip install lexenc              # zero deps
"""

from lexenc.config import (
    EncodingConfig,
    encoding_config_context,
    get_encoding_config,
    reset_encoding_config,
    resolve_encoding,
    set_encoding_config,
)
from lexenc.encoding import Encoding, from_codepoint_decoder
from lexenc.encodings import (
    ASCII,
    ASCII_8BIT,
    BIG5,
    EUC_JP,
    GBK,
    SHIFT_JIS,
    UTF_8,
    WINDOWS_31J,
    gbk_codepoint,
)
from lexenc.errors import LexencError, UnknownEncodingError
from lexenc.protocols import (
    ByteClassifier,
    ByteSource,
    CodepointClassifier,
    CodepointDecoder,
    EncodingHandler,
)
from lexenc.registry import (
    EncodingRegistry,
    EncodingRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from lexenc.scanning import identifier_width, is_constant_start, iter_chars

__version__ = "0.1.0"

__all__ = [
    "ASCII",
    "ASCII_8BIT",
    "BIG5",
    "EUC_JP",
    "GBK",
    "SHIFT_JIS",
    "UTF_8",
    "WINDOWS_31J",
    "ByteClassifier",
    "ByteSource",
    "CodepointClassifier",
    "CodepointDecoder",
    "Encoding",
    "EncodingConfig",
    "EncodingHandler",
    "EncodingRegistry",
    "EncodingRegistryBuilder",
    "LexencError",
    "UnknownEncodingError",
    "__version__",
    "create_default_registry",
    "create_registry_with_defaults",
    "encoding_config_context",
    "from_codepoint_decoder",
    "gbk_codepoint",
    "get_encoding_config",
    "identifier_width",
    "is_constant_start",
    "iter_chars",
    "reset_encoding_config",
    "resolve_encoding",
    "set_encoding_config",
]
