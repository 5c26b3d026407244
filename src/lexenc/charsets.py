"""Byte sets for O(1) classification.

All sets are frozensets of byte values for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from lexenc.charsets import ASCII_ALPHA

    if source[pos] in ASCII_ALPHA:  # O(1) lookup
        ...
"""

import string

ASCII_UPPER: frozenset[int] = frozenset(string.ascii_uppercase.encode("ascii"))

ASCII_LOWER: frozenset[int] = frozenset(string.ascii_lowercase.encode("ascii"))

ASCII_DIGITS: frozenset[int] = frozenset(string.digits.encode("ascii"))

ASCII_ALPHA: frozenset[int] = ASCII_UPPER | ASCII_LOWER

ASCII_ALNUM: frozenset[int] = ASCII_ALPHA | ASCII_DIGITS

# Identifier continuation byte that is not alphanumeric
UNDERSCORE: int = ord("_")

# First byte value outside 7-bit ASCII
ASCII_LIMIT: int = 0x80
