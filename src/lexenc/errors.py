"""Exception classes for lexenc.

Handler operations never raise: an undecodable byte is reported in-band as
width 0. These exceptions belong to the outer surfaces (registry lookup and
configuration).
"""

from __future__ import annotations


class LexencError(Exception):
    """Base exception for all lexenc errors.

    Subclass this for specific error categories.
    """

    pass


class UnknownEncodingError(LexencError, LookupError):
    """No handler is registered under the requested encoding name.

    Also a LookupError, matching what codecs.lookup() raises for an
    unknown codec name.
    """

    def __init__(self, name: str, known: frozenset[str] | None = None) -> None:
        """Initialize unknown encoding error.

        Args:
            name: The encoding name as requested by the caller
            known: Registered names, used to list alternatives (optional)
        """
        self.name = name
        self.known = known

        message = f"Unknown encoding '{name}'"
        if known:
            message += f" (known: {', '.join(sorted(known))})"
        super().__init__(message)
