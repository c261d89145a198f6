"""Exception hierarchy for b64codec.

The core ``encode``/``decode`` calls report failures through their boolean
result and ``OutputBuffer.error``. The allocating helpers in
``b64codec.adapters`` raise these exceptions instead. All of them inherit from
Base64Error so callers can catch any b64codec-specific error at once.
"""

from __future__ import annotations


class Base64Error(Exception):
    """Base exception for all b64codec errors."""

    pass


class EncodeError(Base64Error):
    """Raised when encoding a byte sequence fails."""

    pass


class DecodeError(Base64Error):
    """Raised when decoding a Base64 string fails."""

    pass


class InsufficientOutputSpaceError(Base64Error):
    """Raised when the output buffer is too small for the result.

    Examples:
        - Encode ran out of room before the last group
        - Decode ran out of room while flushing the final partial group
    """

    pass


class InvalidInputEncodingError(DecodeError):
    """Raised when decode input contains a character outside the alphabet.

    Examples:
        - Punctuation such as ``!`` or ``*``
        - Whitespace or line breaks (MIME wrapping is not accepted)
        - ``-`` or ``_`` while decoding with the standard alphabet
        - Any non-ASCII character
    """

    pass
