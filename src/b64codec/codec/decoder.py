"""Base64 decoder writing into a caller-owned buffer.

This module provides the decode() function that converts Base64 text back to
raw bytes with strict alphabet validation. Decoding stops at the first ``=``
or NUL; every other character outside the alphabet is rejected.
"""

from __future__ import annotations

import logging

from .alphabet import INVALID, PADDING, TERMINATOR, classify
from .buffer import ErrorKind, OutputBuffer
from .views import TextLike, code_view

logger = logging.getLogger(__name__)

# Decoded bytes owed by a group holding this many pending symbols
_TAIL_BYTES = (0, 0, 1, 2, 3)


def decode(
    text: TextLike,
    out: OutputBuffer,
    length: int | None = None,
    url_safe: bool = False,
) -> bool:
    """Decode Base64 text into ``out``.

    Scans at most ``length`` characters and stops early at an embedded NUL or
    at the first ``=``. Symbols are accumulated four at a time; each complete
    group is flushed as three bytes while at least three bytes of room
    remain, otherwise scanning stops. A final partial group of 2 or 3 symbols
    is flushed as 1 or 2 bytes, a single dangling symbol is discarded.

    With no buffer attached (``out.data is None``) capacity is unbounded,
    nothing is written and ``out.capacity`` receives the exact decoded size.

    Args:
        text: Base64 text; str or ASCII bytes
        out: Output descriptor, capacity counted in bytes
        length: Number of characters of ``text`` to scan (default: all)
        url_safe: Also accept ``-`` and ``_`` for ``+`` and ``/``

    Returns:
        True on success. False on an invalid character
        (``ErrorKind.INVALID_INPUT_ENCODING``) or when the final bytes do not
        fit (``ErrorKind.INSUFFICIENT_OUTPUT_SPACE``). In every case
        ``out.capacity`` holds the number of bytes written.

    Raises:
        TypeError: If text is neither str nor bytes-like
        ValueError: If length exceeds the input size

    Examples:
        ```python
        from b64codec import OutputBuffer, decode

        out = OutputBuffer.allocate(4)
        decode("TWE=", out)        # True, out.value() == b"Ma"

        out = OutputBuffer.allocate(4)
        decode("TW!=", out)        # False, out.error is INVALID_INPUT_ENCODING
        ```
    """
    out.validate()
    codes = code_view(text, length)

    buffer = out.data
    room = out.capacity if buffer is not None else None
    written = 0

    group = 0
    pending = 0
    for offset, code in enumerate(codes):
        if code == TERMINATOR:
            break

        value = classify(code, url_safe)
        if value == PADDING:
            break
        if value == INVALID:
            logger.debug("decode: invalid character %r at offset %d", chr(code), offset)
            return _fail(out, written, ErrorKind.INVALID_INPUT_ENCODING)

        group = group << 6 | value
        pending += 1

        if pending == 4:
            # Out of space; the tail flush below reports the failure
            if room is not None and room - written < 3:
                break

            if buffer is not None:
                buffer[written] = (group >> 16) & 0xFF
                buffer[written + 1] = (group >> 8) & 0xFF
                buffer[written + 2] = group & 0xFF
            written += 3
            group = 0
            pending = 0

    # Align pending symbols to a 24-bit group and emit the complete bytes
    owed = _TAIL_BYTES[pending]
    group <<= 6 * (4 - pending)
    for shift in (16, 8, 0)[:owed]:
        if room is not None and written >= room:
            logger.debug("decode: insufficient output buffer (capacity %d)", room)
            return _fail(out, written, ErrorKind.INSUFFICIENT_OUTPUT_SPACE)

        if buffer is not None:
            buffer[written] = (group >> shift) & 0xFF
        written += 1

    out.capacity = written
    out.error = None
    return True


def _fail(out: OutputBuffer, written: int, kind: ErrorKind) -> bool:
    out.capacity = written
    out.error = kind
    return False
