"""Base64 encoder writing into a caller-owned buffer.

This module provides the encode() function that converts raw bytes to Base64
symbols, three input bytes to four output symbols, followed by a NUL
terminator.
"""

from __future__ import annotations

import logging

from .alphabet import PAD, TERMINATOR, forward_table
from .buffer import ErrorKind, OutputBuffer
from .sizing import encode_max_output
from .views import BytesLike, byte_view, resolve_length

logger = logging.getLogger(__name__)


def encode(
    data: BytesLike,
    out: OutputBuffer,
    length: int | None = None,
    url_safe: bool = False,
) -> bool:
    """Encode raw bytes into ``out``.

    With no buffer attached (``out.data is None``) nothing is encoded: the
    required capacity is stored in ``out.capacity`` and True is returned.

    Otherwise the input is consumed in 3-byte groups, each written as four
    symbols. A trailing 1- or 2-byte group is zero-extended; the symbols that
    carry no input bits become ``=`` with the standard alphabet and NUL with
    the URL-safe alphabet, so URL-safe output is unpadded. The output is
    always NUL-terminated.

    Every group, full or partial, needs four free slots plus the terminator.
    If they are not available the output is terminated where it stands,
    ``out.capacity`` is set to the size that would have been sufficient and
    False is returned. Groups are never written partially.

    Args:
        data: Bytes to encode
        out: Output descriptor, capacity counted in characters including the
            terminator
        length: Number of bytes of ``data`` to encode (default: all)
        url_safe: Use the ``-``/``_`` alphabet without padding

    Returns:
        True on success, with ``out.capacity`` set to the number of symbols
        written (terminator excluded). False if the buffer is too small.

    Raises:
        TypeError: If data is not bytes-like
        ValueError: If length exceeds the input size

    Examples:
        ```python
        from b64codec import OutputBuffer, encode

        out = OutputBuffer.allocate(5)
        encode(b"Ma", out)                  # out.value() == b"TWE="

        out = OutputBuffer.allocate(5)
        encode(b"Ma", out, url_safe=True)   # out.value() == b"TWE"
        ```
    """
    out.validate()
    view = byte_view(data)
    length = resolve_length(length, len(view))

    # Query mode
    if out.data is None:
        out.capacity = encode_max_output(length)
        out.error = None
        return True

    buffer = out.data
    table = forward_table(url_safe)

    if out.capacity == 0:
        return _out_of_space(out, buffer, 0, length)

    # Reserve the terminator slot up front
    room = out.capacity - 1
    position = 0
    offset = 0
    full_end = length - length % 3

    # 3 x 8 bits in, 4 x 6 bits out
    while offset < full_end:
        if room - position < 4:
            return _out_of_space(out, buffer, position, length)

        group = view[offset] << 16 | view[offset + 1] << 8 | view[offset + 2]
        buffer[position] = table[(group >> 18) & 63]
        buffer[position + 1] = table[(group >> 12) & 63]
        buffer[position + 2] = table[(group >> 6) & 63]
        buffer[position + 3] = table[group & 63]
        position += 4
        offset += 3

    symbols = position
    remaining = length - offset
    if remaining:
        if room - position < 4:
            return _out_of_space(out, buffer, position, length)

        group = view[offset] << 16
        if remaining == 2:
            group |= view[offset + 1] << 8

        filler = TERMINATOR if url_safe else PAD
        buffer[position] = table[(group >> 18) & 63]
        buffer[position + 1] = table[(group >> 12) & 63]
        buffer[position + 2] = table[(group >> 6) & 63] if remaining == 2 else filler
        buffer[position + 3] = filler

        # URL-safe output ends at the first filler slot
        symbols = position + (remaining + 1 if url_safe else 4)
        position += 4

    buffer[position] = TERMINATOR
    out.capacity = symbols
    out.error = None
    return True


def _out_of_space(out: OutputBuffer, buffer: bytearray, position: int, length: int) -> bool:
    """Terminate the partial output and report the capacity that was needed.

    Args:
        out: Output descriptor being filled
        buffer: The descriptor's data
        position: Index of the next unwritten slot
        length: Input length being encoded

    Returns:
        Always False
    """
    if position < out.capacity:
        buffer[position] = TERMINATOR

    required = encode_max_output(length)
    logger.debug(
        "encode: insufficient output buffer (capacity %d, %d required)", out.capacity, required
    )
    out.capacity = required
    out.error = ErrorKind.INSUFFICIENT_OUTPUT_SPACE
    return False
