"""Convenience wrappers around the buffer-filling codec.

``encode_to_buf``/``decode_to_buf`` size a growable bytearray with the
``*_max_output`` helpers, run the codec into it and trim it to the result.
``encode_to_str``/``decode_to_bytes`` return a fresh value and raise on
failure instead of returning False.
"""

from __future__ import annotations

from .codec import OutputBuffer, decode, decode_max_output, encode, encode_max_output
from .codec.views import BytesLike, TextLike, byte_view, text_length
from .exceptions import EncodeError


def encode_to_buf(data: BytesLike, buf: bytearray, url_safe: bool = False) -> bool:
    """Encode ``data`` into ``buf``, replacing its contents.

    Args:
        data: Bytes to encode
        buf: Growable destination; holds the symbols (no terminator) on return
        url_safe: Use the URL-safe alphabet without padding

    Returns:
        True on success
    """
    size = encode_max_output(byte_view(data).nbytes)
    buf[:] = bytes(size)
    out = OutputBuffer(buf, size)
    ok = encode(data, out, url_safe=url_safe)
    del buf[out.capacity if ok else 0 :]
    return ok


def decode_to_buf(text: TextLike, buf: bytearray, url_safe: bool = False) -> bool:
    """Decode ``text`` into ``buf``, replacing its contents.

    On failure ``buf`` keeps the bytes written before the error.

    Args:
        text: Base64 text
        buf: Growable destination; holds the decoded bytes on return
        url_safe: Also accept the URL-safe alphabet

    Returns:
        True on success, False if ``text`` contains an invalid character
    """
    size = decode_max_output(text_length(text))
    buf[:] = bytes(size)
    out = OutputBuffer(buf, size)
    ok = decode(text, out, url_safe=url_safe)
    del buf[out.capacity :]
    return ok


def encode_to_str(data: BytesLike, url_safe: bool = False) -> str:
    """Encode ``data`` and return the Base64 text.

    Example:
        >>> encode_to_str(b"Man")
        'TWFu'
        >>> encode_to_str(b"\\xfb\\xff", url_safe=True)
        '-_8'

    Raises:
        EncodeError: If the codec could not encode into a correctly sized buffer
    """
    buf = bytearray()
    if not encode_to_buf(data, buf, url_safe=url_safe):
        raise EncodeError(f"Failed to encode {len(data)} bytes")
    return buf.decode("ascii")


def decode_to_bytes(text: TextLike, url_safe: bool = False) -> bytes:
    """Decode Base64 ``text`` and return the raw bytes.

    Example:
        >>> decode_to_bytes("TWE=")
        b'Ma'

    Raises:
        InvalidInputEncodingError: If text contains a character outside the alphabet
        InsufficientOutputSpaceError: If the decoded size exceeds the estimate
    """
    size = decode_max_output(text_length(text))
    out = OutputBuffer.allocate(size)
    if not decode(text, out, url_safe=url_safe) and out.error is not None:
        raise out.error.exception(
            f"Failed to decode Base64 input after {out.capacity} bytes: {out.error.value}"
        )
    return out.value()
