"""b64codec: Base64 codec with caller-managed output buffers

A Python library implementing Base64 (RFC 4648) with the standard and
URL-safe alphabets. The core never allocates: callers size an output buffer
(or ask the codec for the size) and the codec fills it.

Key Features:
- Two-phase "query required size, then fill" calling convention
- Strict decoding: anything outside the alphabet is rejected
- URL-safe alphabet without padding
- Allocating helpers for callers that do not need buffer control

Quick Start:
    >>> from b64codec import OutputBuffer, encode, decode_to_bytes
    >>>
    >>> query = OutputBuffer()
    >>> encode(b"hello", query)
    True
    >>> out = OutputBuffer.allocate(query.capacity)
    >>> encode(b"hello", out)
    True
    >>> out.value()
    b'aGVsbG8='
    >>> decode_to_bytes("aGVsbG8=")
    b'hello'
"""

from __future__ import annotations

from .adapters import decode_to_buf, decode_to_bytes, encode_to_buf, encode_to_str
from .codec import (
    ErrorKind,
    OutputBuffer,
    decode,
    decode_max_output,
    encode,
    encode_max_output,
)
from .exceptions import (
    Base64Error,
    DecodeError,
    EncodeError,
    InsufficientOutputSpaceError,
    InvalidInputEncodingError,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_max_output",
    "decode_max_output",
    "OutputBuffer",
    "ErrorKind",
    # Helpers
    "encode_to_buf",
    "decode_to_buf",
    "encode_to_str",
    "decode_to_bytes",
    # Exceptions
    "Base64Error",
    "EncodeError",
    "DecodeError",
    "InsufficientOutputSpaceError",
    "InvalidInputEncodingError",
    # Version
    "__version__",
]
