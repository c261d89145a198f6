"""Base64 codec core for b64codec.

This module provides the size helpers and the encode/decode transforms that
write into caller-owned OutputBuffer descriptors.
"""

from __future__ import annotations

from .buffer import ErrorKind, OutputBuffer
from .decoder import decode
from .encoder import encode
from .sizing import decode_max_output, encode_max_output

__all__ = [
    "encode",
    "decode",
    "encode_max_output",
    "decode_max_output",
    "OutputBuffer",
    "ErrorKind",
]
