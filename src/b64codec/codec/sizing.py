"""Output size calculation for the Base64 codec.

Both helpers are pure integer functions. Callers use them to size a buffer
before the real call; encode also exposes the same value through its query
mode.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, validate_call

Length = Annotated[int, Field(strict=True, ge=0)]


@validate_call
def encode_max_output(raw_length: Length) -> int:
    """Return the buffer size needed to encode ``raw_length`` bytes.

    Four symbols per started 3-byte group plus one terminator byte. The value
    is exact for the standard alphabet and an upper bound for URL-safe output,
    which drops the padding slots.

    Args:
        raw_length: Number of raw bytes to encode

    Returns:
        Required capacity in characters, including the terminator

    Raises:
        pydantic.ValidationError: If raw_length is not a non-negative integer

    Example:
        >>> encode_max_output(4)
        9  # 2 groups * 4 symbols + terminator
    """
    return (raw_length + 2) // 3 * 4 + 1


@validate_call
def decode_max_output(encoded_length: Length) -> int:
    """Return an upper bound on the bytes decoded from ``encoded_length`` symbols.

    Three bytes per started 4-symbol group plus one. Padding characters make
    the true size 0-2 bytes smaller, so over-allocating by this amount is
    always safe.

    Args:
        encoded_length: Number of encoded characters

    Returns:
        Upper bound on decoded size in bytes

    Raises:
        pydantic.ValidationError: If encoded_length is not a non-negative integer

    Example:
        >>> decode_max_output(8)
        7
    """
    return (encoded_length + 3) // 4 * 3 + 1
