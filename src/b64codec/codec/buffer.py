"""Caller-owned output buffer descriptor.

The codec never allocates output. Callers describe where results go with an
OutputBuffer, a (buffer, capacity) pair that each call rewrites in place:

- encode query mode: ``data is None`` on entry, ``capacity`` becomes the
  required size
- success: ``capacity`` becomes the number of symbols or bytes produced
- failure: ``capacity`` holds the best-effort corrective value and ``error``
  names what went wrong

A rewritten descriptor describes the result, not the buffer: reset
``capacity`` before passing it to another call.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..exceptions import (
    Base64Error,
    InsufficientOutputSpaceError,
    InvalidInputEncodingError,
)


class ErrorKind(enum.Enum):
    """Reason a codec call returned False."""

    INSUFFICIENT_OUTPUT_SPACE = "insufficient_output_space"
    INVALID_INPUT_ENCODING = "invalid_input_encoding"

    @property
    def exception(self) -> type[Base64Error]:
        """Exception class raised for this kind by the allocating helpers."""
        if self is ErrorKind.INVALID_INPUT_ENCODING:
            return InvalidInputEncodingError
        return InsufficientOutputSpaceError


@dataclass
class OutputBuffer:
    """Output buffer descriptor for encode and decode.

    Capacity is counted in characters including the NUL terminator for
    encode, and in raw bytes for decode. The codec never touches
    ``data[capacity:]``.

    Attributes:
        data: Caller-owned bytearray, or None to query the required size
        capacity: Usable size of ``data``; rewritten by every call
        error: Set when a call returns False, cleared on success

    Examples:
        ```python
        from b64codec import OutputBuffer, encode

        query = OutputBuffer()
        encode(b"hello", query)          # query.capacity == 9

        out = OutputBuffer.allocate(query.capacity)
        if encode(b"hello", out):
            text = out.value()           # b"aGVsbG8="
        ```
    """

    data: Optional[bytearray] = None
    capacity: int = 0
    error: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        self.validate()

    def validate(self) -> None:
        """Check the descriptor before a codec call.

        Raises:
            TypeError: If data is neither a bytearray nor None
            ValueError: If capacity is negative, non-zero without a buffer,
                or larger than the buffer
        """
        if self.data is not None and not isinstance(self.data, bytearray):
            raise TypeError(f"data must be a bytearray or None, got {type(self.data).__name__}")

        if self.capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {self.capacity}")

        if self.data is None and self.capacity != 0:
            raise ValueError(
                f"capacity must be 0 when no buffer is given, got {self.capacity}"
            )

        if self.data is not None and self.capacity > len(self.data):
            raise ValueError(
                f"capacity {self.capacity} exceeds buffer length {len(self.data)}"
            )

    @classmethod
    def allocate(cls, capacity: int) -> OutputBuffer:
        """Create a descriptor over a fresh zero-filled buffer.

        Args:
            capacity: Buffer size in bytes

        Returns:
            OutputBuffer whose capacity equals the buffer length
        """
        return cls(bytearray(capacity), capacity)

    @property
    def is_query(self) -> bool:
        """True when no buffer is attached."""
        return self.data is None

    def value(self) -> bytes:
        """Return the produced output, ``data[:capacity]``.

        Only meaningful after a call has rewritten ``capacity`` with the
        produced count.

        Raises:
            ValueError: If no buffer is attached
        """
        if self.data is None:
            raise ValueError("OutputBuffer has no data attached")
        return bytes(self.data[: self.capacity])
