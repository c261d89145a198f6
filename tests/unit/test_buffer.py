"""Unit tests for the output buffer descriptor."""

from __future__ import annotations

import pytest

from b64codec import (
    ErrorKind,
    InsufficientOutputSpaceError,
    InvalidInputEncodingError,
    OutputBuffer,
)


class TestOutputBuffer:
    """Test OutputBuffer construction and helpers."""

    def test_default_is_query(self) -> None:
        """Test an empty descriptor requests a size query."""
        out = OutputBuffer()
        assert out.data is None
        assert out.capacity == 0
        assert out.error is None
        assert out.is_query

    def test_allocate(self) -> None:
        out = OutputBuffer.allocate(9)
        assert out.data == bytearray(9)
        assert out.capacity == 9
        assert not out.is_query

    def test_capacity_may_be_smaller_than_buffer(self) -> None:
        out = OutputBuffer(bytearray(10), 4)
        assert out.capacity == 4

    def test_absent_buffer_with_capacity(self) -> None:
        """Test a non-zero capacity without a buffer is rejected."""
        with pytest.raises(ValueError, match="no buffer"):
            OutputBuffer(None, 5)

    def test_capacity_exceeds_buffer(self) -> None:
        with pytest.raises(ValueError, match="exceeds buffer length"):
            OutputBuffer(bytearray(3), 4)

    def test_negative_capacity(self) -> None:
        with pytest.raises(ValueError, match=">= 0"):
            OutputBuffer(bytearray(3), -1)

    def test_immutable_data_rejected(self) -> None:
        with pytest.raises(TypeError, match="bytearray"):
            OutputBuffer(b"abcd", 4)  # type: ignore[arg-type]

    def test_value(self) -> None:
        out = OutputBuffer(bytearray(b"abcdef"), 3)
        assert out.value() == b"abc"

    def test_value_without_buffer(self) -> None:
        with pytest.raises(ValueError, match="no data"):
            OutputBuffer().value()


class TestErrorKind:
    """Test error kind to exception mapping."""

    def test_insufficient_space(self) -> None:
        assert ErrorKind.INSUFFICIENT_OUTPUT_SPACE.exception is InsufficientOutputSpaceError

    def test_invalid_input(self) -> None:
        assert ErrorKind.INVALID_INPUT_ENCODING.exception is InvalidInputEncodingError
