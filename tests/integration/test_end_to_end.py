"""End-to-end tests for the two-phase encode/decode workflow."""

from __future__ import annotations

import pytest

from b64codec import (
    ErrorKind,
    OutputBuffer,
    decode,
    decode_max_output,
    encode,
)

LENGTHS = [0, 1, 2, 3, 4, 31, 255]


def _two_phase_encode(data: bytes, url_safe: bool) -> bytes:
    """Query the size, allocate, then encode."""
    query = OutputBuffer()
    assert encode(data, query, url_safe=url_safe)

    out = OutputBuffer.allocate(query.capacity)
    assert encode(data, out, url_safe=url_safe)
    return out.value()


def _decode(text: bytes, url_safe: bool) -> bytes:
    out = OutputBuffer.allocate(decode_max_output(len(text)))
    assert decode(text, out, url_safe=url_safe)
    return out.value()


class TestRoundTrip:
    """Round-trip through the buffer-filling API."""

    @pytest.mark.parametrize("length", LENGTHS)
    @pytest.mark.parametrize("url_safe", [False, True])
    def test_roundtrip(self, length: int, url_safe: bool) -> None:
        data = bytes((i * 37 + 11) & 0xFF for i in range(length))
        text = _two_phase_encode(data, url_safe)
        assert _decode(text, url_safe) == data

    def test_encoded_text_is_terminated_c_string(self, sample_payload: bytes) -> None:
        """Test the written buffer is usable up to its first NUL."""
        query = OutputBuffer()
        encode(sample_payload, query, url_safe=True)
        out = OutputBuffer.allocate(query.capacity)
        encode(sample_payload, out, url_safe=True)

        assert out.data is not None
        text = bytes(out.data).split(b"\x00", 1)[0]
        assert text == out.value()
        # The whole buffer decodes: the first NUL ends the input
        assert _decode(bytes(out.data), url_safe=True) == sample_payload


class TestAidWorkflow:
    """Encode an avatar id, decode it and split revision and hash."""

    def test_aid(self, aid_bytes: bytes, aid_text: str) -> None:
        text = _two_phase_encode(aid_bytes, url_safe=False)
        assert text.decode("ascii") == aid_text

        decoded = _decode(text, url_safe=False)
        assert decoded[0] == 150
        assert decoded[1:].hex() == "46e9998a3285533a"


class TestRetryAfterFailure:
    """A failed call leaves enough information for one corrective retry."""

    def test_encode_retry(self, sample_payload: bytes) -> None:
        out = OutputBuffer.allocate(4)
        assert not encode(sample_payload, out)
        assert out.error is ErrorKind.INSUFFICIENT_OUTPUT_SPACE

        retry = OutputBuffer.allocate(out.capacity)
        assert encode(sample_payload, retry)
        assert _decode(retry.value(), url_safe=False) == sample_payload

    def test_decode_retry(self, sample_payload: bytes) -> None:
        text = _two_phase_encode(sample_payload, url_safe=False)

        out = OutputBuffer.allocate(1)
        assert not decode(text, out)
        assert out.error is ErrorKind.INSUFFICIENT_OUTPUT_SPACE

        retry = OutputBuffer.allocate(decode_max_output(len(text)))
        assert decode(text, retry)
        assert retry.value() == sample_payload
