"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, Base64 world!"


@pytest.fixture
def aid_bytes() -> bytes:
    """9-byte avatar id: revision byte followed by an 8-byte user hash."""
    return bytes([0x96, 0x46, 0xE9, 0x99, 0x8A, 0x32, 0x85, 0x53, 0x3A])


@pytest.fixture
def aid_text() -> str:
    """Encoding of aid_bytes (three full groups, identical in both alphabets)."""
    return "lkbpmYoyhVM6"
