"""Input views for the codec.

Encode and decode both work on flat unsigned-byte memoryviews. These helpers
turn the accepted input types into such views and resolve the optional
explicit input length against them.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]
TextLike = Union[str, bytes, bytearray, memoryview]


def resolve_length(length: int | None, available: int) -> int:
    """Resolve an optional explicit input length against the input size.

    Args:
        length: Requested length, or None to use the whole input
        available: Actual input size

    Returns:
        Number of input items to process

    Raises:
        ValueError: If length is negative or larger than the input
    """
    if length is None:
        return available
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if length > available:
        raise ValueError(f"length {length} exceeds input size {available}")
    return length


def _flat_view(obj: object, caller: str, expected: str) -> memoryview:
    try:
        view = memoryview(obj)  # type: ignore[arg-type]
    except TypeError as e:
        raise TypeError(f"{caller}() requires {expected}, not {type(obj).__name__}") from e

    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def byte_view(data: BytesLike) -> memoryview:
    """Return a flat unsigned-byte view of ``data``.

    Raises:
        TypeError: If data does not support the buffer protocol (e.g. str)
    """
    if isinstance(data, str):
        raise TypeError("encode() requires a bytes-like object, not str")
    return _flat_view(data, "encode", "a bytes-like object")


def text_length(text: TextLike) -> int:
    """Return the number of characters decode() scans in ``text``.

    Counts characters for str and bytes for everything else, whatever the
    item size of a memoryview.
    """
    if isinstance(text, str):
        return len(text)
    return _flat_view(text, "decode", "str or a bytes-like object").nbytes


def code_view(text: TextLike, length: int | None = None) -> memoryview:
    """Return the first ``length`` characters of ``text`` as byte codes.

    Non-ASCII characters of a str become bytes >= 0x80, which are invalid,
    so the ASCII prefix keeps a one-to-one mapping with the input.

    Raises:
        TypeError: If text is neither str nor bytes-like
        ValueError: If length exceeds the input size
    """
    if isinstance(text, str):
        length = resolve_length(length, len(text))
        return memoryview(text[:length].encode("utf-8", "surrogatepass"))

    view = _flat_view(text, "decode", "str or a bytes-like object")
    length = resolve_length(length, len(view))
    return view[:length]
