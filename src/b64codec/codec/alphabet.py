"""Base64 alphabet tables.

Two forward tables map 6-bit indices to symbols, one per alphabet. A single
inverse table serves both alphabets: it covers the contiguous ASCII range
``+`` (0x2B) through ``z`` (0x7A) and is indexed by ``code - FIRST_CODE``.
URL-safe input is mapped onto it by translating ``-`` to ``+`` and ``_`` to
``/`` before lookup.
"""

from __future__ import annotations

STANDARD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_SAFE_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

PAD = ord("=")
TERMINATOR = 0

# Inverse table categories (valid entries are 0-63)
INVALID = -1
PADDING = -2

FIRST_CODE = ord("+")
LAST_CODE = ord("z")

_URL_SAFE_TRANSLATION = {ord("-"): ord("+"), ord("_"): ord("/")}


def _build_inverse_table() -> tuple[int, ...]:
    table = [INVALID] * (LAST_CODE - FIRST_CODE + 1)
    for index, code in enumerate(STANDARD_ALPHABET):
        table[code - FIRST_CODE] = index
    table[PAD - FIRST_CODE] = PADDING
    return tuple(table)


INVERSE_TABLE = _build_inverse_table()


def forward_table(url_safe: bool) -> bytes:
    """Return the 64-symbol table for the selected alphabet.

    Args:
        url_safe: Select the URL-safe alphabet instead of the standard one

    Returns:
        Symbol table indexed by 6-bit value
    """
    return URL_SAFE_ALPHABET if url_safe else STANDARD_ALPHABET


def classify(code: int, url_safe: bool) -> int:
    """Classify one input character code.

    Args:
        code: Character code (0-255 for byte input, any ordinal for text)
        url_safe: Accept ``-`` and ``_`` as aliases for ``+`` and ``/``

    Returns:
        The 6-bit value (0-63), PADDING for ``=``, or INVALID. The terminator
        is not classified here; callers check for it first.
    """
    if url_safe:
        code = _URL_SAFE_TRANSLATION.get(code, code)
    if code < FIRST_CODE or code > LAST_CODE:
        return INVALID
    return INVERSE_TABLE[code - FIRST_CODE]
