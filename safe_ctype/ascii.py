"""ASCII-only case mapping.

Only 'a'..'z' and 'A'..'Z' are mapped, by a fixed offset; every other value
(control bytes, 0x80..0xFF, negative ints) passes through unchanged. The
locale is never consulted, so results are identical in every process.

Use these only for data already known to be ASCII; nothing here checks.
"""

from __future__ import annotations

from typing import Union

from .chars import Char, CharRangeError, CharTypeError, code_unit, like

_CASE_OFFSET = ord("a") - ord("A")

_LOWER = bytes(range(ord("a"), ord("z") + 1))
_UPPER = bytes(range(ord("A"), ord("Z") + 1))
ASCII_UPPER_TABLE = bytes.maketrans(_LOWER, _UPPER)
ASCII_LOWER_TABLE = bytes.maketrans(_UPPER, _LOWER)


def ascii_to_upper(ch: Char) -> Char:
    u = code_unit(ch)
    if ord("a") <= u <= ord("z"):
        return like(ch, u - _CASE_OFFSET)
    return like(ch, u)


def ascii_to_lower(ch: Char) -> Char:
    u = code_unit(ch)
    if ord("A") <= u <= ord("Z"):
        return like(ch, u + _CASE_OFFSET)
    return like(ch, u)


def _ascii_copy(text: Union[str, bytes, bytearray, memoryview], table: bytes):
    if isinstance(text, str):
        try:
            raw = text.encode("latin-1")
        except UnicodeEncodeError as e:
            raise CharRangeError(
                f"element {e.start}: code point U+{ord(text[e.start]):04X} is not an 8-bit character"
            ) from e
        return raw.translate(table).decode("latin-1")
    if isinstance(text, bytearray):
        return text.translate(table)
    if isinstance(text, (bytes, memoryview)):
        return bytes(text).translate(table)
    raise CharTypeError(f"expected str or bytes-like, got {type(text).__name__}")


def ascii_upper_copy(text):
    """Copy of `text` with ASCII letters uppercased."""
    return _ascii_copy(text, ASCII_UPPER_TABLE)


def ascii_lower_copy(text):
    """Copy of `text` with ASCII letters lowercased."""
    return _ascii_copy(text, ASCII_LOWER_TABLE)
