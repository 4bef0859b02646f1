"""Case conversion over whole buffers, in place or as a copy.

In-place transforms accept:
  - bytearray
  - writable memoryview with a one-byte format (B, b, c)
  - any other mutable sequence (list, array.array) of characters

Each call takes a single snapshot of the locale's case table, so one call
never mixes two locales even if setlocale runs concurrently.

Copying transforms clone first and delegate to the in-place form on the
clone; the argument is never written.
"""

from __future__ import annotations

from array import array
from collections.abc import MutableSequence
from typing import Any, List, Optional

from .chars import CharRangeError, CharTypeError, case_table, code_unit, like

_BYTE_FORMATS = ("B", "b", "c")


def _bounds(n: int, start: Optional[int], stop: Optional[int]) -> range:
    return range(*slice(start, stop).indices(n))


def _translate_view(view: memoryview, table: bytes, start: Optional[int], stop: Optional[int]) -> None:
    if view.readonly:
        raise CharTypeError("memoryview is read-only")
    if view.itemsize != 1 or view.format not in _BYTE_FORMATS:
        raise CharTypeError(f"memoryview format {view.format!r} is not an 8-bit character format")
    if not view.c_contiguous:
        raise CharTypeError("memoryview must be C-contiguous")
    flat = view.cast("B")
    r = _bounds(len(flat), start, stop)
    if len(r) == 0:
        return
    flat[r.start:r.stop] = bytes(flat[r.start:r.stop]).translate(table)


def _translate_sequence(seq: Any, table: bytes, start: Optional[int], stop: Optional[int]) -> None:
    if isinstance(seq, (str, bytes)):
        raise CharTypeError(f"{type(seq).__name__} is immutable; use the *_copy transform")
    if not isinstance(seq, (MutableSequence, array)):
        raise CharTypeError(f"expected a mutable sequence of characters, got {type(seq).__name__}")

    r = _bounds(len(seq), start, stop)

    # Check every element before writing any, so a rejected buffer is untouched.
    units: List[int] = []
    for i in r:
        try:
            units.append(code_unit(seq[i]))
        except CharRangeError as e:
            raise CharRangeError(f"element {i}: {e}") from e
        except CharTypeError as e:
            raise CharTypeError(f"element {i}: {e}") from e

    for i, u in zip(r, units):
        seq[i] = like(seq[i], table[u])


def _inplace(buf: Any, upper: bool, start: Optional[int], stop: Optional[int]) -> None:
    table = case_table(upper)
    if isinstance(buf, bytearray):
        r = _bounds(len(buf), start, stop)
        if len(r):
            buf[r.start:r.stop] = buf[r.start:r.stop].translate(table)
        return
    if isinstance(buf, memoryview):
        _translate_view(buf, table, start, stop)
        return
    _translate_sequence(buf, table, start, stop)


def to_upper_inplace(buf: Any, start: Optional[int] = None, stop: Optional[int] = None) -> None:
    """Uppercase buf[start:stop] in place, element by element."""
    _inplace(buf, True, start, stop)


def to_lower_inplace(buf: Any, start: Optional[int] = None, stop: Optional[int] = None) -> None:
    """Lowercase buf[start:stop] in place, element by element."""
    _inplace(buf, False, start, stop)


def _clone(text: Any) -> Any:
    if isinstance(text, str):
        try:
            return bytearray(text.encode("latin-1"))
        except UnicodeEncodeError as e:
            bad = text[e.start]
            raise CharRangeError(
                f"element {e.start}: code point U+{ord(bad):04X} is not an 8-bit character"
            ) from e
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytearray(text)
    try:
        return list(text)
    except TypeError as e:
        raise CharTypeError(f"expected a sequence of characters, got {type(text).__name__}") from e


def _copy(text: Any, upper: bool) -> Any:
    out = _clone(text)
    _inplace(out, upper, None, None)
    if isinstance(text, str):
        return out.decode("latin-1")
    if isinstance(text, (bytes, memoryview)):
        return bytes(out)
    return out


def to_upper_copy(text: Any) -> Any:
    """Return an uppercased copy of `text`; `text` is left untouched.

    str -> str, bytes/memoryview -> bytes, bytearray -> bytearray,
    other sequences -> list.
    """
    return _copy(text, True)


def to_lower_copy(text: Any) -> Any:
    """Return a lowercased copy of `text`; see to_upper_copy."""
    return _copy(text, False)
