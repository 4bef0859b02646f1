"""Single-character classification and case conversion.

A character here is one 8-bit code unit. It may arrive as:
  - int in -128..255 (negatives are the signed-char bit pattern)
  - bytes / bytearray of length 1
  - str of length 1 with a code point <= 0xFF (Latin-1 view of a byte)

Every call widens to an unsigned code unit before touching libc, so no
negative value ever reaches a <ctype.h> primitive. There is no EOF
sentinel: -1 is the byte 0xFF.

Results depend on the process-wide LC_CTYPE locale at call time. In the
"C" locale only ASCII letters have case mappings.
"""

from __future__ import annotations

from typing import Union

from .libc import ctype_call, libc

Char = Union[int, bytes, bytearray, str]


class CharTypeError(TypeError):
    """Argument is not a character (or not a buffer of characters)."""


class CharRangeError(ValueError):
    """Integer or code point outside the 8-bit domain."""


def code_unit(ch: Char) -> int:
    """Unsigned widening: return the code unit of `ch` as 0..255."""
    # bool is an int subclass but never a character.
    if isinstance(ch, bool):
        raise CharTypeError("expected a character, got bool")
    if isinstance(ch, int):
        if -0x80 <= ch < 0:
            return ch & 0xFF
        if 0 <= ch <= 0xFF:
            return ch
        raise CharRangeError(f"not an 8-bit code unit: {ch!r}")
    if isinstance(ch, (bytes, bytearray)):
        if len(ch) != 1:
            raise CharTypeError(f"expected a single byte, got {len(ch)} bytes")
        return ch[0]
    if isinstance(ch, str):
        if len(ch) != 1:
            raise CharTypeError(f"expected a single character, got {len(ch)} characters")
        cp = ord(ch)
        if cp > 0xFF:
            raise CharRangeError(f"code point U+{cp:04X} is not an 8-bit character")
        return cp
    raise CharTypeError(f"expected a character, got {type(ch).__name__}")


def like(ch: Char, unit: int) -> Char:
    """Return `unit` in the same form `ch` arrived in."""
    if isinstance(ch, int):
        if ch < 0 and unit > 0x7F:
            return unit - 0x100
        return unit
    if isinstance(ch, bytearray):
        return bytearray((unit,))
    if isinstance(ch, bytes):
        return bytes((unit,))
    return chr(unit)


# ---- Unit functions (pre-widened in, code unit out) ----

def _widened(unit: int) -> int:
    if isinstance(unit, bool) or not isinstance(unit, int):
        raise CharTypeError(f"expected a widened code unit (int), got {type(unit).__name__}")
    if not 0 <= unit <= 0xFF:
        raise CharRangeError(f"not a widened code unit: {unit!r}")
    return unit


def to_upper_unit(unit: int) -> int:
    """Uppercase one widened code unit; for `map` over bytes."""
    return ctype_call("toupper", _widened(unit)) & 0xFF


def to_lower_unit(unit: int) -> int:
    """Lowercase one widened code unit; for `map` over bytes."""
    return ctype_call("tolower", _widened(unit)) & 0xFF


def case_table(upper: bool = True) -> bytes:
    """256-byte translation table for the active locale, for bytes.translate.

    The table is a snapshot; later setlocale calls do not affect it.
    """
    fn = libc().toupper if upper else libc().tolower
    return bytes(fn(u) & 0xFF for u in range(0x100))


# ---- Case conversion ----

def to_upper(ch: Char) -> Char:
    return like(ch, to_upper_unit(code_unit(ch)))


def to_lower(ch: Char) -> Char:
    return like(ch, to_lower_unit(code_unit(ch)))


# ---- Classification ----

def _is(fn_name: str, ch: Char) -> bool:
    return ctype_call(fn_name, code_unit(ch)) != 0


def is_alpha(ch: Char) -> bool:
    return _is("isalpha", ch)


def is_digit(ch: Char) -> bool:
    return _is("isdigit", ch)


def is_alnum(ch: Char) -> bool:
    return _is("isalnum", ch)


def is_space(ch: Char) -> bool:
    return _is("isspace", ch)


def is_cntrl(ch: Char) -> bool:
    return _is("iscntrl", ch)


def is_punct(ch: Char) -> bool:
    return _is("ispunct", ch)


def is_print(ch: Char) -> bool:
    return _is("isprint", ch)


def is_graph(ch: Char) -> bool:
    return _is("isgraph", ch)


def is_xdigit(ch: Char) -> bool:
    return _is("isxdigit", ch)


def is_upper(ch: Char) -> bool:
    return _is("isupper", ch)


def is_lower(ch: Char) -> bool:
    return _is("islower", ch)


def is_blank(ch: Char) -> bool:
    return _is("isblank", ch)


PREDICATES = {
    "alpha": is_alpha,
    "digit": is_digit,
    "alnum": is_alnum,
    "space": is_space,
    "cntrl": is_cntrl,
    "punct": is_punct,
    "print": is_print,
    "graph": is_graph,
    "xdigit": is_xdigit,
    "upper": is_upper,
    "lower": is_lower,
    "blank": is_blank,
}
