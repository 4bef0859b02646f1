"""Binding to the host C library's <ctype.h> primitives.

Every function bound here has the C signature `int f(int)` and is undefined
for arguments that are neither EOF nor representable as `unsigned char`.
Callers in this package only ever pass a widened code unit (0..255).

Results follow the C library's active LC_CTYPE locale. Python sets it from
the environment at startup; `locale.setlocale` changes it process-wide.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

LIBC_ENV = "SAFE_CTYPE_LIBC"

CTYPE_FUNCTIONS = (
    "toupper",
    "tolower",
    "isalpha",
    "isdigit",
    "isalnum",
    "isspace",
    "iscntrl",
    "ispunct",
    "isprint",
    "isgraph",
    "isxdigit",
    "isupper",
    "islower",
    "isblank",
)

_libc: Optional[ctypes.CDLL] = None


def _default_name() -> Optional[str]:
    if os.name == "posix":
        # None opens the running process image, which links libc.
        return ctypes.util.find_library("c")
    return ctypes.util.find_library("ucrtbase") or "msvcrt"


def load_libc(name: Optional[str] = None) -> ctypes.CDLL:
    """Open the C library and declare the ctype signatures.

    Resolution order: explicit `name`, then $SAFE_CTYPE_LIBC, then the
    platform default. OSError propagates if the library cannot be opened
    or lacks one of the primitives.
    """
    if name is None:
        name = os.environ.get(LIBC_ENV, "").strip() or _default_name()

    lib = ctypes.CDLL(name)
    for fn_name in CTYPE_FUNCTIONS:
        try:
            fn = getattr(lib, fn_name)
        except AttributeError as e:
            raise OSError(f"{name or 'libc'}: missing ctype primitive {fn_name!r}") from e
        fn.argtypes = [ctypes.c_int]
        fn.restype = ctypes.c_int

    logger.debug("bound ctype primitives from %s", name or "<process image>")
    return lib


def libc() -> ctypes.CDLL:
    """Process-wide binding, loaded on first use."""
    global _libc
    if _libc is None:
        _libc = load_libc()
    return _libc


def ctype_call(fn_name: str, unit: int) -> int:
    """Call one primitive with an already widened code unit."""
    if isinstance(unit, bool) or not isinstance(unit, int):
        raise TypeError(f"{fn_name}: expected int code unit, got {type(unit).__name__}")
    if not 0 <= unit <= 0xFF:
        raise ValueError(f"{fn_name}: code unit out of range: {unit!r}")
    return getattr(libc(), fn_name)(unit)
