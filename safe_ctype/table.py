"""Snapshot of the active locale's classification and case tables."""

from __future__ import annotations

import locale
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from .chars import PREDICATES, to_lower_unit, to_upper_unit

CLASSES = tuple(PREDICATES)


def ctype_table() -> Dict[str, Any]:
    """Return the case mappings and class members for all 256 code units.

    Output is plain JSON data:
      {"upper": [256 ints], "lower": [256 ints], "classes": {name: [members]}}
    """
    classes: Dict[str, List[int]] = {}
    for name in CLASSES:
        pred = PREDICATES[name]
        classes[name] = [u for u in range(0x100) if pred(u)]
    return {
        "upper": [to_upper_unit(u) for u in range(0x100)],
        "lower": [to_lower_unit(u) for u in range(0x100)],
        "classes": classes,
    }


@contextmanager
def ctype_locale(name: str) -> Iterator[str]:
    """Switch LC_CTYPE for the duration of the block, then restore it.

    Process-wide and not thread-safe; for tests and vector runs only.
    locale.Error propagates if `name` is not available.
    """
    previous = locale.setlocale(locale.LC_CTYPE)
    current = locale.setlocale(locale.LC_CTYPE, name)
    try:
        yield current
    finally:
        locale.setlocale(locale.LC_CTYPE, previous)
