from __future__ import annotations

import locale
from typing import Iterator

import pytest

from safe_ctype.table import ctype_locale

# Spellings of a single-byte Latin-1 locale on glibc and on the BSDs/macOS.
LATIN1_LOCALES = (
    "en_US.ISO-8859-1",
    "en_US.ISO8859-1",
    "de_DE.ISO-8859-1",
    "de_DE.ISO8859-1",
    "fr_FR.ISO8859-1",
)


@pytest.fixture
def c_locale() -> Iterator[str]:
    """Pin LC_CTYPE to "C" so exact tables can be asserted."""
    with ctype_locale("C") as name:
        yield name


def _installed_latin1() -> str | None:
    previous = locale.setlocale(locale.LC_CTYPE)
    try:
        for candidate in LATIN1_LOCALES:
            try:
                locale.setlocale(locale.LC_CTYPE, candidate)
            except locale.Error:
                continue
            return candidate
        return None
    finally:
        locale.setlocale(locale.LC_CTYPE, previous)


@pytest.fixture
def latin1_locale() -> Iterator[str]:
    """Pin LC_CTYPE to an ISO-8859-1 locale, where bytes above 0x7F have case."""
    candidate = _installed_latin1()
    if candidate is None:
        pytest.skip("no ISO-8859-1 locale installed")
    with ctype_locale(candidate) as name:
        yield name
