from __future__ import annotations

import pytest

from safe_ctype import libc as libc_mod
from safe_ctype.libc import CTYPE_FUNCTIONS, LIBC_ENV, ctype_call, libc, load_libc


def test_binding_declares_signatures() -> None:
    lib = libc()
    for name in CTYPE_FUNCTIONS:
        fn = getattr(lib, name)
        assert fn.restype is not None
        assert len(fn.argtypes) == 1


def test_binding_is_shared() -> None:
    assert libc() is libc()


def test_ctype_call_refuses_negative_units() -> None:
    with pytest.raises(ValueError):
        ctype_call("isalpha", -1)
    with pytest.raises(ValueError):
        ctype_call("toupper", 0x100)


def test_env_override_is_honoured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LIBC_ENV, "/nonexistent/libnothing.so.0")
    with pytest.raises(OSError):
        load_libc()


def test_explicit_name_beats_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LIBC_ENV, "/nonexistent/libnothing.so.0")
    default = libc_mod._default_name()
    lib = load_libc(default) if default is not None else None
    if lib is None:
        pytest.skip("platform libc has no loadable name")
    assert lib.isdigit(ord("7")) != 0


def test_ctype_call_refuses_non_int_units() -> None:
    with pytest.raises(TypeError):
        ctype_call("isalpha", "a")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ctype_call("toupper", True)
