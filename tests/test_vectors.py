from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from safe_ctype import vectors as vectors_mod
from safe_ctype.table import CLASSES, ctype_table
from safe_ctype.vectors import (
    OPS,
    VECTORS_DIR,
    SchemaError,
    run_vector_file,
    run_vectors,
    validate_or_raise,
    vector_files,
)


def _write(td: str, doc: object) -> Path:
    p = Path(td) / "vec.json"
    p.write_text(json.dumps(doc), encoding="utf-8")
    return p


def test_vectors_ship_inside_the_package() -> None:
    pkg_dir = Path(vectors_mod.__file__).resolve().parent
    assert VECTORS_DIR.parent == pkg_dir
    assert (pkg_dir / "fixtures" / "c_locale.json").is_file()


def test_bundled_vectors_pass() -> None:
    files = vector_files()
    assert [p.name for p in files] == ["ascii.json", "c_locale.json"]
    for p in files:
        assert run_vector_file(p) == [], p.name


def test_every_op_is_covered_by_schema() -> None:
    doc = {
        "v": 1,
        "locale": "C",
        "tests": [
            {"op": op, "in": "a", "expect": ("a" if "copy" in op or "to_" in op else True)}
            for op in sorted(OPS)
        ],
    }
    validate_or_raise(doc)


def test_schema_rejects_bad_documents() -> None:
    with pytest.raises(SchemaError):
        validate_or_raise({"v": 2, "locale": "C", "tests": []})
    with pytest.raises(SchemaError):
        validate_or_raise({"v": 1, "locale": "C", "tests": [{"op": "to_upper", "in": 300, "expect": 1}]})
    with pytest.raises(SchemaError):
        validate_or_raise({"v": 1, "locale": "C", "tests": [{"op": "is_alpha", "in": "a", "expect": "yes"}]})
    with pytest.raises(SchemaError) as ei:
        validate_or_raise({"v": 1, "locale": "C", "tests": [{"op": "frobnicate", "in": "a", "expect": "a"}]})
    assert "/tests/0" in str(ei.value)


def test_run_vector_file_rejects_invalid_file() -> None:
    with tempfile.TemporaryDirectory() as td:
        p = _write(td, {"v": 1, "tests": []})
        with pytest.raises(SchemaError):
            run_vector_file(p)


def test_mismatches_are_reported() -> None:
    doc = {
        "v": 1,
        "locale": "C",
        "tests": [
            {"op": "to_upper", "in": "a", "expect": "A"},
            {"op": "to_upper", "in": "b", "expect": "b"},
            {"op": "is_digit", "in": "x", "expect": True},
        ],
    }
    failures = run_vectors(doc)
    assert len(failures) == 2
    assert failures[0].startswith("tests[1] to_upper")
    assert failures[1].startswith("tests[2] is_digit")


def test_run_restores_locale() -> None:
    import locale

    before = locale.setlocale(locale.LC_CTYPE)
    run_vectors({"v": 1, "locale": "C", "tests": []})
    assert locale.setlocale(locale.LC_CTYPE) == before


def test_table_shape(c_locale: str) -> None:
    t = ctype_table()
    assert len(t["upper"]) == len(t["lower"]) == 0x100
    assert tuple(t["classes"]) == CLASSES
    assert t["classes"]["digit"] == list(range(0x30, 0x3A))
    assert t["upper"][ord("q")] == ord("Q")
    assert t["lower"][0xC9] == 0xC9
    json.dumps(t)
