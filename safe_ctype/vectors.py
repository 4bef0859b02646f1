"""Conformance vectors for the ctype wrappers.

A vector file pins the expected results of the public operations under one
locale:

    {"v": 1, "locale": "C", "tests": [{"op": "to_upper", "in": 97, "expect": 65}, ...]}

Files are validated schema-first (Draft 2020-12) before any case runs; a
file that fails validation is rejected as a whole.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

from jsonschema import Draft202012Validator
from referencing import Registry, Resource

from . import ascii as ascii_
from . import buffers, chars
from .table import ctype_locale

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"
VECTORS_DIR = Path(__file__).resolve().parent / "fixtures"

OPS: Dict[str, Callable[[Any], Any]] = {
    "to_upper": chars.to_upper,
    "to_lower": chars.to_lower,
    "ascii_to_upper": ascii_.ascii_to_upper,
    "ascii_to_lower": ascii_.ascii_to_lower,
    "to_upper_copy": buffers.to_upper_copy,
    "to_lower_copy": buffers.to_lower_copy,
    "ascii_upper_copy": ascii_.ascii_upper_copy,
    "ascii_lower_copy": ascii_.ascii_lower_copy,
}
OPS.update({f"is_{name}": pred for name, pred in chars.PREDICATES.items()})


class SchemaError(Exception):
    pass


def _load_json(p: Path) -> Any:
    return json.loads(p.read_text(encoding="utf-8"))


def _json_pointer(path_parts: Any) -> str:
    parts = list(path_parts)

    def esc(p: Any) -> str:
        return str(p).replace("~", "~0").replace("/", "~1")

    return "" if not parts else "/" + "/".join(esc(p) for p in parts)


def _validator() -> Draft202012Validator:
    vectors = _load_json(SCHEMA_DIR / "vectors-v1.schema.json")
    char = _load_json(SCHEMA_DIR / "char-v1.schema.json")

    reg = Registry().with_resources([
        ("safe-ctype:vectors-v1", Resource.from_contents(vectors)),
        ("safe-ctype:char-v1", Resource.from_contents(char)),
    ])
    return Draft202012Validator(vectors, registry=reg)


def validate_or_raise(doc: Any) -> None:
    errs = sorted(
        _validator().iter_errors(doc),
        key=lambda e: (_json_pointer(e.path), e.message),
    )
    if errs:
        msg = "; ".join(f"{_json_pointer(e.path) or '/'}: {e.message}" for e in errs[:5])
        raise SchemaError(msg)


def run_vectors(doc: Dict[str, Any]) -> List[str]:
    """Run an already validated vector document.

    Returns a list of failure strings (empty if OK).
    """
    failures: List[str] = []
    with ctype_locale(doc["locale"]):
        for i, t in enumerate(doc["tests"]):
            op = t["op"]
            try:
                got = OPS[op](t["in"])
            except (TypeError, ValueError) as e:
                failures.append(f"tests[{i}] {op}({t['in']!r}): raised {type(e).__name__}: {e}")
                continue
            if got != t["expect"]:
                failures.append(f"tests[{i}] {op}({t['in']!r}): expected {t['expect']!r}, got {got!r}")
    return failures


def run_vector_file(path: Path) -> List[str]:
    doc = _load_json(Path(path))
    validate_or_raise(doc)
    return run_vectors(doc)


def vector_files(root: Path = VECTORS_DIR) -> List[Path]:
    """All vector files under `root`, in sorted order."""
    return sorted(Path(root).glob("*.json"), key=lambda p: p.name)
