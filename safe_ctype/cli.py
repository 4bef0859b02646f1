from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .ascii import ascii_lower_copy, ascii_upper_copy
from .buffers import to_lower_copy, to_upper_copy
from .chars import PREDICATES, CharRangeError, CharTypeError, code_unit
from .table import ctype_table
from .vectors import SchemaError, run_vector_file, vector_files

# ---- Exit codes ----
EXIT_OK = 0
EXIT_USAGE = 2
EXIT_SCHEMA_VALIDATION_FAILED = 12
EXIT_VECTOR_MISMATCH = 20
EXIT_INTERNAL_ERROR = 99


def _parse_char(s: str) -> int:
    # A lone character is taken literally; anything longer is an integer
    # literal such as 233, 0xE9 or -23.
    if len(s) == 1:
        return code_unit(s)
    try:
        return code_unit(int(s, 0))
    except ValueError as e:
        raise CharTypeError(f"not a character or integer: {s!r}") from e


def cmd_convert(args: argparse.Namespace) -> int:
    if args.ascii:
        fn = ascii_lower_copy if args.lower else ascii_upper_copy
    else:
        fn = to_lower_copy if args.lower else to_upper_copy
    print(fn(args.text))
    return EXIT_OK


def cmd_classify(args: argparse.Namespace) -> int:
    u = _parse_char(args.char)
    held = [name for name, pred in PREDICATES.items() if pred(u)]
    print(f"0x{u:02X}: {' '.join(held) if held else '-'}")
    return EXIT_OK


def cmd_table(args: argparse.Namespace) -> int:
    print(json.dumps(ctype_table(), sort_keys=True, separators=(",", ":")))
    return EXIT_OK


def cmd_verify(args: argparse.Namespace) -> int:
    paths: List[Path] = [Path(p) for p in args.paths]
    if args.all:
        paths.extend(vector_files())
    if not paths:
        print("verify: no vector files given (pass paths or --all)", file=sys.stderr)
        return EXIT_USAGE

    failed = False
    for p in paths:
        try:
            failures = run_vector_file(p)
        except SchemaError as e:
            print(f"SCHEMA_VALIDATION_FAILED: {p}: {e}", file=sys.stderr)
            return EXIT_SCHEMA_VALIDATION_FAILED
        for f in failures:
            print(f"VECTOR_FAIL: {p.name}: {f}", file=sys.stderr)
        failed = failed or bool(failures)

    if failed:
        return EXIT_VECTOR_MISMATCH
    print(f"vectors: OK ({len(paths)} files)")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="safe-ctype",
        description="Locale-aware 8-bit character classification and case conversion.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_conv = sub.add_parser("convert", help="Print TEXT converted to upper (default) or lower case.")
    p_conv.add_argument("text")
    p_conv.add_argument("--lower", action="store_true", help="Convert to lower case.")
    p_conv.add_argument(
        "--ascii",
        action="store_true",
        help="Map ASCII letters only, ignoring the locale.",
    )
    p_conv.set_defaults(fn=cmd_convert)

    p_cls = sub.add_parser("classify", help="Print the character classes CHAR belongs to.")
    p_cls.add_argument("char", help="A single character, or an integer such as 0xE9.")
    p_cls.set_defaults(fn=cmd_classify)

    p_tab = sub.add_parser("table", help="Dump the active locale's ctype table as JSON.")
    p_tab.set_defaults(fn=cmd_table)

    p_ver = sub.add_parser("verify", help="Run conformance vector files.")
    p_ver.add_argument("paths", nargs="*")
    p_ver.add_argument("--all", action="store_true", help="Run every bundled vector file.")
    p_ver.set_defaults(fn=cmd_verify)

    return p


def main(argv: List[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        )

    try:
        return args.fn(args)
    except KeyboardInterrupt:
        return 130
    except (CharTypeError, CharRangeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except Exception as e:
        print(f"INTERNAL_ERROR: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
