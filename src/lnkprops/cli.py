"""CLI entry point: ``lnkprops FILE [FILE ...]``."""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from ._constants import CONTINUATION_INDENT
from .api import get_properties, translate
from .parser import format_record


def _positive_float(val: str) -> float:
    try:
        num = float(val)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number: {val!r}") from None
    if num <= 0:
        raise argparse.ArgumentTypeError(f"Must be greater than zero: {val!r}")
    return num


def _print_records(records: list[dict[str, str]], as_json: bool) -> int:
    if as_json:
        print(json.dumps(records, indent=2))
        return 0
    for record in records:
        print(f"\n{'=' * 70}")
        print(f"FILE: {record.get('FullName', '')}")
        print(f"{'=' * 70}")
        print(format_record(record))
    print()
    return 0


def _print_translated(records: list[dict[str, str]], as_json: bool) -> int:
    infos = translate(records)
    if infos is None:
        return 1
    if as_json:
        print(json.dumps([asdict(info) for info in infos], indent=2))
        return 0
    for info in infos:
        d = asdict(info)
        width = max(len(k) for k in d)
        print(f"\n{'=' * 70}")
        print(f"FILE: {info.file_path}")
        print(f"{'=' * 70}")
        for key, value in d.items():
            print(f"  {key.ljust(width)}  {value}".rstrip())
    print()
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="lnkprops",
        description="Read Windows shortcut (.lnk/.url) properties via PowerShell",
    )
    parser.add_argument("files", nargs="*", help="Shortcut file(s) to query")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "-t",
        "--translate",
        action="store_true",
        help="Use friendly field names and window mode labels",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        metavar="SECONDS",
        help="Kill PowerShell if it runs longer than this",
    )
    parser.add_argument(
        "--indent-width",
        type=int,
        default=None,
        metavar="N",
        help=(
            "Indent of wrapped value lines (default: read from each block, "
            f"else {CONTINUATION_INDENT})"
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug details to stderr"
    )

    args = parser.parse_args(argv)
    if not args.files:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    records = get_properties(
        args.files, timeout=args.timeout, indent=args.indent_width
    )
    if records is None:
        sys.exit(1)

    show = _print_translated if args.translate else _print_records
    status = show(records, args.json)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
