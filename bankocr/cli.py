"""Command-line interface for bank account number OCR."""

import argparse
import json
import logging
import sys
from pathlib import Path


def _render(number):
    """Print the OCR row for an account number and exit."""
    from bankocr.rendering import render_account_number

    try:
        print(render_account_number(number), end="")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="bankocr",
        description="Decode bank account numbers from OCR files",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Path to the OCR file",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes used to decode rows (default: 1)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the OCR file (default: utf-8)",
    )
    parser.add_argument(
        "--render",
        metavar="NUMBER",
        help="Print the OCR row for a 9-digit account number and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log decoding and repair details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.render:
        _render(args.render)
        return

    if not args.file:
        parser.error("the following arguments are required: file")

    if args.workers < 1:
        parser.error("--workers must be at least 1")

    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: OCR file not found: {file_path}", file=sys.stderr)
        sys.exit(1)

    from bankocr.api import AccountNumberReader, InvalidOcrFileError

    reader = AccountNumberReader(workers=args.workers, encoding=args.encoding)

    try:
        rows = reader.read(file_path)
    except InvalidOcrFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == "json":
        print(json.dumps([row.to_dict() for row in rows], indent=2))
    else:
        _print_table(rows)


def _print_table(rows):
    """Print decoded rows as a fixed-width table with a status summary."""
    from bankocr.models import DecodeSummary

    print(f"{'Account number':<16} {'Status':<8} Possible numbers")
    print(f"{'--------------':<16} {'------':<8} ----------------")
    for row in rows:
        matches = ", ".join(row.possible_matches or [])
        print(f"{row.data.number:<16} {row.data.status.display:<8} {matches}".rstrip())

    summary = DecodeSummary.from_rows(rows)
    counts = "  ".join(f"{status}={n}" for status, n in summary.counts.items())
    print(f"\n{summary.total} account numbers: {counts}")


if __name__ == "__main__":
    main()
