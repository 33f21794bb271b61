"""Command-line interface for JSON to CSV flattening."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import FlattenConfig, parse_delimiter
from .converter import json_to_csv_file, json_to_csv_stream, schema_to_records
from .errors import ConversionError
from .io_utils import read_json_text, write_records, write_records_to_file


def _read_input(path: str, field_name: str) -> str:
    if path == '-':
        return read_json_text(getattr(sys.stdin, 'buffer', sys.stdin), field_name)
    return read_json_text(Path(path), field_name)


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output", "-o", type=Path, help="Output CSV path (default: stdout)")
    parser.add_argument("--separator", help="Header path separator (default: '_')")
    parser.add_argument("--delimiter", help="CSV delimiter; '\\t' or 'tab' for tab (default: ',')")
    parser.add_argument("--encoding", help="Encoding of the --output file (default: utf-8); stdout keeps its own encoding")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Flatten nested JSON into CSV.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert a JSON document to CSV")
    convert_parser.add_argument("input", help="Input JSON file path or '-' for stdin")
    convert_parser.add_argument("--schema", type=Path, help="JSON document whose leaves define the columns")
    convert_parser.add_argument("--null-value", help="Text written for empty cells (default: empty)")
    _add_output_args(convert_parser)

    headers_parser = subparsers.add_parser("headers", help="Write only the header row of a schema document")
    headers_parser.add_argument("schema", help="Schema JSON file path or '-' for stdin")
    _add_output_args(headers_parser)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = FlattenConfig.create(
            separator=args.separator,
            delimiter=parse_delimiter(args.delimiter),
            null_value=getattr(args, "null_value", None),
            encoding=args.encoding,
        )

        if args.command == "headers":
            records = schema_to_records(_read_input(args.schema, "schema"), config)
            if args.output:
                write_records_to_file(records, args.output, config.delimiter, config.null_value, config.encoding)
            else:
                write_records(records, sys.stdout, config.delimiter, config.null_value)
            return 0

        json_text = _read_input(args.input, "json")
        schema_text = read_json_text(args.schema, "schema") if args.schema else None
        if args.output:
            json_to_csv_file(json_text, args.output, schema_text, config)
        else:
            json_to_csv_stream(json_text, sys.stdout, schema_text, config)
        return 0
    except (ConversionError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
