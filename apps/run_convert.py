#!/usr/bin/env python3
"""
Encode numbers to, or decode them from, an arbitrary base on the command line.

Examples:
  python apps/run_convert.py encode 144.5 --preset dozenal          # 100;6
  python apps/run_convert.py encode 123456789 --notation scientific --max-fraction-length 4
  python apps/run_convert.py decode "84;4↊e6" --preset dozenal
  python apps/run_convert.py encode --csv prices.csv --column price --base 16 --output out.csv

Exit codes: 0 on success, 2 on conversion errors (message on stderr).
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional

import pandas as pd

from base_formatter import PRESETS, BaseFormatter, BaseFormatterError, Notation, RoundingMode, by_base
from base_formatter.frames import decode_series, encode_series


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert numbers between decimal and another base.")
    parser.add_argument("command", choices=["encode", "decode"], help="Direction of the conversion")
    parser.add_argument("values", nargs="*", help="Numbers to encode or strings to decode")

    alphabet = parser.add_mutually_exclusive_group()
    alphabet.add_argument("--base", type=int, default=None, help="Base 2..62 using 0-9A-Za-z digits")
    alphabet.add_argument("--preset", choices=sorted(PRESETS.keys()), default=None, help="Named alphabet")

    parser.add_argument("--rounding-mode", choices=[m.value for m in RoundingMode], default=None)
    parser.add_argument("--precision", type=int, default=None, help="Significant digits (default 32)")
    parser.add_argument("--max-fraction-length", type=int, default=None)
    parser.add_argument("--min-fraction-length", type=int, default=None)
    parser.add_argument("--notation", choices=[n.value for n in Notation], default=None)
    parser.add_argument("--grouping", choices=["always", "min2"], default=None, help="Group integer digits")

    parser.add_argument("--csv", dest="csv_path", default=None, help="Convert a CSV column instead of VALUES")
    parser.add_argument("--column", default=None, help="Column to convert (with --csv)")
    parser.add_argument("--output", default=None, help="Output CSV path (with --csv; default stdout)")

    args = parser.parse_args(argv)
    if args.csv_path is None and not args.values:
        parser.error("give VALUES or --csv PATH --column NAME")
    if args.csv_path is not None and args.column is None:
        parser.error("--csv requires --column")
    return args


def _options(args: argparse.Namespace) -> Dict[str, object]:
    opts: Dict[str, object] = {}
    if args.rounding_mode is not None:
        opts["rounding_mode"] = args.rounding_mode
    if args.precision is not None:
        opts["precision"] = args.precision
    if args.max_fraction_length is not None:
        opts["maximum_fraction_length"] = args.max_fraction_length
    if args.min_fraction_length is not None:
        opts["minimum_fraction_length"] = args.min_fraction_length
    if args.notation is not None:
        opts["notation"] = args.notation
    if args.grouping is not None:
        opts["use_grouping"] = args.grouping
    return opts


def build_formatter(args: argparse.Namespace) -> BaseFormatter:
    opts = _options(args)
    if args.preset is not None:
        return PRESETS[args.preset](**opts)
    return by_base(args.base if args.base is not None else 10, **opts)


def run_values(formatter: BaseFormatter, command: str, values: List[str]) -> None:
    for value in values:
        if command == "encode":
            print(formatter.encode(value))
        else:
            print(formatter.decode(value))


def run_csv(formatter: BaseFormatter, command: str, path: str, column: str, output: Optional[str]) -> None:
    frame = pd.read_csv(path, dtype={column: str}, keep_default_na=True)
    if column not in frame.columns:
        raise KeyError(f"column not found: {column!r}")
    if command == "encode":
        frame[f"{column}_base{formatter.base}"] = encode_series(formatter, frame[column])
    else:
        frame[f"{column}_decoded"] = decode_series(formatter, frame[column])
    if output is None:
        frame.to_csv(sys.stdout, index=False)
    else:
        frame.to_csv(output, index=False)
        print(f"[run_convert] wrote {len(frame)} rows to {output}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        formatter = build_formatter(args)
        if args.csv_path is not None:
            run_csv(formatter, args.command, args.csv_path, args.column, args.output)
        else:
            run_values(formatter, args.command, args.values)
    except (BaseFormatterError, KeyError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
