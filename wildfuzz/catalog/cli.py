"""CLI for catalog matching over a CSV."""

from __future__ import annotations

import argparse
import os
from typing import Dict, List

from wildfuzz.catalog.io import process_csv


def parse_args(argv: List[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="wildfuzz match",
        description="Match every text in a CSV against a YAML catalog of wildcard patterns.",
    )
    parser.add_argument("input_csv", type=str, help="CSV with a text/message/line/input column.")
    parser.add_argument(
        "--yaml",
        type=str,
        default=None,
        help=(
            "YAML catalog path (optional). If omitted, uses ./patterns.yaml or the bundled catalog "
            "(wildfuzz/data/patterns.yaml)."
        ),
    )
    parser.add_argument("--out", type=str, default=None, help="Output CSV path.")
    parser.add_argument("--out-dir", type=str, default=None, help="Output directory for CSV.")
    parser.add_argument("--top-k", type=int, default=1, help="Matches written per input row.")
    parser.add_argument("-i", "--ignore-case", action="store_true", default=None,
                        help="Override the catalog's ignore_case option.")
    parser.add_argument("-p", "--ignore-punctuation", action="store_true", default=None,
                        help="Override the catalog's ignore_punctuation option.")
    parser.add_argument("--max-cells", type=int, default=None, help="Upper bound on distance table cells.")
    return parser.parse_args(argv)


def _overrides(args) -> Dict[str, bool]:
    """Catalog options named on the command line; the rest keep their catalog value."""
    flags = {"ignore_case": args.ignore_case, "ignore_punctuation": args.ignore_punctuation}
    return {k: v for k, v in flags.items() if v is not None}


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    inp = args.input_csv
    if not os.path.isfile(inp):
        print(f"error: not a file: {inp}")
        return 2
    try:
        process_csv(
            inp,
            top_k=args.top_k,
            yaml_path=args.yaml,
            out_path=args.out,
            out_dir=args.out_dir,
            overrides=_overrides(args),
            max_cells=args.max_cells,
        )
        return 0
    except Exception as e:
        print(f"error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
