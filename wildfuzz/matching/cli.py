"""CLI for single comparisons and table dumps."""

from __future__ import annotations

import argparse
from typing import List

from wildfuzz.matching.matrix import build_matrix, format_matrix
from wildfuzz.matching.models import MatchResult
from wildfuzz.matching.normalize import normalize_pattern
from wildfuzz.matching.scoring import match


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("pattern", type=str, help="Pattern string; '¿' matches any run of characters.")
    parser.add_argument("text", type=str, help="Text to compare against the pattern.")
    parser.add_argument("-i", "--ignore-case", action="store_true", help="Compare characters case-insensitively.")
    parser.add_argument(
        "-p",
        "--ignore-punctuation",
        action="store_true",
        help="Strip punctuation from the pattern and skip it in the text (it is kept in extractions).",
    )
    parser.add_argument(
        "--max-cells",
        type=int,
        default=None,
        help="Upper bound on distance table cells (default: $WILDFUZZ_MAX_CELLS or 4000000).",
    )


def parse_compare_args(argv: List[str] | None = None):
    parser = argparse.ArgumentParser(prog="wildfuzz compare", description="Score a text against a wildcard pattern.")
    _add_common(parser)
    parser.add_argument("--no-extract", action="store_true", help="Only print score and distance.")
    return parser.parse_args(argv)


def parse_matrix_args(argv: List[str] | None = None):
    parser = argparse.ArgumentParser(prog="wildfuzz matrix", description="Print the distance table for a comparison.")
    _add_common(parser)
    return parser.parse_args(argv)


def render_result(result: MatchResult) -> str:
    lines = [f"Score: {result.score}", f"Distance: {result.distance}", "", "---"]
    for i, ex in enumerate(result.extractions):
        lines.append(f"Extraction #{i}")
        lines.append("  Variables:")
        lines.extend(f"    '{v}'" for v in ex.variables)
        lines.append("  Tokens:")
        lines.extend(f"    '{t}'" for t in ex.tokens)
        lines.append("---")
    return "\n".join(lines)


def compare_main(argv: List[str] | None = None) -> int:
    args = parse_compare_args(argv)
    try:
        result = match(
            args.pattern,
            args.text,
            ignore_case=args.ignore_case,
            ignore_punctuation=args.ignore_punctuation,
            extract_variables=not args.no_extract,
            max_cells=args.max_cells,
        )
    except ValueError as e:
        print(f"error: {e}")
        return 1
    print(render_result(result))
    return 0


def matrix_main(argv: List[str] | None = None) -> int:
    args = parse_matrix_args(argv)
    pattern = normalize_pattern(args.pattern, args.ignore_punctuation)
    try:
        matrix = build_matrix(pattern, args.text, args.ignore_case, args.ignore_punctuation, max_cells=args.max_cells)
    except ValueError as e:
        print(f"error: {e}")
        return 1
    print(format_matrix(matrix))
    return 0


if __name__ == "__main__":
    raise SystemExit(compare_main())
