"""Unified CLI with compare, matrix, and match commands."""

from __future__ import annotations

import sys
from typing import List

from wildfuzz.catalog import cli as catalog_cli
from wildfuzz.matching import cli as matching_cli

USAGE = """usage: wildfuzz <compare|matrix|match> [args...]

subcommands:
  compare   score one text against one pattern and print every extraction
  matrix    print the distance table for one comparison
  match     match each row of a CSV against a YAML pattern catalog

examples:
  wildfuzz compare "¿ else like ¿" "Something else like that"
  wildfuzz compare -i -p "something else like ¿" "Something, Else Like That?"
  wildfuzz matrix "¿ ¿s" "What the hell are lobsters"
  wildfuzz match messages.csv --yaml patterns.yaml --top-k 3
"""


def main(argv: List[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0] in {"-h", "--help", "help"}:
        print(USAGE)
        return 0
    if not argv:
        print(USAGE)
        return 2

    cmd = argv[0]
    rest = argv[1:]

    if cmd == "compare":
        return matching_cli.compare_main(rest)
    if cmd == "matrix":
        return matching_cli.matrix_main(rest)
    if cmd == "match":
        return catalog_cli.main(rest)

    print(f"unknown command: {cmd}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
