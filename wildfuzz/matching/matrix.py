"""Distance table construction for wildcard-aware edit distance."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from wildfuzz.matching.models import MatrixTooLargeError
from wildfuzz.matching.normalize import WILDCARD, fold, is_symbol
from wildfuzz.shared.settings import max_matrix_cells

# Saturating "no alignment" marker: inf + 1 and inf - 1 stay inf.
UNREACHABLE = math.inf

Cell = float
Row = List[Cell]


@dataclass
class DistanceMatrix:
    """The filled (m+1) x (n+1) table for one pattern/text pair."""

    pattern: str
    text: str
    cells: List[Row]

    @property
    def rows(self) -> int:
        return len(self.pattern) + 1

    @property
    def cols(self) -> int:
        return len(self.text) + 1

    def reachable(self, i: int, j: int) -> bool:
        return self.cells[i][j] != UNREACHABLE

    @property
    def distance(self) -> int:
        if not self.reachable(-1, -1):
            return len(self.pattern) + len(self.text)
        return int(self.cells[-1][-1])


def _first_column(wild: Sequence[bool]) -> Row:
    """Cost of each pattern prefix against empty text.

    Literals before the first wildcard are deleted at unit cost; once a
    literal follows a wildcard the prefix is unreachable.
    """
    col: Row = [0]
    seen_wild = False
    blocked = False
    literals = 0
    for is_wild in wild:
        if is_wild:
            seen_wild = True
        else:
            literals += 1
            if seen_wild:
                blocked = True
        col.append(UNREACHABLE if blocked else literals)
    return col


def _fill_wildcard_row(above: Row, row: Row) -> None:
    n = len(row) - 1
    if above[0] == 0:
        # leading wildcard: any text prefix is absorbed for free
        row[:] = [0] * (n + 1)
        return
    hit_zero = False
    for j in range(n + 1):
        if above[j] == 0:
            row[j] = 1
            hit_zero = True
        elif hit_zero:
            # only the last column of the zero run stays free
            row[j - 1] = above[j - 1]
            row[j:] = [0] * (n + 1 - j)
            return
        else:
            row[j] = min(above[j], row[j - 1]) if j > 0 else above[j]
    if hit_zero:
        row[n] = above[n]


def _fill_literal_row(above: Row, row: Row, pc: str, text: str,
                      symbols: Optional[List[bool]]) -> None:
    seen_text = False
    for j in range(1, len(text) + 1):
        if symbols is not None and symbols[j - 1]:
            # punctuation is transparent; the pattern character may still be dropped here
            row[j] = min(row[j - 1], above[j] + 1) if seen_text else row[j - 1]
            continue
        seen_text = True
        match = 1 if pc == text[j - 1] else 0
        row[j] = 1 + min(above[j], row[j - 1], above[j - 1] - match)


def _first_row(text: str, symbols: Optional[List[bool]]) -> Row:
    if symbols is None:
        return list(range(len(text) + 1))
    row: Row = [0]
    for is_sym in symbols:
        row.append(row[-1] if is_sym else row[-1] + 1)
    return row


def build_matrix(pattern: str,
                 text: str,
                 ignore_case: bool = False,
                 ignore_punctuation: bool = False,
                 max_cells: Optional[int] = None) -> DistanceMatrix:
    """Fill the distance table for an already normalized pattern."""
    m, n = len(pattern), len(text)
    limit = max_matrix_cells(max_cells)
    if (m + 1) * (n + 1) > limit:
        raise MatrixTooLargeError(m + 1, n + 1, limit)

    wild = [c == WILDCARD for c in pattern]
    p_cmp = fold(pattern) if ignore_case else pattern
    t_cmp = fold(text) if ignore_case else text
    symbols = [is_symbol(c) for c in text] if ignore_punctuation else None

    first = _first_column(wild)
    cells: List[Row] = [_first_row(t_cmp, symbols)]
    for i in range(1, m + 1):
        cells.append([first[i]] + [0] * n)

    for i in range(1, m + 1):
        if wild[i - 1]:
            _fill_wildcard_row(cells[i - 1], cells[i])
        else:
            _fill_literal_row(cells[i - 1], cells[i], p_cmp[i - 1], t_cmp, symbols)

    return DistanceMatrix(pattern=pattern, text=text, cells=cells)


def format_matrix(matrix: DistanceMatrix, row: int = -1, col: int = -1) -> str:
    """Render the table; ``^`` marks unreachable cells and ``*`` the cell at (row, col)."""
    pattern, text, cells = matrix.pattern, matrix.text, matrix.cells
    width = max(len(str(len(text))), len(str(len(pattern)))) + 2

    header = " " * (width + 1) + "".join(c.rjust(width) for c in text)
    lines = [header]
    for i in range(len(pattern) + 1):
        label = pattern[i - 1] if i > 0 else " "
        parts = []
        for j in range(len(text) + 1):
            element = str(int(cells[i][j])) if matrix.reachable(i, j) else "^"
            if i == row and j == col:
                element = "*" + element
            parts.append(element.rjust(width))
        lines.append(label + "".join(parts))
    return "\n".join(lines)
