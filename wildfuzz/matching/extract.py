"""Backtracking extraction of variables and tokens from a filled distance table.

Every optimal path through the table becomes one :class:`Extraction`. The
search starts at the bottom-right cell and walks toward the origin. When two
moves tie, a new extraction slot is forked from the pieces collected so far
and the alternative path is walked to completion before the current path
resumes.

Walkers are generators. A walker yields a :class:`_Branch` whenever it forks,
and :func:`extract` drives them from an explicit stack. Slot numbering follows
depth-first order and Python recursion depth stays flat however many ties
a table contains.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Optional, Sequence

from wildfuzz.matching.matrix import DistanceMatrix, Row
from wildfuzz.matching.models import Extraction
from wildfuzz.matching.normalize import WILDCARD, is_symbol


@dataclass(frozen=True)
class _Branch:
    row: int
    col: int
    slot: int
    var_next: bool


class _Slots:
    """Pieces for every extraction of one call, built right to left."""

    def __init__(self) -> None:
        self.variables: List[Deque[str]] = [deque()]
        self.tokens: List[Deque[str]] = [deque()]

    def fork(self, slot: int, variable: Optional[str] = None, token: Optional[str] = None) -> int:
        variables = deque(self.variables[slot])
        tokens = deque(self.tokens[slot])
        if variable is not None:
            variables.appendleft(variable)
        if token is not None:
            tokens.appendleft(token)
        self.variables.append(variables)
        self.tokens.append(tokens)
        return len(self.variables) - 1


def _walk(text: str,
          cells: Sequence[Row],
          wild: Sequence[bool],
          ignore_punctuation: bool,
          slots: _Slots,
          start: _Branch) -> Iterator[_Branch]:
    row, col, slot, var_next = start.row, start.col, start.slot, start.var_next
    variables = slots.variables[slot]
    tokens = slots.tokens[slot]
    D = cells
    var = ""
    token = ""

    while col > 0:
        if row > 0 and wild[row - 1]:
            # wildcard row: absorb the flat run into the variable
            while col >= 1:
                moved = False
                if D[row][col - 1] == D[row][col]:
                    var = text[col - 1] + var
                    col -= 1
                    moved = True
                if row > 1 and col >= 1:
                    if D[row][col - 1] != D[row][col]:
                        if D[row - 1][col] <= D[row - 1][col - 1]:
                            row -= 1
                        else:
                            row -= 1
                            col -= 1
                        break
                    if D[row][col - 1] == D[row - 1][col]:
                        child = slots.fork(slot, variable=var)
                        yield _Branch(row - 1, col, child, False)
                elif not moved:
                    break
            variables.appendleft(var)
            var_next = False
            var = ""

        elif row > 1 and wild[row - 2]:
            # literal row directly below a wildcard: close the token here
            if ignore_punctuation and is_symbol(text[col - 1]):
                while col > 1 and D[row][col - 1] == D[row][col]:
                    token = text[col - 1] + token
                    col -= 1

            if col > 1 and D[row - 1][col - 1] == D[row - 1][col] and D[row][col] != D[row - 1][col - 1]:
                child = slots.fork(slot, token=text[col - 1] + token)
                yield _Branch(row - 1, col - 1, child, True)
                row -= 1
            else:
                token = text[col - 1] + token
                row -= 1
                col -= 1

            tokens.appendleft(token)
            var_next = True
            token = ""

        else:
            if row > 0:
                up, diag, left = D[row - 1][col], D[row - 1][col - 1], D[row][col - 1]
                low = min(up, diag, left)
                if up == low and up == diag and D[row][col] == left:
                    row -= 1
                elif diag == low:
                    token = text[col - 1] + token
                    row -= 1
                    col -= 1
                elif up == low:
                    row -= 1
                else:
                    token = text[col - 1] + token
                    col -= 1
            else:
                token = text[col - 1] + token
                col -= 1

            if col == 0:
                tokens.appendleft(token)
                var_next = True
                token = ""

    # text exhausted: remaining pattern rows contribute empty pieces
    while row > 0:
        is_var = wild[row - 1]
        if not is_var and not var_next:
            tokens.appendleft("")
            var_next = True
        elif is_var and var_next:
            variables.appendleft("")
            var_next = False
        row -= 1


def _finish(pattern: str, variables: Deque[str], tokens: Deque[str]) -> Extraction:
    toks = list(tokens)
    if pattern.startswith(WILDCARD):
        toks.insert(0, "")
    if pattern.endswith(WILDCARD):
        toks.append("")
    return Extraction(variables=tuple(variables), tokens=tuple(toks))


def extract(matrix: DistanceMatrix, ignore_punctuation: bool = False) -> List[Extraction]:
    """Enumerate every optimal extraction reachable in ``matrix``.

    Duplicates are kept; the list order is the depth-first order in which
    branches were discovered.
    """
    pattern, text = matrix.pattern, matrix.text
    if WILDCARD not in pattern or not text:
        return []

    wild = [c == WILDCARD for c in pattern]
    slots = _Slots()
    root = _Branch(row=len(pattern), col=len(text), slot=0, var_next=False)
    stack = [_walk(text, matrix.cells, wild, ignore_punctuation, slots, root)]
    while stack:
        try:
            branch = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        stack.append(_walk(text, matrix.cells, wild, ignore_punctuation, slots, branch))

    return [_finish(pattern, v, t) for v, t in zip(slots.variables, slots.tokens)]
