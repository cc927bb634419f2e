"""Data models for wildcard matching results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


class MatrixTooLargeError(ValueError):
    """Raised when a distance table would exceed the configured cell budget."""

    def __init__(self, rows: int, cols: int, max_cells: int):
        self.rows = rows
        self.cols = cols
        self.max_cells = max_cells
        super().__init__(f"distance table of {rows}x{cols} cells exceeds limit of {max_cells}")


@dataclass(frozen=True)
class MatchOptions:
    ignore_case: bool = False
    ignore_punctuation: bool = False


@dataclass(frozen=True)
class Extraction:
    """One optimal alignment: tokens and variables alternate, starting and ending with a token."""

    variables: Tuple[str, ...]
    tokens: Tuple[str, ...]

    def pieces(self) -> List[str]:
        out: List[str] = []
        for i, tok in enumerate(self.tokens):
            out.append(tok)
            if i < len(self.variables):
                out.append(self.variables[i])
        return out


@dataclass
class MatchResult:
    pattern: str
    text: str
    normalized_pattern: str
    score: float
    distance: int
    extractions: List[Extraction] = field(default_factory=list)

    @property
    def exact(self) -> bool:
        return self.distance == 0 and bool(self.normalized_pattern) and bool(self.text)

    def unique(self) -> List[Extraction]:
        seen = set()
        out: List[Extraction] = []
        for ex in self.extractions:
            if ex not in seen:
                seen.add(ex)
                out.append(ex)
        return out

    @property
    def variables(self) -> List[List[str]]:
        return [list(ex.variables) for ex in self.extractions]

    @property
    def tokens(self) -> List[List[str]]:
        return [list(ex.tokens) for ex in self.extractions]
