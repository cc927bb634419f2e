"""Ranking catalog patterns against a text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from rapidfuzz import fuzz as rf_fuzz

from wildfuzz.catalog.canon import CatalogEntry
from wildfuzz.matching.models import MatchOptions, MatchResult
from wildfuzz.matching.normalize import WILDCARD, fold, normalize_pattern
from wildfuzz.matching.scoring import match


@dataclass
class CatalogMatch:
    key: str
    pattern: str
    score: float
    distance: int
    rf_score: float
    result: MatchResult


def literal_skeleton(pattern: str, ignore_punctuation: bool = False) -> str:
    """Literal parts of the pattern, joined by single spaces."""
    norm = normalize_pattern(pattern, ignore_punctuation)
    return " ".join(part.strip() for part in norm.split(WILDCARD) if part.strip())


def _rf_score(pattern: str, text: str, options: MatchOptions) -> float:
    skel = literal_skeleton(pattern, options.ignore_punctuation)
    if not skel or not text:
        return 0.0
    processor = fold if options.ignore_case else None
    return float(rf_fuzz.partial_ratio(skel, text, processor=processor))


def score_entry(text: str, entry: CatalogEntry, options: MatchOptions,
                max_cells: Optional[int] = None) -> CatalogMatch:
    result = match(
        entry.pattern,
        text,
        ignore_case=options.ignore_case,
        ignore_punctuation=options.ignore_punctuation,
        max_cells=max_cells,
    )
    return CatalogMatch(
        key=entry.key,
        pattern=entry.pattern,
        score=result.score,
        distance=result.distance,
        rf_score=_rf_score(entry.pattern, text, options),
        result=result,
    )


def top_k_matches(text: str,
                  entries: List[CatalogEntry],
                  k: int = 3,
                  options: Optional[MatchOptions] = None,
                  max_cells: Optional[int] = None) -> List[CatalogMatch]:
    options = options or MatchOptions()
    scores = [score_entry(text, e, options, max_cells=max_cells) for e in entries]
    scores.sort(key=lambda s: (
        -s.score,
        -s.rf_score,
        s.distance,
        s.key,
    ))
    return scores[:max(0, k)]
