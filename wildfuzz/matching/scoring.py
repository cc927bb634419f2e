"""Scoring and the public comparison entry points."""

from __future__ import annotations

from typing import List, Optional

from rapidfuzz.distance import Levenshtein

from wildfuzz.matching.extract import extract
from wildfuzz.matching.matrix import build_matrix
from wildfuzz.matching.models import Extraction, MatchResult
from wildfuzz.matching.normalize import WILDCARD, fold, normalize_pattern, text_length


def closeness(normalized_pattern: str, text: str, dist: int, ignore_punctuation: bool = False) -> float:
    """Map a distance onto [0, 1] relative to the longer side."""
    if not normalized_pattern or not text:
        return 0.0
    length = max(len(normalized_pattern), text_length(text, ignore_punctuation))
    return max(0.0, min(1.0, (length - dist) / length))


def _plain_distance(pattern: str, text: str, ignore_case: bool) -> int:
    return int(Levenshtein.distance(pattern, text, processor=fold if ignore_case else None))


def match(pattern: str,
          text: str,
          ignore_case: bool = False,
          ignore_punctuation: bool = False,
          extract_variables: bool = True,
          max_cells: Optional[int] = None) -> MatchResult:
    """Compare ``text`` against ``pattern`` and collect every optimal extraction."""
    pattern = pattern or ""
    text = text or ""
    normalized = normalize_pattern(pattern, ignore_punctuation)

    if not normalized or text_length(text, ignore_punctuation) == 0:
        # nothing left to align once punctuation is skipped
        dist = len(normalized) if normalized else text_length(text, ignore_punctuation)
        return MatchResult(pattern=pattern, text=text, normalized_pattern=normalized, score=0.0, distance=dist)

    has_wildcard = WILDCARD in normalized
    extractions: List[Extraction] = []
    if not has_wildcard and not ignore_punctuation:
        dist = _plain_distance(normalized, text, ignore_case)
    else:
        matrix = build_matrix(normalized, text, ignore_case, ignore_punctuation, max_cells=max_cells)
        dist = matrix.distance
        if extract_variables and has_wildcard:
            extractions = extract(matrix, ignore_punctuation)

    return MatchResult(
        pattern=pattern,
        text=text,
        normalized_pattern=normalized,
        score=closeness(normalized, text, dist, ignore_punctuation),
        distance=dist,
        extractions=extractions,
    )


def _populate(result: MatchResult,
              variables: Optional[List[List[str]]],
              tokens: Optional[List[List[str]]]) -> None:
    for ex in result.extractions:
        if variables is not None:
            variables.append(list(ex.variables))
        if tokens is not None:
            tokens.append(list(ex.tokens))


def compare(pattern: str,
            text: str,
            variables: Optional[List[List[str]]] = None,
            tokens: Optional[List[List[str]]] = None,
            *,
            ignore_case: bool = False,
            ignore_punctuation: bool = False,
            max_cells: Optional[int] = None) -> float:
    """Closeness of ``text`` to ``pattern`` in [0, 1].

    When ``variables`` and/or ``tokens`` are given, one list per optimal
    extraction is appended to each, in the same order.
    """
    wants = variables is not None or tokens is not None
    result = match(pattern, text, ignore_case=ignore_case, ignore_punctuation=ignore_punctuation,
                   extract_variables=wants, max_cells=max_cells)
    _populate(result, variables, tokens)
    return result.score


def distance(pattern: str,
             text: str,
             variables: Optional[List[List[str]]] = None,
             tokens: Optional[List[List[str]]] = None,
             *,
             ignore_case: bool = False,
             ignore_punctuation: bool = False,
             max_cells: Optional[int] = None) -> int:
    """Wildcard-aware edit distance of ``text`` from ``pattern``."""
    wants = variables is not None or tokens is not None
    result = match(pattern, text, ignore_case=ignore_case, ignore_punctuation=ignore_punctuation,
                   extract_variables=wants, max_cells=max_cells)
    _populate(result, variables, tokens)
    return result.distance
