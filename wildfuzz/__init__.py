"""Fuzzy matching of text against patterns with '¿' wildcards."""

from wildfuzz._version import __version__
from wildfuzz.matching.extract import extract
from wildfuzz.matching.matrix import UNREACHABLE, DistanceMatrix, build_matrix, format_matrix
from wildfuzz.matching.models import Extraction, MatchOptions, MatchResult, MatrixTooLargeError
from wildfuzz.matching.normalize import (
    WILDCARD,
    collapse_wildcards,
    is_symbol,
    is_whitespace,
    normalize_pattern,
    remove_punctuation,
    remove_punctuation_soft,
)
from wildfuzz.matching.scoring import compare, distance, match

__all__ = [
    "__version__",
    "WILDCARD",
    "UNREACHABLE",
    "compare",
    "distance",
    "match",
    "extract",
    "build_matrix",
    "format_matrix",
    "DistanceMatrix",
    "Extraction",
    "MatchOptions",
    "MatchResult",
    "MatrixTooLargeError",
    "collapse_wildcards",
    "is_symbol",
    "is_whitespace",
    "normalize_pattern",
    "remove_punctuation",
    "remove_punctuation_soft",
]
