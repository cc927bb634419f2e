"""Normalization helpers for wildcard matching."""

from __future__ import annotations

import re
from typing import Iterable

WILDCARD = "¿"

_WILDCARD_RUN = re.compile(re.escape(WILDCARD) + "+")


def is_whitespace(c: str) -> bool:
    return c.isspace() or c == "\0"


def is_symbol(c: str) -> bool:
    """Punctuation is anything that is neither alphanumeric nor whitespace."""
    return not (c.isalnum() or is_whitespace(c))


def remove_punctuation(s: str) -> str:
    if not s:
        return ""
    return "".join(c for c in s if not is_symbol(c))


def remove_punctuation_soft(s: str, save: Iterable[str] = (WILDCARD,)) -> str:
    """Remove punctuation but keep the characters listed in ``save``."""
    if not s:
        return ""
    keep = set(save)
    return "".join(c for c in s if not is_symbol(c) or c in keep)


def collapse_wildcards(pattern: str) -> str:
    if not pattern:
        return ""
    return _WILDCARD_RUN.sub(WILDCARD, pattern)


def normalize_pattern(pattern: str, ignore_punctuation: bool = False) -> str:
    """Strip punctuation (if requested) first, then collapse wildcard runs.

    Stripping first means ``¿?¿`` ends up as a single wildcard.
    """
    if ignore_punctuation:
        pattern = remove_punctuation_soft(pattern)
    return collapse_wildcards(pattern)


def fold_char(c: str) -> str:
    # multi-char upper forms (e.g. "ß" -> "SS") would break the 1:1 column mapping
    up = c.upper()
    return up if len(up) == 1 else c


def fold(s: str) -> str:
    return "".join(fold_char(c) for c in s)


def text_length(text: str, ignore_punctuation: bool = False) -> int:
    """Length of the text as seen by the scorer."""
    if ignore_punctuation:
        return len(remove_punctuation(text))
    return len(text)