"""Pattern catalog loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import yaml

from wildfuzz.matching.models import MatchOptions
from wildfuzz.shared.log import tagged
from wildfuzz.shared.paths import catalog_search_paths


@dataclass
class CatalogEntry:
    key: str
    pattern: str


@dataclass
class Catalog:
    path: str
    entries: List[CatalogEntry] = field(default_factory=list)
    options: MatchOptions = field(default_factory=MatchOptions)


def _read_yaml(yaml_path: Optional[str]) -> Tuple[str, Any]:
    tried = []
    for p in catalog_search_paths(yaml_path):
        tried.append(str(p))
        if not p.is_file():
            continue
        with open(p, "r", encoding="utf-8") as f:
            return str(p), (yaml.safe_load(f) or {})
    raise ValueError(f"failed to read yaml at any of: {tried}")


def _parse_options(raw: Any) -> MatchOptions:
    if not isinstance(raw, dict):
        return MatchOptions()
    return MatchOptions(
        ignore_case=bool(raw.get("ignore_case", False)),
        ignore_punctuation=bool(raw.get("ignore_punctuation", False)),
    )


def _parse_entries(raw: Any) -> List[CatalogEntry]:
    out: List[CatalogEntry] = []
    if isinstance(raw, dict):
        for key, pat in raw.items():
            if isinstance(pat, str) and pat:
                out.append(CatalogEntry(key=str(key), pattern=pat))
            else:
                tagged("warn", f"skipping catalog entry {key!r}: pattern must be a non-empty string")
    elif isinstance(raw, list):
        for i, body in enumerate(raw):
            if not isinstance(body, dict):
                tagged("warn", f"skipping catalog entry #{i}: expected a mapping")
                continue
            pat = body.get("pattern")
            key = body.get("key", f"pattern_{i}")
            if isinstance(pat, str) and pat:
                out.append(CatalogEntry(key=str(key), pattern=pat))
            else:
                tagged("warn", f"skipping catalog entry {key!r}: pattern must be a non-empty string")
    return out


def load_catalog(yaml_path: Optional[str] = None) -> Catalog:
    """Load patterns and default options from YAML."""
    path, cfg = _read_yaml(yaml_path)
    if not isinstance(cfg, dict):
        raise ValueError(f"catalog {path} must be a mapping with a 'patterns' key")

    entries = _parse_entries(cfg.get("patterns"))
    if not entries:
        raise ValueError(f"no patterns loaded from {path}")

    # de-duplicate keys, first one wins
    seen: Dict[str, CatalogEntry] = {}
    for e in entries:
        if e.key in seen:
            tagged("warn", f"duplicate catalog key {e.key!r} ignored")
            continue
        seen[e.key] = e
    return Catalog(path=path, entries=list(seen.values()), options=_parse_options(cfg.get("options")))
