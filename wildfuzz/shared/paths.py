"""Path helpers for packaged resources."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

DEFAULT_CATALOG_NAME = "patterns.yaml"


def package_root() -> Path:
    return Path(__file__).resolve().parents[1]


def default_catalog_path() -> Path:
    return package_root() / "data" / DEFAULT_CATALOG_NAME


def catalog_search_paths(explicit: Optional[str] = None) -> List[Path]:
    """Explicit path first, then the working directory, then the bundled catalog."""
    out: List[Path] = []
    if explicit:
        out.append(Path(explicit))
    out.append(Path(os.getcwd()) / DEFAULT_CATALOG_NAME)
    out.append(default_catalog_path())
    seen = set()
    uniq: List[Path] = []
    for p in out:
        key = str(p)
        if key not in seen:
            seen.add(key)
            uniq.append(p)
    return uniq
