"""Environment-driven limits."""

from __future__ import annotations

import os
from typing import Optional

MAX_CELLS_ENV = "WILDFUZZ_MAX_CELLS"
DEFAULT_MAX_CELLS = 4_000_000


def max_matrix_cells(override: Optional[int] = None) -> int:
    """Cell budget for one distance table: explicit override, then env var, then default."""
    if override is not None:
        return int(override)
    raw = os.environ.get(MAX_CELLS_ENV, "").strip()
    if not raw:
        return DEFAULT_MAX_CELLS
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_CELLS_ENV} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{MAX_CELLS_ENV} must be positive, got {value}")
    return value
