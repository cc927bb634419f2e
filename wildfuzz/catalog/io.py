"""CSV I/O for catalog matching."""

from __future__ import annotations

import csv
import os
import re
from dataclasses import replace
from typing import Dict, List, Optional

from wildfuzz.catalog.canon import load_catalog
from wildfuzz.catalog.ranking import CatalogMatch, top_k_matches
from wildfuzz.matching.models import MatchOptions
from wildfuzz.shared.log import tagged

TEXT_COLUMNS = ["text", "message", "line", "input"]

OUT_HEADER = ["rank", "score", "key", "pattern", "text", "variables", "extractions"]


def detect_text_col(header: List[str]) -> Optional[int]:
    """Index of the column holding the text to match."""
    def norm_header(h: str) -> str:
        if h is None:
            return ""
        h = h.lstrip("\ufeff").strip().lower()
        h = h.replace("-", "_").replace(" ", "_")
        return re.sub(r"_+", "_", h)

    lower = [norm_header(h) if isinstance(h, str) else "" for h in header]
    for option in TEXT_COLUMNS:
        if option in lower:
            return lower.index(option)
    return None


def output_path(inp: str, out_path: Optional[str] = None, out_dir: Optional[str] = None) -> str:
    if out_path:
        return out_path
    in_filename = os.path.splitext(os.path.basename(inp))[0]
    out_filename = f"{in_filename}._matched.csv"
    if out_dir:
        return os.path.join(out_dir, out_filename)
    return os.path.join(os.path.dirname(os.path.abspath(inp)), out_filename)


def format_row(text: str, best: Optional[CatalogMatch], rank: int = 1) -> List[object]:
    if best is None:
        return [rank, "0%", "", "", text, "", 0]
    extractions = best.result.extractions
    variables = " | ".join(extractions[0].variables) if extractions else ""
    return [
        rank,
        f"{int(round(best.score * 100))}%",
        best.key,
        best.pattern,
        text,
        variables,
        len(best.result.unique()),
    ]


def process_csv(inp_path: str,
                top_k: int = 1,
                yaml_path: Optional[str] = None,
                out_path: Optional[str] = None,
                out_dir: Optional[str] = None,
                options: Optional[MatchOptions] = None,
                overrides: Optional[Dict[str, bool]] = None,
                max_cells: Optional[int] = None) -> str:
    catalog = load_catalog(yaml_path)
    opts = options or catalog.options
    if overrides:
        opts = replace(opts, **overrides)
    out_path = output_path(inp_path, out_path=out_path, out_dir=out_dir)

    with open(inp_path, "r", newline="", encoding="utf-8") as f_in, \
         open(out_path, "w", newline="", encoding="utf-8") as f_out:
        rdr = csv.reader(f_in)
        w = csv.writer(f_out)

        header = next(rdr, None)
        if not header:
            raise ValueError("empty CSV (no header)")

        text_idx = detect_text_col(header)
        if text_idx is None:
            raise ValueError(f"could not detect a text column (expected one of {TEXT_COLUMNS})")

        w.writerow(OUT_HEADER)
        rows = 0
        for row in rdr:
            text = row[text_idx] if text_idx < len(row) else ""
            matches = top_k_matches(text, catalog.entries, k=max(1, top_k), options=opts, max_cells=max_cells)
            if not matches:
                w.writerow(format_row(text, None))
            for rank, m in enumerate(matches, start=1):
                w.writerow(format_row(text, m, rank))
            rows += 1

    tagged("ok", f"catalog:   {catalog.path} ({len(catalog.entries)} patterns)")
    tagged("ok", f"processed: {inp_path} ({rows} rows)")
    tagged("ok", f"wrote:     {out_path}")
    return out_path
