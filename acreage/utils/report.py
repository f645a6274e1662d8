"""Tabular summaries of search results built on pandas."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from ..core.combinatorics import central_binom

if TYPE_CHECKING:
    from ..engine.generator import SearchResult


LAYOUT_COLUMNS = ["length", "inner_cells", "multiplicity", "area"]


def layouts_frame(result: SearchResult) -> pd.DataFrame:
    """One row per harvested layout."""

    rows = []
    for grid in result.valid_grids:
        length = grid.segment_count()
        rows.append(
            {
                "length": length,
                "inner_cells": grid.inner_segment_count(),
                "multiplicity": central_binom(length // 2),
                "area": str(grid.loop_area()),
            }
        )
    return pd.DataFrame(rows, columns=LAYOUT_COLUMNS)


def summarize_by_length(result: SearchResult) -> pd.DataFrame:
    """Layouts and curves per loop length, with each length's share of all curves."""

    frame = layouts_frame(result)
    summary = (
        frame.groupby("length")
        .agg(layouts=("multiplicity", "size"), curves=("multiplicity", "sum"))
        .reset_index()
    )
    total = summary["curves"].sum()
    summary["share"] = summary["curves"] / total if total else 0.0
    return summary
