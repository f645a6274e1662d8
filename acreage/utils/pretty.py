"""Pretty-print helpers for slant grids and search results."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.generator import SearchResult
    from ..engine.grid import SlantGrid


def format_grid(grid: SlantGrid) -> str:
    width = grid.size
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid.cells):
        row_render = " ".join(f"{cell.symbol:>2}" for cell in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: SlantGrid, *, label: str | None = None, stream=None) -> None:
    """Print a slant grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_search_stats(result: SearchResult, *, stream=None) -> None:
    """Print totals and the loop length distribution of a finished search."""

    stream = stream or sys.stdout
    print("--- Search ---", file=stream)
    print(f"  Target area:   {result.target}", file=stream)
    print(f"  Layouts:       {result.layout_count}", file=stream)
    print(f"  Curves:        {result.valid_cnt}", file=stream)
    print(f"  Nodes visited: {result.nodes_visited}", file=stream)
    print(f"  Elapsed:       {result.elapsed_seconds:.2f}s", file=stream)

    lengths = result.lengths()
    if lengths:
        length_dist = Counter(lengths)
        print(file=stream)
        print("--- Loops ---", file=stream)
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{l}:{c}" for l, c in sorted(length_dist.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
