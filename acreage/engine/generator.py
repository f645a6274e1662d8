"""Backtracking search for closed loops of a target area.

The search treats every quarter-circle arc as a straight diagonal segment,
which leaves only two possible segments per cell. Each diagonal loop of
length 2n that encloses the target area stands for C(2n, n) arc loops, so
the multiplicity-scaled count is accumulated alongside the layouts.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List

from ..core.combinatorics import central_binom
from ..core.constants import (CORNER_VERTICES, DIAGONAL_STEPS, GRID_SIZE, MAX_VERTEX,
                              TOTAL_CELLS, Cell, is_inner_cell, slant_for_step)
from ..core.exceptions import AcreageError, SearchInvariantError
from ..core.models import Area, Move, Vertex
from .grid import SlantGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

EMPTY = Cell.EMPTY


@dataclass
class SearchConfig:
    """Target area and pruning bounds for one search.

    ``max_inner_cells`` and ``max_length`` prune the search tree. They are
    only safe when proven loose enough for the target; the defaults are the
    exhaustive bounds.
    """

    target: Area
    max_inner_cells: int = TOTAL_CELLS
    max_length: int = TOTAL_CELLS
    progress_interval: int = 1_000_000

    def __post_init__(self) -> None:
        if not 0 <= self.max_inner_cells <= TOTAL_CELLS:
            raise ValueError(f"max_inner_cells must be within 0..{TOTAL_CELLS}")
        if not 0 <= self.max_length <= TOTAL_CELLS:
            raise ValueError(f"max_length must be within 0..{TOTAL_CELLS}")
        if self.progress_interval <= 0:
            raise ValueError("progress_interval must be positive")


@dataclass
class SearchResult:
    target: Area
    valid_cnt: int = 0
    valid_grids: List[SlantGrid] = field(default_factory=list)
    nodes_visited: int = 0
    elapsed_seconds: float = 0.0

    @property
    def layout_count(self) -> int:
        return len(self.valid_grids)

    def lengths(self) -> List[int]:
        return [grid.segment_count() for grid in self.valid_grids]


class LoopGenerator:
    """Depth-first search drawing one diagonal segment at a time.

    The frame is shared and mutated in place; ``moves`` is the undo log and
    ``unplace`` pops exactly what the matching ``place`` pushed. Coordinates
    of ``head`` and ``start`` are vertices on the grid lines, zero-indexed
    from the top-left corner.
    """

    def __init__(self, config: SearchConfig) -> None:
        self.config = config
        self.target = config.target.simplify()
        self.max_inner_cells = config.max_inner_cells
        self.max_length = config.max_length
        self.grid = SlantGrid()
        self.placed: List[List[bool]] = [[False] * GRID_SIZE for _ in range(GRID_SIZE)]
        self.placed_cnt = 0
        self.moves: List[Move] = []
        self.start: Vertex = (0, 0)
        self.head: Vertex = (0, 0)
        self.inner_cells = 0
        self.valid_grids: List[SlantGrid] = []
        self.valid_cnt = 0
        self.nodes_visited = 0
        self._consumed = False

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> SearchResult:
        """Run the search to exhaustion and hand back the accumulators."""

        if self._consumed:
            raise AcreageError("LoopGenerator has already run; create a new one per search")
        self._consumed = True

        if self.target.value > TOTAL_CELLS:
            LOGGER.warning(
                "Target area %s exceeds the %d cells of the grid; nothing to search",
                self.target,
                TOTAL_CELLS,
            )
            return SearchResult(target=self.target)

        LOGGER.info(
            "Searching for loops of area %s (max_inner_cells=%d, max_length=%d)",
            self.target,
            self.max_inner_cells,
            self.max_length,
        )
        started = time.perf_counter()
        self._next_cell()
        elapsed = time.perf_counter() - started
        LOGGER.info(
            "Search finished: %d layouts, %d curves, %d nodes in %.2fs",
            len(self.valid_grids),
            self.valid_cnt,
            self.nodes_visited,
            elapsed,
        )
        return SearchResult(
            target=self.target,
            valid_cnt=self.valid_cnt,
            valid_grids=self.valid_grids,
            nodes_visited=self.nodes_visited,
            elapsed_seconds=elapsed,
        )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _next_cell(self) -> None:
        self.nodes_visited += 1
        if self.nodes_visited % self.config.progress_interval == 0:
            LOGGER.info(
                "%d nodes visited; %d valid grids found",
                self.nodes_visited,
                len(self.valid_grids),
            )

        if self.moves:
            self._extend_head()
        else:
            self._place_first_segments()

    def _place_first_segments(self) -> None:
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                for cell in (Cell.FORWARD, Cell.BACKWARD):
                    if cell is Cell.FORWARD:
                        start, head = (r + 1, c), (r, c + 1)
                    else:
                        start, head = (r, c), (r + 1, c + 1)
                    # Only two cells meet at a corner, too few for a loop vertex.
                    if start in CORNER_VERTICES:
                        continue

                    self.start = start
                    self.head = start
                    self.place(r, c, cell, *head)
                    self._next_cell()
                    self.unplace()

                # Left marked on purpose: later loops may never pass through
                # a cell that already served as a starting cell.
                self.placed[r][c] = True
                if not self.grid.is_empty():
                    raise SearchInvariantError(f"Grid not empty after starting cell {(r, c)}")

    def _extend_head(self) -> None:
        hr, hc = self.head
        placed = self.placed

        candidates = []
        for dr, dc in DIAGONAL_STEPS:
            nr, nc = hr + dr, hc + dc
            if nr < 0 or nr > MAX_VERTEX or nc < 0 or nc > MAX_VERTEX:
                continue
            row = nr if dr == -1 else hr
            col = nc if dc == -1 else hc
            if placed[row][col]:
                continue
            candidates.append((row, col, slant_for_step(dr, dc), nr, nc))

        for row, col, slant, nr, nc in candidates:
            touching = self._occupied_around(nr, nc)
            if touching >= 2:
                # Two strands would meet at this vertex.
                continue

            if (nr, nc) == self.start and not self._try_close(row, col, slant, nr, nc, touching):
                continue

            if self.placed_cnt + 1 > self.max_length:
                continue

            self.place(row, col, slant, nr, nc)
            if self.inner_cells <= self.max_inner_cells:
                self._next_cell()
            self.unplace()

    def _try_close(self, row: int, col: int, slant: Cell, nr: int, nc: int, touching: int) -> bool:
        """Close the loop with this segment and harvest it when the area matches.

        Returns whether the closed loop matched the target.
        """

        if touching != 1:
            raise SearchInvariantError(f"Start vertex {self.start} touched by {touching} cells")

        self.place(row, col, slant, nr, nc)
        if self.placed_cnt % 2:
            raise SearchInvariantError(f"Closed a loop of odd length {self.placed_cnt}")

        matched = self.grid.loop_area() == self.target
        if matched:
            self.valid_grids.append(self.grid.copy())
            self.valid_cnt += central_binom(self.placed_cnt // 2)
            LOGGER.debug("Harvested loop of length %d", self.placed_cnt)
        self.unplace()
        return matched

    def _occupied_around(self, vr: int, vc: int) -> int:
        cells = self.grid.cells
        count = 0
        if vr > 0:
            above = cells[vr - 1]
            if vc > 0 and above[vc - 1] is not EMPTY:
                count += 1
            if vc < GRID_SIZE and above[vc] is not EMPTY:
                count += 1
        if vr < GRID_SIZE:
            below = cells[vr]
            if vc > 0 and below[vc - 1] is not EMPTY:
                count += 1
            if vc < GRID_SIZE and below[vc] is not EMPTY:
                count += 1
        return count

    # ------------------------------------------------------------------
    # Move log
    # ------------------------------------------------------------------
    def place(self, row: int, col: int, cell: Cell, head_row: int, head_col: int) -> None:
        if self.placed[row][col]:
            raise SearchInvariantError(f"Cell {(row, col)} is already placed")

        self.grid.cells[row][col] = cell
        self.placed[row][col] = True
        self.placed_cnt += 1
        self.moves.append(Move((row, col), self.head))
        self.head = (head_row, head_col)
        if is_inner_cell(row, col):
            self.inner_cells += 1

    def unplace(self) -> None:
        if not self.moves:
            raise SearchInvariantError("unplace called with an empty move log")
        (row, col), previous_head = self.moves.pop()
        if not self.placed[row][col]:
            raise SearchInvariantError(f"Cell {(row, col)} was never placed")

        self.grid.cells[row][col] = EMPTY
        self.placed[row][col] = False
        self.placed_cnt -= 1
        self.head = previous_head
        if is_inner_cell(row, col):
            self.inner_cells -= 1
