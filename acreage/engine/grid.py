"""Grid representation and the scanline area computation."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import GRID_SIZE, TOTAL_CELLS, Cell, is_inner_cell
from ..core.exceptions import LoopNotClosedError
from ..core.models import Area, Coord, ScanTally


class SlantGrid:
    """A 7x7 board of empty cells and diagonal curve segments."""

    size = GRID_SIZE

    def __init__(self, cells: Optional[Sequence[Sequence[Cell]]] = None) -> None:
        if cells is None:
            self.cells: List[List[Cell]] = [
                [Cell.EMPTY for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)
            ]
            return
        if len(cells) != GRID_SIZE or any(len(row) != GRID_SIZE for row in cells):
            raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")
        self.cells = [[Cell(cell) for cell in row] for row in cells]

    @classmethod
    def from_strings(cls, rows: Iterable[str]) -> "SlantGrid":
        """Build a grid from text rows of ``·╱╲`` (or ``./\\``)."""

        parsed = [[Cell.from_symbol(symbol) for symbol in row.strip()] for row in rows]
        return cls(parsed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        self.cells[row][col] = cell

    def is_empty(self) -> bool:
        return all(cell is Cell.EMPTY for row in self.cells for cell in row)

    def segments(self) -> Iterator[Tuple[Coord, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if cell is not Cell.EMPTY:
                    yield (r, c), cell

    def segment_count(self) -> int:
        return sum(1 for _ in self.segments())

    def inner_segment_count(self) -> int:
        return sum(1 for (r, c), _ in self.segments() if is_inner_cell(r, c))

    # ------------------------------------------------------------------
    # Area
    # ------------------------------------------------------------------
    def scan(self) -> ScanTally:
        """Classify every cell with a left-to-right parity sweep of each row."""

        segments = 0
        outside = 0
        inside = 0
        for row in self.cells:
            # Every row starts outside the loop at its left edge.
            is_outside = True
            for cell in row:
                if cell is Cell.EMPTY:
                    if is_outside:
                        outside += 1
                    else:
                        inside += 1
                else:
                    segments += 1
                    is_outside = not is_outside
        return ScanTally(segments=segments, outside=outside, inside=inside)

    def loop_area(self) -> Area:
        """Area enclosed by the loop drawn in this grid.

        Assumes the slants form one closed loop; the caller establishes that
        before asking. Each slant adds half a unit, each inside empty cell a
        whole unit.
        """

        tally = self.scan()
        if tally.total != TOTAL_CELLS:
            raise LoopNotClosedError(
                f"Scan accounted for {tally.total} of {TOTAL_CELLS} cells"
            )
        return tally.area().simplify()

    # ------------------------------------------------------------------
    # Copying and serialization helpers
    # ------------------------------------------------------------------
    def copy(self) -> "SlantGrid":
        clone = SlantGrid.__new__(SlantGrid)
        clone.cells = [list(row) for row in self.cells]
        return clone

    def to_jsonable(self) -> List[str]:
        return ["".join(cell.symbol for cell in row) for row in self.cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlantGrid):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(tuple(tuple(row) for row in self.cells))

    def __str__(self) -> str:
        return "\n".join(self.to_jsonable())

    def __repr__(self) -> str:
        return f"SlantGrid({self.to_jsonable()!r})"
