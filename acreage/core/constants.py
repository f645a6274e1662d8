"""Shared constants and enumerations for the loop search."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


GRID_SIZE = 7
TOTAL_CELLS = GRID_SIZE * GRID_SIZE

# Vertices live on the grid lines, so each axis runs 0..GRID_SIZE inclusive.
MAX_VERTEX = GRID_SIZE

DIAGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

CORNER_VERTICES: Tuple[Tuple[int, int], ...] = (
    (0, 0),
    (0, MAX_VERTEX),
    (MAX_VERTEX, 0),
    (MAX_VERTEX, MAX_VERTEX),
)


class Cell(str, Enum):
    """Contents of a single grid cell."""

    EMPTY = "EMPTY"
    FORWARD = "FORWARD"
    BACKWARD = "BACKWARD"

    @property
    def symbol(self) -> str:
        return CELL_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        try:
            return SYMBOL_CELLS[symbol]
        except KeyError:
            raise ValueError(f"Unknown cell symbol: {symbol!r}") from None


CELL_SYMBOLS: Dict[Cell, str] = {
    Cell.EMPTY: "·",
    Cell.FORWARD: "╱",
    Cell.BACKWARD: "╲",
}

SYMBOL_CELLS: Dict[str, Cell] = {
    "·": Cell.EMPTY,
    ".": Cell.EMPTY,
    "╱": Cell.FORWARD,
    "/": Cell.FORWARD,
    "╲": Cell.BACKWARD,
    "\\": Cell.BACKWARD,
}


def slant_for_step(dr: int, dc: int) -> Cell:
    """Return the slant whose diagonal joins a vertex to its ``(dr, dc)`` neighbour."""

    if dr == dc:
        return Cell.BACKWARD
    return Cell.FORWARD


def is_inner_cell(row: int, col: int) -> bool:
    """Whether the cell sits strictly inside the outer ring of the grid."""

    return 0 < row < GRID_SIZE - 1 and 0 < col < GRID_SIZE - 1
