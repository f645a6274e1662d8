"""Deterministic re-checks for harvested loop layouts."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..core.constants import CORNER_VERTICES, Cell
from ..core.exceptions import LoopNotClosedError, ValidationError
from ..core.models import Area, Vertex
from .generator import SearchResult
from .grid import SlantGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


def segment_endpoints(row: int, col: int, cell: Cell) -> Tuple[Vertex, Vertex]:
    if cell is Cell.FORWARD:
        return (row + 1, col), (row, col + 1)
    if cell is Cell.BACKWARD:
        return (row, col), (row + 1, col + 1)
    raise ValueError(f"Cell {(row, col)} holds no segment")


class LoopValidator:
    """Runs integrity checks over grids the search reports as valid."""

    def __init__(self, target: Area) -> None:
        self.target = target.simplify()

    def validate(self, grid: SlantGrid) -> ValidationResult:
        try:
            self._check_segment_count(grid)
            self._check_single_cycle(grid)
            self._check_area(grid)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def validate_result(self, result: SearchResult) -> ValidationResult:
        messages: List[str] = []
        for index, grid in enumerate(result.valid_grids):
            outcome = self.validate(grid)
            messages.extend(f"layout {index}: {message}" for message in outcome.messages)
        return ValidationResult(ok=not messages, messages=messages)

    def _check_segment_count(self, grid: SlantGrid) -> None:
        count = grid.segment_count()
        if count == 0:
            raise ValidationError("Grid holds no segments")
        if count % 2:
            raise ValidationError(f"Loop has odd length {count}")

    def _check_single_cycle(self, grid: SlantGrid) -> None:
        adjacency: Dict[Vertex, List[Vertex]] = defaultdict(list)
        for (row, col), cell in grid.segments():
            a, b = segment_endpoints(row, col, cell)
            adjacency[a].append(b)
            adjacency[b].append(a)

        for vertex, neighbours in adjacency.items():
            if vertex in CORNER_VERTICES:
                raise ValidationError(f"Loop passes through grid corner {vertex}")
            if len(neighbours) != 2:
                raise ValidationError(
                    f"Vertex {vertex} joins {len(neighbours)} segments instead of 2"
                )

        first = next(iter(adjacency))
        seen: Set[Vertex] = {first}
        stack = [first]
        while stack:
            for neighbour in adjacency[stack.pop()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        if len(seen) != len(adjacency):
            raise ValidationError(
                f"Segments form more than one loop ({len(seen)} of {len(adjacency)} vertices reached)"
            )

    def _check_area(self, grid: SlantGrid) -> None:
        try:
            area = grid.loop_area()
        except LoopNotClosedError as exc:
            raise ValidationError(str(exc)) from exc
        if area != self.target:
            raise ValidationError(f"Loop encloses {area}, expected {self.target}")
