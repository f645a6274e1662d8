"""Data models supporting the loop search."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import NamedTuple, Tuple, Union


Vertex = Tuple[int, int]
Coord = Tuple[int, int]


@dataclass(frozen=True, eq=False)
class Area:
    """Enclosed area held as whole units plus half units.

    Every slanted segment cuts its cell along the diagonal, so it contributes
    exactly one half unit to whichever side is inside. Equality and hashing
    use the simplified form, so ``Area(0, 4) == Area(2, 0)``.
    """

    units: int
    half: int = 0

    def __post_init__(self) -> None:
        if self.units < 0 or self.half < 0:
            raise ValueError(f"Area components must be non-negative: {self.units}, {self.half}")

    def simplify(self) -> "Area":
        pairs = self.half // 2
        return Area(units=self.units + pairs, half=self.half - 2 * pairs)

    def is_integer(self, n: int) -> bool:
        simplified = self.simplify()
        return simplified.units == n and simplified.half == 0

    @property
    def value(self) -> Fraction:
        return self.units + Fraction(self.half, 2)

    @classmethod
    def from_value(cls, value: Union[str, int, float, Fraction]) -> "Area":
        """Parse ``"32"`` or ``"6.5"`` into an area of whole and half units."""

        try:
            amount = Fraction(str(value).strip())
        except (ValueError, ZeroDivisionError):
            raise ValueError(f"Invalid area: {value!r}") from None
        if amount < 0:
            raise ValueError(f"Area must be non-negative: {value!r}")
        doubled = amount * 2
        if doubled.denominator != 1:
            raise ValueError(f"Area must be a multiple of one half: {value!r}")
        halves = int(doubled)
        return cls(units=halves // 2, half=halves % 2)

    def _key(self) -> Tuple[int, int]:
        simplified = self.simplify()
        return simplified.units, simplified.half

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        simplified = self.simplify()
        if simplified.half:
            return f"{simplified.units}.5"
        return str(simplified.units)


class Move(NamedTuple):
    """One entry of the undo log: the cell written and the head before writing it."""

    cell: Coord
    previous_head: Vertex


class ScanTally(NamedTuple):
    """Raw counters from a scanline pass over the grid."""

    segments: int
    outside: int
    inside: int

    @property
    def total(self) -> int:
        return self.segments + self.outside + self.inside

    def area(self) -> Area:
        return Area(units=self.inside, half=self.segments)
