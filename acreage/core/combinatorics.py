"""Multiplicity of quarter-circle loops per diagonal-segment loop."""

from __future__ import annotations

import math
from typing import Tuple


# A loop on a 7x7 board never exceeds 49 segments, so n stays well below this.
MAX_CENTRAL_BINOM_N = 26

# https://oeis.org/A000984
CENTRAL_BINOMIALS: Tuple[int, ...] = tuple(
    math.comb(2 * n, n) for n in range(MAX_CENTRAL_BINOM_N + 1)
)


def central_binom(n: int) -> int:
    """Return ``C(2n, n)``.

    A diagonal loop of length ``2n`` keeps its area when exactly half of its
    segments are bent into one kind of quarter-circle arc and half into the
    other, which gives ``C(2n, n)`` arc loops per diagonal loop.
    """

    if not 0 <= n <= MAX_CENTRAL_BINOM_N:
        raise ValueError(f"central_binom is tabulated for 0 <= n <= {MAX_CENTRAL_BINOM_N}, got {n}")
    return CENTRAL_BINOMIALS[n]
