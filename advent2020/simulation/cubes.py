"""Conway cubes: an unbounded N-dimensional cellular automaton.

Only active coordinates are stored; every other coordinate is inactive
forever. A step considers every coordinate within one unit of an active one.
"""

from __future__ import annotations

import itertools
from collections import Counter
from dataclasses import dataclass
from functools import lru_cache

from advent2020.errors import ParseError
from advent2020.simulation.engine import run_cycles

Coordinate = tuple[int, ...]

ACTIVE_CHAR = "#"
INACTIVE_CHAR = "."


@lru_cache(maxsize=None)
def neighbour_offsets(dimensions: int) -> tuple[Coordinate, ...]:
    """All 3**d - 1 unit offsets, excluding the origin."""
    origin = (0,) * dimensions
    return tuple(
        offset
        for offset in itertools.product((-1, 0, 1), repeat=dimensions)
        if offset != origin
    )


@dataclass(frozen=True)
class CubeSpace:
    """Snapshot of the active cubes in a ``dimensions``-dimensional space."""

    active: frozenset[Coordinate]
    dimensions: int = 3

    def __post_init__(self) -> None:
        if self.dimensions < 2:
            raise ValueError("dimensions must be >= 2")
        if any(len(c) != self.dimensions for c in self.active):
            raise ValueError("every coordinate must have `dimensions` components")

    @classmethod
    def parse(cls, text: str, dimensions: int = 3) -> CubeSpace:
        """Parse a 2D slice at the origin of the higher dimensions."""
        padding = (0,) * (dimensions - 2)
        active: set[Coordinate] = set()
        for y, line in enumerate(text.strip().splitlines()):
            for x, char in enumerate(line.strip()):
                if char == ACTIVE_CHAR:
                    active.add((x, y, *padding))
                elif char != INACTIVE_CHAR:
                    raise ParseError(f"could not parse initial state: unknown cube {char!r}")
        return cls(frozenset(active), dimensions)

    def is_active(self, coordinate: Coordinate) -> bool:
        return coordinate in self.active

    def active_neighbours(self, coordinate: Coordinate) -> int:
        """Count active cubes among the 3**d - 1 neighbours of ``coordinate``."""
        return sum(
            tuple(a + b for a, b in zip(coordinate, offset, strict=True)) in self.active
            for offset in neighbour_offsets(self.dimensions)
        )

    def step(self) -> CubeSpace:
        """Return the next cycle.

        An active cube stays active with 2 or 3 active neighbours; an inactive
        cube becomes active with exactly 3.
        """
        counts: Counter[Coordinate] = Counter()
        offsets = neighbour_offsets(self.dimensions)
        for coordinate in self.active:
            for offset in offsets:
                counts[tuple(a + b for a, b in zip(coordinate, offset, strict=True))] += 1
        survivors = frozenset(
            c for c, n in counts.items() if n == 3 or (n == 2 and c in self.active)
        )
        return CubeSpace(survivors, self.dimensions)

    def __len__(self) -> int:
        return len(self.active)


def active_after(space: CubeSpace, cycles: int) -> int:
    """Number of active cubes after ``cycles`` boot cycles."""
    return len(run_cycles(space, CubeSpace.step, cycles))
