"""Seating-area simulation on a bounded ``SeatGrid``.

Each seat's next state depends only on the occupied count among its
neighbours in the pre-step snapshot:

- an empty seat with no occupied neighbours becomes occupied;
- an occupied seat with at least ``tolerance`` occupied neighbours empties;
- floor never changes.

The neighbour relation is fixed by the floor plan, so it is computed once as
``(source, neighbour)`` index pairs over the flattened grid and reused by
every step.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from advent2020.config.constants import ADJACENT_TOLERANCE, VISIBLE_TOLERANCE
from advent2020.config.types import NeighborMode
from advent2020.domain.grid import DIRECTIONS, SeatGrid, Tile
from advent2020.simulation.engine import run_until_stable

NeighbourPairs = tuple[np.ndarray, np.ndarray]

TOLERANCE: dict[NeighborMode, int] = {
    NeighborMode.ADJACENT: ADJACENT_TOLERANCE,
    NeighborMode.LINE_OF_SIGHT: VISIBLE_TOLERANCE,
}


def neighbour_pairs(grid: SeatGrid, mode: NeighborMode) -> NeighbourPairs:
    """Return flat-index ``(sources, neighbours)`` arrays for every seat.

    Out-of-bounds neighbours are excluded. Floor cells get no pairs since
    they never change state.
    """
    sources: list[int] = []
    targets: list[int] = []
    columns = grid.columns
    for row in range(grid.rows):
        for col in range(columns):
            if grid.cells[row, col] == Tile.FLOOR:
                continue
            for d_col, d_row in DIRECTIONS:
                if mode is NeighborMode.ADJACENT:
                    c, r = col + d_col, row + d_row
                    pos = (c, r) if grid.in_bounds(c, r) else None
                else:
                    pos = grid.first_visible(col, row, d_col, d_row)
                if pos is None:
                    continue
                sources.append(row * columns + col)
                targets.append(pos[1] * columns + pos[0])
    return np.array(sources, dtype=np.intp), np.array(targets, dtype=np.intp)


def occupied_neighbour_counts(grid: SeatGrid, pairs: NeighbourPairs) -> np.ndarray:
    """Occupied-neighbour count per cell, shaped like the grid."""
    sources, targets = pairs
    occupied = (grid.cells.ravel() == Tile.OCCUPIED).astype(np.int64)
    counts = np.bincount(sources, weights=occupied[targets], minlength=grid.cells.size)
    return counts.astype(np.int64).reshape(grid.cells.shape)


def seating_step(grid: SeatGrid, pairs: NeighbourPairs, tolerance: int) -> SeatGrid:
    """Compute the next snapshot; ``grid`` is left untouched."""
    counts = occupied_neighbour_counts(grid, pairs)
    cells = grid.cells
    new_cells = cells.copy()
    new_cells[(cells == Tile.EMPTY) & (counts == 0)] = Tile.OCCUPIED
    new_cells[(cells == Tile.OCCUPIED) & (counts >= tolerance)] = Tile.EMPTY
    return grid.with_cells(new_cells)


def make_seating_step(
    grid: SeatGrid, mode: NeighborMode, tolerance: int | None = None
) -> Callable[[SeatGrid], SeatGrid]:
    """Bind the neighbour relation of ``grid``'s floor plan into a step function."""
    pairs = neighbour_pairs(grid, mode)
    threshold = TOLERANCE[mode] if tolerance is None else tolerance
    if threshold < 1:
        raise ValueError("tolerance must be >= 1")

    def step(snapshot: SeatGrid) -> SeatGrid:
        return seating_step(snapshot, pairs, threshold)

    return step


def settle(grid: SeatGrid, mode: NeighborMode) -> tuple[SeatGrid, int]:
    """Run the seating rules to a fixed point; returns the grid and changing rounds."""
    return run_until_stable(grid, make_seating_step(grid, mode))


def occupied_at_fixed_point(grid: SeatGrid, mode: NeighborMode) -> int:
    """Number of occupied seats once nobody moves any more."""
    final, _ = settle(grid, mode)
    return final.count(Tile.OCCUPIED)
