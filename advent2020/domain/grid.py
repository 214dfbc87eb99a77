"""Immutable bounded seat grid backed by a read-only numpy array.

Cells are stored row-major as ``Tile`` codes. Two grids are equal when they
have the same shape and the same cells, so a grid can be used directly as a
simulation snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from advent2020.errors import ParseError


class Tile(IntEnum):
    """Seat layout cell states."""

    FLOOR = 0
    EMPTY = 1
    OCCUPIED = 2


TILE_CHARS: dict[str, Tile] = {".": Tile.FLOOR, "L": Tile.EMPTY, "#": Tile.OCCUPIED}
"""Input alphabet; any other character is a parse error."""

TILE_SYMBOLS: dict[Tile, str] = {tile: char for char, tile in TILE_CHARS.items()}

# (d_col, d_row) for the 8 compass directions, row-major order
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


@dataclass(frozen=True, eq=False)
class SeatGrid:
    """A rectangular seat layout. ``cells[row, col]`` holds a ``Tile`` code."""

    cells: np.ndarray

    def __post_init__(self) -> None:
        if self.cells.ndim != 2:
            raise ValueError("cells must be a 2D array")
        cells = np.array(self.cells, dtype=np.int8, copy=True)
        cells.flags.writeable = False
        object.__setattr__(self, "cells", cells)

    @classmethod
    def parse(cls, text: str) -> SeatGrid:
        """Parse one row per line; all rows must have the same length."""
        rows: list[list[int]] = []
        for line_no, line in enumerate(text.strip().splitlines(), start=1):
            row: list[int] = []
            for char in line.strip():
                tile = TILE_CHARS.get(char)
                if tile is None:
                    raise ParseError(
                        f"unknown tile {char!r} on line {line_no}, "
                        "only '#', '.' and 'L' are allowed"
                    )
                row.append(tile)
            if rows and len(row) != len(rows[0]):
                raise ParseError(f"line {line_no} has {len(row)} tiles, expected {len(rows[0])}")
            rows.append(row)
        if not rows or not rows[0]:
            raise ParseError("seat layout is empty")
        return cls(np.array(rows, dtype=np.int8))

    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def columns(self) -> int:
        return int(self.cells.shape[1])

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.columns and 0 <= row < self.rows

    def get(self, col: int, row: int) -> Tile | None:
        """Return the tile at ``(col, row)``, or None outside the grid."""
        if not self.in_bounds(col, row):
            return None
        return Tile(int(self.cells[row, col]))

    def neighbours(self, col: int, row: int) -> list[Tile]:
        """Tiles of the up to 8 adjacent cells; out-of-bounds cells are skipped."""
        result: list[Tile] = []
        for d_col, d_row in DIRECTIONS:
            tile = self.get(col + d_col, row + d_row)
            if tile is not None:
                result.append(tile)
        return result

    def first_visible(self, col: int, row: int, d_col: int, d_row: int) -> tuple[int, int] | None:
        """Position of the first non-floor cell seen from ``(col, row)`` in one direction."""
        c, r = col + d_col, row + d_row
        while self.in_bounds(c, r):
            if self.cells[r, c] != Tile.FLOOR:
                return c, r
            c, r = c + d_col, r + d_row
        return None

    def visible_seats(self, col: int, row: int) -> list[Tile]:
        """Tiles of the first seat visible in each of the 8 directions."""
        result: list[Tile] = []
        for d_col, d_row in DIRECTIONS:
            pos = self.first_visible(col, row, d_col, d_row)
            if pos is not None:
                result.append(Tile(int(self.cells[pos[1], pos[0]])))
        return result

    def count(self, tile: Tile) -> int:
        """Number of cells holding ``tile``."""
        return int(np.count_nonzero(self.cells == tile))

    def with_cells(self, cells: np.ndarray) -> SeatGrid:
        if cells.shape != self.cells.shape:
            raise ValueError("cells shape must match the grid shape")
        return SeatGrid(cells)

    def render(self) -> str:
        return "\n".join(
            "".join(TILE_SYMBOLS[Tile(int(value))] for value in row) for row in self.cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeatGrid):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(
            np.array_equal(self.cells, other.cells)
        )

    def __hash__(self) -> int:
        return hash((self.cells.shape, self.cells.tobytes()))

    def __str__(self) -> str:
        return self.render()
