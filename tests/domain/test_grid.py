"""Tests for advent2020.domain.grid."""

from __future__ import annotations

import numpy as np
import pytest

from advent2020.domain.grid import SeatGrid, Tile
from advent2020.errors import ParseError

LAYOUT = "L.L\n#L#\n..L"


class TestParse:
    def test_shape_and_tiles(self) -> None:
        grid = SeatGrid.parse(LAYOUT)
        assert (grid.columns, grid.rows) == (3, 3)
        assert grid.get(0, 0) is Tile.EMPTY
        assert grid.get(1, 0) is Tile.FLOOR
        assert grid.get(0, 1) is Tile.OCCUPIED

    def test_render_round_trips(self) -> None:
        assert SeatGrid.parse(LAYOUT).render() == LAYOUT

    def test_unknown_character(self) -> None:
        with pytest.raises(ParseError, match="unknown tile 'x'"):
            SeatGrid.parse("L.x")

    def test_uneven_rows(self) -> None:
        with pytest.raises(ParseError, match="expected 3"):
            SeatGrid.parse("L.L\nLL")

    def test_empty(self) -> None:
        with pytest.raises(ParseError, match="empty"):
            SeatGrid.parse("\n")


class TestImmutability:
    def test_cells_are_read_only(self) -> None:
        grid = SeatGrid.parse(LAYOUT)
        with pytest.raises(ValueError):
            grid.cells[0, 0] = Tile.OCCUPIED

    def test_source_array_is_copied(self) -> None:
        cells = np.array([[1, 0]], dtype=np.int8)
        grid = SeatGrid(cells)
        cells[0, 0] = 2
        assert grid.get(0, 0) is Tile.EMPTY

    def test_with_cells_rejects_other_shape(self) -> None:
        grid = SeatGrid.parse(LAYOUT)
        with pytest.raises(ValueError, match="shape"):
            grid.with_cells(np.zeros((2, 2), dtype=np.int8))


class TestEquality:
    def test_equal_layouts(self) -> None:
        assert SeatGrid.parse(LAYOUT) == SeatGrid.parse(LAYOUT)
        assert hash(SeatGrid.parse(LAYOUT)) == hash(SeatGrid.parse(LAYOUT))

    def test_different_cells(self) -> None:
        assert SeatGrid.parse("L.L") != SeatGrid.parse("L.#")

    def test_different_shape_same_cells(self) -> None:
        assert SeatGrid.parse("LL") != SeatGrid.parse("L\nL")


class TestNeighbours:
    def test_corner_has_three_neighbours(self) -> None:
        grid = SeatGrid.parse(LAYOUT)
        assert sorted(grid.neighbours(0, 0)) == [Tile.FLOOR, Tile.EMPTY, Tile.OCCUPIED]

    def test_centre_has_eight_neighbours(self) -> None:
        grid = SeatGrid.parse(LAYOUT)
        assert len(grid.neighbours(1, 1)) == 8

    def test_out_of_bounds(self) -> None:
        grid = SeatGrid.parse(LAYOUT)
        assert grid.get(-1, 0) is None
        assert grid.get(3, 0) is None

    def test_visible_seats_skip_floor(self) -> None:
        # from the left seat the first seat to the east is two cells away
        grid = SeatGrid.parse("L.#")
        assert grid.first_visible(0, 0, 1, 0) == (2, 0)
        assert grid.visible_seats(0, 0) == [Tile.OCCUPIED]

    def test_nothing_visible(self) -> None:
        grid = SeatGrid.parse(".L.\n...\n...")
        assert grid.visible_seats(1, 0) == []

    def test_count(self) -> None:
        grid = SeatGrid.parse(LAYOUT)
        assert grid.count(Tile.OCCUPIED) == 2
        assert grid.count(Tile.EMPTY) == 4
        assert grid.count(Tile.FLOOR) == 3
