"""Tests for advent2020.simulation.seating."""

from __future__ import annotations

import numpy as np
import pytest

from advent2020.config.types import NeighborMode
from advent2020.domain.grid import SeatGrid, Tile
from advent2020.simulation.seating import (
    make_seating_step,
    neighbour_pairs,
    occupied_at_fixed_point,
    occupied_neighbour_counts,
    settle,
)

EXAMPLE = """\
L.LL.LL.LL
LLLLLLL.LL
L.L.L..L..
LLLL.LL.LL
L.LL.LL.LL
L.LLLLL.LL
..L.L.....
LLLLLLLLLL
L.LLLLLL.L
L.LLLLL.LL
"""

EXAMPLE_ROUND_TWO = """\
#.LL.L#.##
#LLLLLL.L#
L.L.L..L..
#LLL.LL.L#
#.LL.LL.LL
#.LLLL#.##
..L.L.....
#LLLLLLLL#
#.LLLLLL.L
#.#LLLL.##
"""

EXAMPLE_SIGHT_ROUND_TWO = """\
#.LL.LL.L#
#LLLLLL.LL
L.L.L..L..
LLLL.LL.LL
L.LL.LL.LL
L.LLLLL.LL
..L.L.....
LLLLLLLLL#
#.LLLLLL.L
#.LLLLL.L#
"""


class TestNeighbourCounts:
    def test_adjacent_counts(self) -> None:
        grid = SeatGrid.parse("###\n#L#\n###")
        counts = occupied_neighbour_counts(grid, neighbour_pairs(grid, NeighborMode.ADJACENT))
        assert counts[1, 1] == 8
        assert counts[0, 0] == 2

    def test_line_of_sight_skips_floor(self) -> None:
        grid = SeatGrid.parse("#..L..#")
        adjacent = neighbour_pairs(grid, NeighborMode.ADJACENT)
        sight = neighbour_pairs(grid, NeighborMode.LINE_OF_SIGHT)
        assert occupied_neighbour_counts(grid, adjacent)[0, 3] == 0
        assert occupied_neighbour_counts(grid, sight)[0, 3] == 2

    def test_floor_has_no_pairs(self) -> None:
        grid = SeatGrid.parse("...")
        sources, targets = neighbour_pairs(grid, NeighborMode.ADJACENT)
        assert sources.size == 0 and targets.size == 0


class TestStep:
    def test_every_empty_seat_fills_first(self) -> None:
        grid = SeatGrid.parse(EXAMPLE)
        step = make_seating_step(grid, NeighborMode.ADJACENT)
        after = step(grid)
        assert after.count(Tile.OCCUPIED) == grid.count(Tile.EMPTY)
        assert after.count(Tile.FLOOR) == grid.count(Tile.FLOOR)

    def test_step_is_pure(self) -> None:
        grid = SeatGrid.parse(EXAMPLE)
        before = grid.cells.copy()
        make_seating_step(grid, NeighborMode.ADJACENT)(grid)
        assert np.array_equal(grid.cells, before)

    def test_adjacent_round_two(self) -> None:
        grid = SeatGrid.parse(EXAMPLE)
        step = make_seating_step(grid, NeighborMode.ADJACENT)
        assert step(step(grid)) == SeatGrid.parse(EXAMPLE_ROUND_TWO)

    def test_line_of_sight_round_two(self) -> None:
        grid = SeatGrid.parse(EXAMPLE)
        step = make_seating_step(grid, NeighborMode.LINE_OF_SIGHT)
        assert step(step(grid)) == SeatGrid.parse(EXAMPLE_SIGHT_ROUND_TWO)

    def test_rejects_non_positive_tolerance(self) -> None:
        with pytest.raises(ValueError, match="tolerance"):
            make_seating_step(SeatGrid.parse("L"), NeighborMode.ADJACENT, tolerance=0)


class TestFixedPoint:
    def test_adjacent(self) -> None:
        final, rounds = settle(SeatGrid.parse(EXAMPLE), NeighborMode.ADJACENT)
        assert final.count(Tile.OCCUPIED) == 37
        assert rounds == 5

    def test_line_of_sight(self) -> None:
        assert occupied_at_fixed_point(SeatGrid.parse(EXAMPLE), NeighborMode.LINE_OF_SIGHT) == 26

    @pytest.mark.parametrize("mode", list(NeighborMode))
    def test_small_square(self, mode: NeighborMode) -> None:
        # all fill, then only the corners keep fewer than 4 occupied neighbours
        final, rounds = settle(SeatGrid.parse("LLL\nLLL\nLLL"), mode)
        assert final.render() == "#L#\nLLL\n#L#"
        assert rounds == 2

    def test_floor_only(self) -> None:
        final, rounds = settle(SeatGrid.parse("..\n.."), NeighborMode.ADJACENT)
        assert final.count(Tile.OCCUPIED) == 0
        assert rounds == 0
