"""Day 11: Seating System - run the seating rules to a fixed point."""

from __future__ import annotations

from advent2020.config.types import DayAnswers, NeighborMode
from advent2020.domain.grid import SeatGrid
from advent2020.simulation.seating import occupied_at_fixed_point

DAY = 11


def parse(text: str) -> SeatGrid:
    return SeatGrid.parse(text)


def part1(grid: SeatGrid) -> int:
    return occupied_at_fixed_point(grid, NeighborMode.ADJACENT)


def part2(grid: SeatGrid) -> int:
    return occupied_at_fixed_point(grid, NeighborMode.LINE_OF_SIGHT)


def solve(text: str) -> DayAnswers:
    grid = parse(text)
    return DayAnswers(DAY, part1(grid), part2(grid))
