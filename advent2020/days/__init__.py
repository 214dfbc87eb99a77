"""Daily puzzle programs, one module per day, keyed by day number."""

from __future__ import annotations

from collections.abc import Callable

from advent2020.config.types import DayAnswers
from advent2020.days import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day15,
    day16,
    day17,
    day18,
    day19,
    day22,
    day23,
    day25,
)

Solver = Callable[[str], DayAnswers]

SOLVERS: dict[int, Solver] = {
    module.DAY: module.solve
    for module in (
        day01,
        day02,
        day03,
        day04,
        day05,
        day06,
        day07,
        day08,
        day09,
        day10,
        day11,
        day12,
        day13,
        day15,
        day16,
        day17,
        day18,
        day19,
        day22,
        day23,
        day25,
    )
}


def available_days() -> list[int]:
    return sorted(SOLVERS)


def get_solver(day: int) -> Solver:
    """Look up the solver for ``day``; unknown days are a ValueError."""
    try:
        return SOLVERS[day]
    except KeyError:
        raise ValueError(f"no solution for day {day}; available: {available_days()}") from None
