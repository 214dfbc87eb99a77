"""Day 17: Conway Cubes - boot the pocket dimension in 3D and 4D."""

from __future__ import annotations

from advent2020.config.constants import CUBE_CYCLES
from advent2020.config.types import DayAnswers
from advent2020.simulation.cubes import CubeSpace, active_after

DAY = 17


def parse(text: str) -> CubeSpace:
    return CubeSpace.parse(text, dimensions=3)


def lift(space: CubeSpace, dimensions: int) -> CubeSpace:
    """Embed ``space`` at the origin of extra dimensions."""
    padding = (0,) * (dimensions - space.dimensions)
    return CubeSpace(frozenset(c + padding for c in space.active), dimensions)


def part1(space: CubeSpace) -> int:
    return active_after(space, CUBE_CYCLES)


def part2(space: CubeSpace) -> int:
    return active_after(lift(space, 4), CUBE_CYCLES)


def solve(text: str) -> DayAnswers:
    space = parse(text)
    return DayAnswers(DAY, part1(space), part2(space))
