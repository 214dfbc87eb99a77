"""Day 3: Toboggan Trajectory - count trees hit on a slope through a repeating map."""

from __future__ import annotations

import math
from dataclasses import dataclass

from advent2020.config.constants import TREE_SLOPE, TREE_SLOPES
from advent2020.config.types import DayAnswers
from advent2020.errors import ParseError

DAY = 3

TREE = "#"
OPEN = "."


@dataclass(frozen=True)
class TreeMap:
    """Rows of booleans (True = tree); the pattern repeats infinitely to the right."""

    rows: tuple[tuple[bool, ...], ...]

    @classmethod
    def parse(cls, text: str) -> TreeMap:
        rows: list[tuple[bool, ...]] = []
        for line in text.strip().splitlines():
            line = line.strip()
            unknown = set(line) - {TREE, OPEN}
            if unknown:
                raise ParseError(f"could not parse valid square from {sorted(unknown)[0]!r}")
            if not line:
                raise ParseError("map rows must not be empty")
            rows.append(tuple(char == TREE for char in line))
        return cls(tuple(rows))

    def is_tree(self, x: int, y: int) -> bool:
        row = self.rows[y]
        return row[x % len(row)]

    def slope(self, right: int, down: int) -> list[bool]:
        """Squares visited from the top-left corner until falling off the bottom."""
        if down < 1:
            raise ValueError("down must be >= 1")
        return [self.is_tree(right * i, y) for i, y in enumerate(range(0, len(self.rows), down))]

    def count_trees(self, right: int, down: int) -> int:
        return sum(self.slope(right, down))


def parse(text: str) -> TreeMap:
    return TreeMap.parse(text)


def part1(tree_map: TreeMap) -> int:
    return tree_map.count_trees(*TREE_SLOPE)


def part2(tree_map: TreeMap) -> int:
    return math.prod(tree_map.count_trees(right, down) for right, down in TREE_SLOPES)


def solve(text: str) -> DayAnswers:
    tree_map = parse(text)
    return DayAnswers(DAY, part1(tree_map), part2(tree_map))
