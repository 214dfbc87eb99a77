"""Day 1: Report Repair - find expense entries that sum to 2020."""

from __future__ import annotations

import itertools
import math

from advent2020.config.constants import EXPENSE_TARGET
from advent2020.config.types import DayAnswers
from advent2020.errors import InvariantError
from advent2020.io.reading import parse_int, parse_lines

DAY = 1


def parse(text: str) -> list[int]:
    return parse_lines(text, lambda line: parse_int(line, "expense entry"))


def find_entries(entries: list[int], n: int, target: int = EXPENSE_TARGET) -> tuple[int, ...]:
    """First combination of ``n`` entries summing to ``target``."""
    for combination in itertools.combinations(entries, n):
        if sum(combination) == target:
            return combination
    raise InvariantError(f"there are no {n} numbers resulting in {target}")


def part1(entries: list[int]) -> int:
    return math.prod(find_entries(entries, 2))


def part2(entries: list[int]) -> int:
    return math.prod(find_entries(entries, 3))


def solve(text: str) -> DayAnswers:
    entries = parse(text)
    return DayAnswers(DAY, part1(entries), part2(entries))
