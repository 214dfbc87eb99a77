"""Day 9: Encoding Error - find the number that breaks the XMAS cipher."""

from __future__ import annotations

from advent2020.config.constants import XMAS_PREAMBLE
from advent2020.config.types import DayAnswers
from advent2020.errors import InvariantError
from advent2020.io.reading import parse_int, parse_lines

DAY = 9


def parse(text: str) -> list[int]:
    return parse_lines(text, parse_int)


def is_pair_sum(window: list[int], target: int) -> bool:
    """True if two entries at different positions of ``window`` sum to ``target``."""
    seen: set[int] = set()
    for value in window:
        if target - value in seen:
            return True
        seen.add(value)
    return False


def first_invalid(numbers: list[int], preamble: int = XMAS_PREAMBLE) -> int:
    for index in range(preamble, len(numbers)):
        if not is_pair_sum(numbers[index - preamble : index], numbers[index]):
            return numbers[index]
    raise InvariantError("every number is the sum of two of its predecessors")


def contiguous_run(numbers: list[int], target: int) -> list[int]:
    """Find a run of at least two consecutive numbers that sums to ``target``.

    Uses a sliding window, so inputs are assumed to be non-negative.
    """
    start = 0
    total = 0
    for end, value in enumerate(numbers):
        total += value
        while total > target and start < end:
            total -= numbers[start]
            start += 1
        if total == target and end > start:
            return numbers[start : end + 1]
    raise InvariantError(f"no contiguous run sums to {target}")


def encryption_weakness(numbers: list[int], preamble: int = XMAS_PREAMBLE) -> int:
    run = contiguous_run(numbers, first_invalid(numbers, preamble))
    return min(run) + max(run)


def part1(numbers: list[int]) -> int:
    return first_invalid(numbers)


def part2(numbers: list[int]) -> int:
    return encryption_weakness(numbers)


def solve(text: str) -> DayAnswers:
    numbers = parse(text)
    return DayAnswers(DAY, part1(numbers), part2(numbers))
