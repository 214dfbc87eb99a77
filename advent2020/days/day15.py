"""Day 15: Rambunctious Recitation - the elves' memory game."""

from __future__ import annotations

from advent2020.config.constants import MEMORY_GAME_LONG, MEMORY_GAME_SHORT
from advent2020.config.types import DayAnswers
from advent2020.errors import ParseError
from advent2020.io.reading import parse_int

DAY = 15


def parse(text: str) -> list[int]:
    raw = text.strip()
    if not raw:
        raise ParseError("no starting numbers")
    starting = [parse_int(value, "starting number") for value in raw.split(",")]
    if any(value < 0 for value in starting):
        raise ParseError(f"starting numbers must be non-negative, got {raw!r}")
    return starting


def spoken_at(starting: list[int], turn: int) -> int:
    """Number spoken on ``turn`` (1-based).

    Each new number is 0 if the previous one was new, otherwise how many turns
    apart its last two utterances were. ``last_seen`` is a flat list indexed by
    number because the long game needs tens of millions of entries.
    """
    if turn <= len(starting):
        return starting[turn - 1]
    size = max(turn, max(starting) + 1)
    last_seen = [0] * size
    for index, number in enumerate(starting[:-1], start=1):
        last_seen[number] = index
    current = starting[-1]
    for index in range(len(starting), turn):
        previous = last_seen[current]
        last_seen[current] = index
        current = index - previous if previous else 0
    return current


def part1(starting: list[int]) -> int:
    return spoken_at(starting, MEMORY_GAME_SHORT)


def part2(starting: list[int]) -> int:
    return spoken_at(starting, MEMORY_GAME_LONG)


def solve(text: str) -> DayAnswers:
    starting = parse(text)
    return DayAnswers(DAY, part1(starting), part2(starting))
