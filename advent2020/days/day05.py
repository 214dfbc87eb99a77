"""Day 5: Binary Boarding - decode binary space partitioned seat codes."""

from __future__ import annotations

from dataclasses import dataclass

from advent2020.config.constants import (
    BOARDING_PASS_LENGTH,
    BOARDING_PASS_ROW_CHARS,
    PLANE_COLUMNS,
)
from advent2020.config.types import DayAnswers
from advent2020.errors import InvariantError, ParseError
from advent2020.io.reading import parse_lines

DAY = 5


def binary_partition(code: str, high: str, low: str) -> int:
    """Read ``code`` as a binary number where ``high`` is 1 and ``low`` is 0."""
    value = 0
    for char in code:
        if char == high:
            value = value * 2 + 1
        elif char == low:
            value *= 2
        else:
            raise ParseError(f"row identifiers {code!r} should only contain {high!r} or {low!r}")
    return value


def seat_id(row: int, column: int) -> int:
    return row * PLANE_COLUMNS + column


@dataclass(frozen=True)
class BoardingPass:
    code: str
    row: int
    column: int

    @property
    def seat_id(self) -> int:
        return seat_id(self.row, self.column)

    @classmethod
    def parse(cls, code: str) -> BoardingPass:
        code = code.strip()
        if len(code) != BOARDING_PASS_LENGTH:
            raise ParseError(f"seat code {code!r} should be exactly 10 characters long")
        row_code, column_code = code[:BOARDING_PASS_ROW_CHARS], code[BOARDING_PASS_ROW_CHARS:]
        row = binary_partition(row_code, "B", "F")
        return cls(code, row, binary_partition(column_code, "R", "L"))


def parse(text: str) -> list[BoardingPass]:
    return parse_lines(text, BoardingPass.parse)


def part1(passes: list[BoardingPass]) -> int:
    if not passes:
        raise InvariantError("no seat found")
    return max(p.seat_id for p in passes)


def part2(passes: list[BoardingPass]) -> int:
    """Your seat is the gap between two consecutive occupied ids."""
    ids = sorted(p.seat_id for p in passes)
    for before, after in zip(ids, ids[1:]):
        if after - before == 2:
            return before + 1
    raise InvariantError("no seat found")


def solve(text: str) -> DayAnswers:
    passes = parse(text)
    return DayAnswers(DAY, part1(passes), part2(passes))
