"""Day 2: Password Philosophy - count passwords satisfying their policy line."""

from __future__ import annotations

import re
from dataclasses import dataclass

from advent2020.config.types import DayAnswers
from advent2020.errors import ParseError
from advent2020.io.reading import parse_lines

DAY = 2

POLICY_RE = re.compile(r"^(?P<low>\d+)-(?P<high>\d+) (?P<letter>\S): (?P<password>.*)$")


@dataclass(frozen=True)
class Policy:
    low: int
    high: int
    letter: str
    password: str

    def is_count_valid(self) -> bool:
        """The letter occurs between ``low`` and ``high`` times."""
        return self.low <= self.password.count(self.letter) <= self.high

    def is_position_valid(self) -> bool:
        """Exactly one of the 1-based positions ``low``/``high`` holds the letter.

        A position past the end of the password counts as not holding it.
        """
        hits = 0
        for position in (self.low, self.high):
            if position <= len(self.password) and self.password[position - 1] == self.letter:
                hits += 1
        return hits == 1


def parse_policy(line: str) -> Policy:
    """Parse ``{low}-{high} {letter}: {password}``."""
    match = POLICY_RE.match(line.strip())
    if match is None:
        raise ParseError(f"could not parse password policy from {line!r}")
    low, high = int(match["low"]), int(match["high"])
    if low < 1 or low > high:
        raise ParseError(f"policy positions out of order in {line!r}")
    return Policy(low, high, match["letter"], match["password"])


def parse(text: str) -> list[Policy]:
    return parse_lines(text, parse_policy)


def part1(policies: list[Policy]) -> int:
    return sum(1 for p in policies if p.is_count_valid())


def part2(policies: list[Policy]) -> int:
    return sum(1 for p in policies if p.is_position_valid())


def solve(text: str) -> DayAnswers:
    policies = parse(text)
    return DayAnswers(DAY, part1(policies), part2(policies))
