"""Day 6: Custom Customs - count yes answers per group."""

from __future__ import annotations

from advent2020.config.types import DayAnswers
from advent2020.errors import ParseError
from advent2020.io.reading import split_sections

DAY = 6

Group = list[frozenset[str]]


def parse(text: str) -> list[Group]:
    """Groups are separated by blank lines; each line is one person's answers."""
    groups: list[Group] = []
    for section in split_sections(text):
        group: Group = []
        for line in section.splitlines():
            answers = line.strip()
            if not answers.isalpha() or not answers.islower():
                raise ParseError(f"answers must be letters 'a' through 'z', got {answers!r}")
            group.append(frozenset(answers))
        groups.append(group)
    return groups


def part1(groups: list[Group]) -> int:
    """Sum over groups of questions anyone answered yes to."""
    return sum(len(frozenset.union(*group)) for group in groups)


def part2(groups: list[Group]) -> int:
    """Sum over groups of questions everyone answered yes to."""
    return sum(len(frozenset.intersection(*group)) for group in groups)


def solve(text: str) -> DayAnswers:
    groups = parse(text)
    return DayAnswers(DAY, part1(groups), part2(groups))
