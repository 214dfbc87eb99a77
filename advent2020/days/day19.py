"""Day 19: Monster Messages - match messages against a rule grammar."""

from __future__ import annotations

from dataclasses import dataclass

from advent2020.config.types import DayAnswers
from advent2020.domain.grammar import Grammar
from advent2020.errors import ParseError
from advent2020.io.reading import split_sections

DAY = 19


@dataclass(frozen=True)
class Transmission:
    grammar: Grammar
    messages: tuple[str, ...]


def parse(text: str) -> Transmission:
    """Rules, a blank line, then one message per line."""
    sections = split_sections(text)
    if len(sections) != 2:
        raise ParseError("expected a rules section and a messages section")
    rules, messages = sections
    return Transmission(
        Grammar.parse(rules),
        tuple(line.strip() for line in messages.splitlines() if line.strip()),
    )


def part1(transmission: Transmission) -> int:
    return transmission.grammar.count_matches(list(transmission.messages))


def part2(transmission: Transmission) -> int:
    return transmission.grammar.with_looping_rules().count_matches(list(transmission.messages))


def solve(text: str) -> DayAnswers:
    transmission = parse(text)
    return DayAnswers(DAY, part1(transmission), part2(transmission))
