"""Day 10: Adapter Array - chain joltage adapters."""

from __future__ import annotations

from collections import Counter

from advent2020.config.constants import MAX_JOLT_DIFF, OUTLET_JOLTS
from advent2020.config.types import DayAnswers
from advent2020.errors import InvariantError
from advent2020.io.reading import parse_int, parse_lines

DAY = 10


def parse(text: str) -> list[int]:
    return parse_lines(text, parse_int)


def chain(adapters: list[int]) -> list[int]:
    """Outlet, every adapter in ascending order, then the device.

    The device is rated ``MAX_JOLT_DIFF`` above the highest adapter.
    """
    ordered = sorted(adapters)
    if len(set(ordered)) != len(ordered):
        raise InvariantError("adapter joltages must be unique")
    if ordered and ordered[0] <= OUTLET_JOLTS:
        raise InvariantError(f"adapters must be rated above the outlet's {OUTLET_JOLTS} jolts")
    joltages = [OUTLET_JOLTS, *ordered, (ordered[-1] if ordered else OUTLET_JOLTS) + MAX_JOLT_DIFF]
    for low, high in zip(joltages, joltages[1:]):
        if high - low > MAX_JOLT_DIFF:
            raise InvariantError(f"gap between {low} and {high} jolts is more than {MAX_JOLT_DIFF}")
    return joltages


def differences(adapters: list[int]) -> Counter[int]:
    joltages = chain(adapters)
    return Counter(high - low for low, high in zip(joltages, joltages[1:]))


def arrangements(adapters: list[int]) -> int:
    """Number of distinct adapter subsets that still connect outlet to device."""
    joltages = chain(adapters)
    ways = {joltages[0]: 1}
    for joltage in joltages[1:]:
        ways[joltage] = sum(ways.get(joltage - diff, 0) for diff in range(1, MAX_JOLT_DIFF + 1))
    return ways[joltages[-1]]


def part1(adapters: list[int]) -> int:
    counts = differences(adapters)
    return counts[1] * counts[3]


def part2(adapters: list[int]) -> int:
    return arrangements(adapters)


def solve(text: str) -> DayAnswers:
    adapters = parse(text)
    return DayAnswers(DAY, part1(adapters), part2(adapters))
