"""Day 13: Shuttle Search - bus timetables."""

from __future__ import annotations

from dataclasses import dataclass

from advent2020.config.types import DayAnswers
from advent2020.errors import InvariantError, ParseError
from advent2020.io.reading import parse_int

DAY = 13

OUT_OF_SERVICE = "x"


@dataclass(frozen=True)
class Schedule:
    """Earliest departure plus ``(offset, bus_id)`` for every bus in service."""

    earliest: int
    buses: tuple[tuple[int, int], ...]

    @classmethod
    def parse(cls, text: str) -> Schedule:
        lines = [line.strip() for line in text.strip().splitlines()]
        if len(lines) != 2:
            raise ParseError("expected a timestamp line and a schedule line")
        earliest = parse_int(lines[0], "timestamp")
        buses = tuple(
            (offset, parse_int(raw, "bus id"))
            for offset, raw in enumerate(lines[1].split(","))
            if raw != OUT_OF_SERVICE
        )
        if not buses:
            raise ParseError("schedule has no buses in service")
        if any(bus_id <= 0 for _, bus_id in buses):
            raise ParseError("bus ids must be positive")
        return cls(earliest, buses)


def parse(text: str) -> Schedule:
    return Schedule.parse(text)


def wait_time(earliest: int, bus_id: int) -> int:
    return -earliest % bus_id


def part1(schedule: Schedule) -> int:
    bus_id = min(
        (bus for _, bus in schedule.buses), key=lambda bus: wait_time(schedule.earliest, bus)
    )
    return bus_id * wait_time(schedule.earliest, bus_id)


def earliest_alignment(buses: tuple[tuple[int, int], ...]) -> int:
    """First timestamp ``t`` where every bus departs at ``t + offset``.

    Sieves one bus at a time, stepping by the product of the ids already
    satisfied. Bus ids are expected to be pairwise coprime.
    """
    timestamp = 0
    step = 1
    for offset, bus_id in buses:
        for _ in range(bus_id):
            if (timestamp + offset) % bus_id == 0:
                break
            timestamp += step
        else:
            raise InvariantError(f"bus {bus_id} can never align with the earlier buses")
        step *= bus_id
    return timestamp


def part2(schedule: Schedule) -> int:
    return earliest_alignment(schedule.buses)


def solve(text: str) -> DayAnswers:
    schedule = parse(text)
    return DayAnswers(DAY, part1(schedule), part2(schedule))
