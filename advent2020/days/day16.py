"""Day 16: Ticket Translation - work out which column is which field."""

from __future__ import annotations

from advent2020.config.constants import DEPARTURE_PREFIX
from advent2020.config.types import DayAnswers
from advent2020.domain.tickets import TicketNotes

DAY = 16


def parse(text: str) -> TicketNotes:
    return TicketNotes.parse(text)


def part1(notes: TicketNotes) -> int:
    return notes.scan_error_rate()


def part2(notes: TicketNotes) -> int:
    return notes.product_of(DEPARTURE_PREFIX)


def solve(text: str) -> DayAnswers:
    notes = parse(text)
    return DayAnswers(DAY, part1(notes), part2(notes))
