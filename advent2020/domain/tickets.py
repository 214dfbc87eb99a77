"""Ticket translation: field range constraints and column assignment."""

from __future__ import annotations

import math
from dataclasses import dataclass

from advent2020.errors import InvariantError, ParseError
from advent2020.io.reading import parse_int, split_sections

NAME_SEPARATOR = ": "
RANGE_SEPARATOR = " or "
YOUR_TICKET_HEADER = "your ticket:"
NEARBY_TICKETS_HEADER = "nearby tickets:"


@dataclass(frozen=True)
class FieldRule:
    """A named field and the inclusive ranges its values may fall in."""

    name: str
    ranges: tuple[tuple[int, int], ...]

    def accepts(self, value: int) -> bool:
        return any(low <= value <= high for low, high in self.ranges)


def parse_range(raw: str) -> tuple[int, int]:
    """Parse ``low-high``."""
    low, sep, high = raw.strip().partition("-")
    if not sep:
        raise ParseError(f"unknown constraint {raw!r}")
    bounds = parse_int(low, "range bound"), parse_int(high, "range bound")
    if bounds[0] > bounds[1]:
        raise ParseError(f"empty range {raw!r}")
    return bounds


def parse_rule(line: str) -> FieldRule:
    """Parse ``class: 1-3 or 5-7``."""
    name, sep, body = line.partition(NAME_SEPARATOR)
    if not sep or not name:
        raise ParseError(f"unknown constraint {line!r}")
    return FieldRule(name, tuple(parse_range(part) for part in body.split(RANGE_SEPARATOR)))


def parse_ticket(line: str) -> tuple[int, ...]:
    return tuple(parse_int(value, "ticket value") for value in line.split(","))


@dataclass(frozen=True)
class TicketNotes:
    """Field rules, your ticket, and the nearby tickets."""

    rules: tuple[FieldRule, ...]
    ticket: tuple[int, ...]
    nearby: tuple[tuple[int, ...], ...]

    @classmethod
    def parse(cls, text: str) -> TicketNotes:
        sections = split_sections(text)
        if len(sections) != 3:
            raise ParseError("unexpected input, rules, own ticket, other tickets are expected")
        rules_block, own_block, nearby_block = sections

        rules = tuple(parse_rule(line) for line in rules_block.splitlines())
        names = [rule.name for rule in rules]
        if len(set(names)) != len(names):
            raise ParseError("duplicate field name in rules")

        own_lines = own_block.splitlines()
        if own_lines[0].strip() != YOUR_TICKET_HEADER or len(own_lines) != 2:
            raise ParseError(f"expected {YOUR_TICKET_HEADER!r} followed by one ticket")
        ticket = parse_ticket(own_lines[1])

        nearby_lines = nearby_block.splitlines()
        if nearby_lines[0].strip() != NEARBY_TICKETS_HEADER:
            raise ParseError(f"expected {NEARBY_TICKETS_HEADER!r} section")
        nearby = tuple(parse_ticket(line) for line in nearby_lines[1:] if line.strip())

        if any(len(t) != len(ticket) for t in nearby):
            raise ParseError("all tickets must have the same number of values")
        return cls(rules, ticket, nearby)

    def is_valid_value(self, value: int) -> bool:
        return any(rule.accepts(value) for rule in self.rules)

    def ticket_error(self, ticket: tuple[int, ...]) -> int:
        """Sum of the values that no field accepts."""
        return sum(value for value in ticket if not self.is_valid_value(value))

    def scan_error_rate(self) -> int:
        return sum(self.ticket_error(ticket) for ticket in self.nearby)

    def valid_tickets(self) -> list[tuple[int, ...]]:
        """Nearby tickets whose every value is accepted by some field."""
        return [t for t in self.nearby if all(self.is_valid_value(v) for v in t)]

    def candidate_fields(self) -> list[set[str]]:
        """Per column, the field names accepting every valid ticket's value there."""
        valid = self.valid_tickets()
        candidates: list[set[str]] = []
        for column in range(len(self.ticket)):
            values = [t[column] for t in valid]
            candidates.append(
                {rule.name for rule in self.rules if all(rule.accepts(v) for v in values)}
            )
        return candidates

    def resolve_fields(self) -> dict[str, int]:
        """Assign each field name to a column by unique-candidate elimination.

        Raises InvariantError when a column ends up with no candidate or the
        remaining columns all have several candidates.
        """
        candidates = self.candidate_fields()
        mapping: dict[str, int] = {}
        while len(mapping) < len(candidates):
            unique = next(
                (
                    column
                    for column, names in enumerate(candidates)
                    if len(names) == 1 and column not in mapping.values()
                ),
                None,
            )
            if unique is None:
                unresolved = [
                    column
                    for column, names in enumerate(candidates)
                    if column not in mapping.values()
                ]
                empty = [column for column in unresolved if not candidates[column]]
                if empty:
                    raise InvariantError(f"no field fits column {empty[0]}")
                column = unresolved[0]
                raise InvariantError(
                    "field assignments are ambiguous, more than one possibility "
                    f"for column {column}"
                )
            name = next(iter(candidates[unique]))
            mapping[name] = unique
            for names in candidates:
                names.discard(name)
            candidates[unique] = {name}
        return mapping

    def named_values(self) -> dict[str, int]:
        """Your ticket's values keyed by resolved field name."""
        return {name: self.ticket[column] for name, column in self.resolve_fields().items()}

    def product_of(self, prefix: str) -> int:
        """Product of your ticket's values for fields starting with ``prefix``."""
        return math.prod(
            value for name, value in self.named_values().items() if name.startswith(prefix)
        )
