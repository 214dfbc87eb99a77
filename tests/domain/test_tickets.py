"""Tests for advent2020.domain.tickets."""

from __future__ import annotations

import pytest

from advent2020.domain.tickets import FieldRule, TicketNotes, parse_range, parse_rule
from advent2020.errors import InvariantError, ParseError

SCAN_EXAMPLE = """\
class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12
"""

RESOLVE_EXAMPLE = """\
class: 0-1 or 4-19
row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""

AMBIGUOUS = """\
a: 1-10 or 20-30
b: 1-10 or 20-30

your ticket:
1,2

nearby tickets:
3,4
"""


class TestParsing:
    def test_rule(self) -> None:
        assert parse_rule("departure location: 25-80 or 90-961") == FieldRule(
            "departure location", ((25, 80), (90, 961))
        )

    def test_rule_accepts_inclusive_bounds(self) -> None:
        rule = parse_rule("class: 1-3 or 5-7")
        assert rule.accepts(1) and rule.accepts(3) and rule.accepts(7)
        assert not rule.accepts(4)

    @pytest.mark.parametrize("raw", ["1", "a-3", "5-1"])
    def test_bad_range(self, raw: str) -> None:
        with pytest.raises(ParseError):
            parse_range(raw)

    def test_notes(self) -> None:
        notes = TicketNotes.parse(SCAN_EXAMPLE)
        assert [rule.name for rule in notes.rules] == ["class", "row", "seat"]
        assert notes.ticket == (7, 1, 14)
        assert len(notes.nearby) == 4

    def test_wrong_section_count(self) -> None:
        with pytest.raises(ParseError, match="expected"):
            TicketNotes.parse("class: 1-3 or 5-7\n\nyour ticket:\n7")

    def test_wrong_header(self) -> None:
        with pytest.raises(ParseError, match="your ticket"):
            TicketNotes.parse(SCAN_EXAMPLE.replace("your ticket:", "my ticket:"))

    def test_non_numeric_value(self) -> None:
        with pytest.raises(ParseError, match="ticket value"):
            TicketNotes.parse(SCAN_EXAMPLE.replace("7,3,47", "7,x,47"))

    def test_uneven_tickets(self) -> None:
        with pytest.raises(ParseError, match="same number of values"):
            TicketNotes.parse(SCAN_EXAMPLE.replace("7,3,47", "7,3"))


class TestScanning:
    def test_error_rate(self) -> None:
        assert TicketNotes.parse(SCAN_EXAMPLE).scan_error_rate() == 4 + 55 + 12

    def test_valid_tickets(self) -> None:
        assert TicketNotes.parse(SCAN_EXAMPLE).valid_tickets() == [(7, 3, 47)]


class TestResolving:
    def test_candidates(self) -> None:
        candidates = TicketNotes.parse(RESOLVE_EXAMPLE).candidate_fields()
        assert candidates == [{"row"}, {"class", "row"}, {"class", "row", "seat"}]

    def test_resolve(self) -> None:
        notes = TicketNotes.parse(RESOLVE_EXAMPLE)
        assert notes.resolve_fields() == {"row": 0, "class": 1, "seat": 2}
        assert notes.named_values() == {"row": 11, "class": 12, "seat": 13}

    def test_product_of_prefix(self) -> None:
        notes = TicketNotes.parse(RESOLVE_EXAMPLE)
        assert notes.product_of("s") == 13
        assert notes.product_of("") == 11 * 12 * 13

    def test_ambiguous(self) -> None:
        with pytest.raises(InvariantError, match="ambiguous"):
            TicketNotes.parse(AMBIGUOUS).resolve_fields()

    def test_column_without_field(self) -> None:
        text = AMBIGUOUS.replace("b: 1-10 or 20-30", "b: 1-10 or 40-50").replace("3,4", "3,45")
        # column 1 sees 2 and 45: only b fits, leaving a with column 0
        assert TicketNotes.parse(text).resolve_fields() == {"b": 1, "a": 0}
        broken = text.replace("3,45", "3,45\n3,25")
        with pytest.raises(InvariantError, match="no field fits"):
            TicketNotes.parse(broken).resolve_fields()
