"""Day 4: Passport Processing - validate passport fields."""

from __future__ import annotations

import re
from collections.abc import Callable

from advent2020.config.types import DayAnswers
from advent2020.errors import ParseError
from advent2020.io.reading import split_sections

DAY = 4

Passport = dict[str, str]

REQUIRED_FIELDS = frozenset({"byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid"})
OPTIONAL_FIELDS = frozenset({"cid"})
EYE_COLORS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})

HAIR_COLOR_RE = re.compile(r"#[0-9a-f]{6}")
PASSPORT_ID_RE = re.compile(r"[0-9]{9}")
HEIGHT_RE = re.compile(r"(?P<value>[0-9]+)(?P<unit>cm|in)")


def _year_between(low: int, high: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        return len(value) == 4 and value.isdigit() and low <= int(value) <= high

    return check


def is_valid_height(value: str) -> bool:
    """``cm`` in 150-193 or ``in`` in 59-76."""
    match = HEIGHT_RE.fullmatch(value)
    if match is None:
        return False
    amount = int(match["value"])
    if match["unit"] == "cm":
        return 150 <= amount <= 193
    return 59 <= amount <= 76


FIELD_RULES: dict[str, Callable[[str], bool]] = {
    "byr": _year_between(1920, 2002),
    "iyr": _year_between(2010, 2020),
    "eyr": _year_between(2020, 2030),
    "hgt": is_valid_height,
    "hcl": lambda value: HAIR_COLOR_RE.fullmatch(value) is not None,
    "ecl": lambda value: value in EYE_COLORS,
    "pid": lambda value: PASSPORT_ID_RE.fullmatch(value) is not None,
}


def parse_passport(block: str) -> Passport:
    """Parse whitespace separated ``key:value`` tokens."""
    passport: Passport = {}
    for token in block.split():
        key, sep, value = token.partition(":")
        if not sep:
            raise ParseError(f"missing part of token in {token!r}")
        if key not in REQUIRED_FIELDS | OPTIONAL_FIELDS:
            raise ParseError(f"unknown token key {key} in {token!r}")
        passport[key] = value
    return passport


def parse(text: str) -> list[Passport]:
    """Passports are separated by blank lines."""
    return [parse_passport(block) for block in split_sections(text)]


def has_required_fields(passport: Passport) -> bool:
    """All required fields present; ``cid`` is ignored."""
    return REQUIRED_FIELDS <= passport.keys()


def is_valid(passport: Passport) -> bool:
    return has_required_fields(passport) and all(
        check(passport[field]) for field, check in FIELD_RULES.items()
    )


def part1(passports: list[Passport]) -> int:
    return sum(1 for p in passports if has_required_fields(p))


def part2(passports: list[Passport]) -> int:
    return sum(1 for p in passports if is_valid(p))


def solve(text: str) -> DayAnswers:
    passports = parse(text)
    return DayAnswers(DAY, part1(passports), part2(passports))
