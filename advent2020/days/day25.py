"""Day 25: Combo Breaker - recover the door's encryption key."""

from __future__ import annotations

from advent2020.config.constants import HANDSHAKE_MODULUS, HANDSHAKE_SUBJECT
from advent2020.config.types import DayAnswers
from advent2020.errors import InvariantError, ParseError
from advent2020.io.reading import parse_int, parse_lines

DAY = 25


def parse(text: str) -> tuple[int, int]:
    keys = parse_lines(text, lambda line: parse_int(line, "public key"))
    if len(keys) != 2:
        raise ParseError(f"expected two public keys, got {len(keys)}")
    return keys[0], keys[1]


def transform(subject: int, loop_size: int) -> int:
    return pow(subject, loop_size, HANDSHAKE_MODULUS)


def find_loop_size(public_key: int, subject: int = HANDSHAKE_SUBJECT) -> int:
    """Smallest loop size that transforms ``subject`` into ``public_key``."""
    if not 0 < public_key < HANDSHAKE_MODULUS:
        raise InvariantError(f"public key {public_key} out of range")
    value = 1
    for loop_size in range(1, HANDSHAKE_MODULUS):
        value = value * subject % HANDSHAKE_MODULUS
        if value == public_key:
            return loop_size
    raise InvariantError(f"no loop size produces public key {public_key}")


def part1(keys: tuple[int, int]) -> int:
    card_key, door_key = keys
    return transform(door_key, find_loop_size(card_key))


def solve(text: str) -> DayAnswers:
    return DayAnswers(DAY, part1(parse(text)))
