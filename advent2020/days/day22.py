"""Day 22: Crab Combat - play Combat and Recursive Combat.

Decks are held as deques with the top card on the left. Together the two decks
must hold every card of a contiguous range exactly once.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum

from advent2020.config.types import DayAnswers
from advent2020.errors import InvariantError, ParseError
from advent2020.io.reading import parse_int, split_sections

DAY = 22

logger = logging.getLogger(__name__)

PLAYER_HEADERS = ("Player 1:", "Player 2:")


class Player(Enum):
    ONE = 1
    TWO = 2


@dataclass(frozen=True)
class Decks:
    one: tuple[int, ...]
    two: tuple[int, ...]

    def __post_init__(self) -> None:
        cards = [*self.one, *self.two]
        if not cards:
            raise InvariantError("decks must not both be empty")
        if len(set(cards)) != len(cards) or max(cards) - min(cards) + 1 != len(cards):
            raise InvariantError("cards must be a contiguous range of unique numbers")


def parse_deck(section: str, header: str) -> tuple[int, ...]:
    lines = [line.strip() for line in section.splitlines() if line.strip()]
    if not lines or lines[0] != header:
        raise ParseError(f"expected deck header {header!r}")
    return tuple(parse_int(line, "card") for line in lines[1:])


def parse(text: str) -> Decks:
    sections = split_sections(text)
    if len(sections) != len(PLAYER_HEADERS):
        raise ParseError("expected exactly two decks")
    one, two = (parse_deck(s, h) for s, h in zip(sections, PLAYER_HEADERS))
    return Decks(one, two)


def score(deck: deque[int]) -> int:
    """Bottom card times 1, next times 2, and so on."""
    return sum(card * position for position, card in enumerate(reversed(deck), start=1))


def play_combat(decks: Decks) -> tuple[Player, deque[int]]:
    one, two = deque(decks.one), deque(decks.two)
    while one and two:
        a, b = one.popleft(), two.popleft()
        if a > b:
            one.extend((a, b))
        else:
            two.extend((b, a))
    return (Player.ONE, one) if one else (Player.TWO, two)


def play_recursive(one: deque[int], two: deque[int]) -> Player:
    """Play a game of Recursive Combat in place; returns the winner.

    A repeated pair of deck states within one game ends it for player 1.
    """
    seen: set[tuple[tuple[int, ...], tuple[int, ...]]] = set()
    while one and two:
        state = (tuple(one), tuple(two))
        if state in seen:
            return Player.ONE
        seen.add(state)
        a, b = one.popleft(), two.popleft()
        if len(one) >= a and len(two) >= b:
            winner = play_recursive(deque(list(one)[:a]), deque(list(two)[:b]))
        else:
            winner = Player.ONE if a > b else Player.TWO
        if winner is Player.ONE:
            one.extend((a, b))
        else:
            two.extend((b, a))
    return Player.ONE if one else Player.TWO


def part1(decks: Decks) -> int:
    winner, deck = play_combat(decks)
    logger.debug("Combat won by player %d", winner.value)
    return score(deck)


def part2(decks: Decks) -> int:
    one, two = deque(decks.one), deque(decks.two)
    winner = play_recursive(one, two)
    logger.debug("Recursive Combat won by player %d", winner.value)
    return score(one if winner is Player.ONE else two)


def solve(text: str) -> DayAnswers:
    decks = parse(text)
    return DayAnswers(DAY, part1(decks), part2(decks))
