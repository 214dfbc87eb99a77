"""Day 23: Crab Cups - splice cups around a circle."""

from __future__ import annotations

from advent2020.config.constants import (
    CUP_COUNT_LONG,
    CUP_MOVES_LONG,
    CUP_MOVES_SHORT,
    CUP_REFERENCE_LABEL,
)
from advent2020.config.types import DayAnswers
from advent2020.domain.cups import CupCircle

DAY = 23


def parse(text: str) -> str:
    """Validate the labels once; each part builds its own circle."""
    CupCircle.parse(text)
    return text.strip()


def part1(labels: str, moves: int = CUP_MOVES_SHORT) -> str:
    circle = CupCircle.parse(labels)
    circle.play(moves)
    return circle.labels_after(CUP_REFERENCE_LABEL)


def part2(labels: str, moves: int = CUP_MOVES_LONG, total: int = CUP_COUNT_LONG) -> int:
    circle = CupCircle.parse(labels, total=total)
    circle.play(moves)
    return circle.product_after(CUP_REFERENCE_LABEL)


def solve(text: str) -> DayAnswers:
    labels = parse(text)
    return DayAnswers(DAY, part1(labels), part2(labels))
