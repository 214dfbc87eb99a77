"""Configuration and result dataclasses shared by the day programs and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from advent2020.config.constants import INPUT_DIR

__all__ = [
    "Answer",
    "DayAnswers",
    "NeighborMode",
    "RunConfig",
]

Answer = int | str
"""A puzzle answer is either a number or a label string (day 23)."""

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DayAnswers:
    """Answers computed for one day; ``part2`` is None for single-part days."""

    day: int
    part1: Answer
    part2: Answer | None = None

    def parts(self) -> list[tuple[int, Answer]]:
        """Return ``(part, answer)`` pairs for every part that has an answer."""
        result: list[tuple[int, Answer]] = [(1, self.part1)]
        if self.part2 is not None:
            result.append((2, self.part2))
        return result


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class NeighborMode(Enum):
    """Neighbour semantics for the seating simulation."""

    ADJACENT = "adjacent"
    LINE_OF_SIGHT = "line_of_sight"


@dataclass(frozen=True)
class RunConfig:
    """Which days to run and where inputs and outputs live."""

    days: tuple[int, ...]
    input_dir: Path = Path(INPUT_DIR)
    input_path: Path | None = None
    out_dir: Path | None = None

    def __post_init__(self) -> None:
        if not self.days:
            raise ValueError("days must not be empty")
        if len(set(self.days)) != len(self.days):
            raise ValueError("days must include distinct values")
        if any(day < 1 or day > 25 for day in self.days):
            raise ValueError("days must be in [1, 25]")
        if self.input_path is not None and len(self.days) != 1:
            raise ValueError("input_path can only be combined with a single day")

    def input_for(self, day: int) -> Path:
        """Return the input file for ``day``; an explicit input path wins."""
        if self.input_path is not None:
            return self.input_path
        return self.input_dir / f"day{day}.txt"
