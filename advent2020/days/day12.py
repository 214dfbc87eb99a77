"""Day 12: Rain Risk - steer the ferry, directly or through a waypoint.

Positions are ``(east, north)``. Turns are in degrees and must be multiples of
90; anything else is rejected while parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from advent2020.config.constants import WAYPOINT_START
from advent2020.config.types import DayAnswers
from advent2020.errors import ParseError
from advent2020.io.reading import parse_lines

DAY = 12

ACTION_RE = re.compile(r"(?P<action>[NESWLRF])(?P<value>[0-9]+)")

HEADINGS = {"N": (0, 1), "E": (1, 0), "S": (0, -1), "W": (-1, 0)}


@dataclass(frozen=True)
class Action:
    kind: str
    value: int

    @classmethod
    def parse(cls, line: str) -> Action:
        match = ACTION_RE.fullmatch(line.strip())
        if match is None:
            raise ParseError(f"invalid navigation instruction {line.strip()!r}")
        action = cls(match["action"], int(match["value"]))
        if action.kind in "LR" and action.value % 90 != 0:
            raise ParseError(f"turns must be multiples of 90 degrees, got {line.strip()!r}")
        return action

    @property
    def quarter_turns(self) -> int:
        """Clockwise quarter turns; left turns count negative."""
        turns = self.value // 90
        return turns if self.kind == "R" else -turns


def rotate(vector: tuple[int, int], quarter_turns: int) -> tuple[int, int]:
    """Rotate clockwise around the origin."""
    east, north = vector
    for _ in range(quarter_turns % 4):
        east, north = north, -east
    return east, north


def parse(text: str) -> list[Action]:
    return parse_lines(text, Action.parse)


def navigate(actions: list[Action]) -> tuple[int, int]:
    """Move the ship itself; compass actions never change its heading."""
    east, north = 0, 0
    heading = HEADINGS["E"]
    for action in actions:
        if action.kind in HEADINGS:
            d_east, d_north = HEADINGS[action.kind]
            east += d_east * action.value
            north += d_north * action.value
        elif action.kind == "F":
            east += heading[0] * action.value
            north += heading[1] * action.value
        else:
            heading = rotate(heading, action.quarter_turns)
    return east, north


def navigate_waypoint(
    actions: list[Action], waypoint: tuple[int, int] = WAYPOINT_START
) -> tuple[int, int]:
    """Compass actions and turns move the waypoint; ``F`` moves the ship towards it."""
    east, north = 0, 0
    way_east, way_north = waypoint
    for action in actions:
        if action.kind in HEADINGS:
            d_east, d_north = HEADINGS[action.kind]
            way_east += d_east * action.value
            way_north += d_north * action.value
        elif action.kind == "F":
            east += way_east * action.value
            north += way_north * action.value
        else:
            way_east, way_north = rotate((way_east, way_north), action.quarter_turns)
    return east, north


def manhattan(position: tuple[int, int]) -> int:
    return abs(position[0]) + abs(position[1])


def part1(actions: list[Action]) -> int:
    return manhattan(navigate(actions))


def part2(actions: list[Action]) -> int:
    return manhattan(navigate_waypoint(actions))


def solve(text: str) -> DayAnswers:
    actions = parse(text)
    return DayAnswers(DAY, part1(actions), part2(actions))
