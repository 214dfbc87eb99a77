"""Centralized puzzle constants.

All literals that the puzzle statements fix (targets, window sizes, move
counts) are defined here. Day modules import from this module rather than
defining their own inline literals.
"""

from __future__ import annotations

EXPENSE_TARGET = 2020
"""Target sum for the expense report entries (day 1)."""

TREE_SLOPE = (3, 1)
"""Slope (right, down) checked in day 3 part 1."""

TREE_SLOPES: tuple[tuple[int, int], ...] = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))
"""Slopes whose tree counts are multiplied in day 3 part 2."""

PLANE_COLUMNS = 8
"""Seat columns per plane row; seat id is ``row * PLANE_COLUMNS + column``."""

BOARDING_PASS_ROW_CHARS = 7
"""Number of leading F/B characters on a boarding pass."""

BOARDING_PASS_LENGTH = 10
"""Total boarding pass length: 7 row characters + 3 column characters."""

SHINY_GOLD = "shiny gold"
"""Bag colour both day 7 questions are asked about."""

XMAS_PREAMBLE = 25
"""Number of preceding values an XMAS number must be a pair-sum of (day 9)."""

MAX_JOLT_DIFF = 3
"""Largest allowed joltage step between chained adapters (day 10)."""

OUTLET_JOLTS = 0
"""Effective joltage of the charging outlet (day 10)."""

ADJACENT_TOLERANCE = 4
"""Occupied neighbours at which a seated passenger leaves (adjacent rule)."""

VISIBLE_TOLERANCE = 5
"""Occupied visible seats at which a seated passenger leaves (line-of-sight rule)."""

WAYPOINT_START = (10, 1)
"""Initial waypoint offset (east, north) relative to the ship (day 12)."""

MEMORY_GAME_SHORT = 2020
"""Turn whose spoken number answers day 15 part 1."""

MEMORY_GAME_LONG = 30_000_000
"""Turn whose spoken number answers day 15 part 2."""

CUBE_CYCLES = 6
"""Boot cycles simulated for the Conway cubes (day 17)."""

DEPARTURE_PREFIX = "departure"
"""Ticket fields whose values are multiplied in day 16 part 2."""

CUP_MOVES_SHORT = 100
"""Crab moves for day 23 part 1."""

CUP_MOVES_LONG = 10_000_000
"""Crab moves for day 23 part 2."""

CUP_COUNT_LONG = 1_000_000
"""Total cups after filling in ascending labels for day 23 part 2."""

CUPS_PICKED_UP = 3
"""Cups removed from the circle on each move."""

CUP_REFERENCE_LABEL = 1
"""Label after which the answer cups are read."""

HANDSHAKE_SUBJECT = 7
"""Initial subject number of the card/door handshake (day 25)."""

HANDSHAKE_MODULUS = 20_201_227
"""Modulus of the handshake transformation (day 25)."""

INPUT_DIR = "assets/days"
"""Default directory holding ``day{N}.txt`` puzzle inputs."""
