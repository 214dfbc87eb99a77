"""Configuration layer: puzzle constants and typed config dataclasses."""

from advent2020.config.constants import (
    CUBE_CYCLES,
    CUP_COUNT_LONG,
    CUP_MOVES_LONG,
    CUP_MOVES_SHORT,
    EXPENSE_TARGET,
    HANDSHAKE_MODULUS,
    HANDSHAKE_SUBJECT,
    INPUT_DIR,
    MEMORY_GAME_LONG,
    MEMORY_GAME_SHORT,
    SHINY_GOLD,
    XMAS_PREAMBLE,
)
from advent2020.config.types import Answer, DayAnswers, NeighborMode, RunConfig

__all__ = [
    "Answer",
    "CUBE_CYCLES",
    "CUP_COUNT_LONG",
    "CUP_MOVES_LONG",
    "CUP_MOVES_SHORT",
    "DayAnswers",
    "EXPENSE_TARGET",
    "HANDSHAKE_MODULUS",
    "HANDSHAKE_SUBJECT",
    "INPUT_DIR",
    "MEMORY_GAME_LONG",
    "MEMORY_GAME_SHORT",
    "NeighborMode",
    "RunConfig",
    "SHINY_GOLD",
    "XMAS_PREAMBLE",
]
