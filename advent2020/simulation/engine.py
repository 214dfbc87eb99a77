"""Fixed-point driver shared by the cellular simulations.

A step function maps an immutable state to the next one. The driver keeps
applying it until two consecutive states compare equal, or for a fixed number
of cycles. States must implement value equality.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")

StepFn = Callable[[S], S]


def run_until_stable(initial: S, step: StepFn[S]) -> tuple[S, int]:
    """Apply ``step`` until it returns a state equal to its input.

    Returns the fixed point and the number of rounds that changed the state.
    There is no iteration cap: a rule that never stabilises never returns.
    """
    state = initial
    rounds = 0
    while True:
        next_state = step(state)
        if next_state == state:
            break
        state = next_state
        rounds += 1
    logger.debug("fixed point reached after %d changing rounds", rounds)
    return state, rounds


def run_cycles(initial: S, step: StepFn[S], cycles: int) -> S:
    """Apply ``step`` exactly ``cycles`` times."""
    if cycles < 0:
        raise ValueError("cycles must be >= 0")
    state = initial
    for _ in range(cycles):
        state = step(state)
    logger.debug("ran %d cycles", cycles)
    return state
