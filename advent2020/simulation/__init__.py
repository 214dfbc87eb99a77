"""Simulation engine: fixed-point driver, seating rules, and Conway cubes."""

from advent2020.simulation.cubes import CubeSpace, active_after
from advent2020.simulation.engine import run_cycles, run_until_stable
from advent2020.simulation.seating import occupied_at_fixed_point, settle

__all__ = [
    "CubeSpace",
    "active_after",
    "occupied_at_fixed_point",
    "run_cycles",
    "run_until_stable",
    "settle",
]
