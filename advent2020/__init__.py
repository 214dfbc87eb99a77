"""Advent of Code 2020 puzzle solutions."""

__version__ = "0.1.0"
