"""Error taxonomy shared by every day program.

A run aborts when the input file cannot be read, when the input text does not
match the day's grammar, when a parsed structure violates an invariant the
computation relies on, or when the answers log cannot be written. None of
them is recovered locally.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle failures surfaced to the CLI."""


class InputFileError(PuzzleError):
    """The puzzle input could not be opened or read."""


class ParseError(PuzzleError, ValueError):
    """Input text does not match the expected per-day grammar."""


class InvariantError(PuzzleError, ValueError):
    """A parsed structure violates a constraint discovered after parsing."""


class OutputFileError(PuzzleError):
    """A run output such as the answers log could not be written."""
