"""Helpers for reading puzzle inputs and splitting them into lines and sections."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from advent2020.errors import InputFileError, ParseError

T = TypeVar("T")


def read_text(path: Path) -> str:
    """Read the whole input file, normalising Windows line endings."""
    try:
        return Path(path).read_text().replace("\r\n", "\n")
    except OSError as exc:
        raise InputFileError(f"could not read input file {path}: {exc}") from exc


def parse_int(raw: str, what: str = "number") -> int:
    """Parse a base-10 integer, raising ParseError with context on failure."""
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ParseError(f"could not parse {what} from {raw!r}") from exc


def parse_lines(text: str, parse: Callable[[str], T]) -> list[T]:
    """Apply ``parse`` to every non-empty line of ``text``."""
    return [parse(line) for line in text.splitlines() if line.strip()]


def split_sections(text: str) -> list[str]:
    """Split on blank lines, dropping surrounding whitespace and empty sections."""
    return [section.strip("\n") for section in text.strip().split("\n\n") if section.strip()]


def split_once(text: str, separator: str) -> tuple[str, str]:
    """Split at the first ``separator``; the second half is empty if it is missing."""
    head, _, tail = text.partition(separator)
    return head, tail
