"""Input reading, output paths, and answer-log persistence."""

from advent2020.io.reading import parse_int, parse_lines, read_text, split_once, split_sections

__all__ = [
    "parse_int",
    "parse_lines",
    "read_text",
    "split_once",
    "split_sections",
]
