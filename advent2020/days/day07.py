"""Day 7: Handy Haversacks - nested bag rules."""

from __future__ import annotations

import networkx as nx

from advent2020.config.constants import SHINY_GOLD
from advent2020.config.types import DayAnswers
from advent2020.domain.bags import count_contained, count_containers, parse_rules

DAY = 7


def parse(text: str) -> nx.DiGraph:
    return parse_rules(text)


def part1(graph: nx.DiGraph) -> int:
    return count_containers(graph, SHINY_GOLD)


def part2(graph: nx.DiGraph) -> int:
    return count_contained(graph, SHINY_GOLD)


def solve(text: str) -> DayAnswers:
    graph = parse(text)
    return DayAnswers(DAY, part1(graph), part2(graph))
