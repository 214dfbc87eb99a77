"""Luggage rules as a weighted containment graph.

Each node is a bag colour; an edge ``outer -> inner`` with attribute
``count`` means one ``outer`` bag directly holds ``count`` ``inner`` bags.
"""

from __future__ import annotations

import networkx as nx

from advent2020.errors import InvariantError, ParseError
from advent2020.io.reading import parse_int

SEPARATOR = " bags contain "
EMPTY_CONTENT = "no other bags"
SINGULAR_SUFFIX = " bag"
PLURAL_SUFFIX = " bags"


def remove_bag_suffix(value: str) -> str:
    """Strip `` bag``/`` bags``; anything else is a parse error."""
    if value.endswith(PLURAL_SUFFIX):
        return value[: -len(PLURAL_SUFFIX)]
    if value.endswith(SINGULAR_SUFFIX):
        return value[: -len(SINGULAR_SUFFIX)]
    raise ParseError(f"unknown suffix for {value!r}, only ' bags' and ' bag' are allowed")


def parse_content(content: str) -> list[tuple[int, str]]:
    """Parse ``1 bright white bag, 2 muted yellow bags`` into (count, colour) pairs."""
    if content == EMPTY_CONTENT:
        return []
    bags: list[tuple[int, str]] = []
    for item in content.split(", "):
        bag = remove_bag_suffix(item)
        count, sep, colour = bag.partition(" ")
        if not sep or not colour:
            raise ParseError(f"could not split bag contents {item!r}")
        bags.append((parse_int(count, "bag count"), colour))
    return bags


def parse_rules(text: str) -> nx.DiGraph:
    """Build the containment graph; every colour mentioned must have its own rule."""
    graph = nx.DiGraph()
    defined: set[str] = set()
    for line in text.strip().splitlines():
        definition = line.strip().rstrip(".")
        colour, sep, content = definition.partition(SEPARATOR)
        if not sep:
            raise ParseError(f"could not split {definition!r} at {SEPARATOR!r}")
        if colour in defined:
            raise ParseError(f"duplicate rule for {colour}")
        defined.add(colour)
        graph.add_node(colour)
        for count, inner in parse_content(content):
            graph.add_edge(colour, inner, count=count)

    undefined = set(graph.nodes) - defined
    if undefined:
        raise InvariantError(f"unknown bag colour(s) {sorted(undefined)}")
    if not nx.is_directed_acyclic_graph(graph):
        raise InvariantError("bag rules contain a cycle")
    return graph


def count_containers(graph: nx.DiGraph, colour: str) -> int:
    """Number of colours that eventually contain at least one ``colour`` bag."""
    if colour not in graph:
        raise InvariantError(f"unknown bag colour {colour}")
    return len(nx.ancestors(graph, colour))


def count_contained(graph: nx.DiGraph, colour: str) -> int:
    """Total number of bags inside one ``colour`` bag."""
    if colour not in graph:
        raise InvariantError(f"unknown bag colour {colour}")
    inside: dict[str, int] = {}
    # children are finished before their parents in reverse topological order
    for node in reversed(list(nx.topological_sort(graph))):
        inside[node] = sum(
            data["count"] * (1 + inside[inner])
            for _, inner, data in graph.out_edges(node, data=True)
        )
    return inside[colour]
