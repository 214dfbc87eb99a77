"""Crab cups: a circle of labelled cups stored as an arena of "next" links.

``next_cup[label]`` is the label clockwise of ``label``. Labels are dense, so
the arena is a flat list indexed by label and every move relinks a constant
number of entries regardless of the circle size.
"""

from __future__ import annotations

from advent2020.config.constants import CUPS_PICKED_UP
from advent2020.errors import InvariantError, ParseError

MIN_CUPS = CUPS_PICKED_UP + 1


class CupCircle:
    """A single cycle over the labels ``lowest..highest`` with a current cup."""

    def __init__(self, labels: list[int], total: int | None = None) -> None:
        if len(labels) < MIN_CUPS:
            raise InvariantError(f"cups must be at least {MIN_CUPS} contiguous unique numbers")
        lowest, highest = min(labels), max(labels)
        if len(set(labels)) != len(labels) or highest - lowest + 1 != len(labels):
            raise InvariantError(
                f"cups must be contiguous unique numbers, got {''.join(map(str, labels))}"
            )
        order = list(labels)
        if total is not None:
            if total < len(labels):
                raise ValueError("total must be >= the number of labelled cups")
            order.extend(range(highest + 1, lowest + total))
            highest = lowest + total - 1

        self.lowest = lowest
        self.highest = highest
        self.next_cup: list[int] = [0] * (highest + 1)
        for label, following in zip(order, order[1:]):
            self.next_cup[label] = following
        self.next_cup[order[-1]] = order[0]
        self.current = order[0]

    @classmethod
    def parse(cls, text: str, total: int | None = None) -> CupCircle:
        """Parse a line of single-digit labels such as ``389125467``."""
        raw = text.strip()
        if not raw or not raw.isdigit():
            raise ParseError(f"could not parse cup labels from {raw!r}")
        return cls([int(char) for char in raw], total=total)

    def __len__(self) -> int:
        return self.highest - self.lowest + 1

    def _check_label(self, label: int) -> None:
        if not self.lowest <= label <= self.highest:
            raise InvariantError(f"unknown cup label {label}")

    def _below(self, label: int) -> int:
        return self.highest if label == self.lowest else label - 1

    def play_round(self) -> None:
        """Perform one crab move.

        The three cups clockwise of the current cup are picked up. The
        destination is the current label minus one, wrapping from the lowest
        label to the highest and skipping picked-up cups. The picked-up cups
        are placed right after the destination, then the current cup advances.
        """
        nxt = self.next_cup
        current = self.current
        first = nxt[current]
        second = nxt[first]
        third = nxt[second]
        nxt[current] = nxt[third]

        destination = self._below(current)
        while destination in (first, second, third):
            destination = self._below(destination)

        nxt[third] = nxt[destination]
        nxt[destination] = first
        self.current = nxt[current]

    def play(self, rounds: int) -> None:
        """Play ``rounds`` moves; the loop body is ``play_round`` with locals inlined."""
        if rounds < 0:
            raise ValueError("rounds must be >= 0")
        nxt = self.next_cup
        lowest, highest = self.lowest, self.highest
        current = self.current
        for _ in range(rounds):
            first = nxt[current]
            second = nxt[first]
            third = nxt[second]
            nxt[current] = nxt[third]

            destination = highest if current == lowest else current - 1
            while destination == first or destination == second or destination == third:
                destination = highest if destination == lowest else destination - 1

            nxt[third] = nxt[destination]
            nxt[destination] = first
            current = nxt[current]
        self.current = current

    def labels_from(self, label: int) -> list[int]:
        """All labels clockwise after ``label``, excluding ``label`` itself."""
        self._check_label(label)
        result: list[int] = []
        cursor = self.next_cup[label]
        while cursor != label:
            result.append(cursor)
            cursor = self.next_cup[cursor]
        return result

    def labels_after(self, label: int) -> str:
        """Labels clockwise after ``label`` joined into one string."""
        return "".join(str(cup) for cup in self.labels_from(label))

    def product_after(self, label: int) -> int:
        """Product of the two labels immediately clockwise of ``label``."""
        self._check_label(label)
        first = self.next_cup[label]
        return first * self.next_cup[first]
