"""Domain layer: seat grids, cup circles, grammars, tickets, and bag rules."""

from advent2020.domain.cups import CupCircle
from advent2020.domain.grammar import Grammar
from advent2020.domain.grid import SeatGrid, Tile
from advent2020.domain.tickets import FieldRule, TicketNotes

__all__ = [
    "CupCircle",
    "FieldRule",
    "Grammar",
    "SeatGrid",
    "TicketNotes",
    "Tile",
]
