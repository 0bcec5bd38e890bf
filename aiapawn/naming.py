"""Piece colours, move directions, game outcomes and the Move record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Piece(IntEnum):
    """Contents of a board square; WHITE and BLACK also name whose turn it is."""

    WHITE = 0
    BLACK = 1
    EMPTY = 2


class Direction(IntEnum):
    """Direction a pawn moves, seen from the side that owns it."""

    LEFT = 3
    RIGHT = 4
    FORWARD = 5


class Outcome(IntEnum):
    """State of a game."""

    WHITE_WON = 6
    BLACK_WON = 7
    DRAW = 8
    NOT_OVER = 9


_COLUMNS = "ABC"
_ROWS = "123"
_DIRECTION_NAMES = {
    Direction.LEFT: "Diagonal Left",
    Direction.FORWARD: "Forward",
    Direction.RIGHT: "Diagonal Right",
}


@dataclass(frozen=True)
class Move:
    """A pawn at (row, col) moving in a direction."""

    row: int
    col: int
    direction: Direction

    def notation(self) -> str:
        """Return the move in board notation, e.g. ``B1 Forward``."""
        column = _COLUMNS[min(max(self.col, 0), 2)] if self.col in (0, 1) else "C"
        row = _ROWS[self.row] if self.row in (0, 1) else "3"
        name = _DIRECTION_NAMES.get(self.direction, "Diagonal Right")
        return f"{column}{row} {name}"