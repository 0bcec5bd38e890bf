"""Memory of positions met by the computer player and the moves it may still try."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from aiapawn.naming import Move, Piece

Board = Sequence[Sequence[int]]


def _snapshot(board: Board) -> tuple[tuple[Piece, ...], ...]:
    return tuple(tuple(Piece(cell) for cell in row) for row in board)


@dataclass
class Position:
    """A board with the side to move, its candidate moves and the move chosen this game."""

    board: tuple[tuple[Piece, ...], ...]
    turn: Piece
    moves: list[Move] = field(default_factory=list)
    preferred_index: int | None = None

    def __post_init__(self) -> None:
        self.board = _snapshot(self.board)
        self.turn = Piece(self.turn)
        self.moves = list(self.moves)


class PositionList:
    """Ordered collection of known positions, searched by board and turn."""

    def __init__(self) -> None:
        self._positions: list[Position] = []

    def append(self, board: Board, turn: Piece, moves: Sequence[Move]) -> Position:
        """Add a new position at the end and return it."""
        position = Position(board, turn, list(moves))
        self._positions.append(position)
        return position

    def search(self, board: Board, turn: Piece, moves: Sequence[Move]) -> Position:
        """Return the stored position matching board and turn, adding it if absent.

        ``moves`` is used only when the position is new.
        """
        key = _snapshot(board)
        turn = Piece(turn)
        for position in self._positions:
            if position.turn == turn and position.board == key:
                return position
        return self.append(key, turn, moves)

    def dump(self) -> str:
        """Return a plain-text listing of every stored position."""
        lines: list[str] = []
        for number, position in enumerate(self._positions):
            lines.append(f"{number}. Position:")
            lines.extend("".join(str(int(cell)) for cell in row) for row in position.board)
            lines.append(f"turn: {int(position.turn)}")
            lines.append(f"preferred index: {position.preferred_index}")
            for move in position.moves:
                lines.append(f"row: {move.row}")
                lines.append(f"col: {move.col}")
                lines.append(f"direction: {int(move.direction)}")
        return "\n".join(lines) + ("\n" if lines else "")

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)