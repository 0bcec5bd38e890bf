"""Game rules and the three ways of playing: two players, player against computer, computer against itself."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from typing import Callable, TextIO

from aiapawn.naming import Direction, Move, Outcome, Piece
from aiapawn.positions import Position, PositionList
from aiapawn.render import print_board
from aiapawn.rng import random_int

Board = list[list[Piece]]

_RESULT_MESSAGES = {
    Outcome.WHITE_WON: "THE WINNER IS WHITE",
    Outcome.BLACK_WON: "THE WINNER IS BLACK",
}


def initial_board() -> Board:
    """Return the starting board: white on row 0, empty row 1, black on row 2."""
    return [
        [Piece.WHITE] * 3,
        [Piece.EMPTY] * 3,
        [Piece.BLACK] * 3,
    ]


def learn_from_mistake(history: list[Position]) -> None:
    """Forget the losing move of the last position, cascading back while positions run out of moves.

    Every position left in the history then has its preferred move cleared,
    and the history is emptied.
    """
    while history:
        position = history.pop()
        if position.moves and position.preferred_index is not None:
            del position.moves[position.preferred_index]
        exhausted = not position.moves
        position.preferred_index = None
        if not exhausted:
            break
    reset_preferred_moves(history)


def reset_preferred_moves(history: list[Position]) -> None:
    """Clear the preferred move of every position in the history and empty it."""
    for position in history:
        position.preferred_index = None
    history.clear()


def _step(turn: Piece) -> tuple[int, int, int]:
    """Return (row step, left column step, right column step) for the side to move."""
    if turn == Piece.WHITE:
        return 1, -1, 1
    return -1, 1, -1


class Game(ABC):
    """A game of three-by-three pawns sharing a memory of positions with the computer player."""

    def __init__(
        self,
        positions: PositionList,
        *,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
        delay: float = 1.0,
    ) -> None:
        self.board: Board = initial_board()
        self.turn = Piece.WHITE
        self.positions = positions
        self.delay = delay
        self._input = input_func if input_func is not None else input
        self._output = output

    def _write(self, text: str) -> None:
        (self._output if self._output is not None else sys.stdout).write(text)

    def _read_int(self) -> int | None:
        try:
            return int(self._input().strip())
        except ValueError:
            return None

    def _print_board(self) -> None:
        print_board(self.board, self._output if self._output is not None else sys.stdout)

    def valid_moves(self) -> list[Move]:
        """Return every legal move of the side to move, in board order."""
        own = self.turn
        enemy = Piece.BLACK if own == Piece.WHITE else Piece.WHITE
        row_step, left_step, right_step = _step(own)
        moves: list[Move] = []
        for i, row in enumerate(self.board):
            target_row = i + row_step
            if not 0 <= target_row <= 2:
                continue
            ahead = self.board[target_row]
            for j, cell in enumerate(row):
                if cell != own:
                    continue
                left = j + left_step
                if 0 <= left <= 2 and ahead[left] == enemy:
                    moves.append(Move(i, j, Direction.LEFT))
                if ahead[j] == Piece.EMPTY:
                    moves.append(Move(i, j, Direction.FORWARD))
                right = j + right_step
                if 0 <= right <= 2 and ahead[right] == enemy:
                    moves.append(Move(i, j, Direction.RIGHT))
        return moves

    def apply_move(self, move: Move) -> None:
        """Move the pawn of the side to move as the move describes."""
        row_step, left_step, right_step = _step(self.turn)
        column_step = {
            Direction.LEFT: left_step,
            Direction.FORWARD: 0,
        }.get(move.direction, right_step)
        self.board[move.row][move.col] = Piece.EMPTY
        self.board[move.row + row_step][move.col + column_step] = self.turn

    def switch_turn(self) -> None:
        """Pass the move to the other side."""
        self.turn = Piece.BLACK if self.turn == Piece.WHITE else Piece.WHITE

    def state(self) -> Outcome:
        """Return whether someone has won, the game is drawn, or play goes on."""
        for white_end, black_end in zip(self.board[2], self.board[0]):
            if white_end == Piece.WHITE:
                return Outcome.WHITE_WON
            if black_end == Piece.BLACK:
                return Outcome.BLACK_WON
        if not self.valid_moves():
            return Outcome.DRAW
        return Outcome.NOT_OVER

    def choose_computer_move(self, history: list[Position]) -> Move:
        """Pick the computer's move from its memory and record the position in history."""
        valid = self.valid_moves()
        if not valid:
            raise ValueError("no legal move for the side to move")
        backup = valid[0]
        position = self.positions.search(self.board, self.turn, valid)
        history.append(position)
        if not position.moves:
            return backup
        if position.preferred_index is None:
            position.preferred_index = random_int(0, len(position.moves) - 1)
        return position.moves[position.preferred_index]

    def ask_user_move(self) -> Move:
        """Ask the player to pick one of the legal moves until a valid choice is made."""
        valid = self.valid_moves()
        while True:
            self._write("\nEnter the move you want to play\n")
            for number, move in enumerate(valid, start=1):
                self._write(f"{number}. {move.notation()}\n")
            self._write("=> ")
            choice = self._read_int()
            if choice is not None and 1 <= choice <= len(valid):
                return valid[choice - 1]
            self._write("Invalid choice\n")

    def announce_result(self, outcome: Outcome) -> None:
        """Show the result and wait for the player to press Enter."""
        self._write(_RESULT_MESSAGES.get(outcome, "GAME IS DRAW"))
        try:
            self._input()
        except EOFError:
            pass

    def dump_positions(self) -> None:
        """Write the computer's memory of positions."""
        self._write(self.positions.dump())

    @abstractmethod
    def start(self) -> Outcome:
        """Play the game to its end and return the outcome."""


class PvP(Game):
    """Two players at the same keyboard."""

    def start(self) -> Outcome:
        while self.state() == Outcome.NOT_OVER:
            self._print_board()
            self.apply_move(self.ask_user_move())
            self.switch_turn()
        self._print_board()
        outcome = self.state()
        self.announce_result(outcome)
        return outcome


class PvC(Game):
    """A player against the learning computer."""

    def ask_colour(self) -> Piece:
        """Ask which colour the player takes; a random one may be drawn."""
        while True:
            self._write("\nEnter the colour you want to play\n")
            self._write("1. WHITE\n")
            self._write("2. BLACK\n")
            self._write("3. RANDOM\n")
            self._write("=> ")
            choice = self._read_int()
            if choice == 1:
                return Piece.WHITE
            if choice == 2:
                return Piece.BLACK
            if choice == 3:
                return Piece.WHITE if random_int(0, 1) == 0 else Piece.BLACK
            self._write("Invalid Choice\n")

    def start(self) -> Outcome:
        player = self.ask_colour()
        history: list[Position] = []
        while self.state() == Outcome.NOT_OVER:
            self._print_board()
            if self.turn == player:
                self.apply_move(self.ask_user_move())
            else:
                self.apply_move(self.choose_computer_move(history))
                if self.delay > 0:
                    time.sleep(self.delay)
            self.switch_turn()
        self._print_board()
        outcome = self.state()
        self.announce_result(outcome)
        return outcome


class CvC(Game):
    """The computer against itself; the losing side forgets the move that lost."""

    def start(self) -> Outcome:
        histories: dict[Piece, list[Position]] = {Piece.WHITE: [], Piece.BLACK: []}
        while True:
            self.apply_move(self.choose_computer_move(histories[self.turn]))
            self.switch_turn()
            outcome = self.state()
            if outcome != Outcome.NOT_OVER:
                break
        self.announce_result(outcome)
        if outcome == Outcome.WHITE_WON:
            learn_from_mistake(histories[Piece.BLACK])
        elif outcome == Outcome.BLACK_WON:
            learn_from_mistake(histories[Piece.WHITE])
        else:
            reset_preferred_moves(histories[Piece.BLACK])
            reset_preferred_moves(histories[Piece.WHITE])
        return outcome