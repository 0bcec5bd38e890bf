"""Game mode menu and the command that starts it."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO

from aiapawn.game import CvC, PvC, PvP
from aiapawn.naming import Outcome
from aiapawn.positions import PositionList

_CLEAR_SCREEN = "\033[2J\033[H"


class GameManager:
    """Starts games that share one memory of positions."""

    def __init__(
        self,
        *,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
        delay: float = 1.0,
    ) -> None:
        self.positions = PositionList()
        self._options = {"input_func": input_func, "output": output, "delay": delay}

    def player_vs_player(self) -> Outcome:
        """Play a two-player game."""
        return PvP(self.positions, **self._options).start()

    def player_vs_computer(self) -> Outcome:
        """Play a game against the computer."""
        return PvC(self.positions, **self._options).start()

    def computer_vs_computer(self) -> Outcome:
        """Let the computer play itself once."""
        return CvC(self.positions, **self._options).start()


class Menu:
    """Interactive menu that chooses the game mode until closed."""

    def __init__(
        self,
        manager: GameManager | None = None,
        *,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
        clear_screen: bool = True,
    ) -> None:
        self._input = input_func if input_func is not None else input
        self._output = output
        self.manager = manager if manager is not None else GameManager(
            input_func=self._input, output=output
        )
        self.clear_screen = clear_screen

    def _write(self, text: str) -> None:
        (self._output if self._output is not None else sys.stdout).write(text)

    def show(self) -> None:
        """Show the menu and run chosen games until Close is picked or input ends."""
        actions = {
            1: self.manager.player_vs_player,
            2: self.manager.player_vs_computer,
            3: self.manager.computer_vs_computer,
        }
        while True:
            if self.clear_screen:
                self._write(_CLEAR_SCREEN)
            self._write("\n  === AIAPAWN ===\n\n")
            self._write("Choose game mode\n")
            self._write("1. Player VS Player\n")
            self._write("2. Player VS Computer\n")
            self._write("3. Computer VS Computer\n")
            self._write("4. Close\n")
            self._write("=> ")
            try:
                line = self._input()
            except EOFError:
                break
            try:
                choice = int(line.strip())
            except ValueError:
                choice = None
            if choice == 4:
                break
            action = actions.get(choice)
            if action is None:
                self._write("Invalid Choice\n")
            else:
                action()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="aiapawn", description="Three-by-three pawn game with a learning computer."
    )
    parser.parse_args(argv)
    Menu().show()
    return 0


if __name__ == "__main__":
    sys.exit(main())