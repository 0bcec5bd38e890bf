import io

from aiapawn import rng
from aiapawn.menu import GameManager, Menu, main
from aiapawn.naming import Outcome

FINISHED = {Outcome.WHITE_WON, Outcome.BLACK_WON, Outcome.DRAW}


def feeder(values):
    it = iter(values)
    return lambda: next(it)


def test_menu_close_immediately():
    out = io.StringIO()
    Menu(input_func=feeder(["4"]), output=out, clear_screen=False).show()
    text = out.getvalue()
    assert "=== AIAPAWN ===" in text
    assert "4. Close" in text
    assert "Invalid Choice" not in text


def test_menu_invalid_choice_then_close():
    out = io.StringIO()
    Menu(input_func=feeder(["7", "x", "4"]), output=out, clear_screen=False).show()
    assert out.getvalue().count("Invalid Choice") == 2
    assert out.getvalue().count("Choose game mode") == 3


def test_menu_stops_at_end_of_input():
    out = io.StringIO()

    def eof():
        raise EOFError

    Menu(input_func=eof, output=out, clear_screen=False).show()
    assert out.getvalue().count("Choose game mode") == 1


def test_menu_runs_computer_game_and_keeps_memory():
    rng.seed(5)
    out = io.StringIO()
    menu = Menu(input_func=feeder(["3", "", "3", "", "4"]), output=out, clear_screen=False)
    menu.manager._options["delay"] = 0
    menu.show()
    assert len(menu.manager.positions) >= 2
    text = out.getvalue()
    assert text.count("Choose game mode") == 3
    assert "THE WINNER IS" in text or "GAME IS DRAW" in text


def test_manager_shares_positions_between_games():
    rng.seed(9)
    manager = GameManager(input_func=lambda: "", output=io.StringIO(), delay=0)
    assert manager.computer_vs_computer() in FINISHED
    first = len(manager.positions)
    assert first >= 2
    manager.computer_vs_computer()
    assert len(manager.positions) >= first


def test_manager_player_vs_player():
    manager = GameManager(input_func=lambda: "1", output=io.StringIO(), delay=0)
    assert manager.player_vs_player() == Outcome.WHITE_WON
    assert len(manager.positions) == 0


def test_manager_player_vs_computer():
    rng.seed(2)
    manager = GameManager(input_func=lambda: "1", output=io.StringIO(), delay=0)
    assert manager.player_vs_computer() in FINISHED
    assert len(manager.positions) >= 1


def test_main_closes(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda *args: "4")
    assert main([]) == 0
    assert "=== AIAPAWN ===" in capsys.readouterr().out