from aiapawn.naming import Direction, Move, Piece
from aiapawn.positions import Position, PositionList

W, B, E = Piece.WHITE, Piece.BLACK, Piece.EMPTY

START = [[W, W, W], [E, E, E], [B, B, B]]
OTHER = [[W, E, W], [W, E, E], [B, B, B]]


def test_search_adds_new_position():
    positions = PositionList()
    moves = [Move(0, 0, Direction.FORWARD)]
    found = positions.search(START, W, moves)
    assert len(positions) == 1
    assert found.moves == moves
    assert found.preferred_index is None
    assert found.turn is Piece.WHITE


def test_search_returns_existing_and_ignores_new_moves():
    positions = PositionList()
    first = positions.search(START, W, [Move(0, 0, Direction.FORWARD)])
    again = positions.search(START, W, [Move(0, 1, Direction.FORWARD)])
    assert again is first
    assert again.moves == [Move(0, 0, Direction.FORWARD)]
    assert len(positions) == 1


def test_turn_distinguishes_positions():
    positions = PositionList()
    white = positions.search(START, W, [])
    black = positions.search(START, B, [])
    assert white is not black
    assert len(positions) == 2


def test_board_is_copied():
    board = [row[:] for row in START]
    positions = PositionList()
    stored = positions.search(board, W, [])
    board[1][1] = W
    assert stored.board[1][1] is Piece.EMPTY
    assert positions.search(START, W, []) is stored


def test_iteration_keeps_insertion_order():
    positions = PositionList()
    a = positions.append(START, W, [])
    b = positions.append(OTHER, B, [])
    assert list(positions) == [a, b]


def test_position_moves_are_own_list():
    moves = [Move(0, 0, Direction.FORWARD)]
    position = Position(START, W, moves)
    position.moves.clear()
    assert moves == [Move(0, 0, Direction.FORWARD)]


def test_dump_lists_each_position():
    positions = PositionList()
    positions.append(START, W, [Move(0, 2, Direction.FORWARD)])
    positions.append(OTHER, B, [])
    text = positions.dump()
    assert "0. Position:" in text
    assert "1. Position:" in text
    assert "000\n222\n111\n" in text
    assert "direction: 5" in text


def test_dump_of_empty_list():
    assert PositionList().dump() == ""