# aiapawn

Hexapawn in the terminal. Each side has three pawns on a 3x3 board. White
starts on row 1 and Black starts on row 3. A pawn moves one square straight
ahead onto an empty square, or one square diagonally ahead to capture an
enemy pawn. A side wins when one of its pawns reaches the far row. If the side
to move has no legal move, the game is a draw.

The computer keeps a memory of every position it has met, and for each one
the moves it still thinks are playable. The first time it meets a position in
a game, it picks one of those moves at random and then sticks to it. In
Computer VS Computer games, the losing side forgets the last move it chose.
If that position has no moves left, it also forgets the move that led to it,
and so on back through the game. After every such game the chosen moves are
cleared, so the next game picks again at random.

## Installation

```
pip install .
```

## Playing

```
aiapawn
```

The menu offers four choices:

1. Player VS Player: two people take turns on one keyboard.
2. Player VS Computer: you choose White, Black or a random colour, then play against the computer. The computer waits one second after each of its moves.
3. Computer VS Computer: the computer plays itself once, and the losing side learns from its mistake.
4. Close. The menu also closes when input ends.

Each turn lists the legal moves in notation such as `A1 Forward` or
`B2 Diagonal Left`. Columns are A to C and rows are 1 to 3. Enter the number
of the move you want to play. When a game ends, the result is shown, and
pressing Enter returns you to the menu.

The computer's memory lasts only as long as the menu is running, and all game
modes share it. Running option 3 a few times is a quick way to train the
computer before you play against it.

## Using it from Python

- `aiapawn.game.PvP`, `PvC` and `CvC` each take a `PositionList` from
  `aiapawn.positions`. They also take the keyword options `input_func`, a
  callable that returns one line of input, `output`, a text stream, and
  `delay`, the computer's pause in seconds. `start()` plays a whole game and
  returns an `aiapawn.naming.Outcome`.
- `Game.valid_moves()`, `apply_move()`, `switch_turn()` and `state()` let you
  step through a game yourself.
- `aiapawn.game.learn_from_mistake()` and `reset_preferred_moves()` work on
  the list of positions a computer player went through in a game.
- `aiapawn.menu.GameManager` runs games that share one memory.
  `aiapawn.menu.Menu` is the interactive menu.
- `aiapawn.render.render_board()` returns the board drawn with box and block
  characters. `print_board()` writes that drawing to a stream.
- `aiapawn.rng.seed()` reseeds the random choices so that games can be
  repeated.

## Limitations

The computer's memory is not saved anywhere. When the program exits, the
computer forgets everything it learned. Games against a person never teach
the computer anything. Only Computer VS Computer games do.

## Development

```
pip install -e ".[test]"
pytest
```