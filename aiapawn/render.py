"""Text rendering of the 3x3 board with block characters."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from aiapawn.naming import Piece

_H = "═"
_V = "║"
_SHADE = "▒"
_UPPER = "▀"
_LOWER = "▄"
_FULL = "█"
_GAP = "      "

# (ust, alt, ful, fulbos) glyphs for each square content
_GLYPHS = {
    Piece.WHITE: (_LOWER, _UPPER, " ", _FULL),
    Piece.BLACK: (_UPPER, _LOWER, _FULL, " "),
    Piece.EMPTY: (_SHADE, _SHADE, _SHADE, _SHADE),
}

_ROW_LABELS = {
    2: ("  " + _LOWER + _UPPER + _UPPER + _LOWER,
        "    " + _UPPER + _LOWER,
        "  " + _UPPER + _LOWER + _LOWER + _UPPER),
    1: ("  " + _LOWER + _UPPER + _UPPER + _LOWER,
        "    " + _LOWER + _UPPER,
        "  " + _LOWER + _FULL + _LOWER + _LOWER),
    0: ("   " + _LOWER + _FULL + " ",
        "    " + _FULL + " ",
        "   " + _LOWER + _FULL + _LOWER),
}


def _frame_line(left: str, middle: str, right: str) -> str:
    return _V + left + _H * 10 + middle + _H * 10 + middle + _H * 10 + right + _GAP + _V


def _cells(row: Sequence[int], pattern) -> str:
    parts = []
    for cell in row:
        ust, alt, ful, fulbos = _GLYPHS[Piece(cell)]
        parts.append(_V + pattern(ust, alt, ful, fulbos))
    return _V + "".join(parts) + _V


def render_board(board: Sequence[Sequence[int]]) -> str:
    """Return the board drawn as text, row 3 at the top."""
    s = _SHADE
    border = "X" + _H * 40 + "X"
    lines = [border, _frame_line("╔", "╦", "╗")]
    for j in (2, 1, 0):
        row = board[j]
        first, second, third = _ROW_LABELS[j]
        lines.append(_cells(row, lambda u, a, f, b: s + s + a + f + u + u + f + a + s + s) + _GAP + _V)
        lines.append(_cells(row, lambda u, a, f, b: s + s + f + b + b + b + b + f + s + s) + first + _V)
        lines.append(_cells(row, lambda u, a, f, b: s + s + u + f + b + b + f + u + s + s) + second + _V)
        lines.append(_cells(row, lambda u, a, f, b: s + a + f + u + b + b + u + f + a + s) + third + _V)
        lines.append(_cells(row, lambda u, a, f, b: s + f + a * 6 + f + s) + _GAP + _V)
        if j > 0:
            lines.append(_frame_line("╠", "╬", "╣"))
        else:
            lines.append(_frame_line("╚", "╩", "╝"))
    lines.append(_V + " " * 40 + _V)
    lines.append(_V + "    " + _LOWER + _UPPER + _UPPER + _LOWER + "        " + _FULL + _UPPER
                 + _UPPER + _LOWER + "       " + _LOWER + _UPPER + _UPPER + _LOWER + "         " + _V)
    lines.append(_V + "    " + _FULL + _LOWER + _LOWER + _FULL + "        " + _FULL + " " + _UPPER
                 + _LOWER + "       " + _FULL + "            " + _V)
    lines.append(_V + "    " + _FULL + "  " + _FULL + "        " + _FULL + _LOWER + _LOWER + _UPPER
                 + "       " + _UPPER + _LOWER + _LOWER + _UPPER + "         " + _V)
    lines.append(border)
    return "\n".join(lines) + "\n\n"


def print_board(board: Sequence[Sequence[int]], stream: TextIO | None = None) -> None:
    """Write the rendered board to stream (standard output by default)."""
    (stream if stream is not None else sys.stdout).write(render_board(board))