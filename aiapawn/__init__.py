"""Hexapawn on a 3x3 board with a computer opponent that learns from its losses."""

__version__ = "0.1.0"
__all__ = ["naming", "rng", "positions", "render", "game", "menu"]