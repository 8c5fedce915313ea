"""Core Game of Life logic."""

from .cell import Cell
from .grid import Grid
from .game import GameOfLife
from .rules import next_state, successor
from .timing import FrameCounter, Ticker

__all__ = ["Cell", "Grid", "GameOfLife", "next_state", "successor", "Ticker", "FrameCounter"]
