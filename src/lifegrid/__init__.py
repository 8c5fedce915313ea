"""Conway's Game of Life on a bounded grid."""

__version__ = "0.1.0"

from .config import Config
from .core.cell import Cell
from .core.grid import Grid
from .core.game import GameOfLife
from .core.timing import FrameCounter, Ticker

__all__ = ["Cell", "Grid", "GameOfLife", "Ticker", "FrameCounter", "Config"]
