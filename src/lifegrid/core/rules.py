"""Conway's Game of Life transition rule."""

from typing import Optional
import numpy as np

from .cell import Cell


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply the transition rule to a single cell.

    Args:
        cell: Current state of the cell
        live_neighbors: Number of living neighbors (0-8)

    Returns:
        State of the cell in the next generation
    """
    if cell == Cell.ALIVE:
        if live_neighbors < 2 or live_neighbors > 3:
            return Cell.DEAD
        return Cell.ALIVE
    if live_neighbors == 3:
        return Cell.ALIVE
    return Cell.DEAD


def successor(cells: np.ndarray, counts: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """Apply the transition rule to every cell at once.

    Args:
        cells: Current cell states (0 or 1)
        counts: Living neighbor counts, same shape as ``cells``
        out: Optional array to write the next generation into

    Returns:
        Array with the next generation's cell states
    """
    if out is None:
        out = np.empty_like(cells)

    alive = cells > 0

    # Survival: live cell with 2 or 3 neighbors
    survive = alive & ((counts == 2) | (counts == 3))

    # Birth: dead cell with exactly 3 neighbors
    birth = ~alive & (counts == 3)

    np.copyto(out, (survive | birth).astype(out.dtype))
    return out
