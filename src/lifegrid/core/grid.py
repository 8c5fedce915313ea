"""Grid data structure for the Game of Life."""

from typing import Iterable, Optional, Tuple
import logging
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell
from .rules import successor

logger = logging.getLogger(__name__)


class Grid:
    """A finite 2D grid of cells with bounded (non-wrapping) edges.

    Cells are stored row-major in a ``(height, width)`` array. Neighbors that
    fall outside the grid are left out of the count, so corner cells have at
    most 3 neighbors and edge cells at most 5.

    The grid is double buffered: ``advance`` computes the next generation into
    a back buffer and swaps it in, so a reader never sees a half-updated grid.
    """

    def __init__(self, width: int, height: int, rng: Optional[np.random.Generator] = None) -> None:
        """Create a grid with every cell set by a fair coin flip.

        Args:
            width: Number of columns
            height: Number of rows
            rng: Random generator used for seeding (a fresh one if None)
        """
        if rng is None:
            rng = np.random.default_rng()
        self._setup(width, height, rng.integers(0, 2, size=(height, width), dtype=np.int8))

        logger.debug("Created %dx%d grid with %d living cells", width, height, self.population)

    def _setup(self, width: int, height: int, cells: np.ndarray) -> None:
        self.width = width
        self.height = height
        self._cells = cells
        self._next_cells = np.zeros_like(cells)
        self.changed = True

        # Set single-threaded, the grids are small
        torch.set_num_threads(1)

        # Reused input tensor and neighbor kernel for convolution
        self._torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable) -> "Grid":
        """Create a grid from explicit cell states.

        Args:
            width: Number of columns
            height: Number of rows
            cells: Row-major sequence of ``width * height`` states, or a
                nested list of ``height`` rows. Any truthy value is alive.

        Returns:
            New grid holding the given cells

        Raises:
            ValueError: If the data doesn't match the dimensions
        """
        arr = np.asarray(list(cells))
        if arr.ndim == 1:
            if arr.size != width * height:
                raise ValueError(f"Expected {width * height} cells for {width}x{height} grid, got {arr.size}")
            arr = arr.reshape(height, width)
        elif arr.shape != (height, width):
            raise ValueError(f"Data shape {arr.shape} doesn't match grid of {height} rows x {width} columns")

        grid = cls.__new__(cls)
        grid._setup(width, height, (arr != 0).astype(np.int8))
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Row-major, read-only flat view of the cells (index = row * width + col)."""
        view = self._cells.reshape(-1)
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def __len__(self) -> int:
        return self._cells.size

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            The cell's state

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Cell ({row}, {col}) out of bounds for {self.height}x{self.width} grid")

        return Cell(int(self._cells[row, col]))

    def neighbor_count(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Offsets that leave the grid are skipped; they neither wrap around
        nor count as dead cells.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for drow in (-1, 0, 1):
            for dcol in (-1, 0, 1):
                if drow == 0 and dcol == 0:
                    continue

                nrow, ncol = row + drow, col + dcol
                if 0 <= nrow < self.height and 0 <= ncol < self.width:
                    count += int(self._cells[nrow, ncol])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch convolution.

        Zero padding adds nothing for offsets outside the grid, which gives
        the same counts as ``neighbor_count``.

        Returns:
            ``(height, width)`` array with neighbor counts for each cell
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def advance(self) -> None:
        """Advance the grid by one generation.

        Sets ``changed`` to whether any cell differs from the previous
        generation.
        """
        counts = self.count_all_neighbors()
        successor(self._cells, counts, out=self._next_cells)

        self.changed = not np.array_equal(self._cells, self._next_cells)

        # Swap buffers
        self._cells, self._next_cells = self._next_cells, self._cells

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        grid = Grid.from_cells(self.width, self.height, self._cells.tolist())
        grid.changed = self.changed
        return grid

    def to_list(self) -> list:
        """Convert grid to a nested list of rows.

        Returns:
            List of ``height`` rows of 0/1 values
        """
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cells."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as ' '."""
        result = []
        for row in range(self.height):
            result.append("".join("*" if self._cells[row, col] else " " for col in range(self.width)))
        return "\n".join(result)
