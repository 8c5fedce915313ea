"""Game of Life simulation driver."""

from typing import Deque, Dict, Tuple
from collections import deque
import logging

from .grid import Grid

logger = logging.getLogger(__name__)


class GameOfLife:
    """Drives a grid generation by generation and tracks its progress.

    Implements the classic rules (through ``Grid.advance``):
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, grid: Grid, history_size: int = 1000) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The grid to simulate
            history_size: Number of recent states kept for cycle detection

        Raises:
            ValueError: If history_size is less than 1
        """
        if history_size < 1:
            raise ValueError(f"history_size must be at least 1, got {history_size}")

        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[bytes] = deque(maxlen=history_size)
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._population_history.append(self.population)
        self._remember_state()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def changed(self) -> bool:
        """Whether the last generation altered any cell."""
        return self.grid.changed

    @property
    def cycle_detected(self) -> bool:
        """Whether a repeating sequence of states (period 2 or more) was seen."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.advance()
        self._generation += 1
        self._population_history.append(self.population)

        if self.grid.changed and not self._cycle_detected:
            self._check_for_cycles()

    def _remember_state(self) -> None:
        state = self.grid.cells.tobytes()
        # States in the window are unique until a cycle is found
        if len(self._state_history) == self._state_history.maxlen:
            self._seen_states.pop(self._state_history[0], None)
        self._state_history.append(state)
        self._seen_states[state] = self._generation

    def _check_for_cycles(self) -> None:
        """Check if the current state has been seen before."""
        state = self.grid.cells.tobytes()
        first_occurrence = self._seen_states.get(state)
        if first_occurrence is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            logger.debug(
                "Cycle of length %d found at generation %d", self._cycle_length, self._generation
            )
            return

        self._remember_state()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it dies out, stops changing or cycles.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'extinction', 'stable', 'cycle', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self.population == 0:
                return self._generation, "extinction"

            if not self.grid.changed:
                return self._generation, "stable"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        return {
            "generation": self._generation,
            "population": self.population,
            "population_density": self.population / (self.grid.width * self.grid.height),
            "population_history": list(self._population_history),
            "grid_size": self.grid.shape,
            "changed": self.grid.changed,
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
        }
