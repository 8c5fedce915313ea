"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import Optional, Tuple, Callable
import numpy as np

from ..config import Config
from ..core.grid import Grid
from ..core.game import GameOfLife
from ..core.timing import Ticker

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, output: Callable[[str], None] = print) -> None:
        """Initialize CLI interface.

        Args:
            output: Function used to write lines of output
        """
        self.output = output

    def run_simulation(
        self,
        width: int,
        height: int,
        max_generations: int,
        seed: Optional[int] = None,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a simulation until it settles or hits the generation limit.

        Args:
            width: Grid width
            height: Grid height
            max_generations: Maximum generations to run
            seed: Random seed for the initial grid
            verbose: Print progress updates
            show_grid: Show initial and final grid states

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        grid = Grid(width, height, rng=np.random.default_rng(seed))
        game = GameOfLife(grid)
        initial_population = game.population

        if verbose:
            self.output(f"Initialized {width}x{height} grid (seed: {seed})")
            self.output(f"Initial population: {initial_population} cells")

        if show_grid:
            self.output("\nInitial grid:")
            self.output(format_grid(grid))

        if verbose:
            self.output(f"\nRunning simulation (max {max_generations} generations)...")

        start_time = time.time()
        final_generation, reason = game.run_until_stable(max_generations)
        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        if show_grid:
            self.output(f"\nFinal grid (generation {final_generation}):")
            self.output(format_grid(grid))

        logger.info("Simulation finished after %d generations: %s", final_generation, reason)
        return final_generation, reason, stats

    def watch(
        self,
        width: int,
        height: int,
        generations: int,
        interval: float,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Animate a simulation in the terminal.

        A new generation is printed every ``interval`` seconds until the grid
        stops changing or ``generations`` have run.

        Args:
            width: Grid width
            height: Grid height
            generations: Maximum generations to show
            interval: Seconds between generations
            seed: Random seed for the initial grid
            clock: Function returning the current time in seconds
            sleep: Function used to wait between polls

        Returns:
            Number of generations shown after the initial one
        """
        game = GameOfLife(Grid(width, height, rng=np.random.default_rng(seed)))
        ticker = Ticker(interval, clock=clock)

        self._print_frame(game)
        while game.generation < generations and game.changed:
            if not ticker.due():
                sleep(min(interval, 0.01))
                continue
            game.step()
            self._print_frame(game)

        return game.generation

    def _print_frame(self, game: GameOfLife) -> None:
        self.output(format_grid(game.grid))
        self.output(f"-- generation {game.generation}, population {game.population} --")


def format_grid(grid: Grid) -> str:
    """Format a grid for terminal display, framed so blank rows stay visible."""
    border = "+" + "-" * grid.width + "+"
    rows = [f"|{line}|" for line in str(grid).split("\n")]
    return "\n".join([border] + rows + [border])


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a bounded grid from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a random 40x20 grid until it settles
  lifegrid-cli --width 40 --height 20

  # Reproducible run showing the first and last generations
  lifegrid-cli -W 30 -H 15 --seed 7 --show-grid

  # Animate in the terminal, one generation every 0.1 seconds
  lifegrid-cli --watch --interval 0.1 -m 200
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=40, help="Grid width (default: 40)")

    parser.add_argument("-H", "--height", type=int, default=20, help="Grid height (default: 20)")

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=10000,
        help="Maximum generations to simulate (default: 10000)",
    )

    parser.add_argument("-s", "--seed", type=int, help="Random seed for the initial grid")

    parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help="Animate the simulation in the terminal",
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=Config.tick_interval,
        help=f"Seconds between generations in watch mode (default: {Config.tick_interval})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason from GameOfLife.run_until_stable
        stats: Statistics dictionary

    Returns:
        Formatted reason string
    """
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "stable":
        return "Stable - the grid stopped changing"
    elif reason == "cycle":
        cycle_len = stats.get("cycle_length", 0)
        cycle_start = stats.get("cycle_start_generation", 0)
        return f"Cycle detected - length {cycle_len}, started at generation {cycle_start}"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")
    else:
        print(
            "Population: {} -> {}, "
            "Duration: {:.3f}s".format(
                stats["initial_population"], stats["population"], stats.get("duration_seconds", 0)
            )
        )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not validate_args(args):
        return 1

    cli = CLIGameOfLife()

    try:
        if args.watch:
            shown = cli.watch(
                width=args.width,
                height=args.height,
                generations=args.max_generations,
                interval=args.interval,
                seed=args.seed,
            )
            print(f"\nShowed {shown} generations")
            return 0

        final_generation, reason, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            max_generations=args.max_generations,
            seed=args.seed,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )

        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
