#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

import numpy as np

from lifegrid import Grid, GameOfLife


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # Seeded so every run shows the same grid
    grid = Grid(20, 10, rng=np.random.default_rng(2024))
    game = GameOfLife(grid)

    print("Initial state:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    for _ in range(10):
        game.step()
        print(f"Generation {game.generation}:")
        print(grid)
        print(f"Population: {game.population}")

        if not game.changed:
            print("Grid is stable.")
            break

        print("-" * grid.width)

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
