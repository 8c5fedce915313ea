"""Tkinter viewer for Conway's Game of Life."""

import argparse
import logging
import tkinter as tk
from typing import Dict, List, Optional, Tuple
import numpy as np

from ..config import Config
from ..core.grid import Grid
from ..core.game import GameOfLife
from ..core.timing import FrameCounter, Ticker

logger = logging.getLogger(__name__)


class TkinterLifeViewer:
    """Window that fills itself with a Game of Life grid.

    The grid size follows the window: every resize throws the old grid away
    and seeds a new random one. Generations advance on a fixed wall-clock
    tick, independent of the frame rate.
    """

    def __init__(
        self,
        master: tk.Tk,
        config: Optional[Config] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """Initialize the viewer.

        Args:
            master: Root Tkinter window
            config: Display and timing settings
            rng: Random generator used to seed each new grid
        """
        self.master = master
        self.config = config or Config()
        self.rng = rng

        self.master.title("Conway's Game of Life")
        self.master.configure(bg=self.config.dead_color)
        self.master.geometry(f"{self.config.window_width}x{self.config.window_height}")

        self.fullscreen = self.config.fullscreen
        if self.fullscreen:
            self.master.attributes("-fullscreen", True)

        self.canvas = tk.Canvas(
            self.master,
            width=self.config.window_width,
            height=self.config.window_height,
            bg=self.config.dead_color,
            highlightthickness=0,
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", self.on_resize)

        self.master.bind("<Escape>", self.on_escape)
        self.master.bind("<KeyPress-f>", self.toggle_fullscreen)
        self.master.bind("<KeyPress-F>", self.toggle_fullscreen)

        self.ticker = Ticker(self.config.tick_interval)
        self.frames = FrameCounter()

        # Canvas rectangles, indexed by (row, col)
        self.cell_objects: Dict[Tuple[int, int], int] = {}
        self.fps_text = self.canvas.create_text(
            20, 10, anchor="nw", text="FPS: 0.00", fill=self.config.fps_color, font=self.config.font
        )

        self.closed = False
        self._after_id: Optional[str] = None
        self._needs_redraw = True

        self.rebuild_grid(self.config.window_width, self.config.window_height)
        self.update_loop()

    def rebuild_grid(self, pixel_width: int, pixel_height: int) -> None:
        """Replace the grid with a freshly seeded one sized for the viewport."""
        self.cols, self.rows = self.config.grid_size(pixel_width, pixel_height)
        self.grid = Grid(self.cols, self.rows, rng=self.rng)
        self.game = GameOfLife(self.grid)

        for obj in self.cell_objects.values():
            self.canvas.delete(obj)
        self.cell_objects = {}
        self._needs_redraw = True

        # A new grid is shown for a full tick before its first step
        self.ticker.reset()

        logger.debug("Rebuilt grid at %dx%d for %dx%d viewport", self.cols, self.rows, pixel_width, pixel_height)

    def on_resize(self, event: tk.Event) -> None:
        """Handle a change of canvas size.

        The grid is only rebuilt when the new size gives different cell
        dimensions.
        """
        if self.config.grid_size(event.width, event.height) == (self.cols, self.rows):
            return

        self.rebuild_grid(event.width, event.height)

    def on_escape(self, event: Optional[tk.Event] = None) -> None:
        """Handle the Escape key."""
        self.close()

    def toggle_fullscreen(self, event: Optional[tk.Event] = None) -> None:
        """Toggle borderless fullscreen."""
        self.fullscreen = not self.fullscreen
        self.master.attributes("-fullscreen", self.fullscreen)

    def close(self) -> None:
        """Stop the update loop and destroy the window."""
        if self.closed:
            return
        self.closed = True
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None
        self.master.destroy()

    def _cell_color(self, row: int, col: int) -> str:
        if self.grid.get_cell(row, col).alive:
            return self.config.alive_color
        return self.config.dead_color

    def draw_cell(self, row: int, col: int) -> None:
        """Draw or update a single cell on the canvas."""
        cell_key = (row, col)
        color = self._cell_color(row, col)

        if cell_key in self.cell_objects:
            self.canvas.itemconfig(self.cell_objects[cell_key], fill=color)
        else:
            size = self.config.cell_size
            x1 = col * size
            y1 = row * size
            self.cell_objects[cell_key] = self.canvas.create_rectangle(
                x1, y1, x1 + size, y1 + size, fill=color, outline=self.config.border_color
            )

    def redraw_all_cells(self) -> None:
        """Redraw every cell and keep the FPS overlay on top."""
        for row in range(self.rows):
            for col in range(self.cols):
                self.draw_cell(row, col)
        self.canvas.tag_raise(self.fps_text)

    def alive_cells(self) -> List[Tuple[int, int]]:
        """Get (row, col) of every cell currently drawn as alive."""
        return [
            key
            for key, obj in self.cell_objects.items()
            if self.canvas.itemcget(obj, "fill").upper() == self.config.alive_color.upper()
        ]

    def update_loop(self) -> None:
        """Main update loop, run once per frame."""
        if self.ticker.due():
            self.game.step()
            if self.grid.changed:
                self._needs_redraw = True

        # Skip redrawing a grid that has settled
        if self._needs_redraw:
            self.redraw_all_cells()
            self._needs_redraw = False

        self.frames.frame()
        self.canvas.itemconfig(self.fps_text, text=f"FPS: {self.frames.fps:.2f}")

        self._after_id = self.master.after(self.config.frame_delay_ms, self.update_loop)


def create_parser() -> argparse.ArgumentParser:
    """Create the viewer's argument parser."""
    defaults = Config()
    parser = argparse.ArgumentParser(description="Show Conway's Game of Life in a window")
    parser.add_argument(
        "--cell-size",
        type=int,
        default=defaults.cell_size,
        help=f"Cell size in pixels (default: {defaults.cell_size})",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=defaults.tick_interval,
        help=f"Seconds between generations (default: {defaults.tick_interval})",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible grids")
    parser.add_argument("--fullscreen", action="store_true", help="Start in fullscreen")
    parser.add_argument("--test", action="store_true", help="Run for 3 seconds and exit")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the Tkinter viewer."""
    args = create_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.cell_size <= 0:
        raise SystemExit("Error: cell size must be positive")
    if args.interval < 0:
        raise SystemExit("Error: interval must be non-negative")

    config = Config(cell_size=args.cell_size, tick_interval=args.interval, fullscreen=args.fullscreen)
    rng = np.random.default_rng(args.seed)

    root = tk.Tk()
    app = TkinterLifeViewer(root, config=config, rng=rng)

    if args.test:
        print("Running in test mode...")

        def auto_exit() -> None:
            print(f"Test completed. Ran {app.game.generation} generations at {app.frames.fps:.1f} FPS.")
            app.close()

        root.after(3000, auto_exit)

    root.mainloop()


if __name__ == "__main__":
    main()
