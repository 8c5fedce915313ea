"""Configuration for the Game of Life frontends."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Config:
    """Presentation and timing settings."""

    # Grid derivation
    cell_size: int = 50

    # Timing
    tick_interval: float = 0.1
    frame_delay_ms: int = 16

    # Colors
    alive_color: str = "#E3B73D"
    dead_color: str = "#000000"
    border_color: str = "#8C3760"
    fps_color: str = "#FF0000"
    font: Tuple[str, int, str] = ("Arial", 28, "bold")

    # Window
    window_width: int = 1024
    window_height: int = 768
    fullscreen: bool = False

    def grid_size(self, pixel_width: int, pixel_height: int) -> Tuple[int, int]:
        """Get grid dimensions in cells for a viewport.

        Args:
            pixel_width: Viewport width in pixels
            pixel_height: Viewport height in pixels

        Returns:
            Tuple of (width, height), each at least 1
        """
        return (max(1, pixel_width // self.cell_size), max(1, pixel_height // self.cell_size))
