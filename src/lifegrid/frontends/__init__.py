"""Frontend interfaces for the Game of Life.

The Tkinter viewer lives in ``lifegrid.frontends.tkinter_gui`` and is not
imported here, so the CLI works on interpreters built without Tk.
"""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
