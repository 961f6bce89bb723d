"""Terminal backend owning the screen surface grids can bind to."""

from termcells.backend.terminal import TerminalBackend, TerminalSize

__all__ = ["TerminalBackend", "TerminalSize"]
