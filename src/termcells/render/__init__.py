"""Renderers for outputting a CellGrid to a terminal or as text."""

from termcells.render.terminal import TerminalRenderer
from termcells.render.text import TextRenderer

__all__ = ["TerminalRenderer", "TextRenderer"]
