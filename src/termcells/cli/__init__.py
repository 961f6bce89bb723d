"""Command line for previewing labels."""

from termcells.cli.app import create_app

__all__ = ["create_app"]
