"""Typer CLI application for previewing label layouts."""

import logging
import sys
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from termcells.core.cell import Cell
from termcells.core.color import Color
from termcells.core.grid import CellGrid
from termcells.core.label import Align, LabelParams
from termcells.core.rect import Rect
from termcells.render.terminal import TerminalRenderer

WidthOption = Annotated[int, typer.Option("--width", "-w", min=0, help="Label width in cells")]
AlignOption = Annotated[Align, typer.Option("--align", "-a", case_sensitive=False, help="Text alignment")]
EllipsisOption = Annotated[str, typer.Option("--ellipsis", "-e", help="Glyph marking truncated text")]
CenterEllipsisOption = Annotated[
    bool, typer.Option("--center-ellipsis", "-c", help="Put one ellipsis in the middle, keep head and tail")
]
FgOption = Annotated[str, typer.Option("--fg", help="Foreground color (name, index, #rrggbb)")]
BgOption = Annotated[str, typer.Option("--bg", help="Background color (name, index, #rrggbb)")]


def _configure_logging(verbose: bool) -> None:
    # Configure the package logger only; the root logger belongs to the host.
    log = logging.getLogger("termcells")
    for handler in list(log.handlers):
        if isinstance(handler, RichHandler):
            log.removeHandler(handler)
    if verbose:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termcells",
        help="Preview clipped, aligned, truncated labels in a terminal cell grid.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def build_params(align: Align, ellipsis: str, center_ellipsis: bool, fg: str, bg: str) -> LabelParams:
        try:
            return LabelParams(
                fg=Color.parse(fg),
                bg=Color.parse(bg),
                align=align,
                ellipsis=ellipsis,
                center_ellipsis=center_ellipsis,
            )
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    def render_label(width: int, params: LabelParams, text: str) -> CellGrid:
        grid = CellGrid(width, 1)
        grid.draw_label(grid.bounds(), params, text)
        return grid

    @app.callback()
    def main_options(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ) -> None:
        _configure_logging(verbose)

    @app.command()
    def label(
        text: Annotated[str, typer.Argument(help="Label text")],
        width: WidthOption = 20,
        align: AlignOption = Align.LEFT,
        ellipsis: EllipsisOption = '…',
        center_ellipsis: CenterEllipsisOption = False,
        fg: FgOption = "default",
        bg: BgOption = "default",
        frame: Annotated[bool, typer.Option("--frame", "-f", help="Mark the label edges")] = False,
    ) -> None:
        """Draw TEXT as a label WIDTH cells wide and print it."""
        params = build_params(align, ellipsis, center_ellipsis, fg, bg)
        grid = render_label(width, params, text)
        renderer = TerminalRenderer(reset_at_end=False, trim_trailing=not frame)
        row = renderer.render_row(grid.row(0)) if width else ""
        print(f"│{row}│" if frame else row)

    @app.command()
    def cells(
        text: Annotated[str, typer.Argument(help="Label text")],
        width: WidthOption = 20,
        align: AlignOption = Align.LEFT,
        ellipsis: EllipsisOption = '…',
        center_ellipsis: CenterEllipsisOption = False,
    ) -> None:
        """Show the label layout as a table, one column per cell."""
        params = build_params(align, ellipsis, center_ellipsis, "default", "default")
        grid = render_label(width, params, text)

        table = Table(title=f"{width} cells, {params.align.value}"
                      + (", centered ellipsis" if center_ellipsis else ""))
        for x in range(width):
            table.add_column(str(x), justify="center")
        if width:
            table.add_row(*(cell.char for cell in grid.row(0)))
        console.print(table)

    @app.command()
    def screen(
        text: Annotated[str, typer.Argument(help="Label text")],
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=0, help="Label width (default: full screen)")] = None,
        ellipsis: EllipsisOption = '…',
        fg: FgOption = "default",
        bg: BgOption = "default",
    ) -> None:
        """Draw TEXT in every alignment on the live terminal screen."""
        from termcells.backend.terminal import TerminalBackend

        base = build_params(Align.LEFT, ellipsis, False, fg, bg)
        variants = [
            LabelParams(base.fg, base.bg, align, base.ellipsis, centered)
            for align in Align
            for centered in (False, True)
        ]

        backend = TerminalBackend()
        with backend.session():
            grid = CellGrid.bind(backend)
            grid.fill(grid.bounds(), Cell(' ', base.fg, base.bg))
            label_width = grid.width if width is None else width
            for y, params in enumerate(variants):
                grid.draw_label(Rect(0, y * 2, label_width, 1), params, text)
            grid.draw_label(
                Rect(0, grid.height - 1, grid.width, 1),
                LabelParams(align=Align.RIGHT),
                "press Enter to exit",
            )
            backend.flush()
            sys.stdin.readline()

    return app
