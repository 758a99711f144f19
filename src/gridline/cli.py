from __future__ import annotations

import pathlib
import warnings

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from gridline._config import config_file, get_raster_settings
from gridline.geometry import Line, Vector2
from gridline.render import render_line
from gridline.validation import DegenerateLineError, ValidationError

console = Console()
app = typer.Typer(help="Inspect and rasterize 2D line segments.")

MAX_GRID_SPAN = 8192
MAX_CANVAS_SIDE = 8192


def _make_line(x0: float, y0: float, x1: float, y1: float) -> Line:
    return Line(Vector2(x0, y0), Vector2(x1, y1))


def _fmt(vec: Vector2) -> str:
    return f"({vec.x:.4g}, {vec.y:.4g})"


def _check_extent(line: Line, limit: int, scale: int = 1) -> None:
    """Reject segments whose grid walk or canvas would exceed ``limit`` cells."""

    span = max(abs(line.end.x - line.start.x), abs(line.end.y - line.start.y))
    if (span + 1) * scale > limit:
        raise typer.BadParameter(f"Segment spans {span:.6g} cells; the limit is {limit // scale}.")


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


@app.command()
def raster(
    x0: float = typer.Argument(..., help="Start x."),
    y0: float = typer.Argument(..., help="Start y."),
    x1: float = typer.Argument(..., help="End x."),
    y1: float = typer.Argument(..., help="End y."),
    rounding: str | None = typer.Option(None, help="Grid snapping: nearest, floor or truncate."),
) -> None:
    """
    Print the Bresenham grid points between two endpoints.
    """

    settings = get_raster_settings()
    line = _make_line(x0, y0, x1, y1)
    _check_extent(line, MAX_GRID_SPAN)
    try:
        points = line.rasterize(rounding or settings.rounding)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    table = Table(title=f"{_fmt(line.start)} → {_fmt(line.end)}")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for idx, point in enumerate(points):
        table.add_row(str(idx), str(point.x), str(point.y))
    console.print(table)
    console.print(f"[green]{len(points)} points[/green]")


@app.command()
def info(
    x0: float = typer.Argument(..., help="Start x."),
    y0: float = typer.Argument(..., help="Start y."),
    x1: float = typer.Argument(..., help="End x."),
    y1: float = typer.Argument(..., help="End y."),
) -> None:
    """
    Show length, center, normal and bounding box of a segment.
    """

    settings = get_raster_settings()
    line = _make_line(x0, y0, x1, y1)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            normal = _fmt(line.get_normal(on_degenerate=settings.degenerate_normal))
        except DegenerateLineError:
            normal = "[yellow]undefined (zero-length line)[/yellow]"
    for warning in caught:
        console.print(f"[yellow]{warning.message}[/yellow]")

    bounds = line.bounds
    table = Table(show_header=False)
    table.add_row("length", f"{line.length():.6g}")
    table.add_row("center", _fmt(line.get_center()))
    table.add_row("normal", normal)
    table.add_row(
        "bounds",
        f"x={bounds.position.x:.4g} y={bounds.position.y:.4g} w={bounds.width:.4g} h={bounds.height:.4g}",
    )
    console.print(table)


@app.command()
def render(
    x0: float = typer.Argument(..., help="Start x."),
    y0: float = typer.Argument(..., help="Start y."),
    x1: float = typer.Argument(..., help="End x."),
    y1: float = typer.Argument(..., help="End y."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("line.png"),
        "--output",
        "-o",
        help="Path to the PNG file that will be produced.",
    ),
    scale: int = typer.Option(1, min=1, max=64, help="Pixel size of each grid point."),
    color: str = typer.Option("black", help="Point color (name or #rrggbb)."),
    rounding: str | None = typer.Option(None, help="Grid snapping: nearest, floor or truncate."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing image."),
) -> None:
    """
    Rasterize a segment and save the grid points as a PNG image.
    """

    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    settings = get_raster_settings()
    line = _make_line(x0, y0, x1, y1)
    _check_extent(line, MAX_CANVAS_SIDE, scale)
    try:
        image = render_line(line, rounding=rounding or settings.rounding, scale=scale, color=color)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    final_output.parent.mkdir(parents=True, exist_ok=True)
    try:
        image.save(final_output, format="PNG")
    except OSError as exc:  # pragma: no cover - filesystem failure
        raise typer.BadParameter(f"Failed to write image: {exc}") from exc

    console.print(
        Panel(
            f"Wrote {image.width}x{image.height} PNG to [green]{final_output}[/green].",
            title="Render complete",
            border_style="green",
        )
    )


@app.command()
def config() -> None:
    """
    Print the active settings and where they are read from.
    """

    settings = get_raster_settings()
    console.print(f"[magenta]Config file: {config_file()}[/magenta]")
    console.print(f"rounding: {settings.rounding}")
    console.print(f"degenerate_normal: {settings.degenerate_normal}")
