"""CLI application entry point for shapekit.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from shapekit import __version__
from shapekit.cli.output import (
    console,
    print_containment,
    print_error,
    print_file_info,
    print_header,
    print_polygon_table,
    print_step,
    print_success,
)
from shapekit.config import LOG_LEVELS, LoggingConfig, override_settings
from shapekit.core import clipping
from shapekit.domain import Point, Polygon
from shapekit.exceptions import ShapekitError, ShapeLoadError, ShapeSaveError
from shapekit.io import ShapeWriter, load_polygons, save_polygons
from shapekit.utils import configure_logging

BOOLEAN_OPERATIONS = ("union", "intersection", "difference")

# Create the Typer app
app = typer.Typer(
    name="shapekit",
    help="Measure polygons and run boolean operations on GeoJSON shape files.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapekit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Shapekit: 2D geometry on the command line."""
    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: " + ", ".join(LOG_LEVELS),
        )
        raise typer.Exit(code=1)

    configure_logging(logging_config, quiet=quiet)
    ctx.obj = {"quiet": quiet}


@contextmanager
def _geometry_settings(tolerance: float | None, invert_y: bool) -> Iterator[None]:
    changes: dict[str, Any] = {"invert_y": invert_y}
    if tolerance is not None:
        changes["absolute_tolerance"] = tolerance
    with override_settings(**changes):
        yield


def _require_file(path: Path) -> None:
    if not path.exists():
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not path.is_file():
        print_error(
            f"Input path is not a file: {path}",
            details="Please provide a path to a GeoJSON file.",
        )
        raise typer.Exit(code=1)


def _load(path: Path, quiet: bool) -> list[Polygon]:
    if not quiet:
        print_step(f"Loading {path.name}")
    polygons = load_polygons(path)
    if not quiet:
        print_file_info(str(path), len(polygons))
    return polygons


TOLERANCE_OPTION = typer.Option(
    "--tolerance",
    "-t",
    help="Absolute distance tolerance (default: 1e-6)",
    min=0.0,
)
INVERT_Y_OPTION = typer.Option(
    "--invert-y",
    help="Treat the y-axis as pointing down",
)


@app.command()
def inspect(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a GeoJSON file with Polygon or MultiPolygon geometry",
            show_default=False,
        ),
    ],
    point: Annotated[
        tuple[float, float] | None,
        typer.Option(
            "--point",
            "-p",
            help="Classify this point (X Y) against every polygon",
        ),
    ] = None,
    tolerance: Annotated[float | None, TOLERANCE_OPTION] = None,
    invert_y: Annotated[bool, INVERT_Y_OPTION] = False,
) -> None:
    """Print area, holes and bounds for every polygon in a file.

    Example:
        shapekit inspect shapes.json --point 1 0.5
    """
    quiet = ctx.obj["quiet"] if ctx.obj else False
    _require_file(input_file)

    if not quiet:
        print_header(__version__)

    try:
        with _geometry_settings(tolerance, invert_y):
            polygons = _load(input_file, quiet)
            print_polygon_table(polygons)

            if point is not None:
                if not quiet:
                    print_step("Point containment")
                target = Point(*point)
                print_containment(target.x, target.y, [p.contains(target) for p in polygons])

    except ShapeLoadError as e:
        print_error(f"Could not load shapes: {e.reason}")
        raise typer.Exit(code=1)
    except ShapekitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def boolean(
    ctx: typer.Context,
    operation: Annotated[
        str,
        typer.Argument(
            help="Operation to run (union|intersection|difference)",
            show_default=False,
        ),
    ],
    subject_file: Annotated[
        Path,
        typer.Argument(help="Polygons to operate on", show_default=False),
    ],
    clip_file: Annotated[
        Path,
        typer.Argument(help="Polygons to combine with the subject", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {subject}-{operation}.json)",
        ),
    ] = None,
    tolerance: Annotated[float | None, TOLERANCE_OPTION] = None,
    invert_y: Annotated[bool, INVERT_Y_OPTION] = False,
) -> None:
    """Combine the polygons of two files and save the result.

    Example:
        shapekit boolean difference plate.json holes.json -o cut.json
    """
    quiet = ctx.obj["quiet"] if ctx.obj else False

    operation = operation.lower()
    if operation not in BOOLEAN_OPERATIONS:
        print_error(
            f"Invalid operation: {operation}",
            details="Valid values: " + ", ".join(BOOLEAN_OPERATIONS),
        )
        raise typer.Exit(code=1)

    _require_file(subject_file)
    _require_file(clip_file)

    if not quiet:
        print_header(__version__)

    output_path = output or ShapeWriter.get_output_path(subject_file, operation)

    try:
        with _geometry_settings(tolerance, invert_y):
            subject = _load(subject_file, quiet)
            clip = _load(clip_file, quiet)

            if not quiet:
                print_step(f"Computing {operation}")
            result = getattr(clipping, operation)(subject, clip)

        save_polygons(result, output_path)

        if not quiet:
            print_success(
                output_path=str(output_path),
                polygon_count=len(result),
                area=sum(p.area for p in result),
            )

    except ShapeLoadError as e:
        print_error(f"Could not load shapes: {e.reason}")
        raise typer.Exit(code=1)
    except ShapeSaveError as e:
        print_error(f"Could not save shapes: {e.reason}")
        raise typer.Exit(code=1)
    except ShapekitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
