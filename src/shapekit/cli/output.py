"""Rich console output helpers for the CLI."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shapekit.domain import PointContainment, Polygon
from shapekit.domain.tolerance import format_number

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Shapekit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_file_info(path: str, polygon_count: int) -> None:
    # Text keeps paths with brackets from being read as markup
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {polygon_count:,} polygons")


def print_polygon_table(polygons: list[Polygon]) -> None:
    """Print one row of measurements per polygon.

    Args:
        polygons: Polygons to summarise
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("#", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Holes", justify="right")
    table.add_column("Vertices", justify="right")
    table.add_column("Bounds")

    for index, polygon in enumerate(polygons, start=1):
        vertices = sum(loop.segment_count for loop in polygon.loops)
        table.add_row(
            str(index),
            format_number(round(polygon.area, 9)),
            str(len(polygon.holes)),
            str(vertices),
            Text(str(polygon.bounding_box)),
        )
    console.print(table)


def print_containment(x: float, y: float, results: list[PointContainment]) -> None:
    """Print how a point relates to each polygon.

    Args:
        x: Point x coordinate
        y: Point y coordinate
        results: Classification against each polygon, in file order
    """
    point = f"({format_number(x)}, {format_number(y)})"
    for index, result in enumerate(results, start=1):
        style = "green" if result is PointContainment.INSIDE else "yellow"
        console.print(
            f"  {point} {SYM_DOT} polygon {index} {SYM_DOT} [{style}]{result.name}[/{style}]"
        )


def print_success(output_path: str, polygon_count: int, area: float) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        polygon_count: Number of polygons written
        area: Total area of the written polygons
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)
    console.print(f"  {polygon_count} polygons {SYM_DOT} area {format_number(round(area, 9))}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
