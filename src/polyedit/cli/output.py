"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polyedit.core.tables import MeshTables
from polyedit.core.visibility import VertexClassification
from polyedit.domain import AngleClass, InitialMesh, WindingDirection

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
    console.print(f"\n[bold]Polyedit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon_info(path: str, point_count: int) -> None:
    """Print points file information.

    Args:
        path: Path to the points file
        point_count: Number of points read
    """
    # Text keeps Rich from reading brackets in the path as markup
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {point_count} points")


def print_orientation(winding: WindingDirection, area2: float) -> None:
    """Print polygon orientation and its doubled signed area.

    Args:
        winding: Classified winding direction
        area2: Doubled signed area from the orientation fan
    """
    label = "counterclockwise" if winding is WindingDirection.COUNTER_CLOCKWISE else "clockwise"
    console.print(f"  Orientation: [bold]{label}[/bold] {SYM_DOT} area {abs(area2) / 2:.4f}")


def print_no_orientation(point_count: int) -> None:
    """Print why a polygon with fewer than 3 points has no orientation."""
    console.print(f"  [dim]Orientation: undefined {SYM_DOT} {point_count} points, need 3[/dim]")


def print_classification(results: list[VertexClassification]) -> None:
    """Print per-vertex convexity and ear flags.

    Args:
        results: Classification for every vertex
    """
    if not results:
        console.print("  Too few points to classify")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Vertex", justify="right")
    table.add_column("Angle")
    table.add_column("Ear")

    for result in results:
        angle = "convex" if result.angle is AngleClass.CONVEX else "[yellow]reflex[/yellow]"
        if result.ear is None:
            ear = "-"
        else:
            ear = "[green]ear[/green]" if result.ear else "not ear"
        table.add_row(str(result.index), angle, ear)

    console.print(table)


def print_mesh_summary(mesh: InitialMesh, tables: MeshTables) -> None:
    """Print mesh counts.

    Args:
        mesh: Built initial mesh
        tables: Tables filled from the mesh
    """
    bounded = sum(1 for face in tables.faces if face.bounded)
    console.print(
        f"  {len(mesh.vertices)} vertices {SYM_DOT} {mesh.edge_count} edges {SYM_DOT} "
        f"{len(mesh.half_edges)} half-edges"
    )
    console.print(f"  {len(tables.faces)} faces ({bounded} bounded)")


def print_saved(output_path: str) -> None:
    """Print the mesh output file path."""
    line = Text(f"\n{SYM_OK} Mesh written to ", style="green")
    line.append(output_path, style="bold")
    console.print(line)


def print_success(message: str) -> None:
    """Print a completion message."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
