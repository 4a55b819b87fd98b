"""CLI application entry point for polyedit.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from polyedit import __version__
from polyedit.cli.output import (
    SYM_DOT,
    console,
    print_classification,
    print_error,
    print_header,
    print_mesh_summary,
    print_no_orientation,
    print_orientation,
    print_polygon_info,
    print_saved,
    print_step,
    print_success,
)
from polyedit.config import GeometryConfig, PolyEditSettings, ViewportConfig
from polyedit.core import (
    DEFAULT_EPSILON,
    EditorSession,
    classify_vertices,
    total_signed_area2,
    winding_direction,
)
from polyedit.domain import EventKind, Point
from polyedit.exceptions import GeometryError, InputError, PolyEditError
from polyedit.io import MeshWriter, PointReader, read_event_script
from polyedit.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="polyedit",
    help="Classify polygons and build half-edge boundary meshes from clicked points.",
    add_completion=False,
    no_args_is_help=True,
)

EpsilonOption = Annotated[
    float,
    typer.Option(
        "--epsilon",
        "-e",
        help="Collinearity tolerance on doubled areas (0 = exact)",
        min=0.0,
        max=1e-3,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyedit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
            help="File logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "DEBUG",
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
    """Polygon orientation, ear classification and half-edge mesh building."""
    configure_logging(log_file=log_file, file_level=log_level, quiet=True)


def _load_points(points_file: Path) -> list[Point]:
    reader = PointReader(points_file)
    reader.load()
    return reader.points


@app.command()
def classify(
    points_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON or text points file (NDC coordinates)",
            show_default=False,
        ),
    ],
    epsilon: EpsilonOption = DEFAULT_EPSILON,
) -> None:
    """Report orientation and per-vertex convex/reflex and ear classification.

    Vertices are classified in file order. Convexity assumes a
    counterclockwise polygon, so a clockwise file reports every flag
    inverted.
    """
    try:
        points = _load_points(points_file)
    except InputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_header(__version__)
    print_step("Loading polygon")
    print_polygon_info(str(points_file), len(points))

    print_step("Orientation")
    if len(points) < 3:
        print_no_orientation(len(points))
    else:
        print_orientation(winding_direction(points), total_signed_area2(points))

    print_step("Vertices")
    print_classification(classify_vertices(points, epsilon))


@app.command()
def build(
    points_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON or text points file (NDC coordinates)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the mesh and its tables as JSON",
        ),
    ] = None,
    save: Annotated[
        bool,
        typer.Option(
            "--save",
            help="Write the mesh next to the input as {name}-mesh.json",
        ),
    ] = False,
    check_simple: Annotated[
        bool,
        typer.Option(
            "--check-simple",
            help="Reject self-intersecting polygons",
        ),
    ] = False,
    epsilon: EpsilonOption = DEFAULT_EPSILON,
) -> None:
    """Build the half-edge boundary mesh of a polygon and fill its tables."""
    try:
        points = _load_points(points_file)
    except InputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_header(__version__)
    print_step("Loading polygon")
    print_polygon_info(str(points_file), len(points))

    settings = PolyEditSettings(
        geometry=GeometryConfig(collinear_epsilon=epsilon, check_simple=check_simple),
    )
    session = EditorSession(settings)
    for point in points:
        session.add_point(point)

    print_step("Building mesh")
    try:
        tables = session.build()
    except GeometryError as e:
        print_error(f"Could not build mesh: {e}")
        raise typer.Exit(code=1)

    mesh = session.mesh
    if mesh.winding is not None:
        print_orientation(mesh.winding, total_signed_area2(points))
    print_mesh_summary(mesh, tables)

    if save and output is None:
        output = MeshWriter.get_mesh_path(points_file)
    if output is not None:
        try:
            MeshWriter(mesh, tables).save(output)
        except OSError as e:
            print_error(f"Could not write mesh: {e}")
            raise typer.Exit(code=1)
        print_saved(str(output))
    else:
        print_success("Mesh built")


@app.command()
def replay(
    script: Annotated[
        Path,
        typer.Argument(
            help="Event script (click X Y | build | clear | quit per line)",
            show_default=False,
        ),
    ],
    width: Annotated[
        int,
        typer.Option("--width", help="Viewport width in pixels", min=2),
    ] = 800,
    height: Annotated[
        int,
        typer.Option("--height", help="Viewport height in pixels", min=2),
    ] = 600,
    epsilon: EpsilonOption = DEFAULT_EPSILON,
) -> None:
    """Replay recorded editor actions against a fresh session."""
    try:
        events = read_event_script(script)
    except InputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    settings = PolyEditSettings(
        geometry=GeometryConfig(collinear_epsilon=epsilon),
        viewport=ViewportConfig(width=width, height=height),
    )
    session = EditorSession(settings)

    print_header(__version__)
    for event in events:
        try:
            tables = session.handle(event)
        except GeometryError as e:
            print_error(f"line {event.line_no}: {e}")
            continue
        except PolyEditError as e:
            print_error(str(e))
            raise typer.Exit(code=1)

        if event.kind is EventKind.BUILD and tables is not None:
            print_step(f"Build at line {event.line_no}")
            mesh = session.mesh
            if mesh.winding is not None:
                print_orientation(mesh.winding, total_signed_area2(list(session.points)))
            print_mesh_summary(mesh, tables)
        elif event.kind is EventKind.CLEAR:
            print_step(f"Cleared at line {event.line_no}")
        elif event.kind is EventKind.QUIT:
            break

    stats = session.build_logger.stats
    console.print(
        f"\n  {stats.points_added} points {SYM_DOT} {stats.builds} builds {SYM_DOT} "
        f"{stats.failed_builds} failed"
    )
    print_success("Replay complete")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
