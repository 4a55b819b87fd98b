"""Editor session driving the polygon kernel from user actions.

A session owns everything one editing run needs: the in-progress point
list, the mesh builder with its buffers, and the tables of the last build.
Actions are handled synchronously, one at a time:

- click: map a pixel to NDC and append it to the polygon
- build: build the initial mesh and fill the three mesh tables
- clear: drop the points and the current mesh
- quit: close the session
"""

from polyedit.config import PolyEditSettings
from polyedit.core.mesh_builder import PolygonMeshBuilder
from polyedit.core.tables import MeshTables, fill_tables
from polyedit.core.visibility import VertexClassification, classify_vertices
from polyedit.domain import EditorEvent, EventKind, InitialMesh, Point
from polyedit.exceptions import GeometryError, SessionClosedError
from polyedit.utils import BuildLogger


class EditorSession:
    """Interactive polygon editing session.

    Example:
        session = EditorSession()
        for px, py in [(100, 500), (700, 500), (400, 100)]:
            session.click(px, py)
        tables = session.build()
    """

    def __init__(
        self,
        settings: PolyEditSettings | None = None,
        build_logger: BuildLogger | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            settings: Application settings (defaults used if None)
            build_logger: Event logger (a fresh one if None)
        """
        self.settings = settings or PolyEditSettings()
        self.build_logger = build_logger or BuildLogger()
        self._builder = PolygonMeshBuilder(self.settings.geometry)
        self._points: list[Point] = []
        self._tables: MeshTables | None = None
        self._closed = False

    @property
    def points(self) -> tuple[Point, ...]:
        """Points clicked so far, in order."""
        return tuple(self._points)

    @property
    def mesh(self) -> InitialMesh:
        """Mesh of the last build (empty if none)."""
        return self._builder.mesh

    @property
    def tables(self) -> MeshTables | None:
        """Tables of the last successful build."""
        return self._tables

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self, event: str) -> None:
        if self._closed:
            raise SessionClosedError(event)

    def click(self, px: int, py: int) -> Point:
        """Append the point under a pixel position.

        Args:
            px: Pixel column
            py: Pixel row

        Returns:
            The appended point in NDC
        """
        viewport = self.settings.viewport
        return self.add_point(Point.from_screen(px, py, viewport.width, viewport.height))

    def add_point(self, point: Point) -> Point:
        """Append a point already in NDC."""
        self._ensure_open(EventKind.CLICK.value)
        self._points.append(point)
        self.build_logger.log_point_added(len(self._points) - 1, point.x, point.y)
        return point

    def build(self) -> MeshTables:
        """Build the mesh for the current points and fill its tables.

        A rejected build drops the previous mesh and tables, so neither
        outlives the points it was built from.

        Returns:
            Tables of the new mesh

        Raises:
            DegeneratePolygonError: If fewer than 3 points were clicked
            SelfIntersectingPolygonError: If simplicity checking is enabled
                and the polygon crosses itself
        """
        self._ensure_open(EventKind.BUILD.value)
        try:
            mesh = self._builder.build(self._points)
        except GeometryError as e:
            self._builder.clear()
            self._tables = None
            self.build_logger.log_build_error(len(self._points), e)
            raise

        self._tables = fill_tables(mesh)
        self.build_logger.log_build_complete(mesh, len(self._tables.faces))
        return self._tables

    def clear(self) -> None:
        """Drop every point and the current mesh."""
        self._ensure_open(EventKind.CLEAR.value)
        discarded = len(self._points)
        self._points.clear()
        self._builder.clear()
        self._tables = None
        self.build_logger.log_cleared(discarded)

    def quit(self) -> None:
        """Close the session. Later actions raise SessionClosedError."""
        self._closed = True

    def classify(self) -> list[VertexClassification]:
        """Classify the current points as convex/reflex and ear/not ear."""
        results = classify_vertices(self._points, self.settings.geometry.collinear_epsilon)
        for result in results:
            self.build_logger.log_classification(result.index, result.angle.name, result.ear)
        return results

    def handle(self, event: EditorEvent) -> MeshTables | None:
        """Dispatch one editor event.

        Args:
            event: The action to perform

        Returns:
            Mesh tables for build events, None otherwise
        """
        if event.kind is EventKind.CLICK:
            self.click(event.x, event.y)
        elif event.kind is EventKind.BUILD:
            return self.build()
        elif event.kind is EventKind.CLEAR:
            self.clear()
        elif event.kind is EventKind.QUIT:
            self.quit()
        return None
