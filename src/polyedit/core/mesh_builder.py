"""Initial half-edge mesh construction.

This module turns the ordered points of a closed polygon into a boundary
mesh of twin half-edge pairs. The walk direction is chosen so that the
forward half-edges, read in creation order, trace the boundary
counter-clockwise whatever order the points were clicked in.

Key components:
- create_edge: Allocates one twin pair in a HalfEdgeArena
- PolygonMeshBuilder: Owns the mesh buffers and rebuilds them in place
- build_initial_mesh: One-shot convenience wrapper
"""

import structlog

from polyedit.config import GeometryConfig
from polyedit.core.geometry import DEFAULT_EPSILON, intersects
from polyedit.core.orientation import ORIENTATION_ANCHOR, is_counter_clockwise, require_polygon
from polyedit.domain import (
    WHITE,
    HalfEdge,
    HalfEdgeArena,
    InitialMesh,
    Point,
    Vertex,
    WindingDirection,
)
from polyedit.exceptions import SelfIntersectingPolygonError

logger = structlog.get_logger(__name__)


def create_edge(arena: HalfEdgeArena, origin: Vertex, dest: Vertex) -> tuple[HalfEdge, HalfEdge]:
    """Allocate the twin pair for the polygon edge origin -> dest.

    Args:
        arena: Storage receiving both half-edges
        origin: Vertex the first half-edge leaves from
        dest: Vertex the second half-edge leaves from

    Returns:
        Tuple of (forward, twin) half-edges
    """
    return arena.allocate_pair(origin.key, dest.key)


def edge_walk(n: int, counter_clockwise: bool) -> list[tuple[int, int]]:
    """List the polygon edges in the order the builder creates them.

    Counter-clockwise input is walked forwards, anything else backwards, and
    the closing edge always comes last.

    Args:
        n: Number of polygon vertices
        counter_clockwise: Orientation of the input order

    Returns:
        List of (origin, dest) vertex keys, one per polygon edge

    Examples:
        >>> edge_walk(4, True)
        [(0, 1), (1, 2), (2, 3), (3, 0)]
        >>> edge_walk(4, False)
        [(3, 2), (2, 1), (1, 0), (0, 3)]
    """
    if counter_clockwise:
        walk = [(j, j + 1) for j in range(n - 1)]
        walk.append((n - 1, 0))
    else:
        walk = [(j, j - 1) for j in range(n - 1, 0, -1)]
        walk.append((0, n - 1))
    return walk


def find_self_intersection(
    points: list[Point], epsilon: float = DEFAULT_EPSILON
) -> tuple[tuple[int, int], tuple[int, int]] | None:
    """Find a pair of non-adjacent polygon edges that intersect.

    O(n^2) pairwise scan.

    Args:
        points: Polygon points in order
        epsilon: Collinearity tolerance

    Returns:
        The two offending edges as (start, end) index pairs, or None if the
        polygon is simple
    """
    n = len(points)
    for i in range(n):
        a, b = points[i], points[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                # Edges (0, 1) and (n-1, 0) share vertex 0
                continue
            c, d = points[j], points[(j + 1) % n]
            if intersects(a, b, c, d, epsilon):
                return (i, (i + 1) % n), (j, (j + 1) % n)
    return None


class PolygonMeshBuilder:
    """Builds and owns the initial half-edge mesh of a polygon.

    All mesh buffers belong to this object. ``build`` clears them before
    filling, so repeated builds reuse the same storage instead of
    accumulating stale half-edges.

    Example:
        builder = PolygonMeshBuilder()
        mesh = builder.build(points)
        assert mesh.edge_count == len(points)
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Geometry settings (defaults used if None)
        """
        self.config = config or GeometryConfig()
        self._anchor = Point(*self.config.orientation_anchor)
        self._mesh = InitialMesh()

    @property
    def mesh(self) -> InitialMesh:
        """The most recently built mesh (empty before the first build)."""
        return self._mesh

    def clear(self) -> None:
        """Drop the current mesh."""
        self._mesh.clear()

    def build(self, points: list[Point]) -> InitialMesh:
        """Build the boundary mesh for a closed polygon.

        Args:
            points: Polygon points in click order

        Returns:
            The rebuilt mesh

        Raises:
            DegeneratePolygonError: If there are fewer than 3 points
            SelfIntersectingPolygonError: If check_simple is enabled and two
                non-adjacent edges intersect
        """
        require_polygon(points)
        if self.config.check_simple:
            hit = find_self_intersection(points, self.config.collinear_epsilon)
            if hit is not None:
                raise SelfIntersectingPolygonError(*hit)

        mesh = self._mesh
        mesh.clear()

        for key, point in enumerate(points):
            mesh.vertices.append(Vertex(point=point, key=key, color=WHITE))

        counter_clockwise = is_counter_clockwise(points, self._anchor)
        mesh.winding = (
            WindingDirection.COUNTER_CLOCKWISE if counter_clockwise else WindingDirection.CLOCKWISE
        )

        for origin, dest in edge_walk(len(points), counter_clockwise):
            self._add_edge(mesh.vertices[origin], mesh.vertices[dest])

        logger.debug(
            "Initial mesh built",
            vertices=len(mesh.vertices),
            half_edges=len(mesh.half_edges),
            winding=mesh.winding.name,
        )
        return mesh

    def _add_edge(self, origin: Vertex, dest: Vertex) -> None:
        mesh = self._mesh
        create_edge(mesh.half_edges, origin, dest)
        mesh.visited.extend((False, False))
        mesh.adjacency.setdefault(origin.key, set()).add(dest.key)
        mesh.adjacency.setdefault(dest.key, set()).add(origin.key)


def build_initial_mesh(
    points: list[Point],
    anchor: Point = ORIENTATION_ANCHOR,
    epsilon: float = DEFAULT_EPSILON,
    check_simple: bool = False,
) -> InitialMesh:
    """Build the boundary mesh for a closed polygon with a throwaway builder.

    Args:
        points: Polygon points in click order
        anchor: Orientation fan apex
        epsilon: Collinearity tolerance for the simplicity check
        check_simple: Reject self-intersecting polygons

    Returns:
        Newly built mesh
    """
    config = GeometryConfig(
        collinear_epsilon=epsilon,
        orientation_anchor=(anchor.x, anchor.y),
        check_simple=check_simple,
    )
    return PolygonMeshBuilder(config).build(points)
