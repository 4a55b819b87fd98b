"""Half-edge mesh records.

Half-edges are stored in an index-addressed arena. Every reference between
records (origin vertex, twin, next, incident face) is an integer index, so a
mesh can be cleared and rebuilt without leaving dangling records behind.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from polyedit.domain.point import Point, WindingDirection


@dataclass(frozen=True, slots=True)
class Color:
    """RGB color tag with components in [0, 1]."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


WHITE = Color(1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Vertex:
    """A polygon point with a color tag and an identity key.

    Attributes:
        point: Position in normalized device space
        key: Index of the point in the polygon at build time
        color: Display color (white by default)
    """

    point: Point
    key: int
    color: Color = WHITE

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            **self.point.to_dict(),
            "color": list(self.color.to_tuple()),
        }


@dataclass(frozen=True, slots=True)
class HalfEdge:
    """A directed edge record in a HalfEdgeArena.

    Attributes:
        index: Position of this half-edge in its arena
        origin: Key of the vertex this half-edge leaves from
        twin: Arena index of the oppositely-directed half-edge
    """

    index: int
    origin: int
    twin: int


class HalfEdgeArena:
    """Contiguous owned storage for half-edges.

    Half-edges are only ever allocated in twin pairs, so the arena always
    holds an even number of records and ``twin`` is an involution.
    """

    def __init__(self) -> None:
        self._edges: list[HalfEdge] = []

    def allocate_pair(self, origin: int, dest: int) -> tuple[HalfEdge, HalfEdge]:
        """Allocate a twin pair of half-edges.

        Args:
            origin: Vertex key the first half-edge leaves from
            dest: Vertex key the second half-edge leaves from

        Returns:
            Tuple of (forward, twin) half-edges
        """
        base = len(self._edges)
        forward = HalfEdge(index=base, origin=origin, twin=base + 1)
        backward = HalfEdge(index=base + 1, origin=dest, twin=base)
        self._edges.append(forward)
        self._edges.append(backward)
        return forward, backward

    def twin(self, edge: HalfEdge) -> HalfEdge:
        return self._edges[edge.twin]

    def destination(self, edge: HalfEdge) -> int:
        """Vertex key the half-edge points to (origin of its twin)."""
        return self._edges[edge.twin].origin

    def clear(self) -> None:
        """Drop every half-edge and release the storage."""
        self._edges = []

    def __getitem__(self, index: int) -> HalfEdge:
        return self._edges[index]

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[HalfEdge]:
        return iter(self._edges)


@dataclass
class InitialMesh:
    """Boundary mesh of a polygon as produced by the initial mesh builder.

    Attributes:
        vertices: One vertex per polygon point, indexed by key
        half_edges: Arena holding two half-edges per polygon edge
        adjacency: Symmetric map from vertex key to neighbour keys
        visited: One flag per half-edge, False until a face walk consumes it
        winding: Orientation of the input point order
    """

    vertices: list[Vertex] = field(default_factory=list)
    half_edges: HalfEdgeArena = field(default_factory=HalfEdgeArena)
    adjacency: dict[int, set[int]] = field(default_factory=dict)
    visited: list[bool] = field(default_factory=list)
    winding: WindingDirection | None = None

    @property
    def edge_count(self) -> int:
        return len(self.half_edges) // 2

    def is_complete(self) -> bool:
        """Check that every polygon edge has its twin pair and visited flags.

        Returns:
            True if the mesh holds 2n half-edges for n >= 3 vertices
        """
        n = len(self.vertices)
        return (
            n >= 3
            and len(self.half_edges) == 2 * n
            and len(self.visited) == len(self.half_edges)
        )

    def origin(self, edge: HalfEdge) -> Vertex:
        return self.vertices[edge.origin]

    def destination(self, edge: HalfEdge) -> Vertex:
        return self.vertices[self.half_edges.destination(edge)]

    def clear(self) -> None:
        """Reset every buffer for a rebuild."""
        self.vertices.clear()
        self.half_edges.clear()
        self.adjacency.clear()
        self.visited.clear()
        self.winding = None


@dataclass(frozen=True, slots=True)
class Face:
    """A face of the planar subdivision.

    Attributes:
        key: Face index (0 is always the unbounded face)
        bounded: False only for the unbounded face
    """

    key: int
    bounded: bool


@dataclass(frozen=True, slots=True)
class VertexTableEntry:
    """Vertex table row: a vertex and one of its outgoing half-edges."""

    vertex: int
    incident_edge: int

    def to_dict(self) -> dict[str, Any]:
        return {"vertex": self.vertex, "incident_edge": self.incident_edge}


@dataclass(frozen=True, slots=True)
class HalfEdgeTableEntry:
    """Half-edge table row.

    Attributes:
        half_edge: Arena index of the half-edge
        origin: Origin vertex key
        twin: Arena index of the twin
        next: Arena index of the next half-edge around the incident face
        prev: Arena index of the previous half-edge around the incident face
        incident_face: Key of the face on the left of the half-edge
    """

    half_edge: int
    origin: int
    twin: int
    next: int
    prev: int
    incident_face: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "half_edge": self.half_edge,
            "origin": self.origin,
            "twin": self.twin,
            "next": self.next,
            "prev": self.prev,
            "incident_face": self.incident_face,
        }


@dataclass
class FaceTableEntry:
    """Face table row.

    Attributes:
        face: Face key
        outer_component: A half-edge on the outer boundary (None for the
            unbounded face)
        inner_components: One half-edge per hole boundary
    """

    face: int
    outer_component: int | None = None
    inner_components: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "face": self.face,
            "outer_component": self.outer_component,
            "inner_components": list(self.inner_components),
        }
