"""Domain models for polyedit.

This module contains the core domain models representing clicked points,
mesh vertices, half-edges and the tables derived from them. All models are
designed to be:

- Immutable where possible (using frozen dataclasses)
- Index-addressed, so a mesh can be cleared and rebuilt in place
- Independent of any windowing or rendering layer

Key classes:
- Point: A coordinate in normalized device space
- Vertex: A point with a color tag and identity key
- HalfEdge / HalfEdgeArena: Directed edge records and their owning storage
- InitialMesh: Vertices, half-edges, adjacency and visited flags of one build
- Face and the vertex/half-edge/face table rows
"""

from polyedit.domain.events import EditorEvent, EventKind
from polyedit.domain.mesh import (
    WHITE,
    Color,
    Face,
    FaceTableEntry,
    HalfEdge,
    HalfEdgeArena,
    HalfEdgeTableEntry,
    InitialMesh,
    Vertex,
    VertexTableEntry,
)
from polyedit.domain.point import AngleClass, Point, WindingDirection

__all__: list[str] = [
    # Enums
    "AngleClass",
    "EventKind",
    "WindingDirection",
    # Core types
    "WHITE",
    "Color",
    "EditorEvent",
    "Face",
    "FaceTableEntry",
    "HalfEdge",
    "HalfEdgeArena",
    "HalfEdgeTableEntry",
    "InitialMesh",
    "Point",
    "Vertex",
    "VertexTableEntry",
]
