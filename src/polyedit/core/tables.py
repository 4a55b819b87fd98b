"""Vertex, half-edge and face tables derived from an initial mesh.

The initial mesh only pairs half-edges with their twins. This module
completes the doubly connected edge list:

1. Vertex table: one outgoing half-edge per vertex
2. Half-edge table: next/prev links and incident faces, found by walking
   face cycles and consuming the mesh's visited flags
3. Face table: outer and inner boundary components per face

Next links come from the angular order of outgoing half-edges around each
vertex: the successor of a half-edge ending at v is the outgoing half-edge
of v immediately clockwise from its twin. Every face then lies on the left
of its half-edges, so bounded faces are traced counter-clockwise and the
boundary of the unbounded face clockwise.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from polyedit.core.orientation import total_signed_area2
from polyedit.domain import (
    Face,
    FaceTableEntry,
    HalfEdgeTableEntry,
    InitialMesh,
    VertexTableEntry,
)
from polyedit.exceptions import MeshStateError

UNBOUNDED_FACE = 0


def _require_complete(mesh: InitialMesh) -> None:
    if not mesh.is_complete():
        raise MeshStateError(
            f"expected 2n half-edges for {len(mesh.vertices)} vertices, "
            f"found {len(mesh.half_edges)}"
        )


def _outgoing_by_angle(mesh: InitialMesh) -> dict[int, list[int]]:
    """Group half-edge indices by origin, sorted counter-clockwise by angle."""
    outgoing: dict[int, list[tuple[float, int]]] = {}
    for edge in mesh.half_edges:
        origin = mesh.origin(edge)
        dest = mesh.destination(edge)
        angle = math.atan2(dest.y - origin.y, dest.x - origin.x)
        outgoing.setdefault(edge.origin, []).append((angle, edge.index))
    return {key: [index for _, index in sorted(edges)] for key, edges in outgoing.items()}


def _next_links(mesh: InitialMesh) -> list[int]:
    outgoing = _outgoing_by_angle(mesh)
    nxt = [0] * len(mesh.half_edges)
    for edge in mesh.half_edges:
        twin = mesh.half_edges.twin(edge)
        around = outgoing[twin.origin]
        position = around.index(twin.index)
        nxt[edge.index] = around[position - 1]
    return nxt


def fill_vertex_table(mesh: InitialMesh) -> list[VertexTableEntry]:
    """Record the first-created outgoing half-edge of every vertex.

    Args:
        mesh: A complete initial mesh

    Returns:
        One entry per vertex, ordered by vertex key

    Raises:
        MeshStateError: If the mesh is incomplete
    """
    _require_complete(mesh)

    incident: dict[int, int] = {}
    for edge in mesh.half_edges:
        incident.setdefault(edge.origin, edge.index)

    return [
        VertexTableEntry(vertex=vertex.key, incident_edge=incident[vertex.key])
        for vertex in mesh.vertices
    ]


def fill_half_edge_table(mesh: InitialMesh) -> tuple[list[HalfEdgeTableEntry], list[Face]]:
    """Link half-edges into face cycles and assign incident faces.

    Each unvisited half-edge starts a cycle walk that marks every half-edge
    it passes in ``mesh.visited``. A cycle with positive signed area bounds a
    new face. Every other cycle belongs to the unbounded face, which always
    has key 0.

    Args:
        mesh: A complete initial mesh with no half-edge visited yet

    Returns:
        Tuple of (half-edge table ordered by arena index, faces)

    Raises:
        MeshStateError: If the mesh is incomplete or already consumed
    """
    _require_complete(mesh)
    if any(mesh.visited):
        raise MeshStateError("half-edges already consumed by a face walk, rebuild the mesh")

    nxt = _next_links(mesh)
    prev = [0] * len(nxt)
    for index, successor in enumerate(nxt):
        prev[successor] = index

    faces = [Face(key=UNBOUNDED_FACE, bounded=False)]
    incident_face = [UNBOUNDED_FACE] * len(nxt)

    for start in range(len(nxt)):
        if mesh.visited[start]:
            continue

        cycle: list[int] = []
        current = start
        while not mesh.visited[current]:
            mesh.visited[current] = True
            cycle.append(current)
            current = nxt[current]

        points = [mesh.vertices[mesh.half_edges[index].origin].point for index in cycle]
        if total_signed_area2(points) > 0.0:
            face = Face(key=len(faces), bounded=True)
            faces.append(face)
            for index in cycle:
                incident_face[index] = face.key

    table = [
        HalfEdgeTableEntry(
            half_edge=edge.index,
            origin=edge.origin,
            twin=edge.twin,
            next=nxt[edge.index],
            prev=prev[edge.index],
            incident_face=incident_face[edge.index],
        )
        for edge in mesh.half_edges
    ]
    return table, faces


def fill_face_table_inner_components(
    mesh: InitialMesh,
    half_edge_table: list[HalfEdgeTableEntry],
    faces: list[Face],
) -> list[FaceTableEntry]:
    """Record boundary components for every face.

    A bounded face gets the lowest-indexed half-edge of its cycle as outer
    component. The unbounded face has no outer component and one inner
    component per boundary cycle it touches.

    Args:
        mesh: The mesh the half-edge table was built from
        half_edge_table: Output of fill_half_edge_table
        faces: Faces from fill_half_edge_table

    Returns:
        One entry per face, ordered by face key

    Raises:
        MeshStateError: If the half-edge table does not match the mesh
    """
    if len(half_edge_table) != len(mesh.half_edges):
        raise MeshStateError("half-edge table does not cover every half-edge")

    entries = {face.key: FaceTableEntry(face=face.key) for face in faces}
    seen = [False] * len(half_edge_table)

    for row in half_edge_table:
        if seen[row.half_edge]:
            continue

        current = row.half_edge
        while not seen[current]:
            seen[current] = True
            current = half_edge_table[current].next

        entry = entries[row.incident_face]
        if row.incident_face == UNBOUNDED_FACE:
            entry.inner_components.append(row.half_edge)
        elif entry.outer_component is None:
            entry.outer_component = row.half_edge

    return [entries[face.key] for face in faces]


@dataclass
class MeshTables:
    """All three tables of a built mesh."""

    vertex_table: list[VertexTableEntry] = field(default_factory=list)
    half_edge_table: list[HalfEdgeTableEntry] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    face_table: list[FaceTableEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "vertex_table": [row.to_dict() for row in self.vertex_table],
            "half_edge_table": [row.to_dict() for row in self.half_edge_table],
            "face_table": [row.to_dict() for row in self.face_table],
        }


def fill_tables(mesh: InitialMesh) -> MeshTables:
    """Run the three table fills in order.

    Args:
        mesh: A freshly built mesh

    Returns:
        MeshTables for the mesh
    """
    vertex_table = fill_vertex_table(mesh)
    half_edge_table, faces = fill_half_edge_table(mesh)
    face_table = fill_face_table_inner_components(mesh, half_edge_table, faces)
    return MeshTables(
        vertex_table=vertex_table,
        half_edge_table=half_edge_table,
        faces=faces,
        face_table=face_table,
    )
