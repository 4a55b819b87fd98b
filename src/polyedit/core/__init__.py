"""Core algorithms for polyedit.

This module contains the core algorithms for:

- Geometric predicates (signed area, left tests, segment intersection)
- Visibility predicates (diagonals, visibility cones, ears)
- Polygon orientation classification
- Initial half-edge mesh construction and table filling
- The editor session tying them to user actions

The predicates are pure and stateless. Mutable state lives only in
PolygonMeshBuilder and EditorSession.

Key functions:
- signed_area2: Twice the signed area of a triangle
- is_counter_clockwise: Polygon orientation via an anchor fan
- is_ear / diagonal / in_cone / diagonalie: Ear-clipping predicates
- build_initial_mesh: Build a half-edge boundary mesh
- fill_tables: Derive vertex, half-edge and face tables

Key classes:
- PolygonMeshBuilder: Owns and rebuilds the mesh buffers
- EditorSession: Click/build/clear/quit trigger surface
"""

from polyedit.core.geometry import (
    DEFAULT_EPSILON,
    between,
    collinear,
    intersects,
    is_convex,
    left,
    left_on,
    properly_intersects,
    signed_area2,
)
from polyedit.core.mesh_builder import (
    PolygonMeshBuilder,
    build_initial_mesh,
    create_edge,
    find_self_intersection,
)
from polyedit.core.orientation import (
    ORIENTATION_ANCHOR,
    is_counter_clockwise,
    total_signed_area2,
    winding_direction,
)
from polyedit.core.session import EditorSession
from polyedit.core.tables import (
    MeshTables,
    fill_face_table_inner_components,
    fill_half_edge_table,
    fill_tables,
    fill_vertex_table,
)
from polyedit.core.visibility import (
    VertexClassification,
    classify_angles,
    classify_ears,
    classify_vertices,
    diagonal,
    diagonalie,
    in_cone,
    is_ear,
)

__all__ = [
    "DEFAULT_EPSILON",
    "ORIENTATION_ANCHOR",
    # Session and builder classes
    "EditorSession",
    "MeshTables",
    "PolygonMeshBuilder",
    "VertexClassification",
    # Geometry functions
    "between",
    "build_initial_mesh",
    "classify_angles",
    "classify_ears",
    "classify_vertices",
    "collinear",
    "create_edge",
    "diagonal",
    "diagonalie",
    "fill_face_table_inner_components",
    "fill_half_edge_table",
    "fill_tables",
    "fill_vertex_table",
    "find_self_intersection",
    "in_cone",
    "intersects",
    "is_convex",
    "is_counter_clockwise",
    "is_ear",
    "left",
    "left_on",
    "properly_intersects",
    "signed_area2",
    "total_signed_area2",
    "winding_direction",
]
