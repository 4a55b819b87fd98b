"""Unit tests for visibility and ear predicates.

Tests cover:
- Boundary crossing checks for candidate diagonals
- Visibility cones at convex and reflex vertices
- Internal diagonals and ear classification
- Diagnostic classification of whole polygons
"""

from polyedit.core.visibility import (
    classify_angles,
    classify_ears,
    classify_vertices,
    diagonal,
    diagonalie,
    in_cone,
    is_ear,
)
from polyedit.domain import AngleClass, Point

A = Point(-1.0, -1.0)
B = Point(1.0, -1.0)
C = Point(1.0, 1.0)
D = Point(-1.0, 1.0)
SQUARE = [A, B, C, D]

# Counter-clockwise dart with a reflex vertex at the origin
DART = [Point(0.0, -1.0), Point(1.0, 1.0), Point(0.0, 0.0), Point(-1.0, 1.0)]


class TestDiagonalie:
    """Tests for boundary crossing of candidate segments."""

    def test_square_diagonal_touches_only_shared_edges(self):
        assert diagonalie(SQUARE, A, C)
        assert diagonalie(SQUARE, B, D)

    def test_segment_crossing_two_edges(self):
        assert not diagonalie(SQUARE, Point(-2.0, 0.0), Point(2.0, 0.0))

    def test_segment_inside_polygon(self):
        assert diagonalie(SQUARE, Point(-0.5, 0.0), Point(0.5, 0.0))

    def test_closing_edge_is_checked(self):
        """The edge from the last point back to the first blocks too."""
        assert not diagonalie(SQUARE, Point(-2.0, 0.0), Point(0.0, 0.0))


class TestInCone:
    """Tests for visibility cones."""

    def test_convex_apex_interior_direction(self):
        assert in_cone(D, A, B, B, C, D)

    def test_convex_apex_exterior_direction(self):
        assert not in_cone(D, A, B, None, Point(-2.0, -2.0), None)

    def test_reflex_apex_interior_direction(self):
        b, c, d, a = DART[1], DART[2], DART[3], DART[0]
        assert in_cone(b, c, d, d, a, b)

    def test_reflex_apex_into_notch(self):
        b, c, d = DART[1], DART[2], DART[3]
        assert not in_cone(b, c, d, None, Point(0.0, 2.0), None)


class TestDiagonal:
    """Tests for internal diagonals."""

    def test_square_diagonal(self):
        assert diagonal(SQUARE, D, A, B, B, C, D)

    def test_dart_inner_diagonal(self):
        a, b, c, d = DART
        assert diagonal(DART, d, a, b, b, c, d)

    def test_dart_outer_segment_is_not_diagonal(self):
        """The segment between the two wing tips passes over the notch."""
        a, b, c, d = DART
        assert not diagonal(DART, c, d, a, a, b, c)


class TestEars:
    """Tests for ear classification."""

    def test_square_every_vertex_is_ear(self):
        assert is_ear(SQUARE, A, B, C, D, D)
        assert classify_ears(SQUARE) == [True, True, True, True]

    def test_square_every_vertex_convex(self):
        assert classify_angles(SQUARE) == [AngleClass.CONVEX] * 4

    def test_dart_angles(self):
        assert classify_angles(DART) == [
            AngleClass.CONVEX,
            AngleClass.CONVEX,
            AngleClass.REFLEX,
            AngleClass.CONVEX,
        ]

    def test_dart_ears(self):
        """Only the wing tips are ears; the nose sees across the notch."""
        assert classify_ears(DART) == [False, True, False, True]

    def test_reflex_vertex_is_never_ear(self):
        a, b, c, d = DART
        assert not is_ear(DART, b, c, d, a, a)

    def test_too_few_points_for_ears(self):
        triangle = [A, B, C]
        assert classify_ears(triangle) == []
        assert classify_angles(triangle) == [AngleClass.CONVEX] * 3

    def test_too_few_points_for_angles(self):
        assert classify_angles([A, B]) == []


class TestClassifyVertices:
    """Tests for combined diagnostic classification."""

    def test_square(self):
        results = classify_vertices(SQUARE)
        assert [r.index for r in results] == [0, 1, 2, 3]
        assert all(r.angle is AngleClass.CONVEX for r in results)
        assert all(r.ear for r in results)

    def test_triangle_has_no_ear_flags(self):
        results = classify_vertices([A, B, C])
        assert len(results) == 3
        assert all(r.ear is None for r in results)

    def test_clockwise_square_reports_reflex(self):
        """Convexity assumes counter-clockwise order."""
        results = classify_vertices(SQUARE[::-1])
        assert all(r.angle is AngleClass.REFLEX for r in results)
