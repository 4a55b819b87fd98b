"""Visibility predicates for ear-clipping triangulation.

This module decides whether a segment between two polygon vertices is an
internal diagonal, and whether a vertex is an ear:
- diagonalie: the segment crosses no boundary edge
- in_cone: the segment leaves a vertex inside its interior angle
- diagonal: both of the above, from both endpoints
- is_ear: a convex vertex whose neighbours see each other

The predicates only classify. Nothing here removes ears or produces
triangles. Polygons are expected in counter-clockwise order.
"""

from dataclasses import dataclass

from polyedit.core.geometry import DEFAULT_EPSILON, intersects, is_convex, left, left_on
from polyedit.domain import AngleClass, Point


def diagonalie(
    polygon: list[Point], a: Point, b: Point, epsilon: float = DEFAULT_EPSILON
) -> bool:
    """Check that segment ab crosses no polygon edge it does not touch.

    Edges sharing an endpoint with ab are skipped, including the closing edge
    from the last point back to the first. O(n) per call.

    Args:
        polygon: Polygon points in order
        a: First endpoint of the candidate segment
        b: Second endpoint of the candidate segment
        epsilon: Collinearity tolerance

    Returns:
        True if no unrelated boundary edge intersects ab
    """
    n = len(polygon)
    for i in range(n):
        c = polygon[i]
        d = polygon[(i + 1) % n]
        if c in (a, b) or d in (a, b):
            continue
        if intersects(a, b, c, d, epsilon):
            return False
    return True


def in_cone(
    v0: Point,
    v: Point,
    v1: Point,
    b0: Point,  # noqa: ARG001
    b: Point,
    b1: Point,  # noqa: ARG001
    epsilon: float = DEFAULT_EPSILON,
) -> bool:
    """Check that segment vb starts inside the interior cone at v.

    The cone is bounded by the edges from v to its neighbours v0 and v1.
    b0 and b1, the neighbours of b, are accepted so the call mirrors
    ``diagonal`` but do not affect the result.

    Args:
        v0: Predecessor of v
        v: Cone apex
        v1: Successor of v
        b0: Predecessor of b
        b: Far endpoint of the candidate segment
        b1: Successor of b
        epsilon: Collinearity tolerance

    Returns:
        True if b is strictly inside the cone at v
    """
    if left_on(v, v1, v0, epsilon):
        # Convex apex: b must be strictly inside both half-planes
        return left(v, b, v0, epsilon) and left(b, v, v1, epsilon)
    # Reflex apex: b must not be inside the exterior cone
    return not (left_on(v, b, v1, epsilon) and left_on(b, v, v0, epsilon))


def diagonal(
    polygon: list[Point],
    v0: Point,
    v: Point,
    v1: Point,
    b0: Point,
    b: Point,
    b1: Point,
    epsilon: float = DEFAULT_EPSILON,
) -> bool:
    """Check that vb is an internal diagonal of the polygon.

    Args:
        polygon: Polygon points in order
        v0: Predecessor of v
        v: First endpoint
        v1: Successor of v
        b0: Predecessor of b
        b: Second endpoint
        b1: Successor of b
        epsilon: Collinearity tolerance

    Returns:
        True if vb lies inside both endpoint cones and crosses no edge
    """
    return (
        in_cone(v0, v, v1, b0, b, b1, epsilon)
        and in_cone(b0, b, b1, v0, v, v1, epsilon)
        and diagonalie(polygon, v, b, epsilon)
    )


def is_ear(
    polygon: list[Point],
    v0: Point,
    v: Point,
    v1: Point,
    v00: Point,
    v11: Point,
    epsilon: float = DEFAULT_EPSILON,
) -> bool:
    """Check if v is an ear of the polygon.

    v is an ear when it is convex and the segment joining its neighbours v0
    and v1 is an internal diagonal.

    Args:
        polygon: Polygon points in order
        v0: Predecessor of v
        v: Candidate ear tip
        v1: Successor of v
        v00: Predecessor of v0
        v11: Successor of v1
        epsilon: Collinearity tolerance

    Returns:
        True if v is an ear
    """
    if not is_convex(v0, v, v1, epsilon):
        return False
    return diagonal(polygon, v00, v0, v, v, v1, v11, epsilon)


@dataclass(frozen=True, slots=True)
class VertexClassification:
    """Diagnostic classification of one polygon vertex.

    Attributes:
        index: Position of the vertex in the polygon
        angle: Convex or reflex interior angle
        ear: Ear flag, None when the polygon is too small to classify ears
    """

    index: int
    angle: AngleClass
    ear: bool | None = None


def classify_angles(polygon: list[Point], epsilon: float = DEFAULT_EPSILON) -> list[AngleClass]:
    """Classify every vertex of a polygon as convex or reflex.

    Returns:
        One AngleClass per vertex, or an empty list for fewer than 3 points
    """
    n = len(polygon)
    if n < 3:
        return []

    return [
        AngleClass.CONVEX
        if is_convex(polygon[i - 1], polygon[i], polygon[(i + 1) % n], epsilon)
        else AngleClass.REFLEX
        for i in range(n)
    ]


def classify_ears(polygon: list[Point], epsilon: float = DEFAULT_EPSILON) -> list[bool]:
    """Flag every vertex of a polygon that is an ear.

    Returns:
        One flag per vertex, or an empty list for fewer than 4 points
    """
    n = len(polygon)
    if n < 4:
        return []

    return [
        is_ear(
            polygon,
            polygon[i - 1],
            polygon[i],
            polygon[(i + 1) % n],
            polygon[i - 2],
            polygon[(i + 2) % n],
            epsilon,
        )
        for i in range(n)
    ]


def classify_vertices(
    polygon: list[Point], epsilon: float = DEFAULT_EPSILON
) -> list[VertexClassification]:
    """Combine angle and ear classification for every vertex."""
    angles = classify_angles(polygon, epsilon)
    ears = classify_ears(polygon, epsilon)
    return [
        VertexClassification(
            index=i,
            angle=angle,
            ear=ears[i] if ears else None,
        )
        for i, angle in enumerate(angles)
    ]
