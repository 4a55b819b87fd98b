"""Polygon winding orientation.

The total signed area is accumulated as a fan of triangles from a fixed
anchor point to every polygon edge, including the closing edge. For a simple
polygon the sign does not depend on the anchor, as long as the anchor is not
collinear with an edge. The default anchor sits just outside the normalized
device range so clicked points never coincide with it.
"""

from polyedit.core.geometry import signed_area2
from polyedit.domain import Point, WindingDirection
from polyedit.exceptions import DegeneratePolygonError

ORIENTATION_ANCHOR = Point(1.1, 1.1, 0.0)


def total_signed_area2(points: list[Point], anchor: Point = ORIENTATION_ANCHOR) -> float:
    """Calculate twice the signed area of a closed polygon.

    Args:
        points: Polygon points in order
        anchor: Fan apex

    Returns:
        Doubled signed area, 0.0 for fewer than 3 points
    """
    n = len(points)
    if n < 3:
        return 0.0

    total = 0.0
    for i in range(n - 1):
        total += signed_area2(anchor, points[i], points[i + 1])
    total += signed_area2(anchor, points[n - 1], points[0])
    return total


def is_counter_clockwise(points: list[Point], anchor: Point = ORIENTATION_ANCHOR) -> bool:
    """Check if a polygon's points wind counter-clockwise.

    Fewer than 3 points is not an error: such a polygon is reported as not
    counter-clockwise.

    Args:
        points: Polygon points in order
        anchor: Fan apex

    Returns:
        True if the total signed area is positive

    Examples:
        >>> square = [Point(-1, -1), Point(1, -1), Point(1, 1), Point(-1, 1)]
        >>> is_counter_clockwise(square)
        True
        >>> is_counter_clockwise(square[::-1])
        False
    """
    if len(points) < 3:
        return False
    return total_signed_area2(points, anchor) > 0.0


def winding_direction(points: list[Point], anchor: Point = ORIENTATION_ANCHOR) -> WindingDirection:
    """Classify a polygon's winding direction."""
    if is_counter_clockwise(points, anchor):
        return WindingDirection.COUNTER_CLOCKWISE
    return WindingDirection.CLOCKWISE


def require_polygon(points: list[Point], minimum: int = 3) -> None:
    """Raise DegeneratePolygonError if there are too few points.

    Raises:
        DegeneratePolygonError: If len(points) < minimum
    """
    if len(points) < minimum:
        raise DegeneratePolygonError(len(points), minimum)
