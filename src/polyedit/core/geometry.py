"""Geometric predicates over triangles and segments.

This module provides the orientation primitives the rest of polyedit is
built on:
- Doubled signed triangle area (shoelace sum)
- Left / left-or-on / collinear tests against a directed line
- Proper and improper segment intersection
- Convexity of a polygon corner

All functions are pure and stateless. Every comparison against zero goes
through ``epsilon``: a doubled area within ``epsilon`` of zero counts as
collinear. With ``epsilon=0.0`` the tests use exact floating-point
comparisons.
"""

from polyedit.domain import Point

DEFAULT_EPSILON = 1e-12


def signed_area2(v1: Point, v2: Point, v3: Point) -> float:
    """Calculate twice the signed area of triangle v1, v2, v3.

    Args:
        v1: First corner
        v2: Second corner
        v3: Third corner

    Returns:
        Doubled signed area. Positive when v1, v2, v3 wind counter-clockwise.

    Examples:
        >>> signed_area2(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))
        1.0
        >>> signed_area2(Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 0.0))
        -1.0
    """
    return (
        v1.x * v2.y
        - v2.x * v1.y
        + v2.x * v3.y
        - v3.x * v2.y
        + v3.x * v1.y
        - v1.x * v3.y
    )


def left(v1: Point, v2: Point, v3: Point, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Check if v3 is strictly left of the directed line v1 -> v2."""
    return signed_area2(v1, v2, v3) > epsilon


def left_on(v1: Point, v2: Point, v3: Point, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Check if v3 is left of or on the directed line v1 -> v2."""
    return signed_area2(v1, v2, v3) >= -epsilon


def collinear(v1: Point, v2: Point, v3: Point, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Check if v1, v2, v3 lie on one line.

    Args:
        v1: First point
        v2: Second point
        v3: Third point
        epsilon: Largest doubled area still treated as zero

    Returns:
        True if the doubled triangle area is within epsilon of zero

    Examples:
        >>> collinear(Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0))
        True
    """
    return abs(signed_area2(v1, v2, v3)) <= epsilon


def xor(x: bool, y: bool) -> bool:
    """Exclusive or of two truth values."""
    return (not x) ^ (not y)


def properly_intersects(
    a: Point, b: Point, c: Point, d: Point, epsilon: float = DEFAULT_EPSILON
) -> bool:
    """Check if open segments ab and cd cross at a single interior point.

    Any collinear triple among the four endpoints rules out a proper
    intersection. Otherwise each segment must have one endpoint of the other
    on each side of its supporting line.

    Args:
        a: First endpoint of segment 1
        b: Second endpoint of segment 1
        c: First endpoint of segment 2
        d: Second endpoint of segment 2
        epsilon: Collinearity tolerance

    Returns:
        True if the segments cross transversally

    Examples:
        >>> properly_intersects(
        ...     Point(0.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0), Point(2.0, 0.0)
        ... )
        True
    """
    if (
        collinear(a, b, c, epsilon)
        or collinear(a, b, d, epsilon)
        or collinear(c, d, a, epsilon)
        or collinear(c, d, b, epsilon)
    ):
        return False

    return xor(left(a, b, c, epsilon), left(a, b, d, epsilon)) and xor(
        left(c, d, a, epsilon), left(c, d, b, epsilon)
    )


def between(a: Point, b: Point, c: Point, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Check if c lies on the closed segment ab.

    The interval test runs on x unless ab is vertical, in which case it
    runs on y.

    Args:
        a: First endpoint of the segment
        b: Second endpoint of the segment
        c: Point to test
        epsilon: Collinearity tolerance

    Returns:
        True if c is collinear with a and b and lies between them
    """
    if not collinear(a, b, c, epsilon):
        return False

    if a.x != b.x:
        return (a.x <= c.x <= b.x) or (a.x >= c.x >= b.x)
    return (a.y <= c.y <= b.y) or (a.y >= c.y >= b.y)


def intersects(
    a: Point, b: Point, c: Point, d: Point, epsilon: float = DEFAULT_EPSILON
) -> bool:
    """Check if closed segments ab and cd share at least one point.

    Covers proper crossings plus touching and overlapping collinear cases.

    Args:
        a: First endpoint of segment 1
        b: Second endpoint of segment 1
        c: First endpoint of segment 2
        d: Second endpoint of segment 2
        epsilon: Collinearity tolerance

    Returns:
        True if the segments intersect
    """
    if properly_intersects(a, b, c, d, epsilon):
        return True

    return (
        between(a, b, c, epsilon)
        or between(a, b, d, epsilon)
        or between(c, d, a, epsilon)
        or between(c, d, b, epsilon)
    )


def is_convex(prev: Point, cur: Point, nxt: Point, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Check if the corner at cur turns left.

    Assumes a counter-clockwise polygon, where a left turn means the interior
    angle at cur is smaller than 180 degrees.

    Args:
        prev: Predecessor of cur on the polygon
        cur: Corner vertex
        nxt: Successor of cur on the polygon
        epsilon: Collinearity tolerance

    Returns:
        True if prev, cur, nxt make a strict left turn
    """
    return signed_area2(prev, cur, nxt) > epsilon
