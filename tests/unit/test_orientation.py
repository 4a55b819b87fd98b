"""Unit tests for polygon orientation classification."""

import pytest

from polyedit.core.orientation import (
    is_counter_clockwise,
    require_polygon,
    total_signed_area2,
    winding_direction,
)
from polyedit.domain import Point, WindingDirection
from polyedit.exceptions import DegeneratePolygonError

SQUARE = [Point(-1.0, -1.0), Point(1.0, -1.0), Point(1.0, 1.0), Point(-1.0, 1.0)]
DART = [Point(0.0, -1.0), Point(1.0, 1.0), Point(0.0, 0.0), Point(-1.0, 1.0)]


class TestIsCounterClockwise:
    """Tests for is_counter_clockwise."""

    def test_square_counterclockwise(self):
        assert is_counter_clockwise(SQUARE)

    def test_reversed_square_clockwise(self):
        assert not is_counter_clockwise(SQUARE[::-1])

    def test_non_convex_polygon(self):
        assert is_counter_clockwise(DART)
        assert not is_counter_clockwise(DART[::-1])

    def test_rotation_of_start_point(self):
        """Starting from a different vertex keeps the orientation."""
        assert is_counter_clockwise(SQUARE[2:] + SQUARE[:2])

    @pytest.mark.parametrize(
        "anchor",
        [Point(0.0, 0.0), Point(5.0, -3.0), Point(-7.5, 2.25), Point(0.3, 0.1)],
    )
    def test_sign_independent_of_anchor(self, anchor):
        assert is_counter_clockwise(SQUARE, anchor)
        assert not is_counter_clockwise(SQUARE[::-1], anchor)
        assert is_counter_clockwise(DART, anchor)

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_too_few_points_not_counterclockwise(self, count):
        assert not is_counter_clockwise(SQUARE[:count])

    def test_collinear_points_not_counterclockwise(self):
        line = [Point(0.0, 0.0), Point(0.5, 0.0), Point(1.0, 0.0)]
        assert not is_counter_clockwise(line)


class TestTotalSignedArea:
    """Tests for total_signed_area2."""

    def test_square_area(self):
        assert total_signed_area2(SQUARE) == pytest.approx(8.0)
        assert total_signed_area2(SQUARE[::-1]) == pytest.approx(-8.0)

    def test_dart_area(self):
        assert total_signed_area2(DART) == pytest.approx(2.0)

    def test_matches_origin_anchor(self):
        assert total_signed_area2(DART, Point(0.0, 0.0)) == pytest.approx(
            total_signed_area2(DART)
        )

    def test_degenerate_is_zero(self):
        assert total_signed_area2(SQUARE[:2]) == 0.0


class TestWindingDirection:
    """Tests for winding_direction and require_polygon."""

    def test_winding_direction(self):
        assert winding_direction(SQUARE) is WindingDirection.COUNTER_CLOCKWISE
        assert winding_direction(SQUARE[::-1]) is WindingDirection.CLOCKWISE

    def test_require_polygon_accepts_triangle(self):
        require_polygon(SQUARE[:3])

    def test_require_polygon_rejects_two_points(self):
        with pytest.raises(DegeneratePolygonError) as exc_info:
            require_polygon(SQUARE[:2])
        assert exc_info.value.point_count == 2
        assert exc_info.value.minimum == 3
