"""Unit tests for the editor session."""

import pytest

from polyedit.config import GeometryConfig, PolyEditSettings, ViewportConfig
from polyedit.core.session import EditorSession
from polyedit.domain import EditorEvent, EventKind, Point, WindingDirection
from polyedit.exceptions import (
    DegeneratePolygonError,
    SelfIntersectingPolygonError,
    SessionClosedError,
)

# Pixel corners of a counter-clockwise square in an 800x600 viewport
SQUARE_CLICKS = [(200, 450), (600, 450), (600, 150), (200, 150)]


@pytest.fixture
def session():
    return EditorSession()


def click_all(session, clicks):
    for px, py in clicks:
        session.click(px, py)


class TestClicks:
    """Tests for point entry."""

    def test_click_maps_to_ndc(self, session):
        point = session.click(400, 300)
        assert point == Point(0.0, 0.0)
        assert session.points == (Point(0.0, 0.0),)

    def test_square_clicks(self, session):
        click_all(session, SQUARE_CLICKS)
        assert session.points == (
            Point(-0.5, -0.5),
            Point(0.5, -0.5),
            Point(0.5, 0.5),
            Point(-0.5, 0.5),
        )

    def test_custom_viewport(self):
        session = EditorSession(PolyEditSettings(viewport=ViewportConfig(width=200, height=100)))
        assert session.click(200, 0) == Point(1.0, 1.0)

    def test_points_counted(self, session):
        click_all(session, SQUARE_CLICKS)
        assert session.build_logger.stats.points_added == 4


class TestBuild:
    """Tests for building from the session."""

    def test_build_square(self, session):
        click_all(session, SQUARE_CLICKS)
        tables = session.build()

        assert session.mesh.edge_count == 4
        assert session.mesh.winding is WindingDirection.COUNTER_CLOCKWISE
        assert session.mesh.adjacency[0] == {1, 3}
        assert len(tables.faces) == 2
        assert session.tables is tables

    def test_build_clockwise_clicks(self, session):
        click_all(session, SQUARE_CLICKS[::-1])
        session.build()
        assert session.mesh.winding is WindingDirection.CLOCKWISE
        assert len(session.mesh.half_edges) == 8

    def test_build_too_few_points(self, session):
        click_all(session, SQUARE_CLICKS[:2])
        with pytest.raises(DegeneratePolygonError):
            session.build()
        assert session.build_logger.stats.failed_builds == 1
        assert session.tables is None

    def test_rebuild_after_more_clicks(self, session):
        click_all(session, SQUARE_CLICKS[:3])
        session.build()
        session.click(*SQUARE_CLICKS[3])
        session.build()
        assert len(session.mesh.half_edges) == 8
        assert session.build_logger.stats.builds == 2
        assert session.build_logger.stats.last_edge_count == 4

    def test_check_simple(self):
        settings = PolyEditSettings(geometry=GeometryConfig(check_simple=True))
        session = EditorSession(settings)
        click_all(session, [(200, 450), (600, 150), (600, 450), (200, 150)])
        with pytest.raises(SelfIntersectingPolygonError):
            session.build()

    def test_rejected_rebuild_drops_previous_mesh(self):
        settings = PolyEditSettings(geometry=GeometryConfig(check_simple=True))
        session = EditorSession(settings)
        click_all(session, SQUARE_CLICKS)
        session.build()

        # Below the square, so the edge in from the fourth click crosses the first edge
        session.click(400, 550)
        with pytest.raises(SelfIntersectingPolygonError):
            session.build()

        assert len(session.points) == 5
        assert session.tables is None
        assert session.mesh.vertices == []
        assert len(session.mesh.half_edges) == 0


class TestClearAndQuit:
    """Tests for clear and quit."""

    def test_clear(self, session):
        click_all(session, SQUARE_CLICKS)
        session.build()
        session.clear()

        assert session.points == ()
        assert session.mesh.vertices == []
        assert len(session.mesh.half_edges) == 0
        assert session.tables is None
        assert session.build_logger.stats.clears == 1

    def test_quit_closes_session(self, session):
        session.quit()
        assert session.closed
        with pytest.raises(SessionClosedError):
            session.click(1, 1)
        with pytest.raises(SessionClosedError):
            session.build()


class TestClassify:
    """Tests for the diagnostic classification path."""

    def test_classify_square(self, session):
        click_all(session, SQUARE_CLICKS)
        results = session.classify()
        assert len(results) == 4
        assert all(r.ear for r in results)

    def test_classify_empty(self, session):
        assert session.classify() == []


class TestHandle:
    """Tests for event dispatch."""

    def test_event_sequence(self, session):
        events = [EditorEvent(kind=EventKind.CLICK, x=px, y=py) for px, py in SQUARE_CLICKS]
        events.append(EditorEvent(kind=EventKind.BUILD))

        results = [session.handle(event) for event in events]

        assert results[:4] == [None] * 4
        assert results[4] is not None
        assert len(results[4].half_edge_table) == 8

    def test_clear_and_quit_events(self, session):
        session.handle(EditorEvent(kind=EventKind.CLICK, x=1, y=1))
        assert session.handle(EditorEvent(kind=EventKind.CLEAR)) is None
        assert session.points == ()
        session.handle(EditorEvent(kind=EventKind.QUIT))
        assert session.closed
