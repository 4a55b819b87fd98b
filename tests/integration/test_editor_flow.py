"""Integration tests for the click, build, clear cycle.

These tests drive an editor session the way the user would and check the
mesh invariants after every build: 2n half-edges, twin symmetry, symmetric
adjacency with two neighbours per vertex, and a counter-clockwise forward
walk.
"""

import math

import pytest

from polyedit.core.orientation import total_signed_area2
from polyedit.core.session import EditorSession
from polyedit.io import parse_event_script


def regular_polygon_clicks(n: int, clockwise: bool = False) -> list[tuple[int, int]]:
    """Pixel positions of a regular n-gon centred in an 800x600 viewport."""
    clicks = []
    for i in range(n):
        angle = 2 * math.pi * i / n
        # Pixel rows grow downwards, so a negative sine step winds counter-clockwise
        px = round(400 + 200 * math.cos(angle))
        py = round(300 - 200 * math.sin(angle))
        clicks.append((px, py))
    return clicks[::-1] if clockwise else clicks


def assert_mesh_invariants(session: EditorSession) -> None:
    mesh = session.mesh
    n = len(session.points)

    assert len(mesh.vertices) == n
    assert mesh.edge_count == n
    assert len(mesh.half_edges) == 2 * n
    assert len(mesh.visited) == 2 * n

    for edge in mesh.half_edges:
        assert mesh.half_edges.twin(mesh.half_edges.twin(edge)) == edge

    assert len(mesh.adjacency) == n
    for key, neighbours in mesh.adjacency.items():
        assert len(neighbours) == 2
        for other in neighbours:
            assert key in mesh.adjacency[other]

    traced = [mesh.origin(edge).point for edge in mesh.half_edges if edge.index % 2 == 0]
    assert total_signed_area2(traced) > 0


class TestRegularPolygons:
    """Regular polygons clicked in either direction."""

    @pytest.mark.parametrize("n", [3, 5, 8, 12])
    @pytest.mark.parametrize("clockwise", [False, True])
    def test_build_invariants(self, n, clockwise):
        session = EditorSession()
        for px, py in regular_polygon_clicks(n, clockwise):
            session.click(px, py)

        tables = session.build()

        assert_mesh_invariants(session)
        assert len(tables.faces) == 2
        assert tables.face_table[1].outer_component is not None
        assert len(tables.face_table[0].inner_components) == 1

    @pytest.mark.parametrize("n", [4, 6, 9])
    def test_regular_polygon_all_ears(self, n):
        session = EditorSession()
        for px, py in regular_polygon_clicks(n):
            session.click(px, py)

        results = session.classify()

        assert len(results) == n
        assert all(r.ear for r in results)


class TestScriptedSession:
    """A recorded session replayed event by event."""

    def test_two_polygons_in_one_session(self):
        events = parse_event_script(
            """
            click 200 450
            click 600 450
            click 600 150
            click 200 150
            build
            clear
            click 400 100
            click 200 500
            click 600 500
            build
            """
        )
        session = EditorSession()
        built = [tables for tables in map(session.handle, events) if tables is not None]

        assert len(built) == 2
        assert len(built[0].half_edge_table) == 8
        assert len(built[1].half_edge_table) == 6
        assert_mesh_invariants(session)
        assert session.build_logger.stats.builds == 2
        assert session.build_logger.stats.clears == 1
