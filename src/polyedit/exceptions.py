"""Exception hierarchy for Polyedit."""


class PolyEditError(Exception):
    """Base exception for all Polyedit errors."""

    pass


class GeometryError(PolyEditError):
    """Errors in geometric calculations."""

    pass


class DegeneratePolygonError(GeometryError):
    """Polygon has too few points for the requested operation."""

    def __init__(self, point_count: int, minimum: int = 3) -> None:
        self.point_count = point_count
        self.minimum = minimum
        super().__init__(
            f"Polygon needs at least {minimum} points, got {point_count}"
        )


class SelfIntersectingPolygonError(GeometryError):
    """Two non-adjacent polygon edges intersect."""

    def __init__(self, edge_a: tuple[int, int], edge_b: tuple[int, int]) -> None:
        self.edge_a = edge_a
        self.edge_b = edge_b
        super().__init__(
            f"Polygon is not simple: edge {edge_a[0]}-{edge_a[1]} "
            f"intersects edge {edge_b[0]}-{edge_b[1]}"
        )


class MeshError(PolyEditError):
    """Errors related to half-edge mesh construction."""

    pass


class MeshStateError(MeshError):
    """Mesh is not in a state that allows the requested operation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid mesh state: {reason}")


class InputError(PolyEditError):
    """Errors reading user input files."""

    pass


class PointFileError(InputError):
    """Error loading a points file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load points '{path}': {reason}")


class EventScriptError(InputError):
    """Malformed line in an editor event script."""

    def __init__(self, line_no: int, reason: str) -> None:
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"Event script line {line_no}: {reason}")


class SessionClosedError(PolyEditError):
    """Event delivered to an editor session that has already quit."""

    def __init__(self, event: str) -> None:
        self.event = event
        super().__init__(f"Session is closed, cannot handle '{event}'")
