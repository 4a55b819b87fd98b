"""Core geometric types for polygon editing.

This module defines the fundamental geometric types used throughout polyedit:
- Point: A coordinate in normalized device space
- WindingDirection: Enum for polygon winding direction
- AngleClass: Enum for the interior angle type at a polygon vertex
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Polygon winding direction.

    Determined by the sign of the polygon's total signed area:
    - Positive area: counter-clockwise
    - Negative (or zero) area: clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class AngleClass(Enum):
    """Interior angle type at a vertex of a counter-clockwise polygon."""

    CONVEX = auto()
    REFLEX = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in normalized device space.

    Immutable and hashable for use in sets/dicts. The editor is 2-D, so z is
    always 0 for clicked points.

    Attributes:
        x: X coordinate in [-1, 1]
        y: Y coordinate in [-1, 1]
        z: Z coordinate (0 for the 2-D editor)
    """

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_screen(cls, px: int, py: int, width: int, height: int) -> "Point":
        """Map a pixel position to normalized device coordinates.

        Pixel rows grow downwards while NDC y grows upwards, so the y axis is
        flipped. The viewport centre maps to the origin.

        Args:
            px: Pixel column
            py: Pixel row
            width: Viewport width in pixels
            height: Viewport height in pixels

        Returns:
            Point with x and y in [-1, 1]

        Examples:
            >>> Point.from_screen(400, 300, 800, 600)
            Point(x=0.0, y=0.0, z=0.0)
            >>> Point.from_screen(0, 0, 800, 600)
            Point(x=-1.0, y=1.0, z=0.0)
        """
        half_w = width / 2
        half_h = height / 2
        return cls((px - half_w) / half_w, (half_h - py) / half_h, 0.0)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to simple (x, y, z) tuple.

        Returns:
            Tuple of (x, y, z) coordinates
        """
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y and z fields
        """
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and optional z fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]), z=float(data.get("z", 0.0)))
