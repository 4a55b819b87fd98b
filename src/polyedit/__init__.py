"""Polyedit - Geometry kernel for a point-and-click polygon editor.

Polyedit classifies the winding orientation of a clicked polygon, builds a
half-edge boundary mesh from its ordered points, and evaluates the classic
visibility predicates (convexity, diagonals, ears) used by ear-clipping
triangulation.

Example:
    $ polyedit build square.txt -o square-mesh.json

This will build the half-edge mesh for the polygon in square.txt and write
its vertex, half-edge and face tables as JSON.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
