"""I/O layer for points files, event scripts and mesh export.

This module handles:
- Reading polygons from JSON or plain-text points files
- Parsing editor event scripts
- Writing built meshes and their tables as JSON
"""

from polyedit.io.reader import (
    PointReader,
    parse_event_script,
    parse_points,
    read_event_script,
)
from polyedit.io.writer import MeshWriter, mesh_to_dict

__all__ = [
    "MeshWriter",
    "PointReader",
    "mesh_to_dict",
    "parse_event_script",
    "parse_points",
    "read_event_script",
]
