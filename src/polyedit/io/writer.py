"""Mesh writer for exporting built meshes as JSON."""

import json
from pathlib import Path
from typing import Any

from polyedit.core.tables import MeshTables
from polyedit.domain import InitialMesh


def mesh_to_dict(mesh: InitialMesh, tables: MeshTables | None = None) -> dict[str, Any]:
    """Serialize a mesh and, optionally, its tables.

    Args:
        mesh: Built initial mesh
        tables: Tables filled from the mesh

    Returns:
        JSON-compatible dictionary
    """
    data: dict[str, Any] = {
        "winding": mesh.winding.name.lower() if mesh.winding else None,
        "vertices": [vertex.to_dict() for vertex in mesh.vertices],
        "half_edges": [
            {"index": edge.index, "origin": edge.origin, "twin": edge.twin}
            for edge in mesh.half_edges
        ],
        "adjacency": {
            str(key): sorted(neighbours) for key, neighbours in sorted(mesh.adjacency.items())
        },
    }
    if tables is not None:
        data.update(tables.to_dict())
    return data


class MeshWriter:
    """Writes a built mesh to a JSON file."""

    def __init__(self, mesh: InitialMesh, tables: MeshTables | None = None) -> None:
        self._mesh = mesh
        self._tables = tables

    def save(self, output_path: Path) -> None:
        """Write the mesh.

        Args:
            output_path: Destination JSON file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(mesh_to_dict(self._mesh, self._tables), fh, indent=2)
            fh.write("\n")

    @staticmethod
    def get_mesh_path(input_path: Path) -> Path:
        """Derive the default output path for a points file.

        Args:
            input_path: Points file path

        Returns:
            Path like ``{stem}-mesh.json`` next to the input
        """
        return input_path.with_name(f"{input_path.stem}-mesh.json")
