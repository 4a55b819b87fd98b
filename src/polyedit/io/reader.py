"""Readers for point files and editor event scripts.

Point files hold one polygon in NDC, either as JSON (a list of ``[x, y]``
pairs or ``{"x": .., "y": ..}`` objects) or as plain text with one ``x y``
or ``x,y`` pair per line. Event scripts replay editor actions, one per line:

    click 120 480
    build
    clear
    quit

Blank lines and lines starting with ``#`` are ignored in both text formats.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from polyedit.domain import EditorEvent, EventKind, Point
from polyedit.exceptions import EventScriptError, PointFileError


def _content_lines(text: str) -> Iterator[tuple[int, str]]:
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if line and not line.startswith("#"):
            yield line_no, line


def _point_from_json(item: Any) -> Point:
    try:
        if isinstance(item, dict):
            return Point.from_dict(item)
        if isinstance(item, (list, tuple)) and len(item) in (2, 3):
            return Point(*(float(v) for v in item))
    except (KeyError, TypeError):
        raise ValueError(f"Unrecognized point entry: {item!r}") from None
    raise ValueError(f"Unrecognized point entry: {item!r}")


def parse_points(text: str) -> list[Point]:
    """Parse polygon points from JSON or plain text.

    Args:
        text: File contents

    Returns:
        Points in file order

    Raises:
        ValueError: If an entry cannot be parsed
    """
    stripped = text.lstrip()
    if stripped.startswith("["):
        data = json.loads(stripped)
        if not isinstance(data, list):
            raise ValueError("expected a JSON list of points")
        return [_point_from_json(item) for item in data]

    points: list[Point] = []
    for line_no, line in _content_lines(text):
        fields = line.replace(",", " ").split()
        if len(fields) not in (2, 3):
            raise ValueError(f"line {line_no}: expected 'x y', got {line!r}")
        points.append(Point(*(float(v) for v in fields)))
    return points


def parse_event_script(text: str) -> list[EditorEvent]:
    """Parse an editor event script.

    Args:
        text: Script contents

    Returns:
        Events in script order

    Raises:
        EventScriptError: On an unknown action or malformed click
    """
    events: list[EditorEvent] = []
    for line_no, line in _content_lines(text):
        fields = line.split()
        try:
            kind = EventKind(fields[0].lower())
        except ValueError:
            raise EventScriptError(line_no, f"unknown action '{fields[0]}'") from None

        if kind is EventKind.CLICK:
            if len(fields) != 3:
                raise EventScriptError(line_no, "click needs pixel column and row")
            try:
                x, y = int(fields[1]), int(fields[2])
            except ValueError:
                raise EventScriptError(line_no, "click coordinates must be integers") from None
            events.append(EditorEvent(kind=kind, x=x, y=y, line_no=line_no))
        elif len(fields) != 1:
            raise EventScriptError(line_no, f"'{kind.value}' takes no arguments")
        else:
            events.append(EditorEvent(kind=kind, line_no=line_no))
    return events


class PointReader:
    """Loads a polygon from a points file.

    Example:
        reader = PointReader(Path("square.txt"))
        reader.load()
        print(reader.points)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to a JSON or text points file
        """
        self._path = path
        self._points: list[Point] | None = None

    def load(self) -> None:
        """Read and parse the file.

        Raises:
            PointFileError: If the file is missing or malformed
        """
        if not self._path.exists():
            raise PointFileError(str(self._path), "file not found")
        try:
            text = self._path.read_text(encoding="utf-8")
            self._points = parse_points(text)
        except (OSError, ValueError) as e:
            raise PointFileError(str(self._path), str(e)) from e

    @property
    def points(self) -> list[Point]:
        """Return the loaded points.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._points is None:
            raise RuntimeError("Points not loaded. Call load() first.")
        return list(self._points)


def read_event_script(path: Path) -> list[EditorEvent]:
    """Read and parse an event script file.

    Raises:
        PointFileError: If the file cannot be read
        EventScriptError: If a line is malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PointFileError(str(path), str(e)) from e
    return parse_event_script(text)
