"""Editor input events."""

from dataclasses import dataclass
from enum import Enum


class EventKind(str, Enum):
    """User actions the editor reacts to."""

    CLICK = "click"
    BUILD = "build"
    CLEAR = "clear"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class EditorEvent:
    """A single user action.

    Attributes:
        kind: Action type
        x: Pixel column for clicks
        y: Pixel row for clicks
        line_no: Source line when read from a script (0 otherwise)
    """

    kind: EventKind
    x: int = 0
    y: int = 0
    line_no: int = 0
