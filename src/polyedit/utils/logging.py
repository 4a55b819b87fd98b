"""Logging utilities for Polyedit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from polyedit.domain import InitialMesh
from polyedit.domain.point import WindingDirection


@dataclass
class BuildStats:
    """Statistics from an editor session."""

    points_added: int = 0
    builds: int = 0
    failed_builds: int = 0
    clears: int = 0
    last_edge_count: int = 0
    last_winding: WindingDirection | None = None
    errors: list[str] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polyedit")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class BuildLogger:
    """Logger for editor events and mesh build statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger("polyedit.session")
        self._stats = BuildStats()

    def log_point_added(self, index: int, x: float, y: float) -> None:
        """Log a clicked point."""
        self._logger.debug("Point added", index=index, x=round(x, 4), y=round(y, 4))
        self._stats.points_added += 1

    def log_build_complete(self, mesh: InitialMesh, face_count: int) -> None:
        """Log a successful mesh build."""
        winding = mesh.winding.name if mesh.winding else None
        self._logger.info(
            "Mesh built",
            vertices=len(mesh.vertices),
            edges=mesh.edge_count,
            half_edges=len(mesh.half_edges),
            faces=face_count,
            winding=winding,
        )
        self._stats.builds += 1
        self._stats.last_edge_count = mesh.edge_count
        self._stats.last_winding = mesh.winding

    def log_build_error(self, point_count: int, error: Exception) -> None:
        """Log a rejected mesh build."""
        self._logger.info(
            "Mesh build failed",
            points=point_count,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_builds += 1
        self._stats.errors.append(str(error))

    def log_cleared(self, discarded: int) -> None:
        """Log a cleared point list."""
        self._logger.debug("Points cleared", discarded=discarded)
        self._stats.clears += 1

    def log_classification(self, index: int, angle: str, ear: bool | None) -> None:
        """Log the diagnostic classification of one vertex."""
        self._logger.debug("Vertex classified", index=index, angle=angle, ear=ear)

    @property
    def stats(self) -> BuildStats:
        """Get current session statistics."""
        return self._stats
