"""Configuration settings for Polyedit."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometric predicates and mesh construction.

    Coordinates live in normalized device space ([-1, 1] on both axes), so
    doubled triangle areas never exceed 8. The collinearity tolerance is
    expressed in those units.
    """

    collinear_epsilon: float = Field(
        default=1e-12,
        ge=0.0,
        le=1e-3,
        description="Doubled-area tolerance for collinearity (0 = exact comparison)",
    )
    orientation_anchor: tuple[float, float] = Field(
        default=(1.1, 1.1),
        description="Fan anchor for orientation classification (outside NDC range)",
    )
    check_simple: bool = Field(
        default=False,
        description="Reject self-intersecting polygons at build time",
    )


class ViewportConfig(BaseModel):
    """Editor viewport used to map pixel clicks into NDC."""

    width: int = Field(
        default=800,
        ge=2,
        description="Viewport width in pixels",
    )
    height: int = Field(
        default=600,
        ge=2,
        description="Viewport height in pixels",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyEditSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyEditSettings:
    """Get default application settings."""
    return PolyEditSettings()
