"""Configuration management for polyedit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Predicate tolerance and mesh build settings
- ViewportConfig: Pixel-to-NDC viewport size
- LoggingConfig: Logging settings
- PolyEditSettings: Main application settings
"""

from polyedit.config.settings import (
    GeometryConfig,
    LoggingConfig,
    PolyEditSettings,
    ViewportConfig,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PolyEditSettings",
    "ViewportConfig",
    "get_default_settings",
]
