"""Utility functions for polyedit.

This module provides utility functions including:

- Logging setup and configuration
- Per-session build statistics
"""

from polyedit.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
)

__all__ = [
    "BuildLogger",
    "BuildStats",
    "configure_logging",
]
