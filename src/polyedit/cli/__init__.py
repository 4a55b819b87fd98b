"""Command-line interface for polyedit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Orientation and ear classification reports
- Mesh building with JSON export
- Replay of recorded editor sessions
"""

from polyedit.cli.app import cli, main

__all__ = ["cli", "main"]
