"""Command-line interface for shapekit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Polygon measurements and point containment checks
- Boolean operations between polygon files
- Configurable tolerance and y-axis convention
"""

from shapekit.cli.app import cli, main

__all__ = ["cli", "main"]
