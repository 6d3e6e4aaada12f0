"""Utility functions for shapekit.

This module provides logging setup and configuration.
"""

from shapekit.utils.logging import configure_logging

__all__ = ["configure_logging"]
