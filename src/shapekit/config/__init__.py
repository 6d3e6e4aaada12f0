"""Configuration management for shapekit.

This module provides configuration management using Pydantic models.
Geometry settings are held per context and can be overridden temporarily.

Key classes:
- GeometrySettings: Tolerances and y-axis convention
- LoggingConfig: Logging settings
- ShapekitSettings: Main application settings
"""

from shapekit.config.settings import (
    LOG_LEVELS,
    GeometrySettings,
    LoggingConfig,
    ShapekitSettings,
    get_default_settings,
    get_settings,
    override_settings,
    reset_settings,
    resolve_angle_tolerance,
    resolve_tolerance,
    set_settings,
)

__all__ = [
    "LOG_LEVELS",
    "GeometrySettings",
    "LoggingConfig",
    "ShapekitSettings",
    "get_default_settings",
    "get_settings",
    "override_settings",
    "reset_settings",
    "resolve_angle_tolerance",
    "resolve_tolerance",
    "set_settings",
]
