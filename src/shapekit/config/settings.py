"""Configuration settings for Shapekit.

The active geometry settings live in a context variable so that a caller can
temporarily change tolerances or the y-axis convention for a block of code
without affecting other threads or tasks.
"""

import math
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class GeometrySettings(BaseModel):
    """Tolerances and conventions shared by every geometric algorithm."""

    model_config = ConfigDict(frozen=True)

    absolute_tolerance: float = Field(
        default=1e-6,
        ge=0.0,
        description="Distance below which two values are considered equal",
    )
    angle_tolerance: float = Field(
        default=math.pi / 180,
        ge=0.0,
        le=math.pi,
        description="Angle in radians below which two directions are considered equal",
    )
    invert_y: bool = Field(
        default=False,
        description="Treat the y-axis as pointing down (screen coordinates)",
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

    @field_validator("log_level", "file_log_level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class ShapekitSettings(BaseModel):
    """Main application settings."""

    geometry: GeometrySettings = Field(default_factory=GeometrySettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapekitSettings:
    """Get default application settings."""
    return ShapekitSettings()


_DEFAULT_GEOMETRY = GeometrySettings()
_current: ContextVar[GeometrySettings] = ContextVar(
    "shapekit_geometry_settings", default=_DEFAULT_GEOMETRY
)


def get_settings() -> GeometrySettings:
    """Return the geometry settings active in the current context."""
    return _current.get()


def set_settings(settings: GeometrySettings) -> None:
    """Replace the geometry settings for the current context.

    Args:
        settings: New settings to activate
    """
    _current.set(settings)


def reset_settings() -> None:
    """Restore the default geometry settings for the current context."""
    _current.set(_DEFAULT_GEOMETRY)


@contextmanager
def override_settings(**changes: Any) -> Iterator[GeometrySettings]:
    """Temporarily change geometry settings.

    Args:
        **changes: Field values to override, e.g. ``invert_y=True``

    Yields:
        The settings active inside the block

    Example:
        >>> with override_settings(absolute_tolerance=1e-3):
        ...     get_settings().absolute_tolerance
        0.001
    """
    updated = GeometrySettings.model_validate(get_settings().model_dump() | changes)
    token = _current.set(updated)
    try:
        yield updated
    finally:
        _current.reset(token)


def resolve_tolerance(tolerance: float | None) -> float:
    """Return ``tolerance`` or the configured absolute tolerance when None."""
    if tolerance is None:
        return _current.get().absolute_tolerance
    return tolerance


def resolve_angle_tolerance(angle_tolerance: float | None) -> float:
    """Return ``angle_tolerance`` or the configured angle tolerance when None."""
    if angle_tolerance is None:
        return _current.get().angle_tolerance
    return angle_tolerance
