"""Configuration settings for geomkit."""

from contextlib import AbstractContextManager
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from geomkit.utils.tolerance import DEFAULT_EPSILON, using_epsilon


class CoordType(str, Enum):
    """Type computed coordinates are round-cast to."""

    FLOAT = "float"
    INT = "int"

    @property
    def python_type(self) -> type:
        return int if self is CoordType.INT else float


class ToleranceConfig(BaseModel):
    """Configuration for numeric comparisons.

    The epsilon is relative: two values compare equal when their difference
    is within ``epsilon * (|a| + |b| + 1)``.

    Operations take the coordinate type as an argument, so pass
    ``coord_type=config.python_type`` to ``overlap``, ``rotate`` and the
    other computing functions.
    """

    epsilon: float = Field(
        default=DEFAULT_EPSILON,
        gt=0.0,
        le=1e-2,
        description="Relative epsilon for tolerant comparisons",
    )
    coord_type: CoordType = Field(
        default=CoordType.FLOAT,
        description="Type for coordinates produced by intersections and transforms",
    )

    @property
    def python_type(self) -> type:
        """Python type to pass as ``coord_type`` to computing functions."""
        return self.coord_type.python_type

    def apply(self) -> AbstractContextManager[float]:
        """Use this epsilon for comparisons inside a ``with`` block."""
        return using_epsilon(self.epsilon)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if None)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GeomkitSettings(BaseModel):
    """Main library settings."""

    tolerance: ToleranceConfig = Field(default_factory=ToleranceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GeomkitSettings:
    """Get default library settings."""
    return GeomkitSettings()
