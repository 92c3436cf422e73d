"""Configuration management for geomkit.

This module provides configuration management using Pydantic models.
Configuration can be built in code, loaded from a dictionary, or left at the
defaults.

Key classes:
- ToleranceConfig: Comparison epsilon and computed coordinate type
- LoggingConfig: Logging settings
- GeomkitSettings: Main library settings
"""

from geomkit.config.settings import (
    CoordType,
    GeomkitSettings,
    LoggingConfig,
    ToleranceConfig,
    get_default_settings,
)

__all__ = [
    "CoordType",
    "GeomkitSettings",
    "LoggingConfig",
    "ToleranceConfig",
    "get_default_settings",
]
