"""Configuration management for asciigram.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: SVG document options
- GridConfig: Text normalization options
- LoggingConfig: Logging settings
- AsciigramSettings: Main application settings
"""

from asciigram.config.settings import (
    AsciigramSettings,
    GridConfig,
    LoggingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "AsciigramSettings",
    "GridConfig",
    "LoggingConfig",
    "RenderConfig",
    "get_default_settings",
]
