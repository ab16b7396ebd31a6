"""Utility functions for asciigram.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics tracking
"""

from asciigram.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
    "get_logger",
]
