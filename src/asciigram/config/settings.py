"""Configuration settings for asciigram."""

from pathlib import Path

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """Configuration for the emitted SVG document."""

    backdrop: bool = Field(
        default=False,
        description="Paint a background rectangle behind the drawing",
    )
    disable_text: bool = Field(
        default=False,
        description="Omit leftover characters instead of emitting them as text",
    )
    spaces: int = Field(
        default=2,
        ge=0,
        le=16,
        description="Consecutive spaces that end a text run (0 = one glyph per run)",
    )
    stretch: bool = Field(
        default=False,
        description="Stretch text runs to exactly fill their cells",
    )


class GridConfig(BaseModel):
    """Configuration for turning raw text into a character grid."""

    tab_width: int = Field(
        default=4,
        ge=1,
        le=16,
        description="Columns per tab stop when expanding tabs",
    )
    strip_indent: bool = Field(
        default=True,
        description="Remove indentation common to every line",
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


class AsciigramSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    grid: GridConfig = Field(default_factory=GridConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AsciigramSettings:
    """Get default application settings."""
    return AsciigramSettings()
