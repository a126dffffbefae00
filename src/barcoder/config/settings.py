"""Configuration settings for barcoder."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OutputFormat(str, Enum):
    """File format written by the renderer."""

    SVG = "svg"
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"
    BMP = "bmp"

    @classmethod
    def from_path(cls, path: Path) -> "OutputFormat":
        """Infer the format from a file suffix.

        Raises:
            ValueError: If the suffix is not a supported format
        """
        suffix = path.suffix.lower().lstrip(".")
        if suffix == "jpg":
            suffix = "jpeg"
        return cls(suffix)


class RenderConfig(BaseModel):
    """Configuration for drawing a barcode."""

    bar_width: int = Field(
        default=2,
        ge=1,
        le=50,
        description="Output units per module unit (the X dimension)",
    )
    bar_height: int = Field(
        default=30,
        ge=1,
        le=2000,
        description="Height of the bars",
    )
    draw_text: bool = Field(
        default=True,
        description="Draw the human readable label under the bars",
    )
    quiet_zone: bool = Field(
        default=True,
        description="Draw margins around the symbol",
    )
    font_size: int = Field(
        default=12,
        ge=4,
        le=200,
        description="Label font size in pixels",
    )
    foreground: str = Field(
        default="#000000",
        description="Bar and text colour",
    )
    background: str = Field(
        default="#FFFFFF",
        description="Background colour",
    )


class OutputConfig(BaseModel):
    """Configuration for output files."""

    format: OutputFormat | None = Field(
        default=None,
        description="Output format (None = infer from the file suffix)",
    )
    svg_scalar: float = Field(
        default=1.0,
        gt=0.0,
        le=100.0,
        description="Factor applied to every SVG coordinate",
    )
    svg_units: str = Field(
        default="px",
        description="Unit suffix for SVG coordinates",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file logging)",
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
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            expected = ", ".join(LOG_LEVELS)
            raise ValueError(f"unknown log level '{value}', expected one of {expected}")
        return level


class BarcoderSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BarcoderSettings:
    """Get default application settings."""
    return BarcoderSettings()
