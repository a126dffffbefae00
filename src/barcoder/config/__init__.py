"""Configuration management for barcoder.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Bar dimensions, label and colour settings
- OutputConfig: Output file settings
- LoggingConfig: Logging settings
- BarcoderSettings: Main application settings
"""

from barcoder.config.settings import (
    BarcoderSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "BarcoderSettings",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "RenderConfig",
    "get_default_settings",
]
