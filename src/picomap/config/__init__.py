"""Configuration loading, schema, and defaults."""

from picomap.config.loader import ConfigError, load_config
from picomap.config.schema import OutputFormat, PicomapConfig, Smoothing

__all__ = [
    "ConfigError",
    "OutputFormat",
    "PicomapConfig",
    "Smoothing",
    "load_config",
]
