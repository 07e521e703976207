"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, load_schema_file
from .runtime_settings import OUTPUT_FORMATS, Configuration, OutputSettings, SchemaConfig

__all__ = [
    "Configuration",
    "OutputSettings",
    "SchemaConfig",
    "OUTPUT_FORMATS",
    "ConfigurationError",
    "load_configuration",
    "load_schema_file",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
