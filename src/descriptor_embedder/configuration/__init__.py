"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .generator_settings import DEFAULT_GENCODE_VERSION, GencodeVersion, GeneratorOptions
from .loader import (
    MAX_LITERAL_GROUP_BYTES,
    ConfigurationError,
    load_configuration,
    parse_configuration,
)

__all__ = [
    "DEFAULT_GENCODE_VERSION",
    "GencodeVersion",
    "GeneratorOptions",
    "MAX_LITERAL_GROUP_BYTES",
    "ConfigurationError",
    "load_configuration",
    "parse_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
