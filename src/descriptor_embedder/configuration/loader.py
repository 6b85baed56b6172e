"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from descriptor_embedder.naming.name_resolver import NamespaceStyle

from .generator_settings import DEFAULT_GENCODE_VERSION, GencodeVersion, GeneratorOptions

# Largest constant a Java class file can hold, in modified UTF-8 bytes.
MAX_LITERAL_GROUP_BYTES = 65535
# Escaped bytes above 0x7F and NUL take two bytes each in modified UTF-8.
_WORST_CASE_BYTES_PER_INPUT_BYTE = 2
_GENCODE_VERSION_PATTERN = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z.-]+))?")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GeneratorOptions:
    """Load and validate the generator configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return parse_configuration(parsed)


def parse_configuration(parsed: Mapping[str, Any]) -> GeneratorOptions:
    """Build generator options from an already parsed configuration mapping."""
    generator = _optional_mapping(parsed.get("generator"), "generator")
    chunking = _optional_mapping(parsed.get("chunking"), "chunking")

    bytes_per_line = _require_positive_int(
        chunking.get("bytes_per_line", GeneratorOptions.bytes_per_line), "chunking.bytes_per_line"
    )
    lines_per_group = _require_positive_int(
        chunking.get("lines_per_group", GeneratorOptions.lines_per_group),
        "chunking.lines_per_group",
    )
    worst_case_group_bytes = bytes_per_line * lines_per_group * _WORST_CASE_BYTES_PER_INPUT_BYTE
    if worst_case_group_bytes >= MAX_LITERAL_GROUP_BYTES:
        raise ConfigurationError(
            "chunking.bytes_per_line * chunking.lines_per_group is too large: one literal group "
            f"may reach {worst_case_group_bytes} bytes (limit {MAX_LITERAL_GROUP_BYTES})."
        )

    return GeneratorOptions(
        strip_nonfunctional_content=_optional_bool(
            generator.get("strip_nonfunctional_content"), "generator.strip_nonfunctional_content"
        ),
        restricted_runtime_mode=_optional_bool(
            generator.get("restricted_runtime_mode"), "generator.restricted_runtime_mode"
        ),
        annotate_output=_optional_bool(
            generator.get("annotate_output"), "generator.annotate_output"
        ),
        namespace_style=_parse_namespace_style(generator.get("namespace_style")),
        enforce_lite=_optional_bool(generator.get("enforce_lite"), "generator.enforce_lite"),
        bytes_per_line=bytes_per_line,
        lines_per_group=lines_per_group,
        gencode_version=_parse_gencode_version(generator.get("gencode_version")),
    )


def _parse_namespace_style(value: Any) -> NamespaceStyle:
    if value is None:
        return GeneratorOptions.namespace_style
    if not isinstance(value, str):
        raise ConfigurationError("generator.namespace_style must be a string.")
    try:
        return NamespaceStyle(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(style.value for style in NamespaceStyle)
        raise ConfigurationError(
            f"generator.namespace_style '{value}' is not one of: {choices}."
        ) from exc


def _parse_gencode_version(value: Any) -> GencodeVersion:
    if value is None:
        return DEFAULT_GENCODE_VERSION
    if not isinstance(value, str):
        raise ConfigurationError("generator.gencode_version must be a string.")
    match = _GENCODE_VERSION_PATTERN.fullmatch(value.strip())
    if match is None:
        raise ConfigurationError(
            f"generator.gencode_version '{value}' must look like MAJOR.MINOR.PATCH[-SUFFIX]."
        )
    major, minor, patch, suffix = match.groups()
    return GencodeVersion(major=int(major), minor=int(minor), patch=int(patch), suffix=suffix or "")


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
