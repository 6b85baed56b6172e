"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "descriptor-embedder.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for descriptor-embedder.
# Every key is optional; the values below are the defaults.

generator:
  # Embed an empty descriptor payload instead of the serialized schema file.
  strip_nonfunctional_content: false
  # Lite runtime: no dependency descriptors and no gencode version check.
  restricted_runtime_mode: false
  # Write a <Holder>.java.pb.meta annotation file next to each holder.
  annotate_output: false
  # One of proto_package, java_package, prefixed.
  namespace_style: java_package
  # Skip every schema file when generating for the lite runtime only.
  enforce_lite: false
  gencode_version: "4.31.1"

chunking:
  # Raw bytes per string literal line.
  bytes_per_line: 40
  # Literal lines concatenated into one array element.
  # bytes_per_line * lines_per_group * 2 must stay below 65535.
  lines_per_group: 400
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration with the defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generator configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
