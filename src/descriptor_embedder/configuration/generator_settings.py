"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from descriptor_embedder.chunk_encoding.chunk_encoder import (
    DEFAULT_BYTES_PER_LINE,
    DEFAULT_LINES_PER_GROUP,
)
from descriptor_embedder.naming.name_resolver import NamespaceStyle


@dataclass(frozen=True)
class GencodeVersion:
    """Runtime version the generated code is validated against."""

    major: int
    minor: int
    patch: int
    suffix: str = ""

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        return f"{version}-{self.suffix}" if self.suffix else version


DEFAULT_GENCODE_VERSION = GencodeVersion(major=4, minor=31, patch=1)


@dataclass(frozen=True)
class GeneratorOptions:  # pylint: disable=too-many-instance-attributes
    """Options controlling descriptor holder generation."""

    strip_nonfunctional_content: bool = False
    restricted_runtime_mode: bool = False
    annotate_output: bool = False
    namespace_style: NamespaceStyle = NamespaceStyle.JAVA_PACKAGE
    enforce_lite: bool = False
    bytes_per_line: int = DEFAULT_BYTES_PER_LINE
    lines_per_group: int = DEFAULT_LINES_PER_GROUP
    gencode_version: GencodeVersion = field(default=DEFAULT_GENCODE_VERSION)
