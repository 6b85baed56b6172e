"""Descriptor emission entities."""

from __future__ import annotations

from dataclasses import dataclass

from descriptor_embedder.chunk_encoding.chunk_encoder import ChunkGroup
from descriptor_embedder.schema_model.schema_models import DependencyReference


@dataclass(frozen=True)
class PreparedDescriptorHolder:
    """Everything needed to print one holder type, computed before any output is opened."""

    source_file_name: str
    holder_name: str
    namespace: str
    chunk_groups: tuple[ChunkGroup, ...]
    dependency_references: tuple[DependencyReference, ...]

    @property
    def java_file_path(self) -> str:
        package_dir = f"{self.namespace.replace('.', '/')}/" if self.namespace else ""
        return f"{package_dir}{self.holder_name}.java"

    @property
    def annotation_file_path(self) -> str:
        return f"{self.java_file_path}.pb.meta"

    @property
    def annotation_relative_path(self) -> str:
        return f"{self.holder_name}.java.pb.meta"


@dataclass(frozen=True)
class EmissionOutcome:
    """Files written for one schema file, relative to the output directory."""

    generated_files: tuple[str, ...]
    annotation_files: tuple[str, ...] = ()
