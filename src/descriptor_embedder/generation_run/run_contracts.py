"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from descriptor_embedder.configuration.generator_settings import GeneratorOptions
from descriptor_embedder.schema_model.schema_models import SchemaFileDescription


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    descriptor_set_path: str
    output_dir: str
    file_names: tuple[str, ...] = ()
    config_path: str | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    output_dir: Path
    generated_files: tuple[str, ...]
    annotation_files: tuple[str, ...]
    skipped_file_names: tuple[str, ...]


@dataclass(frozen=True)
class GenerationArtifacts:
    """Loaded inputs required during a generation run."""

    options: GeneratorOptions
    schema_files: tuple[SchemaFileDescription, ...]
