"""Generation run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path

from descriptor_embedder.configuration import (
    ConfigurationError,
    GeneratorOptions,
    load_configuration,
)
from descriptor_embedder.descriptor_emission import EmissionOutcome, generate_descriptor_holder
from descriptor_embedder.naming import NameResolutionError, NameResolver
from descriptor_embedder.payload_serialization import SerializationError
from descriptor_embedder.schema_model import (
    DescriptorSetError,
    SchemaFileDescription,
    collect_with_dependencies,
    find_root_file_names,
    read_descriptor_set,
)
from descriptor_embedder.text_emission import OutputDirectory, PrinterError

from .run_contracts import GenerationArtifacts, GenerationOutcome, GenerationRequest

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

RUNTIME_SCHEMA_PREFIX = "google/protobuf/"

HolderGenerator = Callable[..., EmissionOutcome]


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation_run(
    request: GenerationRequest,
    *,
    holder_generator: HolderGenerator | None = None,
) -> GenerationOutcome:
    """Generate descriptor holders for every requested schema file and return the run outcome.

    Files are processed one after another; the first failure aborts the run.
    Holders already written for earlier files stay on disk.
    """
    resolved_holder_generator = holder_generator or generate_descriptor_holder

    artifacts = _load_generation_artifacts(request)
    output_directory = OutputDirectory(request.output_dir)
    resolver = NameResolver(artifacts.options.namespace_style)

    generated_files: list[str] = []
    annotation_files: list[str] = []
    skipped_file_names: list[str] = []
    for schema_file in artifacts.schema_files:
        if not has_descriptor_methods(schema_file, artifacts.options):
            _LOGGER.info("Skipping %s: generated for the lite runtime only.", schema_file.name)
            skipped_file_names.append(schema_file.name)
            continue
        try:
            outcome = resolved_holder_generator(
                schema_file,
                resolver=resolver,
                options=artifacts.options,
                output_directory=output_directory,
            )
        except (SerializationError, NameResolutionError, PrinterError, OSError, ValueError) as exc:
            raise GenerationRunError(f"{schema_file.name}: {exc}") from exc
        _LOGGER.debug("Generated %s from %s.", ", ".join(outcome.generated_files), schema_file.name)
        generated_files.extend(outcome.generated_files)
        annotation_files.extend(outcome.annotation_files)

    return GenerationOutcome(
        output_dir=output_directory.root.resolve(),
        generated_files=tuple(generated_files),
        annotation_files=tuple(annotation_files),
        skipped_file_names=tuple(skipped_file_names),
    )


def has_descriptor_methods(schema_file: SchemaFileDescription, options: GeneratorOptions) -> bool:
    """Return whether a descriptor holder should be generated for the file at all."""
    return not options.enforce_lite and not schema_file.optimize_for_lite


def select_default_file_names(schema_files: Mapping[str, SchemaFileDescription]) -> tuple[str, ...]:
    """Return the root files and everything they import, dependencies first.

    Files under `google/protobuf/` ship with the runtime and are left out.
    """
    roots = [schema_files[name] for name in find_root_file_names(schema_files)]
    return tuple(
        schema_file.name
        for schema_file in collect_with_dependencies(roots)
        if not schema_file.name.startswith(RUNTIME_SCHEMA_PREFIX)
    )


def _load_generation_artifacts(request: GenerationRequest) -> GenerationArtifacts:
    try:
        options = (
            load_configuration(request.config_path) if request.config_path else GeneratorOptions()
        )
        schema_files_by_name = read_descriptor_set(request.descriptor_set_path)
    except (ConfigurationError, DescriptorSetError, OSError) as exc:
        raise GenerationRunError(str(exc)) from exc

    file_names = request.file_names or select_default_file_names(schema_files_by_name)
    unknown = [name for name in file_names if name not in schema_files_by_name]
    if unknown:
        raise GenerationRunError(
            f"Schema files not found in descriptor set: {', '.join(unknown)}"
        )
    return GenerationArtifacts(
        options=options,
        schema_files=tuple(schema_files_by_name[name] for name in file_names),
    )


def describe_outcome(outcome: GenerationOutcome) -> list[Path]:
    """Return absolute paths of every file written by the run."""
    return [
        outcome.output_dir / relative_path
        for relative_path in (*outcome.generated_files, *outcome.annotation_files)
    ]
