"""Generation run domain exports."""

from .generation_use_case import (
    GenerationRunError,
    describe_outcome,
    execute_generation_run,
    has_descriptor_methods,
    select_default_file_names,
)
from .run_contracts import GenerationArtifacts, GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationArtifacts",
    "GenerationRunError",
    "describe_outcome",
    "execute_generation_run",
    "has_descriptor_methods",
    "select_default_file_names",
]
