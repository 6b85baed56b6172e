"""Descriptor emission exports."""

from .descriptor_block_emitter import (
    FILE_DESCRIPTOR_TYPE,
    emit_descriptor_block,
    generate_descriptor_holder,
    prepare_descriptor_holder,
    resolve_dependency_references,
)
from .emission_outcomes import EmissionOutcome, PreparedDescriptorHolder

__all__ = [
    "FILE_DESCRIPTOR_TYPE",
    "emit_descriptor_block",
    "generate_descriptor_holder",
    "prepare_descriptor_holder",
    "resolve_dependency_references",
    "EmissionOutcome",
    "PreparedDescriptorHolder",
]
