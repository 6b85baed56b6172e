"""Schema model exports."""

from .descriptor_set_reader import (
    DescriptorSetError,
    collect_with_dependencies,
    find_root_file_names,
    link_schema_files,
    read_descriptor_set,
)
from .schema_models import DependencyReference, SchemaFileDescription, describe_schema_file

__all__ = [
    "DependencyReference",
    "SchemaFileDescription",
    "describe_schema_file",
    "DescriptorSetError",
    "collect_with_dependencies",
    "find_root_file_names",
    "link_schema_files",
    "read_descriptor_set",
]
