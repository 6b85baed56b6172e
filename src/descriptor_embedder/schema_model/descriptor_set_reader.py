"""Descriptor set loading service."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from google.protobuf import descriptor_pb2
from google.protobuf.message import DecodeError

from .schema_models import SchemaFileDescription, describe_schema_file


class DescriptorSetError(Exception):
    """Raised when a descriptor set cannot be read or linked."""


def read_descriptor_set(descriptor_set_path: Path | str) -> dict[str, SchemaFileDescription]:
    """Read a serialized `FileDescriptorSet` and link its files by dependency name.

    Args:
      descriptor_set_path: File written by `protoc --include_imports --descriptor_set_out`.

    Returns:
      Schema file descriptions keyed by file name, in descriptor set order.

    Raises:
      DescriptorSetError: If the file is missing, undecodable or has unresolved dependencies.
    """
    path = Path(descriptor_set_path)
    if not path.exists():
        raise DescriptorSetError(f"Descriptor set not found: {path}")

    descriptor_set = descriptor_pb2.FileDescriptorSet()
    try:
        descriptor_set.ParseFromString(path.read_bytes())
    except DecodeError as exc:
        raise DescriptorSetError(f"Failed to parse descriptor set {path}: {exc}") from exc
    return link_schema_files(descriptor_set.file)


def link_schema_files(
    descriptor_protos: Sequence[descriptor_pb2.FileDescriptorProto],
) -> dict[str, SchemaFileDescription]:
    """Turn descriptor protos into schema file descriptions with shared dependency objects."""
    protos_by_name: dict[str, descriptor_pb2.FileDescriptorProto] = {}
    for descriptor_proto in descriptor_protos:
        if descriptor_proto.name in protos_by_name:
            raise DescriptorSetError(
                f"Duplicate schema file in descriptor set: {descriptor_proto.name}"
            )
        protos_by_name[descriptor_proto.name] = descriptor_proto

    linked: dict[str, SchemaFileDescription] = {}
    for name in protos_by_name:
        _link_schema_file(name, protos_by_name, linked, visiting=())
    return {name: linked[name] for name in protos_by_name}


def find_root_file_names(schema_files: Mapping[str, SchemaFileDescription]) -> tuple[str, ...]:
    """Return the files that no other file in the set imports, in set order."""
    imported = {
        dependency.name
        for schema_file in schema_files.values()
        for dependency in schema_file.dependencies
    }
    return tuple(name for name in schema_files if name not in imported)


def collect_with_dependencies(
    schema_files: Iterable[SchemaFileDescription],
) -> tuple[SchemaFileDescription, ...]:
    """Return the files and everything they import transitively, dependencies first."""
    collected: dict[str, SchemaFileDescription] = {}
    for schema_file in schema_files:
        _collect_schema_file(schema_file, collected)
    return tuple(collected.values())


def _link_schema_file(
    name: str,
    protos_by_name: Mapping[str, descriptor_pb2.FileDescriptorProto],
    linked: dict[str, SchemaFileDescription],
    visiting: tuple[str, ...],
) -> SchemaFileDescription:
    if name in linked:
        return linked[name]
    if name in visiting:
        cycle = " -> ".join((*visiting, name))
        raise DescriptorSetError(f"Import cycle in descriptor set: {cycle}")
    descriptor_proto = protos_by_name.get(name)
    if descriptor_proto is None:
        importer = visiting[-1] if visiting else "<request>"
        raise DescriptorSetError(
            f"Dependency '{name}' of '{importer}' is missing from descriptor set."
        )

    dependencies = tuple(
        _link_schema_file(dependency_name, protos_by_name, linked, (*visiting, name))
        for dependency_name in descriptor_proto.dependency
    )
    schema_file = describe_schema_file(descriptor_proto, dependencies)
    linked[name] = schema_file
    return schema_file


def _collect_schema_file(
    schema_file: SchemaFileDescription, collected: dict[str, SchemaFileDescription]
) -> None:
    if schema_file.name in collected:
        return
    for dependency in schema_file.dependencies:
        _collect_schema_file(dependency, collected)
    collected[schema_file.name] = schema_file
