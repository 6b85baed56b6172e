"""Holder type and namespace naming service."""

from __future__ import annotations

import re
from enum import Enum

from descriptor_embedder.schema_model.schema_models import (
    DependencyReference,
    SchemaFileDescription,
)

DEFAULT_PACKAGE_PREFIX = "com.google.protos"
_OUTER_CLASS_SUFFIX = "OuterClass"
_JAVA_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class NameResolutionError(Exception):
    """Raised when a holder type name or namespace cannot be derived."""


class NamespaceStyle(str, Enum):
    """How the namespace of a generated holder type is chosen."""

    PROTO_PACKAGE = "proto_package"
    JAVA_PACKAGE = "java_package"
    PREFIXED = "prefixed"


class NameResolver:
    """Resolve holder type names for one generation run.

    Holder names are cached per schema file name on the instance, so a resolver
    must not be shared across runs that use different descriptor sets.
    """

    def __init__(self, namespace_style: NamespaceStyle = NamespaceStyle.JAVA_PACKAGE) -> None:
        self._namespace_style = namespace_style
        self._holder_names: dict[str, str] = {}

    def holder_type_name(self, schema_file: SchemaFileDescription) -> str:
        """Return the simple name of the type holding the file's descriptor."""
        cached = self._holder_names.get(schema_file.name)
        if cached is not None:
            return cached
        holder_name = _derive_holder_type_name(schema_file)
        self._holder_names[schema_file.name] = holder_name
        return holder_name

    def namespace(self, schema_file: SchemaFileDescription) -> str:
        """Return the dotted namespace of the holder type, possibly empty."""
        if self._namespace_style is NamespaceStyle.PROTO_PACKAGE:
            namespace = schema_file.package
        elif schema_file.java_package is not None:
            namespace = schema_file.java_package
        elif self._namespace_style is NamespaceStyle.PREFIXED:
            parts = (DEFAULT_PACKAGE_PREFIX, schema_file.package)
            namespace = ".".join(part for part in parts if part)
        else:
            namespace = schema_file.package
        _validate_namespace(namespace, schema_file.name)
        return namespace

    def qualified_holder_name(self, schema_file: SchemaFileDescription) -> str:
        namespace = self.namespace(schema_file)
        holder_name = self.holder_type_name(schema_file)
        return f"{namespace}.{holder_name}" if namespace else holder_name

    def dependency_reference(self, schema_file: SchemaFileDescription) -> DependencyReference:
        return DependencyReference(
            file_name=schema_file.name,
            qualified_holder_name=self.qualified_holder_name(schema_file),
        )


def underscores_to_camel_case(text: str) -> str:
    """Convert `foo_bar-baz2qux` style text to `FooBarBaz2Qux`."""
    result: list[str] = []
    capitalize_next = True
    for character in text:
        if "a" <= character <= "z":
            result.append(character.upper() if capitalize_next else character)
            capitalize_next = False
        elif "A" <= character <= "Z":
            result.append(character)
            capitalize_next = False
        elif "0" <= character <= "9":
            result.append(character)
            capitalize_next = True
        else:
            capitalize_next = True
    return "".join(result)


def _derive_holder_type_name(schema_file: SchemaFileDescription) -> str:
    if schema_file.java_outer_classname:
        holder_name = schema_file.java_outer_classname
    else:
        base_name = schema_file.name.rsplit("/", 1)[-1]
        base_name = base_name.removesuffix(".protodevel").removesuffix(".proto")
        holder_name = underscores_to_camel_case(base_name)
        if holder_name in schema_file.top_level_type_names:
            holder_name += _OUTER_CLASS_SUFFIX
    if not _JAVA_IDENTIFIER.fullmatch(holder_name):
        raise NameResolutionError(
            f"Cannot derive a holder type name for '{schema_file.name}': '{holder_name}'"
        )
    return holder_name


def _validate_namespace(namespace: str, file_name: str) -> None:
    if not namespace:
        return
    for segment in namespace.split("."):
        if not _JAVA_IDENTIFIER.fullmatch(segment):
            raise NameResolutionError(f"Malformed namespace '{namespace}' for '{file_name}'.")
