"""Schema model entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from google.protobuf import descriptor_pb2


@dataclass(frozen=True)
class SchemaFileDescription:  # pylint: disable=too-many-instance-attributes
    """Compiled description of one schema file and its ordered dependencies."""

    name: str
    package: str
    dependencies: tuple[SchemaFileDescription, ...] = ()
    java_package: str | None = None
    java_outer_classname: str | None = None
    top_level_type_names: tuple[str, ...] = ()
    optimize_for_lite: bool = False
    descriptor_proto: descriptor_pb2.FileDescriptorProto = field(
        default_factory=descriptor_pb2.FileDescriptorProto,
        compare=False,
        repr=False,
    )


@dataclass(frozen=True)
class DependencyReference:
    """Originating file name paired with the qualified holder type that carries its descriptor."""

    file_name: str
    qualified_holder_name: str


def describe_schema_file(
    descriptor_proto: descriptor_pb2.FileDescriptorProto,
    dependencies: tuple[SchemaFileDescription, ...] = (),
) -> SchemaFileDescription:
    """Build a schema file description from a compiled `FileDescriptorProto`."""
    options = descriptor_proto.options
    top_level_type_names = (
        tuple(message.name for message in descriptor_proto.message_type)
        + tuple(enum.name for enum in descriptor_proto.enum_type)
        + tuple(service.name for service in descriptor_proto.service)
    )
    return SchemaFileDescription(
        name=descriptor_proto.name,
        package=descriptor_proto.package,
        dependencies=dependencies,
        java_package=options.java_package if options.HasField("java_package") else None,
        java_outer_classname=(
            options.java_outer_classname if options.HasField("java_outer_classname") else None
        ),
        top_level_type_names=top_level_type_names,
        optimize_for_lite=options.optimize_for == descriptor_pb2.FileOptions.LITE_RUNTIME,
        descriptor_proto=descriptor_proto,
    )
