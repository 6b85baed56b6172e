"""Descriptor payload serialization service."""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.descriptor import FieldDescriptor
from google.protobuf.message import DecodeError, EncodeError, Message

from descriptor_embedder.schema_model import SchemaFileDescription, collect_with_dependencies

DESCRIPTOR_SCHEMA_FILE_NAME = "google/protobuf/descriptor.proto"
_FILE_DESCRIPTOR_PROTO_TYPE = "google.protobuf.FileDescriptorProto"


class SerializationError(Exception):
    """Raised when a schema file description cannot be serialized."""


def serialize_payload(
    schema_file: SchemaFileDescription, *, strip_nonfunctional_content: bool = False
) -> bytes:
    """Serialize a redacted copy of the file's descriptor proto.

    Source code info and source-retention options never reach the payload,
    including custom options declared in the file's imports. With
    `strip_nonfunctional_content` the payload is an empty message, which
    serializes to zero bytes.

    Raises:
      SerializationError: If the descriptor proto cannot be encoded.
    """
    payload = _copy_with_custom_options(schema_file)
    payload.ClearField("source_code_info")
    strip_source_retention_options(payload)
    if strip_nonfunctional_content:
        payload.Clear()

    try:
        return payload.SerializeToString()
    except EncodeError as exc:
        raise SerializationError(f"Failed to serialize '{schema_file.name}': {exc}") from exc


def strip_source_retention_options(message: Message) -> None:
    """Clear every field and extension declared with `retention = RETENTION_SOURCE`, recursively."""
    for field_descriptor, value in message.ListFields():
        if _has_source_retention(field_descriptor):
            if field_descriptor.is_extension:
                message.ClearExtension(field_descriptor)
            else:
                message.ClearField(field_descriptor.name)
            continue
        if field_descriptor.message_type is None:
            continue
        if field_descriptor.message_type.GetOptions().map_entry:
            value_field = field_descriptor.message_type.fields_by_name["value"]
            if value_field.message_type is not None:
                for item in value.values():
                    strip_source_retention_options(item)
        elif isinstance(value, Message):
            strip_source_retention_options(value)
        else:
            for item in value:
                strip_source_retention_options(item)


def _has_source_retention(field_descriptor: FieldDescriptor) -> bool:
    options = field_descriptor.GetOptions()
    return options.retention == descriptor_pb2.FieldOptions.RETENTION_SOURCE


def _copy_with_custom_options(schema_file: SchemaFileDescription) -> Message:
    """Copy the descriptor proto with the custom options of its imports parsed as extensions.

    Custom options can only be declared by files importing `descriptor.proto`;
    without it among the imports the generated `FileDescriptorProto` is used.
    """
    schema_files = collect_with_dependencies((schema_file,))
    if all(candidate.name != DESCRIPTOR_SCHEMA_FILE_NAME for candidate in schema_files):
        payload = descriptor_pb2.FileDescriptorProto()
        payload.CopyFrom(schema_file.descriptor_proto)
        return payload

    pool = descriptor_pool.DescriptorPool()
    try:
        for candidate in schema_files:
            pool.AddSerializedFile(candidate.descriptor_proto.SerializeToString())
        message_classes = message_factory.GetMessageClassesForFiles(
            [candidate.name for candidate in schema_files], pool
        )
        payload_class = message_classes[_FILE_DESCRIPTOR_PROTO_TYPE]
        return payload_class.FromString(schema_file.descriptor_proto.SerializeToString())
    except (EncodeError, DecodeError, TypeError, KeyError) as exc:
        raise SerializationError(
            f"Failed to resolve custom options of '{schema_file.name}': {exc}"
        ) from exc
