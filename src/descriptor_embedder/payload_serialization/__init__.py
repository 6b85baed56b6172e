"""Payload serialization exports."""

from .payload_serializer import (
    SerializationError,
    serialize_payload,
    strip_source_retention_options,
)

__all__ = ["SerializationError", "serialize_payload", "strip_source_retention_options"]
