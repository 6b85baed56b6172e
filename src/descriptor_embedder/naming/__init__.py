"""Naming exports."""

from .name_resolver import (
    NameResolutionError,
    NameResolver,
    NamespaceStyle,
    underscores_to_camel_case,
)

__all__ = [
    "NameResolutionError",
    "NameResolver",
    "NamespaceStyle",
    "underscores_to_camel_case",
]
