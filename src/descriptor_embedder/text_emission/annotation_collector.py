"""Source-position annotation collection."""

from __future__ import annotations

from collections.abc import Sequence

from google.protobuf import descriptor_pb2


class AnnotationCollector:
    """Accumulates generated-code annotations into a `GeneratedCodeInfo` record."""

    def __init__(self) -> None:
        self._info = descriptor_pb2.GeneratedCodeInfo()

    def add_annotation(
        self, begin: int, end: int, source_file: str, path: Sequence[int] = ()
    ) -> None:
        """Map the `[begin, end)` byte span of generated text back to `source_file`."""
        annotation = self._info.annotation.add()
        annotation.source_file = source_file
        annotation.begin = begin
        annotation.end = end
        annotation.path.extend(path)

    @property
    def annotations(self) -> tuple[descriptor_pb2.GeneratedCodeInfo.Annotation, ...]:
        return tuple(self._info.annotation)

    def serialize(self) -> bytes:
        return self._info.SerializeToString()
