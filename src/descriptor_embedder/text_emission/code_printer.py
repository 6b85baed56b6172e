"""Template printer with indentation tracking and annotation spans."""

from __future__ import annotations

from collections.abc import Mapping
from typing import BinaryIO

from .annotation_collector import AnnotationCollector

INDENT_STEP = "  "


class PrinterError(Exception):
    """Raised for malformed templates or invalid printer state."""


class CodePrinter:
    """Writes `$variable$` templates to a binary stream.

    Indentation is inserted at the start of every non-empty line. The byte span
    of the latest substitution of each variable is remembered so that
    `annotate` can map it back to a source file.
    """

    def __init__(
        self,
        stream: BinaryIO,
        *,
        delimiter: str = "$",
        annotation_collector: AnnotationCollector | None = None,
    ) -> None:
        if len(delimiter) != 1:
            raise PrinterError("Printer delimiter must be a single character.")
        self._stream = stream
        self._delimiter = delimiter
        self._annotation_collector = annotation_collector
        self._indent = ""
        self._at_line_start = True
        self._offset = 0
        self._spans: dict[str, tuple[int, int]] = {}

    def print(self, template: str, substitutions: Mapping[str, str] | None = None) -> None:
        """Print `template`, replacing `$name$` with `substitutions[name]` and `$$` with `$`."""
        values = substitutions or {}
        parts = template.split(self._delimiter)
        if len(parts) % 2 == 0:
            raise PrinterError(f"Unclosed variable in template: {template!r}")

        for index, part in enumerate(parts):
            if index % 2 == 0:
                self._write(part)
            elif not part:
                self._write(self._delimiter)
            elif part not in values:
                raise PrinterError(f"Undefined variable in template: {part}")
            else:
                self._write_variable(part, str(values[part]))

    def indent(self) -> None:
        self._indent += INDENT_STEP

    def outdent(self) -> None:
        if not self._indent:
            raise PrinterError("Outdent called without a matching indent.")
        self._indent = self._indent[: -len(INDENT_STEP)]

    def annotate(self, variable: str, source_file: str) -> None:
        """Record that the last substitution of `variable` originates from `source_file`."""
        if self._annotation_collector is None:
            return
        span = self._spans.get(variable)
        if span is None:
            raise PrinterError(f"Cannot annotate variable that was never printed: {variable}")
        begin, end = span
        self._annotation_collector.add_annotation(begin, end, source_file)

    def _write_variable(self, name: str, value: str) -> None:
        if value and self._at_line_start and not value.startswith("\n"):
            self._emit(self._indent)
            self._at_line_start = False
        begin = self._offset
        self._write(value)
        self._spans[name] = (begin, self._offset)

    def _write(self, text: str) -> None:
        start = 0
        while start < len(text):
            newline = text.find("\n", start)
            line = text[start:] if newline == -1 else text[start : newline + 1]
            if self._at_line_start and line != "\n":
                self._emit(self._indent)
            self._emit(line)
            self._at_line_start = line.endswith("\n")
            start += len(line)

    def _emit(self, text: str) -> None:
        if not text:
            return
        encoded = text.encode("utf-8")
        self._stream.write(encoded)
        self._offset += len(encoded)
