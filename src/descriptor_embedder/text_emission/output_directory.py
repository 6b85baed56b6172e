"""Generated output file sink."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import BinaryIO


class OutputDirectory:
    """Opens generated files below one root directory."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)
        self._written_files: list[str] = []

    @property
    def root(self) -> Path:
        return self._root

    @property
    def written_files(self) -> tuple[str, ...]:
        return tuple(self._written_files)

    @contextmanager
    def open(self, relative_path: str) -> Iterator[BinaryIO]:
        """Open `relative_path` for writing; the stream is closed on every exit path.

        Raises:
          ValueError: If the path is absolute or escapes the output root.
          OSError: If the file cannot be created or written.
        """
        destination = self._root / _checked_relative_path(relative_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("wb") as stream:
            self._written_files.append(relative_path)
            yield stream


def _checked_relative_path(relative_path: str) -> PurePosixPath:
    candidate = PurePosixPath(relative_path)
    if candidate.is_absolute() or ".." in candidate.parts or not candidate.parts:
        raise ValueError(f"Output path must stay inside the output directory: {relative_path}")
    return candidate
