"""Chunk encoding service for embedded descriptor payloads."""

from __future__ import annotations

from dataclasses import dataclass

from .literal_escaping import escape_literal_bytes, unescape_literal

DEFAULT_BYTES_PER_LINE = 40
DEFAULT_LINES_PER_GROUP = 400


@dataclass(frozen=True)
class ChunkGroup:
    """Escaped chunk literals concatenated into one literal expression."""

    chunks: tuple[str, ...]

    def decode(self) -> bytes:
        """Return the raw bytes covered by this group."""
        return b"".join(unescape_literal(chunk) for chunk in self.chunks)


def encode_chunks(data: bytes, bytes_per_line: int, lines_per_group: int) -> tuple[ChunkGroup, ...]:
    """Split `data` into escaped chunks of at most `bytes_per_line` raw bytes.

    A new group starts once the current group holds `lines_per_group` chunks.
    Empty data still yields one group holding one empty chunk, so the
    generated literal array always has at least one element.

    Raises:
      ValueError: If either limit is smaller than one.
    """
    if bytes_per_line < 1:
        raise ValueError("bytes_per_line must be at least 1.")
    if lines_per_group < 1:
        raise ValueError("lines_per_group must be at least 1.")

    if not data:
        return (ChunkGroup(chunks=("",)),)

    groups: list[ChunkGroup] = []
    current: list[str] = []
    for offset in range(0, len(data), bytes_per_line):
        if len(current) == lines_per_group:
            groups.append(ChunkGroup(chunks=tuple(current)))
            current = []
        current.append(escape_literal_bytes(data[offset : offset + bytes_per_line]))
    groups.append(ChunkGroup(chunks=tuple(current)))
    return tuple(groups)


def decode_chunk_groups(groups: tuple[ChunkGroup, ...]) -> bytes:
    """Concatenate and unescape every group in order."""
    return b"".join(group.decode() for group in groups)
