"""Chunk encoding exports."""

from .chunk_encoder import (
    DEFAULT_BYTES_PER_LINE,
    DEFAULT_LINES_PER_GROUP,
    ChunkGroup,
    decode_chunk_groups,
    encode_chunks,
)
from .literal_escaping import LiteralEscapeError, escape_literal_bytes, unescape_literal

__all__ = [
    "DEFAULT_BYTES_PER_LINE",
    "DEFAULT_LINES_PER_GROUP",
    "ChunkGroup",
    "decode_chunk_groups",
    "encode_chunks",
    "LiteralEscapeError",
    "escape_literal_bytes",
    "unescape_literal",
]
