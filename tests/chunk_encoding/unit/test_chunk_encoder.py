"""Chunk encoder tests."""

from __future__ import annotations

import pytest
from descriptor_embedder.chunk_encoding import (
    DEFAULT_BYTES_PER_LINE,
    DEFAULT_LINES_PER_GROUP,
    ChunkGroup,
    decode_chunk_groups,
    encode_chunks,
    unescape_literal,
)

_ALL_BYTE_VALUES = bytes(range(256))


def test_forty_five_bytes_produce_one_group_with_two_chunks() -> None:
    data = bytes((index * 37) % 256 for index in range(45))

    groups = encode_chunks(data, DEFAULT_BYTES_PER_LINE, DEFAULT_LINES_PER_GROUP)

    assert len(groups) == 1
    assert len(groups[0].chunks) == 2
    assert unescape_literal(groups[0].chunks[0]) == data[:40]
    assert unescape_literal(groups[0].chunks[1]) == data[40:]


def test_empty_data_produces_exactly_one_empty_chunk() -> None:
    groups = encode_chunks(b"", DEFAULT_BYTES_PER_LINE, DEFAULT_LINES_PER_GROUP)

    assert groups == (ChunkGroup(chunks=("",)),)
    assert groups[0].decode() == b""


def test_sixteen_thousand_lines_split_into_groups_at_group_boundaries() -> None:
    data = _ALL_BYTE_VALUES * 2500
    group_bytes = DEFAULT_BYTES_PER_LINE * DEFAULT_LINES_PER_GROUP

    groups = encode_chunks(data, DEFAULT_BYTES_PER_LINE, DEFAULT_LINES_PER_GROUP)

    assert sum(len(group.chunks) for group in groups) == 16000
    assert len(groups) == 40
    for index, group in enumerate(groups):
        assert len(group.chunks) == DEFAULT_LINES_PER_GROUP
        assert group.decode() == data[index * group_bytes : (index + 1) * group_bytes]


def test_partial_last_group_holds_the_remaining_chunks() -> None:
    data = _ALL_BYTE_VALUES * 10 + b"xyz"

    groups = encode_chunks(data, 16, 7)

    total_chunks = -(-len(data) // 16)
    assert len(groups) == -(-total_chunks // 7)
    assert all(len(group.chunks) == 7 for group in groups[:-1])
    assert len(groups[-1].chunks) == total_chunks - 7 * (len(groups) - 1)
    assert unescape_literal(groups[-1].chunks[-1]) == data[-(len(data) % 16) :]


@pytest.mark.parametrize(
    ("bytes_per_line", "lines_per_group"),
    [(1, 1), (1, 5), (3, 2), (40, 400), (255, 1), (256, 3), (1000, 1)],
)
def test_groups_reassemble_the_original_bytes(bytes_per_line: int, lines_per_group: int) -> None:
    data = _ALL_BYTE_VALUES + bytes(reversed(_ALL_BYTE_VALUES)) + b'""\\\\\n\r\t\'\x00'

    groups = encode_chunks(data, bytes_per_line, lines_per_group)

    assert decode_chunk_groups(groups) == data
    for group in groups:
        assert 1 <= len(group.chunks) <= lines_per_group
        assert all(len(unescape_literal(chunk)) <= bytes_per_line for chunk in group.chunks)


def test_quote_byte_never_appears_unescaped_in_a_chunk() -> None:
    data = b'before"after' + b"\x22" * 50

    groups = encode_chunks(data, 8, 3)

    for group in groups:
        for chunk in group.chunks:
            unescaped_quotes = [
                index
                for index, character in enumerate(chunk)
                if character == '"' and (index == 0 or chunk[index - 1] != "\\")
            ]
            assert unescaped_quotes == []
    assert decode_chunk_groups(groups) == data


@pytest.mark.parametrize(("bytes_per_line", "lines_per_group"), [(0, 1), (1, 0), (-3, 400)])
def test_rejects_limits_below_one(bytes_per_line: int, lines_per_group: int) -> None:
    with pytest.raises(ValueError):
        encode_chunks(b"data", bytes_per_line, lines_per_group)
