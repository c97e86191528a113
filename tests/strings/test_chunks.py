"""Tests for chunk enumeration and Bloom sizing."""
from __future__ import annotations

import pytest

from rkmatch.strings.chunks import Chunk, bloom_size_for, chunk_count, iter_chunks


class TestChunks:
    def test_remainder_is_dropped(self):
        chunks = list(iter_chunks(b"abcdefgh", 3))
        assert [c.offset for c in chunks] == [0, 3]
        assert [bytes(c.view(b"abcdefgh")) for c in chunks] == [b"abc", b"def"]

    def test_indices_are_sequential(self):
        assert [c.index for c in iter_chunks(b"x" * 10, 2)] == [0, 1, 2, 3, 4]

    def test_short_query_has_no_chunks(self):
        assert list(iter_chunks(b"ab", 3)) == []
        assert chunk_count(2, 3) == 0

    def test_view_is_zero_copy(self):
        data = bytearray(b"abcdef")
        view = Chunk(index=0, offset=3, length=3).view(data)
        data[3] = ord("X")
        assert bytes(view) == b"Xef"

    def test_non_positive_k(self):
        with pytest.raises(ValueError):
            chunk_count(10, 0)


class TestBloomSize:
    def test_rounds_up_to_whole_bytes(self):
        # 2 chunks * 10 bits = 20 -> 24
        assert bloom_size_for(6, 3) == 24
        # 5 chunks * 10 bits = 50 -> 56
        assert bloom_size_for(100, 20) == 56

    def test_exact_multiple_unchanged(self):
        # 4 chunks * 10 bits = 40
        assert bloom_size_for(80, 20) == 40

    def test_minimum_one_byte(self):
        assert bloom_size_for(0, 20) == 8
        assert bloom_size_for(5, 20) == 8

    def test_custom_budget(self):
        assert bloom_size_for(100, 20, bits_per_chunk=16) == 80
        assert bloom_size_for(100, 20) % 8 == 0
