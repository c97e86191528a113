"""Non-overlapping query chunks.

A query of length m is cut into m // k chunks of exactly k bytes. A
trailing remainder shorter than k takes no part in matching, in every
mode. Chunks borrow from the sequence they index through a memoryview,
so enumerating them copies nothing.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

# default Bloom budget per query chunk
BITS_PER_CHUNK = 10


@dataclass(frozen=True, slots=True)
class Chunk:
    """A k-byte window at a fixed offset of some byte sequence."""
    index: int
    offset: int
    length: int

    def view(self, data: bytes | bytearray | memoryview) -> memoryview:
        """Zero-copy view of this chunk's bytes in data."""
        return memoryview(data)[self.offset:self.offset + self.length]


def chunk_count(length: int, k: int) -> int:
    """Number of whole k-byte chunks in a sequence of the given length."""
    if k <= 0:
        raise ValueError(f"chunk length must be positive, got {k}")
    return length // k


def iter_chunks(data: bytes | bytearray | memoryview, k: int) -> Iterator[Chunk]:
    """Yield the whole k-byte chunks of data, left to right."""
    for index in range(chunk_count(len(data), k)):
        yield Chunk(index=index, offset=index * k, length=k)


def bloom_size_for(query_len: int, k: int, bits_per_chunk: int = BITS_PER_CHUNK) -> int:
    """Bloom filter size for a query: bits_per_chunk per chunk.

    Rounded up to a multiple of 8 and never below 8, so a query with
    no whole chunks still gets a valid (empty) filter.
    """
    bits = chunk_count(query_len, k) * bits_per_chunk
    return max(8, (bits + 7) // 8 * 8)
