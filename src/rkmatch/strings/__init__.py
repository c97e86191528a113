"""Chunk matchers: baselines, single-pattern Rabin-Karp, batch Rabin-Karp."""

from rkmatch.strings.baseline import exact_match, substring_match
from rkmatch.strings.batch import BatchMatcher, BatchResult, rabin_karp_batch_match
from rkmatch.strings.chunks import Chunk, bloom_size_for, chunk_count, iter_chunks
from rkmatch.strings.rabin_karp import rabin_karp_match, rabin_karp_search

__all__ = [
    "BatchMatcher",
    "BatchResult",
    "Chunk",
    "bloom_size_for",
    "chunk_count",
    "exact_match",
    "iter_chunks",
    "rabin_karp_batch_match",
    "rabin_karp_match",
    "rabin_karp_search",
    "substring_match",
]
