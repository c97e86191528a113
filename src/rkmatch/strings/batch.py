"""Batch Rabin-Karp matching: every query chunk against the target in one pass.

Running single-pattern Rabin-Karp once per chunk costs O(n) per chunk,
O(n * m / k) in total. The batch matcher gets that down to one linear
pass over the target:

    1. Cut the query into m // k chunks and hash each one.
    2. Insert every chunk hash into a Bloom filter (~10 bits per chunk).
    3. Roll a hash across all n - k + 1 target windows and ask the
       filter about each one. Most windows miss after one or two probes.
    4. On a filter positive, look up the chunks that actually carry
       that hash and compare bytes. Only a byte-equal window counts.

A filter positive can be wrong in two ways. The filter itself can
report a hash no chunk has (a Bloom false positive), and a chunk can
share the window's hash without sharing its bytes (a hash collision).
Step 4 rules out both, so the count is exact.

Each query chunk counts at most once however many windows it matches.
Two chunks with identical bytes are still two chunks, and both count
when a window matches them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rkmatch.bloom.filter import DUMP_BITS, BloomFilter
from rkmatch.errors import InvariantError
from rkmatch.hashing.modular import Modulus
from rkmatch.hashing.rolling import hash_bytes, window_hashes
from rkmatch.strings.chunks import BITS_PER_CHUNK, bloom_size_for, iter_chunks

log = logging.getLogger(__name__)

Bytes = bytes | bytearray | memoryview


@dataclass(slots=True)
class BatchResult:
    """Outcome of one batch match."""
    matched: int
    total_chunks: int
    bloom_bits: int
    bloom_dump: str
    windows_scanned: int = 0
    bloom_positives: int = 0
    bloom_false_positives: int = 0
    hash_collisions: int = 0
    matched_chunks: list[int] = field(default_factory=list)

    @property
    def percentage(self) -> float:
        if self.total_chunks == 0:
            return 0.0
        return self.matched / self.total_chunks


class BatchMatcher:
    """Match all k-byte chunks of a query against a target at once.

    Usage:
        matcher = BatchMatcher(k=20)
        result = matcher.match(query, target)
        result.matched, result.total_chunks

    Parameters:
        k: Chunk length in bytes.
        modulus: Modulus for the rolling hash (default BIG_PRIME).
        bits_per_chunk: Bloom budget per chunk when match() is not
            given an explicit filter size.
        dump_bits: Leading filter bits captured in BatchResult.bloom_dump.
    """

    def __init__(
        self,
        k: int,
        modulus: Modulus | None = None,
        bits_per_chunk: int = BITS_PER_CHUNK,
        dump_bits: int = DUMP_BITS,
    ) -> None:
        if k <= 0:
            raise ValueError(f"chunk length must be positive, got {k}")
        self._k = k
        self._modulus = modulus or Modulus()
        self._bits_per_chunk = bits_per_chunk
        self._dump_bits = dump_bits

    @property
    def k(self) -> int:
        return self._k

    def match(
        self,
        query: Bytes,
        target: Bytes,
        bloom_bits: int | None = None,
    ) -> BatchResult:
        """Count the query chunks that occur somewhere in target.

        bloom_bits overrides the filter size; it must be a positive
        multiple of 8. The target must be at least k bytes long.
        """
        k = self._k
        n = len(target)
        if k > n:
            raise InvariantError(f"chunk length {k} exceeds target length {n}")
        if bloom_bits is None:
            bloom_bits = bloom_size_for(len(query), k, self._bits_per_chunk)

        qv = memoryview(query)
        tv = memoryview(target)

        bloom = BloomFilter(bloom_bits)
        try:
            # hash -> chunks carrying it; the filter answers "maybe",
            # this answers "which ones"
            by_hash: dict[int, list[tuple[int, memoryview]]] = {}
            total = 0
            for chunk in iter_chunks(qv, k):
                view = chunk.view(qv)
                h = hash_bytes(view, self._modulus)
                bloom.add(h)
                by_hash.setdefault(h, []).append((chunk.index, view))
                total += 1

            result = BatchResult(
                matched=0,
                total_chunks=total,
                bloom_bits=bloom_bits,
                bloom_dump=bloom.dump(self._dump_bits),
            )
            log.debug(
                "bloom populated: %d chunks in %d bits, fill %.3f",
                total, bloom_bits, bloom.fill_ratio(),
            )

            found: set[int] = set()
            for offset, h in window_hashes(tv, k, self._modulus):
                result.windows_scanned += 1
                if not bloom.might_contain(h):
                    continue
                result.bloom_positives += 1
                candidates = by_hash.get(h)
                if candidates is None:
                    result.bloom_false_positives += 1
                    continue
                window = tv[offset:offset + k]
                for idx, view in candidates:
                    if idx in found:
                        continue
                    if view == window:
                        found.add(idx)
                    else:
                        result.hash_collisions += 1
                        log.debug(
                            "hash collision: chunk %d vs window at %d", idx, offset,
                        )
                if len(found) == total:
                    # every chunk already matched; nothing left to find
                    break
        finally:
            bloom.free()

        result.matched = len(found)
        result.matched_chunks = sorted(found)
        log.debug(
            "batch match: %d/%d chunks, %d windows, %d positives, "
            "%d filter false positives, %d collisions",
            result.matched, total, result.windows_scanned,
            result.bloom_positives, result.bloom_false_positives,
            result.hash_collisions,
        )
        return result


def rabin_karp_batch_match(
    bloom_bits: int,
    k: int,
    query: Bytes,
    target: Bytes,
    modulus: Modulus | None = None,
) -> int:
    """Number of distinct query chunks found in target.

    Function form of BatchMatcher.match() for callers that only want
    the count.
    """
    return BatchMatcher(k, modulus).match(query, target, bloom_bits).matched
