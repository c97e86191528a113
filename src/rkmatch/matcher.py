"""DocumentMatcher: run one strategy over a query and a target.

Dispatch is a pure function of the Algorithm tag:

    EXACT             -- whole-sequence equality, no chunking
    SUBSTRING         -- naive scan per query chunk
    RABIN_KARP        -- rolling-hash search per query chunk
    RABIN_KARP_BATCH  -- all chunks at once through a Bloom filter

The three chunked modes cut the query into m // k chunks and report
how many of them occur in the target. On the same inputs they always
agree; they differ only in how much work they do to get there.

Usage:
    matcher = DocumentMatcher(MatchConfig(algorithm=Algorithm.RABIN_KARP_BATCH, k=20))
    report = matcher.match(query_bytes, target_bytes)
    print(report.summary())
    # "12 chunks matched (out of 40), percentage: 0.30"
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field

from rkmatch.algorithm import Algorithm
from rkmatch.config import MatchConfig
from rkmatch.hashing.rolling import hash_bytes, window_hashes
from rkmatch.strings.baseline import exact_match, substring_match
from rkmatch.strings.batch import BatchMatcher, BatchResult
from rkmatch.strings.chunks import bloom_size_for, chunk_count, iter_chunks
from rkmatch.strings.rabin_karp import rabin_karp_match

log = logging.getLogger(__name__)

Bytes = bytes | bytearray | memoryview


@dataclass(slots=True)
class MatchReport:
    """Result of one DocumentMatcher.match() call.

    For EXACT only `exact` is meaningful. The chunked modes fill
    `matched` and `total_chunks`; the rolling-hash modes also record
    each chunk's hash and the first few target window hashes, and the
    batch mode keeps its BatchResult (Bloom dump and statistics).
    """
    algorithm: Algorithm
    k: int
    matched: int = 0
    total_chunks: int = 0
    exact: bool | None = None
    chunk_hashes: list[int] = field(default_factory=list)
    target_hashes: list[int] = field(default_factory=list)
    batch: BatchResult | None = None

    @property
    def percentage(self) -> float:
        """matched / total_chunks, 0.0 when the query has no whole chunk."""
        if self.total_chunks == 0:
            return 0.0
        return self.matched / self.total_chunks

    def summary(self) -> str:
        if self.algorithm is Algorithm.EXACT:
            return "Exact match" if self.exact else "Not an exact match"
        return (
            f"{self.matched} chunks matched (out of {self.total_chunks}), "
            f"percentage: {self.percentage:.2f}"
        )


class DocumentMatcher:
    """Match a query document against target documents with one strategy."""

    def __init__(self, config: MatchConfig | None = None) -> None:
        self._config = config or MatchConfig()

    @property
    def config(self) -> MatchConfig:
        return self._config

    def match(self, query: Bytes, target: Bytes) -> MatchReport:
        algo = self._config.algorithm
        if algo is Algorithm.EXACT:
            report = self._match_exact(query, target)
        elif algo is Algorithm.SUBSTRING:
            report = self._match_substring(query, target)
        elif algo is Algorithm.RABIN_KARP:
            report = self._match_rabin_karp(query, target)
        else:
            report = self._match_batch(query, target)
        log.debug("%s: %s", algo.value, report.summary())
        return report

    def _new_report(self, query: Bytes) -> MatchReport:
        k = self._config.k
        return MatchReport(
            algorithm=self._config.algorithm,
            k=k,
            total_chunks=chunk_count(len(query), k),
        )

    def _match_exact(self, query: Bytes, target: Bytes) -> MatchReport:
        report = self._new_report(query)
        report.exact = exact_match(query, target)
        return report

    def _match_substring(self, query: Bytes, target: Bytes) -> MatchReport:
        report = self._new_report(query)
        qv = memoryview(query)
        for chunk in iter_chunks(qv, self._config.k):
            if substring_match(chunk.view(qv), target):
                report.matched += 1
        return report

    def _record_hashes(self, report: MatchReport, query: Bytes, target: Bytes) -> None:
        cfg = self._config
        qv = memoryview(query)
        report.chunk_hashes = [
            hash_bytes(chunk.view(qv), cfg.modulus)
            for chunk in iter_chunks(qv, cfg.k)
        ]
        preview = itertools.islice(
            window_hashes(target, cfg.k, cfg.modulus), cfg.hash_preview
        )
        report.target_hashes = [h for _, h in preview]

    def _match_rabin_karp(self, query: Bytes, target: Bytes) -> MatchReport:
        cfg = self._config
        report = self._new_report(query)
        self._record_hashes(report, query, target)
        if cfg.k > len(target):
            # no window of the target is long enough; nothing can match
            return report
        qv = memoryview(query)
        for chunk in iter_chunks(qv, cfg.k):
            if rabin_karp_match(chunk.view(qv), target, cfg.modulus):
                report.matched += 1
        return report

    def _match_batch(self, query: Bytes, target: Bytes) -> MatchReport:
        cfg = self._config
        report = self._new_report(query)
        self._record_hashes(report, query, target)
        if cfg.k > len(target):
            return report
        matcher = BatchMatcher(
            cfg.k,
            cfg.modulus,
            bits_per_chunk=cfg.bits_per_chunk,
            dump_bits=cfg.bloom_dump_bits,
        )
        bloom_bits = bloom_size_for(len(query), cfg.k, cfg.bits_per_chunk)
        report.batch = matcher.match(query, target, bloom_bits)
        report.matched = report.batch.matched
        return report
