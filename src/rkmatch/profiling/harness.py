"""Timing harness for the chunked matching strategies.

Runs SUBSTRING, RABIN_KARP and RABIN_KARP_BATCH over the same
generated corpus and records wall time and match counts. The counts
must agree across strategies; the times show what the rolling hash
and the Bloom filter buy.

Pure-Python hashing is slow per byte, so single-pattern Rabin-Karp
usually loses to the naive scan (whose inner comparison runs in C).
The batch matcher wins once there are enough chunks, because it
touches each target byte a constant number of times.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass, field

from rkmatch.algorithm import Algorithm
from rkmatch.config import MatchConfig
from rkmatch.matcher import DocumentMatcher
from rkmatch.profiling.corpus import CorpusGenerator

log = logging.getLogger(__name__)

CHUNKED = (Algorithm.SUBSTRING, Algorithm.RABIN_KARP, Algorithm.RABIN_KARP_BATCH)


@dataclass(slots=True)
class StrategyTiming:
    """Timing for one strategy on one corpus."""
    algorithm: Algorithm
    matched: int
    total_chunks: int
    time_ms: float


@dataclass(slots=True)
class BenchmarkResult:
    """Timings for every strategy on one corpus."""
    query_len: int
    target_len: int
    k: int
    planted: int
    timings: list[StrategyTiming] = field(default_factory=list)
    cprofile_stats: str | None = None

    @property
    def counts_agree(self) -> bool:
        return len({t.matched for t in self.timings}) <= 1

    def timing_for(self, algorithm: Algorithm) -> StrategyTiming:
        for t in self.timings:
            if t.algorithm is algorithm:
                return t
        raise KeyError(algorithm.value)


def run_benchmark(
    query_len: int = 20_000,
    target_len: int = 100_000,
    k: int = 20,
    overlap: float = 0.3,
    seed: int = 42,
    algorithms: tuple[Algorithm, ...] = CHUNKED,
    profile: bool = False,
) -> BenchmarkResult:
    """Generate a corpus and time each strategy on it.

    If profile=True, the batch matcher run is wrapped in cProfile and
    its stats are included in the result.
    """
    corpus = CorpusGenerator(seed=seed).generate(
        query_len=query_len, target_len=target_len, k=k, overlap=overlap,
    )
    result = BenchmarkResult(
        query_len=query_len,
        target_len=target_len,
        k=k,
        planted=len(corpus.planted),
    )

    for algo in algorithms:
        matcher = DocumentMatcher(MatchConfig(algorithm=algo, k=k))
        pr = None
        if profile and algo is Algorithm.RABIN_KARP_BATCH:
            pr = cProfile.Profile()
            pr.enable()
        t0 = time.perf_counter()
        report = matcher.match(corpus.query, corpus.target)
        elapsed_ms = (time.perf_counter() - t0) * 1000
        if pr is not None:
            pr.disable()
            s = io.StringIO()
            ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
            ps.print_stats(20)
            result.cprofile_stats = s.getvalue()
        result.timings.append(StrategyTiming(
            algorithm=algo,
            matched=report.matched,
            total_chunks=report.total_chunks,
            time_ms=elapsed_ms,
        ))
        log.debug("%s: %d matched in %.1f ms", algo.value, report.matched, elapsed_ms)

    if not result.counts_agree:
        log.warning(
            "strategies disagree: %s",
            ", ".join(f"{t.algorithm.value}={t.matched}" for t in result.timings),
        )
    return result
