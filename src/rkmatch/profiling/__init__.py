"""Benchmark harness and corpus generation for the chunk matchers."""

from rkmatch.profiling.corpus import Corpus, CorpusGenerator
from rkmatch.profiling.harness import BenchmarkResult, StrategyTiming, run_benchmark
from rkmatch.profiling.report import format_report

__all__ = [
    "BenchmarkResult",
    "Corpus",
    "CorpusGenerator",
    "StrategyTiming",
    "format_report",
    "run_benchmark",
]
