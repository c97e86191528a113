"""Report generation for benchmark results."""
from __future__ import annotations

from rkmatch.profiling.harness import BenchmarkResult


def format_report(result: BenchmarkResult, label: str = "Chunk matching") -> str:
    """Format a BenchmarkResult as a table, fastest strategy as the baseline."""
    fastest = min((t.time_ms for t in result.timings), default=0.0)

    def _relative(ms: float) -> str:
        if fastest <= 0:
            return "-"
        return f"{ms / fastest:.1f}x"

    lines = [
        f"=== {label} ===",
        f"Query:     {result.query_len:,} bytes",
        f"Target:    {result.target_len:,} bytes",
        f"Chunk:     {result.k} bytes",
        f"Planted:   {result.planted:,} chunks",
        "",
        f"{'Algorithm':<20} {'Matched':>10} {'Total':>8} {'Time (ms)':>12} {'Relative':>10}",
        "-" * 64,
    ]
    for t in result.timings:
        lines.append(
            f"{t.algorithm.value:<20} {t.matched:>10,} {t.total_chunks:>8,} "
            f"{t.time_ms:>12.1f} {_relative(t.time_ms):>10}"
        )
    if not result.counts_agree:
        lines.append("")
        lines.append("WARNING: match counts differ between strategies")
    return "\n".join(lines)
