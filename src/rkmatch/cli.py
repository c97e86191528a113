"""rkmatch CLI entry point.

Usage:
    rkmatch match [-t ALGO] [-k K] [-q PRIME] QUERY DOC [DOC ...]
    rkmatch bench [--query-len N] [--target-len N] [-k K]
"""
import argparse
import logging
import sys

from rkmatch.algorithm import Algorithm
from rkmatch.config import DEFAULT_CHUNK_SIZE, MatchConfig
from rkmatch.hashing.modular import BIG_PRIME

log = logging.getLogger(__name__)


def _algorithm(text: str) -> Algorithm:
    try:
        return Algorithm.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _add_match_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "match",
        help="Match every k-byte chunk of QUERY against each DOC.",
    )
    p.add_argument("query", help="Query document")
    p.add_argument("docs", nargs="+", metavar="doc", help="Documents to match against")
    p.add_argument(
        "-t", "--algorithm", type=_algorithm, default=Algorithm.SUBSTRING,
        help="exact, substring, rabin-karp or rabin-karp-batch; "
             "0-3 also accepted (default: substring)",
    )
    p.add_argument(
        "-k", "--chunk-size", type=_positive_int, default=DEFAULT_CHUNK_SIZE,
        help=f"Chunk length in bytes (default: {DEFAULT_CHUNK_SIZE})",
    )
    p.add_argument(
        "-q", "--prime", type=_positive_int, default=BIG_PRIME,
        help=f"Rolling hash modulus (default: {BIG_PRIME})",
    )
    p.add_argument(
        "--bits-per-chunk", type=_positive_int, default=10,
        help="Bloom filter bits per query chunk (default: 10)",
    )
    p.add_argument(
        "--raw", action="store_true",
        help="Skip case folding and whitespace collapsing.",
    )


def _add_bench_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "bench",
        help="Time the chunked strategies on a synthetic corpus.",
    )
    p.add_argument(
        "--query-len", type=_positive_int, default=20_000,
        help="Query length in bytes (default: 20000)",
    )
    p.add_argument(
        "--target-len", type=_positive_int, default=100_000,
        help="Target length in bytes (default: 100000)",
    )
    p.add_argument(
        "-k", "--chunk-size", type=_positive_int, default=DEFAULT_CHUNK_SIZE,
        help=f"Chunk length in bytes (default: {DEFAULT_CHUNK_SIZE})",
    )
    p.add_argument(
        "--overlap", type=float, default=0.3,
        help="Fraction of query chunks planted in the target (default: 0.3)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Profile the batch matcher and print top functions by cumulative time.",
    )


def _print_report(report, doc: str, multiple: bool) -> None:
    if multiple:
        print(f"== {doc}")
    if report.algorithm.uses_rolling_hash:
        print(" ".join(str(h) for h in report.chunk_hashes))
        print(" ".join(str(h) for h in report.target_hashes))
    if report.batch is not None:
        print(report.batch.bloom_dump)
    print(report.summary())


def _run_match(args: argparse.Namespace) -> int:
    from rkmatch.matcher import DocumentMatcher
    from rkmatch.text import read_document

    try:
        config = MatchConfig.create(
            algorithm=args.algorithm,
            k=args.chunk_size,
            prime=args.prime,
            bits_per_chunk=args.bits_per_chunk,
        )
    except ValueError as exc:
        print(f"rkmatch: {exc}", file=sys.stderr)
        return 2

    try:
        query = read_document(args.query, raw=args.raw)
        docs = [(path, read_document(path, raw=args.raw)) for path in args.docs]
    except OSError as exc:
        print(f"rkmatch: cannot read {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1

    matcher = DocumentMatcher(config)
    for path, target in docs:
        log.debug("matching %s (%d bytes) against %s (%d bytes)",
                  args.query, len(query), path, len(target))
        _print_report(matcher.match(query, target), path, len(docs) > 1)
    return 0


def _run_bench(args: argparse.Namespace) -> int:
    from rkmatch.profiling.harness import run_benchmark
    from rkmatch.profiling.report import format_report

    try:
        result = run_benchmark(
            query_len=args.query_len,
            target_len=args.target_len,
            k=args.chunk_size,
            overlap=args.overlap,
            seed=args.seed,
            profile=args.cprofile,
        )
    except ValueError as exc:
        print(f"rkmatch: {exc}", file=sys.stderr)
        return 2
    print(format_report(result))
    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="rkmatch",
        description="Find which k-byte chunks of a query document recur in other documents.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log matcher internals to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_match_parser(subparsers)
    _add_bench_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        sys.exit(_run_match(args))
    if args.command == "bench":
        sys.exit(_run_bench(args))
