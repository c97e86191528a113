"""rkmatch: chunk-level duplicate detection with Rabin-Karp and a Bloom filter.

Public API:
    DocumentMatcher / MatchReport: run one strategy over a query and a target
    MatchConfig: validated parameters (algorithm, chunk size, modulus)
    Algorithm: EXACT, SUBSTRING, RABIN_KARP, RABIN_KARP_BATCH
    BatchMatcher: all query chunks against a target in one pass
    RollingHash / Modulus: the hashing core
    BloomFilter / BitVector: the probabilistic set
"""

from rkmatch.algorithm import Algorithm
from rkmatch.bloom import BitVector, BloomFilter
from rkmatch.config import MatchConfig
from rkmatch.errors import InvariantError
from rkmatch.hashing import BIG_PRIME, Modulus, RollingHash
from rkmatch.matcher import DocumentMatcher, MatchReport
from rkmatch.strings import BatchMatcher, exact_match, substring_match
from rkmatch.text import normalize

__all__ = [
    "Algorithm",
    "BIG_PRIME",
    "BatchMatcher",
    "BitVector",
    "BloomFilter",
    "DocumentMatcher",
    "InvariantError",
    "MatchConfig",
    "MatchReport",
    "Modulus",
    "RollingHash",
    "exact_match",
    "normalize",
    "substring_match",
]
