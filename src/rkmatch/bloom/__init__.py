"""Bit-packed Bloom filter used by the batch matcher.

Public API:
    BitVector: big-endian-within-byte packed bit array
    BloomFilter: 10-probe filter over rolling-hash values
"""

from rkmatch.bloom.bitvector import BitVector
from rkmatch.bloom.filter import NUM_PROBES, BloomFilter

__all__ = [
    "BitVector",
    "BloomFilter",
    "NUM_PROBES",
]
