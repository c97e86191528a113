"""Modular arithmetic and the Rabin-Karp rolling hash."""

from rkmatch.hashing.modular import BIG_PRIME, Modulus
from rkmatch.hashing.rolling import BASE, RollingHash, hash_bytes, window_hashes

__all__ = [
    "BASE",
    "BIG_PRIME",
    "Modulus",
    "RollingHash",
    "hash_bytes",
    "window_hashes",
]
