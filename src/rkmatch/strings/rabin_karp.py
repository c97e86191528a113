"""Single-pattern Rabin-Karp search.

Hash the pattern once, slide a rolling hash across every window of the
target, and compare bytes only where the hashes agree. Every hash hit
is confirmed before it is reported: two different windows can share a
hash under the modulus, and reporting the hash hit alone would count
those collisions as matches.
"""
from __future__ import annotations

import logging

from rkmatch.errors import InvariantError
from rkmatch.hashing.modular import Modulus
from rkmatch.hashing.rolling import hash_bytes, window_hashes

log = logging.getLogger(__name__)

Bytes = bytes | bytearray | memoryview


def rabin_karp_search(
    pattern: Bytes,
    target: Bytes,
    modulus: Modulus | None = None,
) -> int:
    """Offset of the first confirmed occurrence of pattern, or -1.

    The pattern must be non-empty and no longer than the target.
    """
    k = len(pattern)
    n = len(target)
    if k == 0 or k > n:
        raise InvariantError(
            f"pattern length must be in [1, {n}], got {k}"
        )
    modulus = modulus or Modulus()
    pattern_hash = hash_bytes(pattern, modulus)
    tv = memoryview(target)
    for offset, h in window_hashes(tv, k, modulus):
        if h != pattern_hash:
            continue
        if tv[offset:offset + k] == pattern:
            return offset
        log.debug("hash collision at offset %d (hash %d)", offset, h)
    return -1


def rabin_karp_match(
    pattern: Bytes,
    target: Bytes,
    modulus: Modulus | None = None,
) -> bool:
    """True iff pattern occurs in target, confirmed byte for byte."""
    return rabin_karp_search(pattern, target, modulus) >= 0
