"""Reference matchers: whole-sequence equality and naive substring scan.

These are the baselines the hashed matchers are measured and tested
against. substring_match() compares the chunk at every offset of the
target, O(n * k) per chunk, with no hashing and no shortcuts.
"""
from __future__ import annotations

Bytes = bytes | bytearray | memoryview


def exact_match(query: Bytes, target: Bytes) -> bool:
    """True iff query and target have the same length and bytes."""
    if len(query) != len(target):
        return False
    return bytes(query) == bytes(target)


def substring_match(chunk: Bytes, target: Bytes) -> bool:
    """True iff chunk occurs as a contiguous run anywhere in target.

    A chunk longer than the target never matches. An empty chunk or an
    empty target matches trivially.
    """
    k = len(chunk)
    n = len(target)
    if k > n:
        return False
    if k == 0 or n == 0:
        return True
    tv = memoryview(target)
    for i in range(n - k + 1):
        if tv[i:i + k] == chunk:
            return True
    return False
