"""Rabin-Karp rolling hash over byte windows.

The hash of a k-byte window w is the polynomial

    H(w) = w[0]*B^(k-1) + w[1]*B^(k-2) + ... + w[k-1]   (mod P)

with B = 256. Sliding the window right by one byte drops the leading
term, shifts every remaining term up one power of B, and adds the new
trailing byte:

    H' = (H - out*B^(k-1)) * B + in   (mod P)

B^(k-1) mod P is computed once per window length, so each slide costs
a constant number of modular operations no matter how large k is.

Two windows with equal hashes are only *candidates*. Distinct byte
windows can collide under the modulus, so every caller must compare
the bytes before it reports a match.
"""
from __future__ import annotations

from collections.abc import Iterator

from rkmatch.errors import InvariantError
from rkmatch.hashing.modular import Modulus

BASE = 256


class RollingHash:
    """Hash state for one sliding k-byte window.

    Build it with RollingHash.initial(), then call roll() once per
    byte the window advances. The state is mutated in place and must
    not be shared between independent traversals.
    """

    __slots__ = ("modulus", "k", "value", "_base", "_lead_weight")

    def __init__(self, k: int, modulus: Modulus | None = None) -> None:
        if k <= 0:
            raise InvariantError(f"window length must be positive, got {k}")
        self.modulus = modulus or Modulus()
        self.k = k
        self.value = 0
        self._base = self.modulus.reduce(BASE)
        self._lead_weight = self.modulus.pow(self._base, k - 1)

    @classmethod
    def initial(
        cls,
        window: bytes | bytearray | memoryview,
        k: int,
        modulus: Modulus | None = None,
    ) -> RollingHash:
        """Seed a hash from the first k bytes of window (Horner's rule)."""
        if len(window) < k:
            raise InvariantError(
                f"window has {len(window)} bytes, need at least {k}"
            )
        state = cls(k, modulus)
        m = state.modulus
        h = 0
        for j in range(k):
            h = m.add(m.mul(h, state._base), m.reduce(window[j]))
        state.value = h
        return state

    def roll(self, outgoing: int, incoming: int) -> int:
        """Slide the window one byte and return the new hash."""
        m = self.modulus
        leading = m.mul(m.reduce(outgoing), self._lead_weight)
        shifted = m.mul(m.sub(self.value, leading), self._base)
        self.value = m.add(shifted, m.reduce(incoming))
        return self.value

    def __repr__(self) -> str:
        return f"RollingHash(k={self.k}, value={self.value}, P={self.modulus.value})"


def hash_bytes(
    data: bytes | bytearray | memoryview,
    modulus: Modulus | None = None,
) -> int:
    """Hash of the whole of data as a single window."""
    return RollingHash.initial(data, len(data), modulus).value


def window_hashes(
    data: bytes | bytearray | memoryview,
    k: int,
    modulus: Modulus | None = None,
) -> Iterator[tuple[int, int]]:
    """Yield (offset, hash) for every k-byte window of data.

    One initial() and n-k roll() calls. Yields nothing when data is
    shorter than k.
    """
    n = len(data)
    if n < k:
        return
    state = RollingHash.initial(data, k, modulus)
    yield 0, state.value
    for i in range(n - k):
        yield i + 1, state.roll(data[i], data[i + k])
