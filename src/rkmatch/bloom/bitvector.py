"""Packed bit array with a fixed big-endian-within-byte layout.

Bit i lives in byte i // 8 at bit position 7 - (i % 8). Setting bit 8
therefore sets the most significant bit of the second byte:

    bv = BitVector(16)
    bv.set(8)
    bv.to_bytes()   # b"\\x00\\x80"

The layout is part of the contract, not an implementation detail.
Hex dumps of a filter are compared against dumps produced by other
implementations of the same filter, so the byte image has to match
bit for bit.
"""
from __future__ import annotations

from rkmatch.errors import InvariantError


class BitVector:
    """Fixed-size bit array backed by a bytearray. Bits are never cleared."""

    __slots__ = ("_size", "_buf")

    def __init__(self, size_bits: int) -> None:
        if size_bits <= 0 or size_bits % 8 != 0:
            raise InvariantError(
                f"size must be a positive multiple of 8, got {size_bits}"
            )
        self._size = size_bits
        self._buf = bytearray(size_bits >> 3)

    def __len__(self) -> int:
        return self._size

    def _locate(self, i: int) -> tuple[int, int]:
        if not (0 <= i < self._size):
            raise IndexError(f"bit {i} out of range for {self._size}-bit vector")
        return i >> 3, 0x80 >> (i & 7)

    def get(self, i: int) -> bool:
        byte_idx, mask = self._locate(i)
        return bool(self._buf[byte_idx] & mask)

    def set(self, i: int) -> None:
        byte_idx, mask = self._locate(i)
        self._buf[byte_idx] |= mask

    def count(self) -> int:
        """Number of set bits."""
        return sum(bin(b).count("1") for b in self._buf)

    def to_bytes(self) -> bytes:
        """Copy of the raw byte image."""
        return bytes(self._buf)

    def hexdump(self, count_bits: int) -> str:
        """Leading count_bits bits as space-separated hex bytes.

        count_bits must be a multiple of 8. The dump stops early if
        the vector is shorter than count_bits.
        """
        if count_bits % 8 != 0:
            raise InvariantError(
                f"dump length must be a multiple of 8, got {count_bits}"
            )
        n = min(len(self._buf), count_bits >> 3)
        return " ".join(f"{b:02x}" for b in self._buf[:n])
