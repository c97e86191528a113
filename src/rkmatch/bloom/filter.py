"""Bloom filter over rolling-hash values.

Answers "is there a query chunk with this hash?" for every window of
the target without a dictionary probe per window. False positives are
possible (the filter says "maybe" when no chunk has that hash), but
false negatives are not: an inserted value always queries true.

The elements are Rabin-Karp hashes, which are already spread across
[0, P). So instead of k independent hash functions, the probe
positions form an affine family in the probe index i:

    probe(i, x) = ((x mod P1) + i * (x mod P2) + 1 + i^2) mod bsz

with two fixed primes P1, P2 distinct from the matching modulus. It
is the double-hashing trick of Kirsch & Mitzenmacher with a quadratic
term, and it costs two remainders per element instead of a digest.

The filter is sized by the caller (about 10 bits per query chunk in
the batch matcher), populated once, queried once per target window
and then freed. There is no deletion and no resizing.
"""
from __future__ import annotations

from rkmatch.bloom.bitvector import BitVector

H1_PRIME = 4189793
H2_PRIME = 3296731
NUM_PROBES = 10

# leading bits shown by dump() when no count is given
DUMP_BITS = 160


class BloomFilter:
    """Fixed-size Bloom filter with NUM_PROBES probe positions per element.

    Parameters:
        size_bits: Size of the bit vector. Must be a positive multiple
            of 8; anything else raises InvariantError.
    """

    def __init__(self, size_bits: int) -> None:
        self._bits: BitVector | None = BitVector(size_bits)
        self._m = size_bits
        self._count = 0

    @property
    def size_bits(self) -> int:
        """Number of bits in the filter (0 after free())."""
        return self._m

    @property
    def num_probes(self) -> int:
        return NUM_PROBES

    @property
    def count(self) -> int:
        """Number of elements added."""
        return self._count

    @property
    def bits(self) -> BitVector:
        if self._bits is None:
            raise RuntimeError("Bloom filter has been freed")
        return self._bits

    def probe(self, i: int, x: int) -> int:
        """Bit position of probe i for element x."""
        if self._bits is None:
            raise RuntimeError("Bloom filter has been freed")
        return ((x % H1_PRIME) + i * (x % H2_PRIME) + 1 + i * i) % self._m

    def add(self, x: int) -> None:
        """Add a hash value to the filter."""
        bits = self.bits
        for i in range(NUM_PROBES):
            bits.set(self.probe(i, x))
        self._count += 1

    def might_contain(self, x: int) -> bool:
        """Check if a hash value might be in the filter.

        Returns False as soon as one probe bit is unset, so a miss
        usually costs one or two probes rather than all ten.
        """
        bits = self.bits
        for i in range(NUM_PROBES):
            if not bits.get(self.probe(i, x)):
                return False
        return True

    __contains__ = might_contain

    def free(self) -> None:
        """Release the bit vector. The filter is unusable afterwards."""
        self._bits = None
        self._m = 0

    def dump(self, count_bits: int = DUMP_BITS) -> str:
        """Hex dump of the leading count_bits bits."""
        return self.bits.hexdump(count_bits)

    def fill_ratio(self) -> float:
        """Fraction of bits that are set."""
        return self.bits.count() / self._m

    def estimated_fp_rate(self) -> float:
        """Estimate the false positive rate from the fill ratio.

        FP rate ~= (fill_ratio)^NUM_PROBES. The probe family is not
        fully independent, so treat this as a guide rather than a bound.
        """
        fr = self.fill_ratio()
        if fr >= 1.0:
            return 1.0
        return fr ** NUM_PROBES

    def memory_bytes(self) -> int:
        """Size of the bit array in bytes."""
        return self._m >> 3
