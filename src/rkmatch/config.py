"""Parameters for one document match.

Everything a match needs besides the two byte sequences lives here,
validated once at construction. The modulus is part of the config
rather than module state, so two configs with different moduli can
be used side by side.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from rkmatch.algorithm import Algorithm
from rkmatch.bloom.filter import DUMP_BITS
from rkmatch.hashing.modular import Modulus
from rkmatch.strings.chunks import BITS_PER_CHUNK

DEFAULT_CHUNK_SIZE = 20

# target window hashes kept for diagnostics in the rolling-hash modes
HASH_PREVIEW = 5


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Validated match parameters."""
    algorithm: Algorithm = Algorithm.SUBSTRING
    k: int = DEFAULT_CHUNK_SIZE
    modulus: Modulus = field(default_factory=Modulus)
    bits_per_chunk: int = BITS_PER_CHUNK
    hash_preview: int = HASH_PREVIEW
    bloom_dump_bits: int = DUMP_BITS

    def __post_init__(self) -> None:
        if self.k <= 0:
            raise ValueError(f"chunk size must be positive, got {self.k}")
        if self.bits_per_chunk <= 0:
            raise ValueError(
                f"bits_per_chunk must be positive, got {self.bits_per_chunk}"
            )
        if self.hash_preview < 0:
            raise ValueError(
                f"hash_preview must be non-negative, got {self.hash_preview}"
            )
        if self.bloom_dump_bits < 0 or self.bloom_dump_bits % 8 != 0:
            raise ValueError(
                "bloom_dump_bits must be a non-negative multiple of 8, "
                f"got {self.bloom_dump_bits}"
            )

    @classmethod
    def create(
        cls,
        algorithm: Algorithm | str = Algorithm.SUBSTRING,
        k: int = DEFAULT_CHUNK_SIZE,
        prime: int | None = None,
        **kwargs: int,
    ) -> MatchConfig:
        """Build a config from loose values (selector name, raw prime)."""
        if isinstance(algorithm, str):
            algorithm = Algorithm.parse(algorithm)
        modulus = Modulus(prime) if prime is not None else Modulus()
        return cls(algorithm=algorithm, k=k, modulus=modulus, **kwargs)
