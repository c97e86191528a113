"""Synthetic query/target pairs for profiling and agreement tests.

Both documents are built from a pool of short lower-case words, so
they look like normalized text. A chosen fraction of the query's
chunks is planted verbatim into the target at random positions; the
rest of the target is fresh words. With long enough chunks the fresh
text is vanishingly unlikely to reproduce a query chunk, so the
planted count is also (almost always) the true match count.
"""
from __future__ import annotations

import random
import string
from dataclasses import dataclass

_ALPHABET = string.ascii_lowercase


@dataclass(slots=True)
class Corpus:
    """A generated query/target pair."""
    query: bytes
    target: bytes
    k: int
    planted: list[int]

    @property
    def total_chunks(self) -> int:
        return len(self.query) // self.k


class CorpusGenerator:
    """Generate normalized-looking documents with planted chunk overlap."""

    __slots__ = ("_rng", "_words")

    def __init__(self, seed: int = 42, vocabulary: int = 500) -> None:
        self._rng = random.Random(seed)
        self._words = [self._make_word() for _ in range(vocabulary)]

    def _make_word(self) -> str:
        length = self._rng.randint(2, 9)
        return "".join(self._rng.choice(_ALPHABET) for _ in range(length))

    def text(self, length: int) -> bytes:
        """Space-separated words, exactly length bytes long."""
        parts: list[str] = []
        size = 0
        while size <= length:
            word = self._rng.choice(self._words)
            parts.append(word)
            size += len(word) + 1
        return " ".join(parts).encode("ascii")[:length]

    def generate(
        self,
        query_len: int = 20_000,
        target_len: int = 100_000,
        k: int = 20,
        overlap: float = 0.3,
    ) -> Corpus:
        """Build a query and a target sharing about overlap of the query's chunks."""
        if not (0.0 <= overlap <= 1.0):
            raise ValueError(f"overlap must be in [0, 1], got {overlap}")
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        query = self.text(query_len)
        total = query_len // k
        planted = sorted(self._rng.sample(range(total), int(total * overlap)))

        target = bytearray(self.text(target_len))
        # one disjoint slot per planted chunk, so plants never overwrite each other
        slots = target_len // k
        if len(planted) > slots:
            planted = planted[:slots]
        for idx, slot in zip(planted, self._rng.sample(range(slots), len(planted))):
            start = slot * k
            target[start:start + k] = query[idx * k:(idx + 1) * k]
        return Corpus(query=query, target=bytes(target), k=k, planted=planted)
