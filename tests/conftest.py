"""Shared fixtures for rkmatch tests."""
from __future__ import annotations

import random

import pytest

SEED = 42


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def random_bytes(rng):
    """Factory: random bytes over a small alphabet, so windows repeat."""
    def _make(n: int, alphabet: bytes = b"abcd ") -> bytes:
        return bytes(rng.choice(alphabet) for _ in range(n))
    return _make
