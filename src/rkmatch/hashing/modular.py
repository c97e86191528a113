"""Arithmetic in the ring [0, P) for the rolling hash.

Python integers never overflow, but the hash is still defined as a
polynomial in byte values with power-of-base coefficients, never as a
product of two large hash values. mul() enforces that shape: one of
its operands must be at most 256. A caller that multiplies two hash
values together has a bug, and we want to hear about it immediately
rather than get a number that happens to be in range.

The modulus is a value, not process state. Two matches with different
moduli can run side by side without touching each other.
"""
from __future__ import annotations

from dataclasses import dataclass

from rkmatch.errors import InvariantError

# BIG_PRIME * 256 fits in a signed 64-bit word
BIG_PRIME = 5003943032159437

# largest operand mul() accepts on its "small" side
SMALL_OPERAND_LIMIT = 256


@dataclass(frozen=True, slots=True)
class Modulus:
    """A modulus P and the add/sub/mul operations over [0, P).

    Every operation checks that its operands are already reduced. Use
    reduce() to bring an arbitrary non-negative integer into range.
    """
    value: int = BIG_PRIME

    def __post_init__(self) -> None:
        if self.value < 2:
            raise ValueError(f"modulus must be at least 2, got {self.value}")

    def _check(self, a: int, b: int) -> None:
        p = self.value
        if not (0 <= a < p and 0 <= b < p):
            raise InvariantError(
                f"operands must lie in [0, {p}), got a={a}, b={b}"
            )

    def reduce(self, x: int) -> int:
        """Map a non-negative integer into [0, P)."""
        if x < 0:
            raise InvariantError(f"cannot reduce negative value {x}")
        return x % self.value

    def add(self, a: int, b: int) -> int:
        """(a + b) mod P with a single conditional subtraction."""
        self._check(a, b)
        s = a + b
        return s - self.value if s >= self.value else s

    def sub(self, a: int, b: int) -> int:
        """(a - b) mod P, kept non-negative."""
        self._check(a, b)
        return a - b if a >= b else a - b + self.value

    def mul(self, a: int, b: int) -> int:
        """(a * b) mod P. One operand must be <= 256."""
        self._check(a, b)
        if a > SMALL_OPERAND_LIMIT and b > SMALL_OPERAND_LIMIT:
            raise InvariantError(
                f"one operand of mul must be <= {SMALL_OPERAND_LIMIT}, "
                f"got a={a}, b={b}"
            )
        return (a * b) % self.value

    def pow(self, base: int, exponent: int) -> int:
        """base ** exponent mod P by repeated mul().

        Linear in exponent. Only used once per window length to
        precompute the weight of a window's leading byte.
        """
        if exponent < 0:
            raise InvariantError(f"exponent must be non-negative, got {exponent}")
        result = self.reduce(1)
        for _ in range(exponent):
            result = self.mul(result, base)
        return result
