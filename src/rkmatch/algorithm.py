"""Matching strategies."""
from __future__ import annotations

from enum import Enum


class Algorithm(Enum):
    EXACT = "exact"
    SUBSTRING = "substring"
    RABIN_KARP = "rabin-karp"
    RABIN_KARP_BATCH = "rabin-karp-batch"

    @property
    def is_chunked(self) -> bool:
        """True for the modes that count matched query chunks."""
        return self is not Algorithm.EXACT

    @property
    def uses_rolling_hash(self) -> bool:
        return self in (Algorithm.RABIN_KARP, Algorithm.RABIN_KARP_BATCH)

    @classmethod
    def parse(cls, text: str) -> Algorithm:
        """Parse a selector name, or one of the legacy codes 0-3.

        Codes follow the order of the members: 0 exact, 1 substring,
        2 rabin-karp, 3 rabin-karp-batch.
        """
        value = text.strip().lower().replace("_", "-")
        if value.isdigit():
            members = list(cls)
            code = int(value)
            if code < len(members):
                return members[code]
        else:
            for member in cls:
                if member.value == value:
                    return member
        names = ", ".join(m.value for m in cls)
        raise ValueError(f"unknown algorithm {text!r}; choose from {names} (or 0-3)")
