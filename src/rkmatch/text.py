"""Reading and normalizing documents before they reach the matchers.

Normalization makes chunk matching insensitive to case and layout:

    1. ASCII upper case letters become lower case.
    2. Every run of whitespace (space, tab, newline, CR, VT, FF)
       becomes exactly one space.
    3. Leading and trailing whitespace is dropped.

The matchers themselves never normalize; they compare raw bytes.
"""
from __future__ import annotations

from pathlib import Path


def normalize(data: bytes) -> bytes:
    """Lower-case ASCII letters and collapse whitespace runs to one space."""
    return b" ".join(data.lower().split())


def read_document(path: str | Path, raw: bool = False) -> bytes:
    """Read a file as bytes, normalized unless raw=True.

    OSError from the read propagates to the caller.
    """
    data = Path(path).read_bytes()
    return data if raw else normalize(data)
