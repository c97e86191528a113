"""Exceptions raised by the matching core."""


class InvariantError(AssertionError):
    """A precondition of the hashing or filter code was violated.

    These are programmer errors: an operand outside the modular ring,
    a Bloom filter size that is not a positive multiple of 8, a window
    shorter than the chunk length. Library code never catches them.
    """
