"""Operating-system randomness."""

import os


def randombytes(n: int) -> bytes:
    """Return ``n`` bytes from the operating system's secure random source."""
    if n < 0:
        raise ValueError("number of bytes must not be negative")
    return os.urandom(n)