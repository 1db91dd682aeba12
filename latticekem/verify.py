"""Constant-time comparison and conditional copy of byte strings."""

from __future__ import annotations

import hmac


def verify(a: bytes, b: bytes) -> int:
    """Compare two equal-length byte strings: 0 if equal, 1 otherwise."""
    a, b = bytes(a), bytes(b)
    if len(a) != len(b):
        raise ValueError("byte strings must have the same length")
    return 0 if hmac.compare_digest(a, b) else 1


def cmov(r: bytes, x: bytes, b: int) -> bytes:
    """Return ``x`` if ``b`` is 1 and ``r`` if ``b`` is 0, without branching on data."""
    if b not in (0, 1):
        raise ValueError("condition bit must be 0 or 1")
    r, x = bytes(r), bytes(x)
    if len(r) != len(x):
        raise ValueError("byte strings must have the same length")
    mask = -b & 0xFF
    return bytes(ri ^ (mask & (ri ^ xi)) for ri, xi in zip(r, x))