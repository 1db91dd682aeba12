"""Vectors of polynomials: serialisation, compression and NTT-domain products."""

from __future__ import annotations

from collections.abc import Sequence

from latticekem.ntt import ZETAS, basemul
from latticekem.params import N, POLYBYTES, Q
from latticekem.poly import (
    poly_add,
    poly_from_bytes,
    poly_invntt_tomont,
    poly_ntt,
    poly_reduce,
    poly_to_bytes,
)

_BITS_FOR_POLY_BYTES = {320: 10, 352: 11}


def _int16(x: int) -> int:
    return ((x + 0x8000) & 0xFFFF) - 0x8000


def _poly(coeffs: Sequence[int]) -> list[int]:
    r = [_int16(c) for c in coeffs]
    if len(r) != N:
        raise ValueError(f"expected {N} coefficients, got {len(r)}")
    return r


def _vec(vec: Sequence[Sequence[int]]) -> list[list[int]]:
    polys = [_poly(p) for p in vec]
    if not polys:
        raise ValueError("a polynomial vector must not be empty")
    return polys


def _positive(c: int) -> int:
    """Standard representative of a 16-bit coefficient as an unsigned 16-bit value."""
    return (c + (Q if c < 0 else 0)) & 0xFFFF


def _bits(compressed_bytes: int, k: int) -> int:
    if k <= 0 or compressed_bytes % k:
        raise ValueError(
            f"compressed size {compressed_bytes} does not fit {k} polynomials"
        )
    try:
        return _BITS_FOR_POLY_BYTES[compressed_bytes // k]
    except KeyError:
        raise ValueError(
            "compressed size must be 320*k or 352*k bytes"
        ) from None


def _pack(values: Sequence[int], bits: int) -> bytes:
    word = 0
    for j, v in enumerate(values):
        word |= v << (bits * j)
    return word.to_bytes(len(values) * bits // 8, "little")


def _unpack(data: bytes, bits: int) -> list[int]:
    word = int.from_bytes(data, "little")
    mask = (1 << bits) - 1
    return [(word >> (bits * j)) & mask for j in range(len(data) * 8 // bits)]


def polyvec_compress(vec: Sequence[Sequence[int]], compressed_bytes: int) -> bytes:
    """Compress every polynomial to 10 or 11 bits per coefficient and serialise."""
    polys = _vec(vec)
    bits = _bits(compressed_bytes, len(polys))
    mask = (1 << bits) - 1
    out = bytearray()
    for p in polys:
        t = [(((_positive(c) << bits) + Q // 2) // Q) & mask for c in p]
        out += _pack(t, bits)
    return bytes(out)


def polyvec_decompress(data: bytes, k: int, compressed_bytes: int) -> list[list[int]]:
    """Approximate inverse of :func:`polyvec_compress`."""
    bits = _bits(compressed_bytes, k)
    data = bytes(data)
    if len(data) != compressed_bytes:
        raise ValueError(f"expected {compressed_bytes} bytes, got {len(data)}")
    chunk = compressed_bytes // k
    half = 1 << (bits - 1)
    return [
        [(v * Q + half) >> bits for v in _unpack(data[i:i + chunk], bits)]
        for i in range(0, compressed_bytes, chunk)
    ]


def polyvec_to_bytes(vec: Sequence[Sequence[int]]) -> bytes:
    """Serialise a vector of polynomials, POLYBYTES bytes per polynomial."""
    return b"".join(poly_to_bytes(p) for p in _vec(vec))


def polyvec_from_bytes(data: bytes, k: int) -> list[list[int]]:
    """Inverse of :func:`polyvec_to_bytes` for a vector of ``k`` polynomials."""
    data = bytes(data)
    if k <= 0:
        raise ValueError("k must be positive")
    if len(data) != k * POLYBYTES:
        raise ValueError(f"expected {k * POLYBYTES} bytes, got {len(data)}")
    return [poly_from_bytes(data[i:i + POLYBYTES]) for i in range(0, len(data), POLYBYTES)]


def polyvec_ntt(vec: Sequence[Sequence[int]]) -> list[list[int]]:
    """Apply the forward NTT to every polynomial."""
    return [poly_ntt(p) for p in _vec(vec)]


def polyvec_invntt_tomont(vec: Sequence[Sequence[int]]) -> list[list[int]]:
    """Apply the inverse NTT, with multiplication by 2^16, to every polynomial."""
    return [poly_invntt_tomont(p) for p in _vec(vec)]


def polyvec_basemul_acc_montgomery(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[int]:
    """Multiply in the NTT domain and accumulate into one polynomial, times 2^-16.

    Only the first two polynomials of each vector take part in the sum.
    """
    va, vb = _vec(a), _vec(b)
    if len(va) != len(vb):
        raise ValueError("vectors must have the same length")
    if len(va) < 2:
        raise ValueError("vectors must hold at least two polynomials")
    r = [0] * N
    for block in range(N // 4):
        lo = 4 * block
        zeta = ZETAS[64 + block]
        for pa, pb in zip(va[:2], vb[:2]):
            s0, s1 = basemul(pa[lo:lo + 2], pb[lo:lo + 2], zeta)
            s2, s3 = basemul(pa[lo + 2:lo + 4], pb[lo + 2:lo + 4], -zeta)
            r[lo] = _int16(r[lo] + s0)
            r[lo + 1] = _int16(r[lo + 1] + s1)
            r[lo + 2] = _int16(r[lo + 2] + s2)
            r[lo + 3] = _int16(r[lo + 3] + s3)
    return poly_reduce(r)


def polyvec_reduce(vec: Sequence[Sequence[int]]) -> list[list[int]]:
    """Barrett-reduce every coefficient of every polynomial."""
    return [poly_reduce(p) for p in _vec(vec)]


def polyvec_add(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Add two vectors of polynomials without modular reduction."""
    va, vb = _vec(a), _vec(b)
    if len(va) != len(vb):
        raise ValueError("vectors must have the same length")
    return [poly_add(x, y) for x, y in zip(va, vb)]