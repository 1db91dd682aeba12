"""Polynomials in R_q = Z_q[X]/(X^256 + 1) as lists of 256 signed 16-bit coefficients."""

from __future__ import annotations

from collections.abc import Sequence

from latticekem.ntt import ZETAS, basemul, invntt, ntt
from latticekem.params import N, POLYBYTES, Q, SYMBYTES
from latticekem.reduce import barrett_reduce, montgomery_reduce

_TOMONT = (1 << 32) % Q


def _int16(x: int) -> int:
    return ((x + 0x8000) & 0xFFFF) - 0x8000


def _poly(coeffs: Sequence[int]) -> list[int]:
    r = [_int16(c) for c in coeffs]
    if len(r) != N:
        raise ValueError(f"expected {N} coefficients, got {len(r)}")
    return r


def _data(data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) != length:
        raise ValueError(f"expected {length} bytes, got {len(data)}")
    return data


def _positive(c: int) -> int:
    """Map a 16-bit coefficient to its standard representative as an unsigned 16-bit value."""
    return (c + (Q if c < 0 else 0)) & 0xFFFF


def _pack(values: Sequence[int], bits: int) -> bytes:
    per_chunk = 8
    chunk_bytes = bits
    out = bytearray()
    for start in range(0, len(values), per_chunk):
        word = 0
        for j, v in enumerate(values[start:start + per_chunk]):
            word |= v << (bits * j)
        out += word.to_bytes(chunk_bytes, "little")
    return bytes(out)


def _unpack(data: bytes, bits: int) -> list[int]:
    mask = (1 << bits) - 1
    out = []
    for start in range(0, len(data), bits):
        word = int.from_bytes(data[start:start + bits], "little")
        out.extend((word >> (bits * j)) & mask for j in range(8))
    return out


def poly_compress(coeffs: Sequence[int], compressed_bytes: int) -> bytes:
    """Compress to 4 bits (128 bytes) or 5 bits (160 bytes) per coefficient."""
    r = _poly(coeffs)
    if compressed_bytes == 128:
        t = [(((_positive(c) << 4) + Q // 2) // Q) & 15 for c in r]
        return _pack(t, 4)
    if compressed_bytes == 160:
        mask32 = 0xFFFFFFFF
        t = [
            (((((_positive(c) if c >= -Q else (c + Q) & mask32) << 5) & mask32)
              + Q // 2) & mask32) // Q & 31
            for c in r
        ]
        return _pack(t, 5)
    raise ValueError("compressed size must be 128 or 160 bytes")


def poly_decompress(data: bytes, compressed_bytes: int) -> list[int]:
    """Approximate inverse of :func:`poly_compress`."""
    if compressed_bytes == 128:
        t = _unpack(_data(data, 128), 4)
        return [(v * Q + 8) >> 4 for v in t]
    if compressed_bytes == 160:
        t = _unpack(_data(data, 160), 5)
        return [(v * Q + 16) >> 5 for v in t]
    raise ValueError("compressed size must be 128 or 160 bytes")


def poly_to_bytes(coeffs: Sequence[int]) -> bytes:
    """Serialise to POLYBYTES bytes, 12 bits per coefficient."""
    r = _poly(coeffs)
    out = bytearray()
    for c0, c1 in zip(r[0::2], r[1::2]):
        t0, t1 = _positive(c0), _positive(c1)
        out += bytes((t0 & 0xFF, ((t0 >> 8) | (t1 << 4)) & 0xFF, (t1 >> 4) & 0xFF))
    return bytes(out)


def poly_from_bytes(data: bytes) -> list[int]:
    """Inverse of :func:`poly_to_bytes`."""
    return _unpack(_data(data, POLYBYTES), 12)


def poly_from_msg(msg: bytes) -> list[int]:
    """Map each message bit to 0 or (q+1)/2."""
    msg = _data(msg, SYMBYTES)
    half = (Q + 1) // 2
    return [half if (byte >> j) & 1 else 0 for byte in msg for j in range(8)]


def poly_to_msg(coeffs: Sequence[int]) -> bytes:
    """Decode a polynomial to a 32-byte message by rounding each coefficient."""
    r = _poly(coeffs)
    bits = [((((_positive(c) << 1) + Q // 2) // Q) & 1) for c in r]
    return bytes(
        sum(bit << j for j, bit in enumerate(bits[i:i + 8])) for i in range(0, N, 8)
    )


def poly_to_mont(coeffs: Sequence[int]) -> list[int]:
    """Multiply every coefficient by 2^16 modulo q (into the Montgomery domain)."""
    return [montgomery_reduce(c * _TOMONT) for c in _poly(coeffs)]


def poly_reduce(coeffs: Sequence[int]) -> list[int]:
    """Barrett-reduce every coefficient to its centred representative."""
    return [barrett_reduce(c) for c in _poly(coeffs)]


def poly_ntt(coeffs: Sequence[int]) -> list[int]:
    """Forward NTT followed by coefficient reduction."""
    return poly_reduce(ntt(_poly(coeffs)))


def poly_invntt_tomont(coeffs: Sequence[int]) -> list[int]:
    """Inverse NTT including multiplication by 2^16."""
    return invntt(_poly(coeffs))


def poly_basemul_montgomery(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Multiply two polynomials in the NTT domain, with a factor 2^-16."""
    a, b = _poly(a), _poly(b)
    r: list[int] = []
    for i in range(N // 4):
        zeta = ZETAS[64 + i]
        lo = 4 * i
        r.extend(basemul(a[lo:lo + 2], b[lo:lo + 2], zeta))
        r.extend(basemul(a[lo + 2:lo + 4], b[lo + 2:lo + 4], -zeta))
    return r


def poly_add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficient-wise sum without modular reduction."""
    return [_int16(x + y) for x, y in zip(_poly(a), _poly(b))]


def poly_sub(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficient-wise difference without modular reduction."""
    return [_int16(x - y) for x, y in zip(_poly(a), _poly(b))]