"""Number-theoretic transform over Z_q[X]/(X^256 + 1)."""

from __future__ import annotations

from collections.abc import Sequence

from latticekem.params import N
from latticekem.reduce import barrett_reduce, montgomery_reduce

ZETAS: tuple[int, ...] = (
    -1044, -758, -359, -1517, 1493, 1422, 287, 202,
    -171, 622, 1577, 182, 962, -1202, -1474, 1468,
    573, -1325, 264, 383, -829, 1458, -1602, -130,
    -681, 1017, 732, 608, -1542, 411, -205, -1571,
    1223, 652, -552, 1015, -1293, 1491, -282, -1544,
    516, -8, -320, -666, -1618, -1162, 126, 1469,
    -853, -90, -271, 830, 107, -1421, -247, -951,
    -398, 961, -1508, -725, 448, -1065, 677, -1275,
    -1103, 430, 555, 843, -1251, 871, 1550, 105,
    422, 587, 177, -235, -291, -460, 1574, 1653,
    -246, 778, 1159, -147, -777, 1483, -602, 1119,
    -1590, 644, -872, 349, 418, 329, -156, -75,
    817, 1097, 603, 610, 1322, -1285, -1465, 384,
    -1215, -136, 1218, -1335, -874, 220, -1187, -1659,
    -1185, -1530, -1278, 794, -1510, -854, -870, 478,
    -108, -308, 996, 991, 958, -1460, 1522, 1628,
)

_INV_SCALE = 1441  # mont^2 / 128


def _int16(x: int) -> int:
    return ((x + 0x8000) & 0xFFFF) - 0x8000


def _as_poly(coeffs: Sequence[int]) -> list[int]:
    r = [_int16(c) for c in coeffs]
    if len(r) != N:
        raise ValueError(f"expected {N} coefficients, got {len(r)}")
    return r


def fqmul(a: int, b: int) -> int:
    """Multiply and Montgomery-reduce: a value congruent to a*b*2^-16 mod q."""
    return montgomery_reduce(_int16(a) * _int16(b))


def ntt(coeffs: Sequence[int]) -> list[int]:
    """Forward NTT; input in standard order, output in bit-reversed order."""
    r = _as_poly(coeffs)
    k = 1
    length = 128
    while length >= 2:
        for start in range(0, N, 2 * length):
            zeta = ZETAS[k]
            k += 1
            for j in range(start, start + length):
                t = fqmul(zeta, r[j + length])
                r[j + length] = _int16(r[j] - t)
                r[j] = _int16(r[j] + t)
        length >>= 1
    return r


def invntt(coeffs: Sequence[int]) -> list[int]:
    """Inverse NTT followed by multiplication with the Montgomery factor 2^16."""
    r = _as_poly(coeffs)
    k = 127
    length = 2
    while length <= 128:
        for start in range(0, N, 2 * length):
            zeta = ZETAS[k]
            k -= 1
            for j in range(start, start + length):
                t = r[j]
                r[j] = barrett_reduce(t + r[j + length])
                r[j + length] = fqmul(zeta, _int16(r[j + length] - t))
        length <<= 1
    return [fqmul(c, _INV_SCALE) for c in r]


def basemul(a: Sequence[int], b: Sequence[int], zeta: int) -> tuple[int, int]:
    """Multiply two degree-one polynomials in Z_q[X]/(X^2 - zeta)."""
    if len(a) != 2 or len(b) != 2:
        raise ValueError("basemul operands must have exactly two coefficients")
    a0, a1 = a
    b0, b1 = b
    r0 = fqmul(fqmul(a1, b1), zeta)
    r0 = _int16(r0 + fqmul(a0, b0))
    r1 = _int16(fqmul(a0, b1) + fqmul(a1, b0))
    return r0, r1