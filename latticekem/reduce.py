"""Montgomery and Barrett reduction modulo q on 16-bit signed values."""

from latticekem.params import Q

MONT = -1044  # 2^16 mod q
QINV = -3327  # q^-1 mod 2^16

_BARRETT_V = ((1 << 26) + Q // 2) // Q


def _int16(x: int) -> int:
    return ((x + 0x8000) & 0xFFFF) - 0x8000


def _int32(x: int) -> int:
    return ((x + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def montgomery_reduce(a: int) -> int:
    """Return a 16-bit value congruent to a * 2^-16 modulo q.

    ``a`` is taken as a 32-bit signed integer.
    """
    a = _int32(a)
    t = _int16(_int16(a) * QINV)
    return _int16((a - t * Q) >> 16)


def barrett_reduce(a: int) -> int:
    """Return the centred representative of a 16-bit ``a`` modulo q."""
    a = _int16(a)
    t = _int16((_BARRETT_V * a + (1 << 25)) >> 26)
    t = _int16(t * Q)
    return _int16(a - t)