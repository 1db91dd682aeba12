"""Symmetric primitives built on SHA-3 and SHAKE: XOF, PRF, hashes and KDF."""

from __future__ import annotations

import hashlib

from latticekem.params import SSBYTES, SYMBYTES

XOF_BLOCKBYTES = 168  # SHAKE128 rate


def _seed(seed: bytes) -> bytes:
    seed = bytes(seed)
    if len(seed) != SYMBYTES:
        raise ValueError(f"seed must be {SYMBYTES} bytes, got {len(seed)}")
    return seed


def _byte(value: int, name: str) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")
    return value


class Shake128Xof:
    """SHAKE128 absorbing a seed and two index bytes, squeezed in whole blocks."""

    def __init__(self, seed: bytes, x: int, y: int) -> None:
        data = _seed(seed) + bytes((_byte(x, "x"), _byte(y, "y")))
        self._shake = hashlib.shake_128(data)
        self._offset = 0

    def squeeze_blocks(self, nblocks: int) -> bytes:
        """Return the next ``nblocks`` blocks of output, continuing the stream."""
        if nblocks < 0:
            raise ValueError("number of blocks must not be negative")
        end = self._offset + nblocks * XOF_BLOCKBYTES
        out = self._shake.digest(end)[self._offset:]
        self._offset = end
        return out


def shake256_prf(key: bytes, nonce: int, outlen: int) -> bytes:
    """SHAKE256 of ``key`` followed by a one-byte ``nonce``, ``outlen`` bytes long."""
    if outlen < 0:
        raise ValueError("output length must not be negative")
    data = _seed(key) + bytes((_byte(nonce, "nonce"),))
    return hashlib.shake_256(data).digest(outlen)


def hash_h(data: bytes) -> bytes:
    """The hash H: SHA3-256."""
    return hashlib.sha3_256(bytes(data)).digest()


def hash_g(data: bytes) -> bytes:
    """The hash G: SHA3-512."""
    return hashlib.sha3_512(bytes(data)).digest()


def kdf(data: bytes) -> bytes:
    """Derive a shared secret of SSBYTES bytes with SHAKE256."""
    return hashlib.shake_256(bytes(data)).digest(SSBYTES)