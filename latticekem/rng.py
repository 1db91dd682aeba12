"""AES-256 based deterministic generators: a seed expander and a CTR-DRBG."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK = 16


class RngError(ValueError):
    """Raised when a generator is asked for something it cannot give."""


def aes256_ecb(key: bytes, block: bytes) -> bytes:
    """Encrypt one 16-byte ``block`` under a 32-byte AES-256 ``key``."""
    key, block = bytes(key), bytes(block)
    if len(key) != 32:
        raise ValueError("AES-256 key must be 32 bytes")
    if len(block) != _BLOCK:
        raise ValueError("AES block must be 16 bytes")
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(block) + encryptor.finalize()


def _increment(counter: bytes) -> bytes:
    """Increment a big-endian counter, wrapping to zero on overflow."""
    width = len(counter)
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * width))
    return value.to_bytes(width, "big")


def ctr_drbg_update(
    provided_data: bytes | None, key: bytes, v: bytes
) -> tuple[bytes, bytes]:
    """Run the CTR-DRBG update step and return the new ``(key, v)``."""
    if provided_data is not None and len(provided_data) != 48:
        raise ValueError("provided data must be 48 bytes")
    temp = bytearray()
    for _ in range(3):
        v = _increment(bytes(v))
        temp += aes256_ecb(key, v)
    if provided_data is not None:
        temp = bytearray(t ^ p for t, p in zip(temp, provided_data))
    return bytes(temp[:32]), bytes(temp[32:])


class SeedExpander:
    """Expand a 32-byte seed into at most ``maxlen`` bytes with AES-256 in counter mode."""

    def __init__(self, seed: bytes, diversifier: bytes, maxlen: int) -> None:
        if maxlen < 0 or maxlen >= 1 << 32:
            raise RngError("maxlen must be less than 2**32")
        seed, diversifier = bytes(seed), bytes(diversifier)
        if len(seed) != 32:
            raise ValueError("seed must be 32 bytes")
        if len(diversifier) != 8:
            raise ValueError("diversifier must be 8 bytes")
        self.length_remaining = maxlen
        self._key = seed
        self._ctr = diversifier + maxlen.to_bytes(4, "big") + bytes(4)
        self._buffer = bytes(_BLOCK)
        self._buffer_pos = _BLOCK

    def read(self, n: int) -> bytes:
        """Return the next ``n`` bytes of the expanded stream."""
        if n < 0:
            raise ValueError("number of bytes must not be negative")
        if n >= self.length_remaining:
            raise RngError("requested length exceeds what remains")
        self.length_remaining -= n
        out = bytearray()
        while n > 0:
            available = _BLOCK - self._buffer_pos
            if n <= available:
                out += self._buffer[self._buffer_pos:self._buffer_pos + n]
                self._buffer_pos += n
                break
            out += self._buffer[self._buffer_pos:]
            n -= available
            self._buffer = aes256_ecb(self._key, self._ctr)
            self._buffer_pos = 0
            self._ctr = self._ctr[:12] + _increment(self._ctr[12:])
        return bytes(out)


class CtrDrbg:
    """AES-256 CTR-DRBG without derivation function, as used for known-answer tests."""

    def __init__(
        self, entropy_input: bytes, personalization_string: bytes | None = None
    ) -> None:
        seed_material = bytes(entropy_input)
        if len(seed_material) != 48:
            raise ValueError("entropy input must be 48 bytes")
        if personalization_string is not None:
            personalization_string = bytes(personalization_string)
            if len(personalization_string) != 48:
                raise ValueError("personalization string must be 48 bytes")
            seed_material = bytes(
                s ^ p for s, p in zip(seed_material, personalization_string)
            )
        self._key, self._v = ctr_drbg_update(seed_material, bytes(32), bytes(16))
        self.reseed_counter = 1

    def random_bytes(self, n: int) -> bytes:
        """Return ``n`` pseudo-random bytes and advance the generator state."""
        if n < 0:
            raise ValueError("number of bytes must not be negative")
        out = bytearray()
        while len(out) < n:
            self._v = _increment(self._v)
            block = aes256_ecb(self._key, self._v)
            out += block[: n - len(out)]
        self._key, self._v = ctr_drbg_update(None, self._key, self._v)
        self.reseed_counter += 1
        return bytes(out)