"""SHA-256 and SHA-512 message digests."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass

_K256: tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_K512: tuple[int, ...] = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
    0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
    0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
    0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
    0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
    0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
    0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
    0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
    0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
    0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
    0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
    0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
    0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
    0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)

_IV256 = bytes.fromhex(
    "6a09e667bb67ae853c6ef372a54ff53a510e527f9b05688c1f83d9ab5be0cd19"
)
_IV512 = bytes.fromhex(
    "6a09e667f3bcc908bb67ae8584caa73b3c6ef372fe94f82ba54ff53a5f1d36f1"
    "510e527fade682d19b05688c2b3e6c1f1f83d9abfb41bd6b5be0cd19137e2179"
)


@dataclass(frozen=True)
class _Variant:
    bits: int
    fmt: str
    iv: bytes
    k: Sequence[int]
    big_sigma0: tuple[int, int, int]
    big_sigma1: tuple[int, int, int]
    small_sigma0: tuple[int, int, int]
    small_sigma1: tuple[int, int, int]

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def block_size(self) -> int:
        return self.bits * 2  # 16 words of bits/8 bytes each

    @property
    def length_bytes(self) -> int:
        return self.bits // 4

    def rotr(self, x: int, c: int) -> int:
        return ((x >> c) | (x << (self.bits - c))) & self.mask

    def big(self, x: int, rots: tuple[int, int, int]) -> int:
        return self.rotr(x, rots[0]) ^ self.rotr(x, rots[1]) ^ self.rotr(x, rots[2])

    def small(self, x: int, spec: tuple[int, int, int]) -> int:
        return self.rotr(x, spec[0]) ^ self.rotr(x, spec[1]) ^ (x >> spec[2])


_SHA256 = _Variant(32, "I", _IV256, _K256, (2, 13, 22), (6, 11, 25), (7, 18, 3), (17, 19, 10))
_SHA512 = _Variant(64, "Q", _IV512, _K512, (28, 34, 39), (14, 18, 41), (1, 8, 7), (19, 61, 6))


def _compress(v: _Variant, state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    mask = v.mask
    w = list(struct.unpack(f">16{v.fmt}", block))
    for t in range(16, len(v.k)):
        w.append(
            (v.small(w[t - 2], v.small_sigma1) + w[t - 7]
             + v.small(w[t - 15], v.small_sigma0) + w[t - 16]) & mask
        )
    a, b, c, d, e, f, g, h = state
    for kt, wt in zip(v.k, w):
        t1 = (h + v.big(e, v.big_sigma1) + ((e & f) ^ (~e & g)) + kt + wt) & mask
        t2 = (v.big(a, v.big_sigma0) + ((a & b) ^ (a & c) ^ (b & c))) & mask
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & mask, c, b, a, (t1 + t2) & mask
    return tuple((x + y) & mask for x, y in zip(state, (a, b, c, d, e, f, g, h)))


def _digest(v: _Variant, data: bytes) -> bytes:
    data = bytes(data)
    block = v.block_size
    tail = len(data) % block
    pad_zeros = (block - v.length_bytes - 1 - tail) % block
    padded = (
        data
        + b"\x80"
        + bytes(pad_zeros)
        + (len(data) * 8).to_bytes(v.length_bytes, "big")
    )
    state = struct.unpack(f">8{v.fmt}", v.iv)
    for offset in range(0, len(padded), block):
        state = _compress(v, state, padded[offset:offset + block])
    return struct.pack(f">8{v.fmt}", *state)


def sha256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return _digest(_SHA256, data)


def sha512(data: bytes) -> bytes:
    """Return the 64-byte SHA-512 digest of ``data``."""
    return _digest(_SHA512, data)