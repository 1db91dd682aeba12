import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from latticekem.sha2 import sha256, sha512


def test_sha256_empty_pinned():
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha256_abc_pinned():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 200])
def test_sha256_padding_boundaries(length):
    data = bytes((i * 7 + 3) & 0xFF for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


@pytest.mark.parametrize("length", [0, 1, 111, 112, 113, 127, 128, 129, 239, 240, 255, 256, 300])
def test_sha512_padding_boundaries(length):
    data = bytes((i * 13 + 5) & 0xFF for i in range(length))
    assert sha512(data) == hashlib.sha512(data).digest()


def test_digest_sizes():
    assert len(sha256(b"message")) == 32
    assert len(sha512(b"message")) == 64


def test_accepts_bytearray():
    assert sha512(bytearray(b"xyz")) == hashlib.sha512(b"xyz").digest()


@settings(max_examples=50)
@given(st.binary(max_size=400))
def test_sha256_matches_hashlib(data):
    assert sha256(data) == hashlib.sha256(data).digest()


@settings(max_examples=50)
@given(st.binary(max_size=400))
def test_sha512_matches_hashlib(data):
    assert sha512(data) == hashlib.sha512(data).digest()