import pytest

from latticekem.rng import (
    CtrDrbg,
    RngError,
    SeedExpander,
    aes256_ecb,
    ctr_drbg_update,
)

KAT_ENTROPY = bytes(range(48))


def test_aes256_ecb_fips197_vector():
    key = bytes(range(32))
    block = bytes.fromhex("00112233445566778899aabbccddeeff")
    assert aes256_ecb(key, block).hex() == "8ea2b7ca516745bfeafc49904b496089"


def test_aes256_ecb_rejects_bad_sizes():
    with pytest.raises(ValueError):
        aes256_ecb(bytes(16), bytes(16))
    with pytest.raises(ValueError):
        aes256_ecb(bytes(32), bytes(15))


def test_ctr_drbg_first_output_matches_kat_seed():
    drbg = CtrDrbg(KAT_ENTROPY)
    assert drbg.random_bytes(48).hex().upper() == (
        "061550234D158C5EC95595FE04EF7A25767F2E24CC2BC479D09D86DC9ABCFDE7"
        "056A8C266F9EF97ED08541DBD2E1FFA1"
    )


def test_ctr_drbg_is_deterministic():
    a = CtrDrbg(KAT_ENTROPY)
    b = CtrDrbg(KAT_ENTROPY)
    assert a.random_bytes(33) == b.random_bytes(33)
    assert a.random_bytes(7) == b.random_bytes(7)


def test_ctr_drbg_personalization_changes_stream():
    plain = CtrDrbg(KAT_ENTROPY)
    personal = CtrDrbg(KAT_ENTROPY, bytes([1]) * 48)
    assert plain.random_bytes(32) != personal.random_bytes(32)


def test_ctr_drbg_zero_personalization_equals_none():
    assert CtrDrbg(KAT_ENTROPY, bytes(48)).random_bytes(32) == CtrDrbg(
        KAT_ENTROPY
    ).random_bytes(32)


def test_ctr_drbg_lengths_and_counter():
    drbg = CtrDrbg(KAT_ENTROPY)
    assert len(drbg.random_bytes(5)) == 5
    assert len(drbg.random_bytes(17)) == 17
    assert drbg.reseed_counter == 3


def test_ctr_drbg_empty_request_still_advances_state():
    a = CtrDrbg(KAT_ENTROPY)
    b = CtrDrbg(KAT_ENTROPY)
    assert a.random_bytes(0) == b""
    assert a.random_bytes(16) != b.random_bytes(16)


def test_ctr_drbg_short_request_is_prefix_of_block():
    a = CtrDrbg(KAT_ENTROPY)
    b = CtrDrbg(KAT_ENTROPY)
    assert a.random_bytes(10) == b.random_bytes(16)[:10]


def test_ctr_drbg_rejects_bad_entropy():
    with pytest.raises(ValueError):
        CtrDrbg(bytes(32))


def test_ctr_drbg_update_zero_data_equals_none():
    key, v = bytes(range(32)), bytes(range(16))
    assert ctr_drbg_update(bytes(48), key, v) == ctr_drbg_update(None, key, v)


def test_ctr_drbg_update_output_sizes_and_xor():
    key, v = bytes(32), bytes(16)
    k0, v0 = ctr_drbg_update(None, key, v)
    data = bytes([0xFF]) * 48
    k1, v1 = ctr_drbg_update(data, key, v)
    assert (len(k0), len(v0)) == (32, 16)
    assert bytes(x ^ 0xFF for x in k0) == k1
    assert bytes(x ^ 0xFF for x in v0) == v1


def test_seed_expander_first_block_is_counter_encryption():
    seed = bytes(range(32))
    diversifier = bytes(range(8))
    maxlen = 1000
    exp = SeedExpander(seed, diversifier, maxlen)
    ctr0 = diversifier + maxlen.to_bytes(4, "big") + bytes(4)
    ctr1 = diversifier + maxlen.to_bytes(4, "big") + bytes(3) + b"\x01"
    out = exp.read(32)
    assert out[:16] == aes256_ecb(seed, ctr0)
    assert out[16:] == aes256_ecb(seed, ctr1)


def test_seed_expander_chunked_reads_match_single_read():
    seed, diversifier = bytes([7]) * 32, bytes([3]) * 8
    whole = SeedExpander(seed, diversifier, 500).read(100)
    parts = SeedExpander(seed, diversifier, 500)
    chunks = b"".join(parts.read(n) for n in (1, 15, 16, 3, 40, 25))
    assert chunks == whole
    assert parts.length_remaining == 400


def test_seed_expander_rejects_reading_all_that_remains():
    exp = SeedExpander(bytes(32), bytes(8), 10)
    with pytest.raises(RngError):
        exp.read(10)
    assert len(exp.read(9)) == 9


def test_seed_expander_rejects_large_maxlen():
    with pytest.raises(RngError):
        SeedExpander(bytes(32), bytes(8), 1 << 32)


def test_seed_expander_rejects_bad_sizes():
    with pytest.raises(ValueError):
        SeedExpander(bytes(31), bytes(8), 10)
    with pytest.raises(ValueError):
        SeedExpander(bytes(32), bytes(9), 10)