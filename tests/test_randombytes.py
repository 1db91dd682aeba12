import pytest
from hypothesis import given, strategies as st

from latticekem.randombytes import randombytes


@given(st.integers(min_value=0, max_value=4096))
def test_length(n):
    assert len(randombytes(n)) == n


def test_zero_length():
    assert randombytes(0) == b""


def test_draws_differ():
    a = randombytes(32)
    b = randombytes(32)
    assert len(a) == len(b) == 32
    assert a != b


def test_negative_rejected():
    with pytest.raises(ValueError):
        randombytes(-1)