from hypothesis import given, strategies as st

from latticekem.params import Q
from latticekem.reduce import MONT, barrett_reduce, montgomery_reduce


def test_montgomery_reduce_of_multiple_of_q_is_zero():
    assert montgomery_reduce(5 * Q) == 0
    assert montgomery_reduce(-7 * Q) == 0


def test_montgomery_reduce_of_two_to_sixteen_is_one():
    assert montgomery_reduce(1 << 16) == 1


def test_montgomery_of_mont_squared_is_mont():
    assert (montgomery_reduce(MONT * MONT) - MONT) % Q == 0


def test_montgomery_of_mont_is_one():
    assert montgomery_reduce(MONT) % Q == 1


@given(st.integers(min_value=-Q * (1 << 15) + 1, max_value=Q * (1 << 15) - 1))
def test_montgomery_reduce_congruence(a):
    r = montgomery_reduce(a)
    assert -Q < r < Q
    assert (r * (1 << 16) - a) % Q == 0


@given(st.integers(min_value=-(1 << 15), max_value=(1 << 15) - 1))
def test_barrett_reduce_centred(a):
    r = barrett_reduce(a)
    assert -(Q // 2) <= r <= Q // 2
    assert (r - a) % Q == 0


def test_barrett_multiples_of_q():
    assert barrett_reduce(0) == 0
    assert barrett_reduce(Q) == 0
    assert barrett_reduce(-Q) == 0
    assert barrett_reduce(Q + 1) == 1