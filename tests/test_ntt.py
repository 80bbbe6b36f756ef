import pytest
from hypothesis import given, strategies as st

from cpbooklet import fft
from cpbooklet.ntt import MOD1, MOD2, MOD3, NTT


def _horner(coeffs, x, p):
    result = 0
    for c in reversed(coeffs):
        result = (result * x + c) % p
    return result


def test_small_product():
    assert NTT(MOD3).multiply([1, 1], [1, 1]) == [1, 2, 1]


def test_empty_operand():
    assert NTT().multiply([], [3]) == []


@pytest.mark.parametrize("p", [MOD1, MOD2, MOD3])
def test_root_has_full_order(p):
    ntt = NTT(p)
    assert (p - 1) % (1 << ntt.max_base) == 0
    assert ((p - 1) >> ntt.max_base) % 2 == 1
    assert pow(ntt.root, 1 << (ntt.max_base - 1), p) == p - 1


@pytest.mark.parametrize("p", [MOD1, MOD2, MOD3])
@given(
    a=st.lists(st.integers(min_value=0, max_value=10**9), min_size=1, max_size=20),
    b=st.lists(st.integers(min_value=0, max_value=10**9), min_size=1, max_size=20),
    x=st.integers(min_value=0, max_value=10**9),
)
def test_product_evaluates_to_product(p, a, b, x):
    c = NTT(p).multiply(a, b)
    assert len(c) == len(a) + len(b) - 1
    assert _horner(c, x, p) == _horner(a, x, p) * _horner(b, x, p) % p


@given(st.integers(min_value=0, max_value=5).flatmap(
    lambda e: st.lists(st.integers(min_value=0, max_value=MOD3 - 1), min_size=1 << e, max_size=1 << e)))
def test_double_transform_reverses(values):
    ntt = NTT(MOD3)
    n = len(values)
    twice = ntt.transform(ntt.transform(values))
    assert twice == [n * values[-k % n] % MOD3 for k in range(n)]


@given(
    st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=15),
    st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=15),
)
def test_agrees_with_complex_fft(a, b):
    assert NTT(MOD3).multiply(a, b) == fft.multiply(a, b)


def test_length_too_large_for_modulus():
    ntt = NTT(13)
    assert ntt.max_base == 2
    with pytest.raises(ValueError):
        ntt.transform([1] * 8)


def test_length_not_power_of_two():
    with pytest.raises(ValueError):
        NTT().transform([1, 2, 3])


def test_even_modulus_rejected():
    with pytest.raises(ValueError):
        NTT(16)