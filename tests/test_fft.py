import pytest
from hypothesis import given, strategies as st

from cpbooklet.fft import fft, multiply


def _horner(coeffs, x):
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def test_impulse_transforms_to_ones():
    out = fft([1, 0, 0, 0])
    assert all(abs(v - 1) < 1e-12 for v in out)


def test_constant_transforms_to_spike():
    out = fft([1, 1, 1, 1, 1, 1, 1, 1])
    assert abs(out[0] - 8) < 1e-9
    assert all(abs(v) < 1e-9 for v in out[1:])


@pytest.mark.parametrize("bad", [[], [1, 2, 3], [0] * 6])
def test_bad_length_raises(bad):
    with pytest.raises(ValueError):
        fft(bad)


@given(st.integers(min_value=0, max_value=6).flatmap(
    lambda e: st.lists(st.floats(min_value=-100, max_value=100), min_size=1 << e, max_size=1 << e)))
def test_double_transform_reverses(values):
    n = len(values)
    twice = fft(fft(values))
    for k in range(n):
        assert abs(twice[k] - n * values[-k % n]) < 1e-6 * n


def test_small_product():
    assert multiply([1, 1], [1, 1]) == [1, 2, 1]


def test_empty_operand():
    assert multiply([], [1, 2]) == []


@given(
    st.lists(st.integers(min_value=0, max_value=1000), min_size=1, max_size=30),
    st.lists(st.integers(min_value=0, max_value=1000), min_size=1, max_size=30),
)
def test_product_evaluates_to_product(a, b):
    c = multiply(a, b)
    assert len(c) == len(a) + len(b) - 1
    for x in (1, 2, -1):
        assert _horner(c, x) == _horner(a, x) * _horner(b, x)


@given(st.lists(st.integers(min_value=0, max_value=1000), min_size=1, max_size=20))
def test_multiply_by_one(a):
    assert multiply(a, [1]) == a
    assert multiply([1], a) == a