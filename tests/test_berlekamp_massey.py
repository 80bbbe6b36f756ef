import pytest
from hypothesis import given, strategies as st

from cpbooklet.berlekamp_massey import berlekamp_massey, mod_pow
from cpbooklet.modular import MOD


def test_documented_example():
    assert berlekamp_massey([0, 1, 1, 3, 5, 11]) == [1, 2]


def test_fibonacci():
    fib = [0, 1]
    while len(fib) < 12:
        fib.append(fib[-1] + fib[-2])
    assert berlekamp_massey(fib) == [1, 1]


def test_empty_and_zero_sequences():
    assert berlekamp_massey([]) == []
    assert berlekamp_massey([0, 0, 0, 0]) == []


def test_mod_pow_matches_builtin():
    assert mod_pow(3, 10**12, MOD) == pow(3, 10**12, MOD)
    assert mod_pow(-2, 3, 7) == pow(-2, 3, 7)


def test_mod_pow_negative_exponent():
    with pytest.raises(ValueError):
        mod_pow(2, -1)


@given(
    st.lists(st.integers(min_value=0, max_value=MOD - 1), min_size=1, max_size=5),
    st.data(),
)
def test_recovered_recurrence_generates_sequence(coeffs, data):
    k = len(coeffs)
    seq = data.draw(st.lists(st.integers(min_value=0, max_value=MOD - 1), min_size=k, max_size=k))
    while len(seq) < 2 * k + 3:
        seq.append(sum(c * seq[-1 - j] for j, c in enumerate(coeffs)) % MOD)
    rec = berlekamp_massey(seq)
    assert len(rec) <= k
    for i in range(len(rec), len(seq)):
        assert seq[i] == sum(c * seq[i - 1 - j] for j, c in enumerate(rec)) % MOD