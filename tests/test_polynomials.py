import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpbooklet.modular import MOD
from cpbooklet.ntt import MOD3, NTT
from cpbooklet.polynomials import Poly, convolve_mod

coeff_lists = st.lists(st.integers(min_value=0, max_value=MOD - 1), max_size=30)


def _random_poly(rng, degree, modulus=MOD):
    coeffs = [rng.randrange(modulus) for _ in range(degree)] + [rng.randrange(1, modulus)]
    return Poly(coeffs, modulus)


def test_convolve_matches_ntt():
    rng = random.Random(5)
    a = [rng.randrange(MOD3) for _ in range(57)]
    b = [rng.randrange(MOD3) for _ in range(33)]
    assert convolve_mod(a, b, MOD3) == NTT(MOD3).multiply(a, b)


def test_convolve_square_matches_ntt():
    rng = random.Random(6)
    a = [rng.randrange(MOD3) for _ in range(40)]
    assert convolve_mod(a, a, MOD3) == NTT(MOD3).multiply(a, a)


def test_convolve_empty():
    assert convolve_mod([], [1, 2, 3]) == []


@settings(max_examples=40, deadline=None)
@given(coeff_lists, coeff_lists, st.integers(min_value=0, max_value=MOD - 1))
def test_product_evaluates_to_product_of_values(a, b, x):
    pa, pb = Poly(a), Poly(b)
    assert (pa * pb).evaluate(x) == pa.evaluate(x) * pb.evaluate(x) % MOD


def test_trailing_zeros_removed():
    assert Poly([1, 2, 0, 0]).coefficients == [1, 2]
    assert Poly([0, 0]).is_zero()
    assert Poly([0, 0]).degree() == -1


def test_getitem_outside_range_is_zero():
    p = Poly([4, 5])
    assert p[1] == 5
    assert p[7] == 0
    assert p[-1] == 0


def test_mixed_moduli_rejected():
    with pytest.raises(ValueError):
        Poly([1], 7) + Poly([1], 11)


def test_division_by_zero_polynomial():
    with pytest.raises(ZeroDivisionError):
        divmod(Poly([1, 2]), Poly([]))


@settings(max_examples=40, deadline=None)
@given(coeff_lists, coeff_lists.filter(lambda c: any(c)))
def test_divmod_slow_invariant(a, b):
    pa, pb = Poly(a), Poly(b)
    q, r = divmod(pa, pb)
    assert q * pb + r == pa
    assert r.degree() < pb.degree()


def test_fast_divmod_matches_slow():
    rng = random.Random(11)
    a = _random_poly(rng, 700)
    b = _random_poly(rng, 350)
    q, r = divmod(a, b)
    assert q * b + r == a
    assert r.degree() < b.degree()
    assert (q, r) == a.divmod_slow(b)
    assert a % b == r


def test_inverse_series():
    rng = random.Random(3)
    p = Poly([rng.randrange(1, MOD)] + [rng.randrange(MOD) for _ in range(40)])
    for n in (1, 2, 7, 33, 64):
        assert (p * p.inverse(n)).truncate(n) == Poly([1])


def test_inverse_requires_invertible_constant():
    with pytest.raises(ZeroDivisionError):
        Poly([0, 1]).inverse(4)
    with pytest.raises(ValueError):
        Poly([1, 1]).inverse(0)


def test_evaluate_many_matches_evaluate():
    rng = random.Random(8)
    p = _random_poly(rng, 25)
    xs = [rng.randrange(MOD) for _ in range(19)]
    assert p.evaluate_many(xs) == [p.evaluate(x) for x in xs]


def test_evaluate_many_of_zero_polynomial():
    assert Poly([]).evaluate_many([3, 4, 5]) == [0, 0, 0]


def test_interpolate_round_trip():
    rng = random.Random(9)
    p = _random_poly(rng, 15)
    xs = rng.sample(range(MOD), 16)
    ys = [p.evaluate(x) for x in xs]
    assert Poly.interpolate(xs, ys) == p


def test_interpolate_rejects_bad_input():
    with pytest.raises(ValueError):
        Poly.interpolate([1, 1], [2, 3])
    with pytest.raises(ValueError):
        Poly.interpolate([1, 2], [2])


def test_derivative():
    assert Poly([0, 0, 0, 1]).derivative() == Poly([0, 0, 3])
    assert Poly([]).derivative().is_zero()


@settings(max_examples=40, deadline=None)
@given(coeff_lists)
def test_bisect_x2_round_trip(coeffs):
    p = Poly(coeffs)
    even, odd = p.bisect()
    assert even.x2() + odd.x2().mul_xk(1) == p


@settings(max_examples=40, deadline=None)
@given(coeff_lists, st.integers(min_value=0, max_value=MOD - 1), st.integers(0, MOD - 1))
def test_mulx_scales_argument(coeffs, a, x):
    p = Poly(coeffs)
    assert p.mulx(a).evaluate(x) == p.evaluate(a * x % MOD)


def test_reversed():
    p = Poly([1, 2, 3])
    assert p.reversed() == Poly([3, 2, 1])
    assert p.reversed(5) == Poly([3, 2, 1]).mul_xk(2)
    assert p.truncate(2) == Poly([1, 2])