import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpbooklet.hashing import MOD, HashRange, mod_mul

residues = st.integers(min_value=0, max_value=MOD - 1)


@given(residues, residues)
def test_mod_mul_commutes(a, b):
    assert mod_mul(a, b) == mod_mul(b, a)


@given(residues)
def test_mod_mul_identity_and_negation(a):
    assert mod_mul(a, 1) == a
    assert mod_mul(a, MOD - 1) == (MOD - a) % MOD


def test_single_character_hash_is_its_code():
    h = HashRange("a")
    assert h.hash(0, 0) == (97, 97)


def test_equal_substrings_hash_equal():
    h = HashRange("abab")
    assert h.hash(0, 1) == h.hash(2, 3)
    assert h.hash(0, 1) != h.hash(1, 2)


def test_empty_range_hashes_to_zero():
    h = HashRange("xyz")
    assert h.hash(2, 1) == (0, 0)


def test_incremental_add_matches_construction():
    whole = HashRange("hello world", bases=(12345, 67890))
    parts = HashRange(bases=(12345, 67890))
    parts.add("hello")
    parts.add(" ")
    for ch in "world":
        parts.add(ch)
    assert parts.text == whole.text
    assert parts.hash(3, 9) == whole.hash(3, 9)


@given(st.text(alphabet="ab", min_size=1, max_size=25), st.data())
def test_hash_depends_only_on_substring(text, data):
    h = HashRange(text, bases=(1_000_003, 998_244_353))
    length = data.draw(st.integers(min_value=1, max_value=len(text)))
    i = data.draw(st.integers(min_value=0, max_value=len(text) - length))
    fresh = HashRange(text[i:i + length], bases=(1_000_003, 998_244_353))
    assert h.hash(i, i + length - 1) == fresh.hash(0, length - 1)


def test_out_of_range_raises():
    h = HashRange("abc")
    with pytest.raises(IndexError):
        h.hash(0, 3)
    with pytest.raises(IndexError):
        h.hash(-1, 1)


def test_invalid_bases_raise():
    with pytest.raises(ValueError):
        HashRange("abc", bases=(0, 5))
    with pytest.raises(ValueError):
        HashRange("abc", bases=(3,))