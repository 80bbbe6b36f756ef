"""Polynomial rolling hash of substrings with two random bases modulo 2**61 - 1."""

from __future__ import annotations

import random

MOD = (1 << 61) - 1

_rng = random.SystemRandom()


def mod_mul(a, b):
    """``a * b`` modulo 2**61 - 1."""
    return a * b % MOD


def _random_base():
    return _rng.randint(int(0.1 * MOD), int(0.9 * MOD))


class HashRange:
    """Hashes of arbitrary substrings of a growing string; ranges are 0-based and inclusive."""

    def __init__(self, text="", bases=None):
        if bases is None:
            bases = (_random_base(), _random_base())
        bases = tuple(bases)
        if len(bases) != 2 or not all(0 < b < MOD for b in bases):
            raise ValueError("bases must be two integers in [1, 2**61 - 1)")
        self.bases = bases
        self.text = ""
        self._prefix = [(0, 0)]
        self._powers = [(1, 1)]
        self.add(text)

    def add(self, text):
        """Append ``text`` (one character or many) to the hashed string."""
        b0, b1 = self.bases
        for ch in text:
            h0, h1 = self._prefix[-1]
            code = ord(ch)
            self._prefix.append(((mod_mul(b0, h0) + code) % MOD, (mod_mul(b1, h1) + code) % MOD))
        self.text += text

    def _extend(self, length):
        b0, b1 = self.bases
        while len(self._powers) <= length:
            p0, p1 = self._powers[-1]
            self._powers.append((mod_mul(b0, p0), mod_mul(b1, p1)))

    def hash(self, left, right):
        """Pair of hashes of ``text[left:right + 1]``."""
        if left < 0 or right >= len(self.text) or left > right + 1:
            raise IndexError(f"range [{left}, {right}] outside a string of length {len(self.text)}")
        length = right + 1 - left
        self._extend(length)
        end = self._prefix[right + 1]
        start = self._prefix[left]
        power = self._powers[length]
        return tuple((e - mod_mul(p, s)) % MOD for e, s, p in zip(end, start, power))