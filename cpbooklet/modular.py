"""Arithmetic in the integers modulo a prime, with Tonelli-Shanks square roots."""

from __future__ import annotations

from functools import total_ordering

MOD = 1_000_000_007


def bpow(x, n):
    """Raise ``x`` to the non-negative integer power ``n`` by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = Modular(1, x.modulus) if isinstance(x, Modular) else type(x)(1)
    square = x
    while n:
        if n & 1:
            result = result * square
        n >>= 1
        if n:
            square = square * square
    return result


@total_ordering
class Modular:
    """A residue modulo ``modulus``; division assumes the modulus is prime."""

    __slots__ = ("value", "modulus")

    def __init__(self, value, modulus=MOD):
        if modulus < 1:
            raise ValueError("modulus must be positive")
        self.modulus = modulus
        self.value = int(value) % modulus

    def _coerce(self, other):
        if isinstance(other, Modular):
            if other.modulus != self.modulus:
                raise ValueError("operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.modulus
        return NotImplemented

    def inverse(self):
        """Multiplicative inverse by Fermat's little theorem."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return bpow(self, self.modulus - 2)

    def __neg__(self):
        return Modular(-self.value, self.modulus)

    def __add__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return Modular(self.value + value, self.modulus)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return Modular(self.value - value, self.modulus)

    def __rsub__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return Modular(value - self.value, self.modulus)

    def __mul__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return Modular(self.value * value, self.modulus)

    __rmul__ = __mul__

    def __truediv__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self * Modular(value, self.modulus).inverse()

    def __rtruediv__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return Modular(value, self.modulus) * self.inverse()

    def __pow__(self, exponent):
        if exponent < 0:
            return bpow(self.inverse(), -exponent)
        return bpow(self, exponent)

    def __eq__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self.value == value

    def __lt__(self, other):
        if isinstance(other, Modular):
            return self.value < other.value
        if isinstance(other, (int, float)):
            return self.value < int(other)
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __abs__(self):
        return self

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"Modular({self.value}, {self.modulus})"


def sqrt_mod(a, modulus=MOD):
    """Smallest square root of ``a`` modulo an odd prime (Tonelli-Shanks).

    Raises ValueError when ``a`` is not a quadratic residue.
    """
    a = a if isinstance(a, Modular) else Modular(a, modulus)
    p = a.modulus
    if p == 2:
        return a.value
    half = (p - 1) // 2
    legendre = a ** half
    if legendre.value == 0:
        return 0
    if legendre.value != 1:
        raise ValueError(f"{a.value} has no square root modulo {p}")
    s, r = p - 1, 0
    while s % 2 == 0:
        s //= 2
        r += 1
    n = Modular(2, p)
    while (n ** half).value == 1:
        n += 1
    x, b, g = a ** ((s + 1) // 2), a ** s, n ** s
    while b.value != 1:
        m = 0
        t = b
        while t.value != 1:
            t *= t
            m += 1
        g = bpow(g, 1 << (r - m - 1))
        x *= g
        g *= g
        b *= g
        r = m
    return min(x.value, p - x.value)