"""Polynomials over a prime field with FFT-based multiplication."""

from __future__ import annotations

from itertools import zip_longest

from cpbooklet.fft import fft
from cpbooklet.modular import MOD, Modular

_SPLIT = 1 << 15
_SLOW_DIVISION_LIMIT = 250


def _check_modulus(modulus):
    if not 2 <= modulus < 1 << 31:
        raise ValueError("modulus must be between 2 and 2**31 - 1")


def _inverse(value, modulus):
    value %= modulus
    if value == 0:
        raise ZeroDivisionError("zero has no inverse")
    return pow(value, modulus - 2, modulus)


def _transform_size(la, lb):
    if not la or not lb:
        return 0
    return 1 << (la + lb - 2).bit_length()


def _spectrum(values, n, modulus):
    buffer = []
    for r in values[:n]:
        centred = r - modulus if 2 * r > modulus else r
        high, low = divmod(centred, _SPLIT)
        buffer.append(complex(low, high))
    buffer.extend([0j] * (n - len(buffer)))
    return fft(buffer)


def _cyclic_product(fa, fb, modulus):
    n = len(fa)
    mirrored = [fb[0]] + fb[:0:-1]
    c = []
    d = []
    for x, y, m in zip(fa, fb, mirrored):
        yc = m.conjugate()
        c.append(x * (y + yc))
        d.append(x * (y - yc))
    c = fft(c)
    d = fft(d)
    c = [c[0]] + c[:0:-1]
    d = [d[0]] + d[:0:-1]
    t = 2 * n
    result = []
    for ck, dk in zip(c, d):
        a0 = round(ck.real / t)
        a1 = round(ck.imag / t + dk.imag / t)
        a2 = round(dk.real / t)
        result.append((a0 + a1 * _SPLIT - a2 * _SPLIT * _SPLIT) % modulus)
    return result


def convolve_mod(a, b, modulus=MOD):
    """Product of two coefficient lists modulo ``modulus``, exact for moduli below 2**31."""
    _check_modulus(modulus)
    a = [int(x) % modulus for x in a]
    b = [int(x) % modulus for x in b]
    n = _transform_size(len(a), len(b))
    if n == 0:
        return []
    fa = _spectrum(a, n, modulus)
    fb = fa if a == b else _spectrum(b, n, modulus)
    return _cyclic_product(fa, fb, modulus)[: len(a) + len(b) - 1]


def _build_tree(tree, v, xs, lo, hi, modulus):
    if hi - lo == 1:
        tree[v] = Poly([-xs[lo], 1], modulus)
    else:
        mid = lo + (hi - lo) // 2
        tree[v] = _build_tree(tree, 2 * v, xs, lo, mid, modulus) * _build_tree(
            tree, 2 * v + 1, xs, mid, hi, modulus
        )
    return tree[v]


class Poly:
    """A polynomial with coefficients modulo a prime, lowest degree first."""

    __slots__ = ("coefficients", "modulus")

    def __init__(self, coefficients=(), modulus=MOD):
        _check_modulus(modulus)
        if isinstance(coefficients, (int, Modular)):
            coefficients = [coefficients]
        coeffs = [int(c) % modulus for c in coefficients]
        while coeffs and coeffs[-1] == 0:
            coeffs.pop()
        self.coefficients = coeffs
        self.modulus = modulus

    def _new(self, coefficients):
        return Poly(coefficients, self.modulus)

    def _coerce(self, other):
        if isinstance(other, Poly):
            if other.modulus != self.modulus:
                raise ValueError("polynomials have different moduli")
            return other
        if isinstance(other, (int, Modular)):
            return self._new(other)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._new(
            x + y for x, y in zip_longest(self.coefficients, other.coefficients, fillvalue=0)
        )

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._new(
            x - y for x, y in zip_longest(self.coefficients, other.coefficients, fillvalue=0)
        )

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._new(convolve_mod(self.coefficients, other.coefficients, self.modulus))

    def __mod__(self, other):
        return divmod(self, other)[1]

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            raise ZeroDivisionError("polynomial division by zero")
        if self.degree() < other.degree():
            return self._new([]), self
        d = self.degree() - other.degree() + 1
        if min(d - 1, other.degree()) < _SLOW_DIVISION_LIMIT:
            return self.divmod_slow(other)
        quotient = (
            (self.reversed().truncate(d) * other.reversed().inverse(d)).truncate(d).reversed(d)
        )
        return quotient, self - quotient * other

    def __getitem__(self, index):
        """Coefficient of ``x**index``; zero outside the stored range."""
        if 0 <= index < len(self.coefficients):
            return self.coefficients[index]
        return 0

    def __eq__(self, other):
        if isinstance(other, Poly):
            return self.modulus == other.modulus and self.coefficients == other.coefficients
        if isinstance(other, (int, Modular)):
            return self.coefficients == self._new(other).coefficients
        return NotImplemented

    def __hash__(self):
        return hash((self.modulus, tuple(self.coefficients)))

    def __repr__(self):
        return f"Poly({self.coefficients}, {self.modulus})"

    def truncate(self, k):
        """The polynomial made of the first ``k`` coefficients."""
        return self._new(self.coefficients[:k])

    def mul_xk(self, k):
        """Multiply by ``x**k``."""
        return self._new([0] * k + self.coefficients)

    def reversed(self, n=None):
        """``x**n * A(1/x)`` keeping ``n`` coefficients; ``n`` defaults to degree + 1."""
        if n is None:
            n = self.degree() + 1
        padded = self.coefficients + [0] * max(0, n - len(self.coefficients))
        return self._new(padded[::-1][:n])

    def divmod_slow(self, other):
        """Quotient and remainder by schoolbook long division."""
        other = self._coerce(other)
        if other is NotImplemented or other.is_zero():
            raise ZeroDivisionError("polynomial division by zero")
        p = self.modulus
        divisor = other.coefficients
        lead_inv = _inverse(divisor[-1], p)
        remainder = list(self.coefficients)
        quotient = []
        while len(remainder) >= len(divisor):
            q = remainder[-1] * lead_inv % p
            quotient.append(q)
            if q:
                offset = len(remainder) - len(divisor)
                for i, c in enumerate(divisor, offset):
                    remainder[i] = (remainder[i] - q * c) % p
            remainder.pop()
        return self._new(quotient[::-1]), self._new(remainder)

    def evaluate(self, x):
        """Value at the point ``x`` by Horner's rule."""
        p = self.modulus
        x = int(x) % p
        result = 0
        for c in reversed(self.coefficients):
            result = (result * x + c) % p
        return result

    def _evaluate_tree(self, tree, v, xs, lo, hi):
        if hi - lo == 1:
            return [self.evaluate(xs[lo])]
        mid = lo + (hi - lo) // 2
        left = (self % tree[2 * v])._evaluate_tree(tree, 2 * v, xs, lo, mid)
        right = (self % tree[2 * v + 1])._evaluate_tree(tree, 2 * v + 1, xs, mid, hi)
        return left + right

    def evaluate_many(self, xs):
        """Values at every point of ``xs`` using a subproduct tree."""
        p = self.modulus
        xs = [int(x) % p for x in xs]
        if not xs:
            return []
        if self.is_zero():
            return [0] * len(xs)
        tree = {}
        _build_tree(tree, 1, xs, 0, len(xs), p)
        return self._evaluate_tree(tree, 1, xs, 0, len(xs))

    def degree(self):
        """Degree, or -1 for the zero polynomial."""
        return len(self.coefficients) - 1

    def is_zero(self):
        return not self.coefficients

    def derivative(self):
        return self._new(i * c for i, c in enumerate(self.coefficients[1:], 1))

    def mulx(self, a):
        """Multiply the ``k``-th coefficient by ``a**k``."""
        p = self.modulus
        a = int(a) % p
        result = []
        current = 1
        for c in self.coefficients:
            result.append(c * current % p)
            current = current * a % p
        return self._new(result)

    def x2(self):
        """``P(x) -> P(x**2)``."""
        result = [0] * (2 * len(self.coefficients))
        result[::2] = self.coefficients
        return self._new(result)

    def bisect(self):
        """``(P0, P1)`` with ``P(x) = P0(x**2) + x * P1(x**2)``."""
        return self._new(self.coefficients[::2]), self._new(self.coefficients[1::2])

    def inverse(self, n):
        """Power series inverse modulo ``x**n``."""
        if n < 1:
            raise ValueError("n must be positive")
        p = self.modulus
        if self[0] == 0:
            raise ZeroDivisionError("constant term is zero; no series inverse")
        q = self.truncate(n)
        if n == 1:
            return self._new([_inverse(q[0], p)])
        p0, p1 = q.mulx(-1).bisect()
        half = (n + 1) // 2
        denominator = p0 * p0 - (p1 * p1).mul_xk(1)
        t = denominator.inverse(half)
        return ((p0 * t).x2() + (p1 * t).x2().mul_xk(1)).truncate(n)

    def _interpolate_tree(self, tree, v, ys, lo, hi):
        if hi - lo == 1:
            return self._new([ys[lo] * _inverse(self[0], self.modulus)])
        mid = lo + (hi - lo) // 2
        left = (self % tree[2 * v])._interpolate_tree(tree, 2 * v, ys, lo, mid)
        right = (self % tree[2 * v + 1])._interpolate_tree(tree, 2 * v + 1, ys, mid, hi)
        return left * tree[2 * v + 1] + right * tree[2 * v]

    @staticmethod
    def interpolate(xs, ys, modulus=MOD):
        """The polynomial of degree below ``len(xs)`` through the points ``(xs[i], ys[i])``."""
        _check_modulus(modulus)
        xs = [int(x) % modulus for x in xs]
        ys = [int(y) % modulus for y in ys]
        if len(xs) != len(ys):
            raise ValueError("xs and ys must have the same length")
        if not xs:
            return Poly([], modulus)
        if len(set(xs)) != len(xs):
            raise ValueError("interpolation points must be distinct")
        tree = {}
        root = _build_tree(tree, 1, xs, 0, len(xs), modulus)
        return root.derivative()._interpolate_tree(tree, 1, ys, 0, len(xs))