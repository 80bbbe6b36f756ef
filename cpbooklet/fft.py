"""Complex fast Fourier transform and integer polynomial multiplication."""

import cmath
import math
from functools import lru_cache
from itertools import zip_longest


@lru_cache(maxsize=None)
def _roots(n):
    # roots[k + j] == exp(i*pi*j/k) for every power of two k < n
    roots = [0j, 1 + 0j]
    while len(roots) < n:
        k = len(roots)
        roots.extend(cmath.rect(1.0, math.pi * j / k) for j in range(k))
    return tuple(roots)


def _check_size(n):
    if n < 1 or n & (n - 1):
        raise ValueError("length must be a positive power of two")


def _transform(a):
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    roots = _roots(n)
    k = 1
    while k < n:
        for start in range(0, n, 2 * k):
            for j in range(k):
                z = a[start + j + k] * roots[j + k]
                a[start + j + k] = a[start + j] - z
                a[start + j] = a[start + j] + z
        k <<= 1


def fft(values):
    """Discrete Fourier transform ``X[k] = sum(a[j] * exp(2*pi*i*j*k/n))``."""
    a = [complex(v) for v in values]
    _check_size(len(a))
    _transform(a)
    return a


def multiply(a, b):
    """Convolution of two integer coefficient lists, rounded to integers."""
    if not a or not b:
        return []
    need = len(a) + len(b) - 1
    size = 1 << (need - 1).bit_length()
    fa = [complex(x, y) for x, y in zip_longest(a, b, fillvalue=0)]
    fa.extend([0j] * (size - len(fa)))
    _transform(fa)
    r = complex(0, -0.25 / size)
    for i in range(size // 2 + 1):
        j = (size - i) & (size - 1)
        z = (fa[j] * fa[j] - (fa[i] * fa[i]).conjugate()) * r
        if i != j:
            fa[j] = (fa[i] * fa[i] - (fa[j] * fa[j]).conjugate()) * r
        fa[i] = z
    _transform(fa)
    return [math.floor(c.real + 0.5) for c in fa[:need]]