"""Extended Euclidean algorithm."""


def _trunc_div(b, a):
    q = abs(b) // abs(a)
    return -q if (a < 0) != (b < 0) else q


def xgcd(a, b):
    """Return ``(x, y, g)`` with ``a*x + b*y == g`` and ``|g| == gcd(a, b)``.

    Every solution is ``(x + k*b/g, y - k*a/g)``.
    """
    s, s2, t, t2 = 0, 1, 1, 0
    while a != 0:
        q = _trunc_div(b, a)
        b -= q * a
        s -= q * s2
        t -= q * t2
        a, b = b, a
        s, s2 = s2, s
        t, t2 = t2, t
    return s, t, b