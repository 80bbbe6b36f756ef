"""Circle intersections, tangents and circumcentres with points as complex numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPS = 1e-9


def _sgn(x):
    return (x > EPS) - (x < -EPS)


def _cross(a, b):
    return a.real * b.imag - a.imag * b.real


def _perp(p):
    return complex(-p.imag, p.real)


def _norm(p):
    return p.real * p.real + p.imag * p.imag


@dataclass(frozen=True)
class Line:
    """The line of points ``p`` with ``cross(v, p) == c``; ``v`` is its direction."""

    v: complex
    c: float

    @staticmethod
    def through(p, q):
        """The line through the distinct points ``p`` and ``q``."""
        p, q = complex(p), complex(q)
        if p == q:
            raise ValueError("a line needs two distinct points")
        v = q - p
        return Line(v, _cross(v, p))

    def _side(self, p):
        return _cross(self.v, complex(p)) - self.c

    def sq_dist(self, p):
        """Squared distance from ``p`` to the line."""
        side = self._side(p)
        return side * side / _norm(self.v)

    def proj(self, p):
        """Orthogonal projection of ``p`` on the line."""
        p = complex(p)
        return p - _perp(self.v) * self._side(p) / _norm(self.v)


def circum_center(a, b, c):
    """Centre of the circle through three non-collinear points."""
    a, b, c = complex(a), complex(b), complex(c)
    b, c = b - a, c - a
    cr = _cross(b, c)
    if cr == 0:
        raise ValueError("points are collinear")
    return a + _perp(b * _norm(c) - c * _norm(b)) / cr / 2.0


def circle_line(center, radius, line):
    """Intersection points of a circle with a line: zero, one or two of them."""
    center = complex(center)
    h2 = radius * radius - line.sq_dist(center)
    count = 1 + _sgn(h2)
    if h2 <= -EPS:
        return ()
    p = line.proj(center)
    h = line.v * math.sqrt(max(h2, 0.0)) / abs(line.v)
    return (p - h, p + h)[:count]


def circle_circle(o1, r1, o2, r2):
    """Intersection points of two circles; raises ValueError for identical circles."""
    o1, o2 = complex(o1), complex(o2)
    d = o2 - o1
    d2 = _norm(d)
    if d2 == 0:
        if r1 == r2:
            raise ValueError("the circles coincide")
        return ()
    pd = (d2 + r1 * r1 - r2 * r2) / 2
    h2 = r1 * r1 - pd * pd / d2
    count = 1 + _sgn(h2)
    if h2 <= -EPS:
        return ()
    p = o1 + d * pd / d2
    h = _perp(d) * math.sqrt(max(h2, 0.0) / d2)
    return (p - h, p + h)[:count]


def tangents(o1, r1, o2, r2, inner=False):
    """Common tangents of two circles as pairs of touching points.

    With ``inner`` the internal tangents are returned; with ``r2 == 0`` these
    are the tangents from the point ``o2``.
    """
    o1, o2 = complex(o1), complex(o2)
    if inner:
        r2 = -r2
    d = o2 - o1
    dr = r1 - r2
    d2 = _norm(d)
    h2 = d2 - dr * dr
    if abs(d2) < EPS or h2 < -EPS:
        if abs(h2) <= EPS:
            raise ValueError("the circles coincide")
        return []
    root = math.sqrt(max(h2, 0.0))
    out = []
    for sign in (-1, 1):
        v = (d * dr + _perp(d) * root * sign) / d2
        out.append((o1 + v * r1, o2 + v * r2))
    count = 1 + (h2 > EPS)
    return out[:count]