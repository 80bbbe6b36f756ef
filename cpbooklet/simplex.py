"""Linear programming by the two-phase simplex method."""

import math

EPS = 1e-8


class LPSolver:
    """Maximise ``c @ x`` subject to ``A @ x <= b`` and ``x >= 0``.

    A solver instance is meant to be solved once.
    """

    def __init__(self, a, b, c):
        m, n = len(b), len(c)
        if len(a) != m:
            raise ValueError("A must have one row per entry of b")
        self.m, self.n = m, n
        self._nonbasic = list(range(n)) + [-1]
        self._basic = [n + i for i in range(m)]
        d = [[0.0] * (n + 2) for _ in range(m + 2)]
        for i, (row, bound) in enumerate(zip(a, b)):
            if len(row) != n:
                raise ValueError("every row of A must have one entry per entry of c")
            d[i][:n] = [float(x) for x in row]
            d[i][n] = -1.0
            d[i][n + 1] = float(bound)
        d[m][:n] = [-float(x) for x in c]
        d[m + 1][n] = 1.0
        self._d = d

    def _pivot(self, r, s):
        d = self._d
        pivot_row = d[r]
        inv = 1 / pivot_row[s]
        for i, row in enumerate(d):
            if i != r and abs(row[s]) > EPS:
                inv2 = row[s] * inv
                row[:] = [x - y * inv2 for x, y in zip(row, pivot_row)]
                row[s] = pivot_row[s] * inv2
        for j in range(self.n + 2):
            if j != s:
                pivot_row[j] *= inv
        for i, row in enumerate(d):
            if i != r:
                row[s] *= -inv
        pivot_row[s] = inv
        self._basic[r], self._nonbasic[s] = self._nonbasic[s], self._basic[r]

    def _entering(self, row, candidates):
        nonbasic = self._nonbasic
        s = -1
        for j in candidates:
            if s == -1 or (row[j], nonbasic[j]) < (row[s], nonbasic[s]):
                s = j
        return s

    def _simplex(self, phase):
        d, m, n = self._d, self.m, self.n
        x = m + phase - 1
        while True:
            s = self._entering(d[x], (j for j in range(n + 1) if self._nonbasic[j] != -phase))
            if d[x][s] >= -EPS:
                return True
            r = -1
            for i in range(m):
                if d[i][s] <= EPS:
                    continue
                if r == -1 or (d[i][n + 1] / d[i][s], self._basic[i]) < (
                    d[r][n + 1] / d[r][s],
                    self._basic[r],
                ):
                    r = i
            if r == -1:
                return False
            self._pivot(r, s)

    def solve(self):
        """Return ``(value, x)``.

        ``value`` is ``-inf`` with ``x`` None when the problem is infeasible,
        ``inf`` with some feasible ``x`` when it is unbounded, and the optimum
        with an optimal ``x`` otherwise.
        """
        d, m, n = self._d, self.m, self.n
        r = min(range(m), key=lambda i: d[i][n + 1], default=0)
        if d[r][n + 1] < -EPS:
            self._pivot(r, n)
            if not self._simplex(2) or d[m + 1][n + 1] < -EPS:
                return -math.inf, None
            for i in range(m):
                if self._basic[i] == -1:
                    s = self._entering(d[i], range(n + 1))
                    self._pivot(i, s)
        ok = self._simplex(1)
        x = [0.0] * n
        for i in range(m):
            if 0 <= self._basic[i] < n:
                x[self._basic[i]] = d[i][n + 1]
        return (d[m][n + 1] if ok else math.inf), x