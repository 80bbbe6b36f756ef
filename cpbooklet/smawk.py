"""SMAWK row maxima for totally monotone matrices and concave (max, +) convolution."""


def smawk(row_size, col_size, select):
    """Column of the maximum of every row of a totally monotone matrix.

    ``select(i, j, k)`` with ``j < k`` tells whether column ``k`` beats column
    ``j`` in row ``i``.
    """
    if row_size and not col_size:
        raise ValueError("a matrix with rows needs at least one column")

    def solve(rows, cols):
        n = len(rows)
        if n == 0:
            return []
        kept = []
        for col in cols:
            while kept and select(rows[len(kept) - 1], kept[-1], col):
                kept.pop()
            if len(kept) < n:
                kept.append(col)
        answer = [0] * n
        answer[1::2] = solve(rows[1::2], kept)
        j = 0
        for i in range(0, n, 2):
            answer[i] = kept[j]
            end = kept[-1] if i + 1 == n else answer[i + 1]
            while kept[j] != end:
                j += 1
                if select(rows[i], answer[i], kept[j]):
                    answer[i] = kept[j]
        return answer

    return solve(list(range(row_size)), list(range(col_size)))


def max_plus_convolution(a, b):
    """``c[i] = max(a[j] + b[i - j])`` for any ``a`` and a concave ``b``."""
    n, m = len(a), len(b)
    if not n or not m:
        return []

    def get(i, j):
        return a[j] + b[i - j]

    def select(i, j, k):
        if i < k:
            return False
        if i - j >= m:
            return True
        return get(i, j) <= get(i, k)

    best = smawk(n + m - 1, n, select)
    return [get(i, j) for i, j in enumerate(best)]