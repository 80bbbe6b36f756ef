"""Determinant of a real square matrix by Gaussian elimination."""


def determinant(matrix):
    """Determinant using partial pivoting; the input is left untouched."""
    a = [[float(x) for x in row] for row in matrix]
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    result = 1.0
    for i in range(n):
        best = max(range(i, n), key=lambda j: abs(a[j][i]))
        if best != i:
            a[i], a[best] = a[best], a[i]
            result = -result
        pivot_row = a[i]
        pivot = pivot_row[i]
        result *= pivot
        if result == 0:
            return 0.0
        for row in a[i + 1:]:
            v = row[i] / pivot
            if v != 0:
                row[i + 1:] = [x - v * y for x, y in zip(row[i + 1:], pivot_row[i + 1:])]
    return result