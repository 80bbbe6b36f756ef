"""Doubling ranks of cyclic substrings (the basic factor structure)."""

from itertools import pairwise


def dbf(text):
    """Rank tables of the cyclic substrings of ``text + '\\0'``.

    ``levels[k][i]`` is the dense rank of the substring of length ``2**k``
    starting at ``i``; equal substrings share a rank and ``'\\0'`` sorts first.
    """
    n = len(text)
    if n == 0:
        raise ValueError("text must not be empty")
    level_count = (n - 1).bit_length() + 2
    alphabet = sorted(set(text) | {"\0"})
    rank = {c: i for i, c in enumerate(alphabet)}
    size = n + 1
    levels = [[rank[c] for c in text] + [0]]
    for i in range(1, level_count):
        previous = levels[-1]
        step = 1 << (i - 1)
        terms = [(previous[j], previous[(j + step) % size]) for j in range(size)]
        order = sorted(range(size), key=terms.__getitem__)
        current = [0] * size
        for before, after in pairwise(order):
            current[after] = current[before] + (terms[after] != terms[before])
        levels.append(current)
    return levels