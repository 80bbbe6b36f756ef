"""Brute-force boolean satisfiability for up to 63 variables."""


def sat(clauses):
    """First satisfying assignment of a CNF formula, or None.

    Literal ``2*i`` is variable ``i`` and ``2*i + 1`` its negation. Assignments
    are tried in increasing order of their bit mask.
    """
    clauses = [list(clause) for clause in clauses]
    max_literal = max((lit for clause in clauses for lit in clause), default=0)
    n = (max_literal >> 1) + 1
    if n >= 64:
        raise ValueError("at most 63 variables are supported")
    masks = []
    for clause in clauses:
        positive = negative = 0
        for lit in clause:
            if lit < 0:
                raise ValueError("literals must be non-negative")
            if lit & 1:
                negative |= 1 << (lit >> 1)
            else:
                positive |= 1 << (lit >> 1)
        masks.append((positive, negative))
    for mask in range(1 << n):
        if all(positive & mask or negative & ~mask for positive, negative in masks):
            return [bool(mask >> j & 1) for j in range(n)]
    return None