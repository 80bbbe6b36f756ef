"""XOR-satisfiability through Gaussian elimination over GF(2)."""

from enum import IntEnum

NSAT = 512 - 1


class GaussResult(IntEnum):
    """Outcome of solving a linear system over GF(2)."""

    INCONSISTENT = 0
    UNIQUE = 1
    INFINITE = -1


def solve_xor_system(rows, columns):
    """Solve rows given as bit masks; bit ``columns`` of each row is its right-hand side.

    Returns ``(result, assignment)`` where free variables are set to False.
    """
    a = list(rows)
    n = len(a)
    where = [-1] * columns
    row = 0
    for col in range(columns):
        if row >= n:
            break
        bit = 1 << col
        pivot = next((i for i in range(row, n) if a[i] & bit), None)
        if pivot is None:
            continue
        a[row], a[pivot] = a[pivot], a[row]
        where[col] = row
        pivot_row = a[row]
        a = [r ^ pivot_row if i != row and r & bit else r for i, r in enumerate(a)]
        row += 1
    rhs = 1 << columns
    assignment = [w != -1 and bool(a[w] & rhs) for w in where]
    mask = sum(1 << j for j, value in enumerate(assignment) if value)
    for r in a:
        if (r & mask).bit_count() % 2 != bool(r & rhs):
            return GaussResult.INCONSISTENT, assignment
    if -1 in where:
        return GaussResult.INFINITE, assignment
    return GaussResult.UNIQUE, assignment


def xorsat(clauses):
    """Assignment of all NSAT variables making every XOR clause true, or None.

    Literal ``2*i`` is variable ``i`` and ``2*i + 1`` its negation.
    """
    lines = []
    for clause in clauses:
        line = 0
        disparity = 1
        for lit in clause:
            if not 0 <= lit >> 1 < NSAT or lit < 0:
                raise ValueError(f"literal {lit} out of range")
            disparity ^= lit & 1
            line |= 1 << (lit >> 1)
        line |= disparity << NSAT
        lines.append(line)
    result, assignment = solve_xor_system(lines, NSAT)
    if result is GaussResult.INCONSISTENT:
        return None
    return assignment