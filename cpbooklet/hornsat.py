"""Horn satisfiability in linear time by unit propagation."""


def hornsat(clauses, n):
    """Minimal model of a Horn formula over ``n`` variables, or None if unsatisfiable.

    Literal ``2*i`` is variable ``i`` and ``2*i + 1`` its negation. Only the
    first literal of a clause may be positive and no clause may be empty.
    """
    clauses = [list(clause) for clause in clauses]
    for clause in clauses:
        if not clause:
            raise ValueError("clauses must not be empty")
        for position, lit in enumerate(clause):
            if lit < 0 or lit >> 1 >= n:
                raise ValueError(f"literal {lit} out of range")
            if position and not lit & 1:
                raise ValueError("only the first literal of a clause may be positive")
    value = [False] * n
    variables_left = n
    max_len = max((len(clause) for clause in clauses), default=0)
    for clause in clauses:
        if len(clause) == 1 and not clause[0] & 1:
            var = clause[0] >> 1
            if not value[var]:
                variables_left -= 1
            value[var] = True
    neg_instances = [[] for _ in range(n)]
    score = [0] * len(clauses)
    buckets = [[] for _ in range(max_len + 1)]
    retired = len(buckets)
    for i, clause in enumerate(clauses):
        head = clause[0]
        if not head & 1 and value[head >> 1]:
            continue
        if head ^ 1 in clause:
            continue
        s = 0
        for lit in clause[0 if head & 1 else 1:]:
            neg_instances[lit >> 1].append(i)
            s += not value[lit >> 1]
        score[i] = s
        buckets[s].append(i)
    ready = buckets[0] if buckets else []
    while ready:
        index = ready.pop()
        head = clauses[index][0]
        if not head & 1 and value[head >> 1]:
            score[index] = retired
            continue
        if not variables_left or head & 1:
            return None
        variables_left -= 1
        value[head >> 1] = True
        for c in neg_instances[head >> 1]:
            if score[c] >= retired:
                continue
            score[c] -= 1
            buckets[score[c]].append(c)
    return value