"""Minimum cost assignment of jobs to workers (Hungarian algorithm)."""

import math


def hungarian(costs):
    """Minimum total cost of giving each job (row) its own worker (column).

    ``costs[i][w]`` is the cost of worker ``w`` doing job ``i``; costs may be
    negative and there must be no more jobs than workers.
    """
    n = len(costs)
    if n == 0:
        return 0
    m = len(costs[0])
    if any(len(row) != m for row in costs):
        raise ValueError("all rows must have the same length")
    if n > m:
        raise ValueError("there must be no more jobs than workers")
    a = [[0] * (m + 1)] + [[0, *row] for row in costs]
    u = [0] * (n + 1)
    v = [0] * (m + 1)
    job = [0] * (m + 1)
    for i in range(1, n + 1):
        w = 0
        job[0] = i
        dist = [math.inf] * (m + 1)
        pre = [-1] * (m + 1)
        done = [False] * (m + 1)
        while job[w]:
            done[w] = True
            j = job[w]
            delta = math.inf
            next_w = 0
            row = a[j]
            for worker in range(m + 1):
                if done[worker]:
                    continue
                candidate = row[worker] - u[j] - v[worker]
                if candidate < dist[worker]:
                    dist[worker] = candidate
                    pre[worker] = w
                if dist[worker] < delta:
                    delta = dist[worker]
                    next_w = worker
            for worker in range(m + 1):
                if done[worker]:
                    u[job[worker]] += delta
                    v[worker] -= delta
                else:
                    dist[worker] -= delta
            w = next_w
        while w:
            previous = pre[w]
            job[w] = job[previous]
            w = previous
    return -v[0]