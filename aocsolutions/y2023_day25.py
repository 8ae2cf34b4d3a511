"""Snowverload: splitting the wiring diagram with a minimum cut."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence

from aocsolutions.textutil import split, split_no_empty, trim

_MERGED = -math.inf


def global_min_cut(matrix: Sequence[Sequence[int]]) -> tuple[int, list[int]]:
    """Stoer-Wagner minimum cut of a weighted adjacency matrix.

    Returns the cut weight and the vertices on one side of it.
    """
    mat: list[list[float]] = [list(row) for row in matrix]
    n = len(mat)
    if n < 2:
        raise ValueError("a cut needs at least two vertices")
    if any(len(row) != n for row in mat):
        raise ValueError("the adjacency matrix must be square")

    best: tuple[float, list[int]] = (math.inf, [])
    groups = [[i] for i in range(n)]
    for phase in range(1, n):
        weights = list(mat[0])
        s = t = 0
        for _ in range(n - phase):
            weights[t] = _MERGED
            s, t = t, max(range(n), key=weights.__getitem__)
            for i in range(n):
                weights[i] += mat[t][i]
        best = min(best, (weights[t] - mat[t][t], groups[t]))
        groups[s] = groups[s] + groups[t]
        for i in range(n):
            mat[s][i] += mat[t][i]
        for i in range(n):
            mat[i][s] = mat[s][i]
        mat[0][t] = _MERGED
    weight, cut = best
    return int(weight), list(cut)


def part1(lines: Iterable[str]) -> int:
    """Product of the sizes of the two groups left by the minimum cut."""
    connections: dict[str, set[str]] = defaultdict(set)
    for line in lines:
        fields = split(line, ":")
        if len(fields) < 2:
            raise ValueError(f"malformed connection line {line!r}")
        name = fields[0]
        for other in split_no_empty(trim(fields[1], " "), " "):
            connections[name].add(other)
            connections[other].add(name)
    names = sorted(connections)
    index = {name: i for i, name in enumerate(names)}
    size = len(names)
    matrix = [[0] * size for _ in range(size)]
    for name, others in connections.items():
        for other in others:
            matrix[index[name]][index[other]] = 1
    _, cut = global_min_cut(matrix)
    return len(cut) * (size - len(cut))