"""Cosmic expansion: distances between galaxies in an expanding universe."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations

PART1_EXPANSION = 2
PART2_EXPANSION = 1_000_000


def empty_rows(grid: Sequence[str]) -> list[int]:
    """Indices of rows holding only '.'."""
    if not grid:
        raise ValueError("empty grid")
    width = len(grid[0])
    return [r for r, row in enumerate(grid) if all(ch == "." for ch in row[:width])]


def empty_cols(grid: Sequence[str]) -> list[int]:
    """Indices of columns holding only '.'."""
    if not grid:
        raise ValueError("empty grid")
    return [c for c in range(len(grid[0])) if all(row[c] == "." for row in grid)]


def _prefix(size: int, empty: Iterable[int], expansion: int) -> list[int]:
    weights = [1] * size
    for index in empty:
        weights[index] = expansion
    return list(accumulate(weights, initial=0))


def sum_distances(lines: Iterable[str], expansion: int) -> int:
    """Sum of shortest distances between all pairs of galaxies.

    Every empty row and column counts as ``expansion`` rows or columns.
    """
    grid = list(lines)
    rows = _prefix(len(grid), empty_rows(grid), expansion)
    cols = _prefix(len(grid[0]), empty_cols(grid), expansion)
    galaxies = [
        (r, c) for r, row in enumerate(grid) for c, ch in enumerate(row) if ch == "#"
    ]
    return sum(
        abs(rows[r1] - rows[r2]) + abs(cols[c1] - cols[c2])
        for (r1, c1), (r2, c2) in combinations(galaxies, 2)
    )


def part1(lines: Iterable[str]) -> int:
    """Distances with each empty row and column doubled."""
    return sum_distances(lines, PART1_EXPANSION)


def part2(lines: Iterable[str]) -> int:
    """Distances with each empty row and column a million times as wide."""
    return sum_distances(lines, PART2_EXPANSION)