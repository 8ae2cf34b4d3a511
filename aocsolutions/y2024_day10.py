"""Hoof it: scoring and rating hiking trails on a height map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

Position = tuple[int, int]
Grid = Sequence[Sequence[int]]

TRAILHEAD = 0
SUMMIT = 9


def _parse(lines: Iterable[str]) -> list[list[int]]:
    grid = [[ord(ch) - ord("0") for ch in line] for line in lines]
    if not grid or not grid[0]:
        raise ValueError("empty height map")
    return grid


def _trailheads(grid: Grid) -> list[Position]:
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, height in enumerate(row)
        if height == TRAILHEAD
    ]


def _climb(grid: Grid, row: int, col: int, height: int) -> Iterator[tuple[int, int, int]]:
    rows, cols = len(grid), len(grid[0])
    up = height + 1
    if row > 0 and grid[row - 1][col] == up:
        yield row - 1, col, up
    if col > 0 and grid[row][col - 1] == up:
        yield row, col - 1, up
    if row < rows - 1 and grid[row + 1][col] == up:
        yield row + 1, col, up
    if col < cols - 1 and grid[row][col + 1] == up:
        yield row, col + 1, up


def trailhead_score(grid: Grid, start: Position) -> int:
    """Number of distinct summits reachable from ``start`` by steps of +1."""
    stack = [(start[0], start[1], TRAILHEAD)]
    summits: set[Position] = set()
    while stack:
        row, col, height = stack.pop()
        if height == SUMMIT and (row, col) not in summits:
            summits.add((row, col))
            continue
        stack.extend(_climb(grid, row, col, height))
    return len(summits)


def trailhead_rating(grid: Grid, start: Position) -> int:
    """Number of distinct trails from ``start`` to any summit."""
    stack = [(start[0], start[1], TRAILHEAD)]
    trails = 0
    while stack:
        row, col, height = stack.pop()
        if height == SUMMIT:
            trails += 1
            continue
        stack.extend(_climb(grid, row, col, height))
    return trails


def part1(lines: Iterable[str]) -> int:
    """Sum of the scores of all trailheads."""
    grid = _parse(lines)
    return sum(trailhead_score(grid, start) for start in _trailheads(grid))


def part2(lines: Iterable[str]) -> int:
    """Sum of the ratings of all trailheads."""
    grid = _parse(lines)
    return sum(trailhead_rating(grid, start) for start in _trailheads(grid))