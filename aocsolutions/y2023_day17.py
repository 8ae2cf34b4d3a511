"""Clumsy crucible: least heat loss with limits on straight runs."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

ULTRA_MIN_STEPS = 4
ULTRA_MAX_STEPS = 10

_HORIZONTAL, _VERTICAL = 0, 1
_DIRECTIONS = {_HORIZONTAL: ((0, 1), (0, -1)), _VERTICAL: ((1, 0), (-1, 0))}


def _parse(lines: Iterable[str]) -> list[list[int]]:
    grid = []
    for line in lines:
        if not line.isdigit():
            raise ValueError(f"heat map row must hold only digits: {line!r}")
        grid.append([int(ch) for ch in line])
    if not grid:
        raise ValueError("empty heat map")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("heat map rows differ in length")
    return grid


def min_heat_loss(lines: Iterable[str], min_steps: int, max_steps: int) -> int:
    """Least heat lost going from the top-left to the bottom-right block.

    Each straight run covers between ``min_steps`` and ``max_steps`` blocks and
    is followed by a turn. The starting block's heat is not counted.
    """
    grid = _parse(lines)
    rows, cols = len(grid), len(grid[0])
    goal = (rows - 1, cols - 1)
    if goal == (0, 0):
        raise ValueError("no path: start and goal coincide")

    heap = [(0, 0, 0, _HORIZONTAL), (0, 0, 0, _VERTICAL)]
    done: set[tuple[int, int, int]] = set()
    while heap:
        cost, r, c, axis = heapq.heappop(heap)
        if (r, c) == goal:
            return cost
        if (r, c, axis) in done:
            continue
        done.add((r, c, axis))
        for dr, dc in _DIRECTIONS[axis]:
            heat = 0
            for step in range(1, max_steps + 1):
                nr, nc = r + dr * step, c + dc * step
                if not (0 <= nr < rows and 0 <= nc < cols):
                    break
                heat += grid[nr][nc]
                if step >= min_steps and (nr, nc, 1 - axis) not in done:
                    heapq.heappush(heap, (cost + heat, nr, nc, 1 - axis))
    raise ValueError("no path reaches the goal")


def part2(lines: Iterable[str]) -> int:
    """Least heat loss for an ultra crucible (runs of 4 to 10 blocks)."""
    return min_heat_loss(lines, ULTRA_MIN_STEPS, ULTRA_MAX_STEPS)