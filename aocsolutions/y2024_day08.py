"""Resonant collinearity: antinodes of antennas on the same frequency."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import combinations

Position = tuple[int, int]

EMPTY = "."
HARMONIC_REACH = 100


def find_antennas(lines: Iterable[str]) -> dict[str, list[Position]]:
    """Antenna positions (row, column) grouped by frequency, in reading order."""
    antennas: dict[str, list[Position]] = defaultdict(list)
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char != EMPTY:
                antennas[char].append((row, col))
    return dict(antennas)


def _size(grid: Sequence[str]) -> tuple[int, int]:
    if not grid:
        raise ValueError("empty map")
    return len(grid), len(grid[0])


def _inside(point: Position, rows: int, cols: int) -> bool:
    first, second = point
    return 0 <= first < cols and 0 <= second < rows


def part1(lines: Iterable[str]) -> int:
    """Distinct antinodes: points twice as far from one antenna as from the other."""
    grid = list(lines)
    rows, cols = _size(grid)
    antinodes: set[Position] = set()
    for positions in find_antennas(grid).values():
        for (r1, c1), (r2, c2) in combinations(positions, 2):
            dr, dc = r2 - r1, c2 - c1
            for point in ((r2 + dr, c2 + dc), (r1 - dr, c1 - dc)):
                if _inside(point, rows, cols):
                    antinodes.add(point)
    return len(antinodes)


def part2(lines: Iterable[str]) -> int:
    """Distinct antinodes anywhere on the line through two same-frequency antennas."""
    grid = list(lines)
    rows, cols = _size(grid)
    antinodes: set[Position] = set()
    for positions in find_antennas(grid).values():
        for (r1, c1), (r2, c2) in combinations(positions, 2):
            dr, dc = r2 - r1, c2 - c1
            step = math.gcd(dr, dc)
            sr, sc = dr // step, dc // step
            for k in range(-HARMONIC_REACH, HARMONIC_REACH):
                point = (r2 + k * sr, c2 + k * sc)
                if _inside(point, rows, cols):
                    antinodes.add(point)
    return len(antinodes)