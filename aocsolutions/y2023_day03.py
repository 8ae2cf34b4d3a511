"""Engine schematic: part numbers and gear ratios."""

from __future__ import annotations

import re
import string
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby

from aocsolutions.textutil import to_int

_NUMBER = re.compile(r"[0-9]+")
_NEIGHBOURS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1))


def _cell(grid: Sequence[str], row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def is_symbol(grid: Sequence[str], row: int, col: int) -> bool:
    """True if the cell exists and is neither a digit nor '.'."""
    char = _cell(grid, row, col)
    return char is not None and char not in string.digits and char != "."


def is_gear(grid: Sequence[str], row: int, col: int) -> bool:
    """True if the cell exists and holds '*'."""
    return _cell(grid, row, col) == "*"


def _numbers(grid: Sequence[str]) -> Iterator[tuple[int, re.Match[str]]]:
    for row, line in enumerate(grid):
        for match in _NUMBER.finditer(line):
            yield row, match


def _around(match: re.Match[str], row: int) -> Iterator[tuple[int, int]]:
    """Cells around every digit of a number, digit by digit, in a fixed order."""
    for col in range(match.start(), match.end()):
        for dr, dc in _NEIGHBOURS:
            yield row + dr, col + dc


def part1(lines: Iterable[str]) -> int:
    """Sum of the numbers that touch a symbol."""
    grid = list(lines)
    return sum(
        to_int(match.group())
        for row, match in _numbers(grid)
        if any(is_symbol(grid, r, c) for r, c in _around(match, row))
    )


def part2(lines: Iterable[str]) -> int:
    """Sum of the gear ratios of gears touching exactly two numbers.

    Consecutive equal numbers next to a gear count once.
    """
    grid = list(lines)
    gear_numbers: dict[tuple[int, int], list[int]] = defaultdict(list)
    for row, match in _numbers(grid):
        value = to_int(match.group())
        for r, c in _around(match, row):
            if is_gear(grid, r, c):
                gear_numbers[(r, c)].append(value)

    total = 0
    for values in gear_numbers.values():
        distinct = [value for value, _ in groupby(values)]
        if len(distinct) == 2:
            total += distinct[0] * distinct[1]
    return total