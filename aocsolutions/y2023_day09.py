"""Extrapolating sequences by repeated differences."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise

from aocsolutions.textutil import split_ints


def extrapolate(values: Iterable[int]) -> tuple[int, int]:
    """Return the (next, previous) values of the sequence."""
    row = list(values)
    lasts: list[int] = []
    firsts: list[int] = []
    while any(row):
        lasts.append(row[-1])
        firsts.append(row[0])
        row = [b - a for a, b in pairwise(row)]
    previous = 0
    for value in reversed(firsts):
        previous = value - previous
    return sum(lasts), previous


def part1(lines: Iterable[str]) -> int:
    """Sum of the extrapolated next values."""
    return sum(extrapolate(split_ints(line, " "))[0] for line in lines)


def part2(lines: Iterable[str]) -> int:
    """Sum of the extrapolated previous values."""
    return sum(extrapolate(split_ints(line, " "))[1] for line in lines)