"""Historian hysteria: comparing two lists of location IDs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from aocsolutions.textutil import split_ints


def _columns(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        values = split_ints(line, " ")
        if len(values) < 2:
            raise ValueError(f"expected two numbers in {line!r}")
        left.append(values[0])
        right.append(values[1])
    return left, right


def part1(lines: Iterable[str]) -> int:
    """Total distance between the two lists, each sorted."""
    left, right = _columns(lines)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(lines: Iterable[str]) -> int:
    """Similarity score: each left number times its count in the right list."""
    left, right = _columns(lines)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)