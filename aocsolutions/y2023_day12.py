"""Hot springs: counting arrangements of damaged springs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

from aocsolutions.textutil import split, split_ints

UNFOLD = 5


@lru_cache(maxsize=None)
def _count(springs: str, groups: tuple[int, ...]) -> int:
    size = len(springs)
    if size < sum(groups) + len(groups) - 1:
        return 0
    if not groups:
        return 0 if "#" in springs else 1

    total = 0
    if springs.startswith((".", "?")):
        total = _count(springs[1:], groups)
    if springs.startswith(("#", "?")):
        first = groups[0]
        if "." not in springs[:first]:
            if first == size:
                total += _count("", groups[1:])
            if first < size and springs[first] != "#":
                total += _count(springs[first + 1 :], groups[1:])
    return total


def count_arrangements(springs: str, groups: Sequence[int]) -> int:
    """Number of ways to fill the '?' so that the damaged runs match ``groups``."""
    return _count(springs, tuple(groups))


def _parse(line: str) -> tuple[str, list[int]]:
    fields = split(line, " ")
    if len(fields) < 2:
        raise ValueError(f"malformed record {line!r}")
    return fields[0], split_ints(fields[1], ",")


def _pin_ends(springs: str, groups: Sequence[int]) -> str:
    """Fix the runs that touch a '#' at either end of the record."""
    chars = list(springs)
    if groups and chars and chars[0] == "#":
        first = groups[0]
        for i in range(min(first, len(chars))):
            chars[i] = "#"
        if first < len(chars):
            chars[first] = "."
    if groups and chars and chars[-1] == "#":
        last = groups[-1]
        size = len(chars)
        for i in range(min(last, size)):
            chars[size - i - 1] = "#"
        if size - last - 1 >= 0:
            chars[size - last - 1] = "."
    return "".join(chars)


def _solve(springs: str, groups: list[int]) -> int:
    return count_arrangements(_pin_ends(springs, groups), groups)


def part1(lines: Iterable[str]) -> int:
    """Sum of arrangement counts over all records."""
    return sum(_solve(*_parse(line)) for line in lines)


def part2(lines: Iterable[str]) -> int:
    """Sum of arrangement counts with every record unfolded five times."""
    total = 0
    for line in lines:
        springs, groups = _parse(line)
        total += _solve("?".join([springs] * UNFOLD), groups * UNFOLD)
    return total