"""Bridge repair: which equations can be made true with the given operators."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from aocsolutions.textutil import split, split_ints


def concat(a: int, b: int) -> int:
    """The digits of ``a`` followed by the digits of ``b``."""
    scale = 10
    while b // scale > 0:
        scale *= 10
    return a * scale + b


def combinations(values: Sequence[int]) -> list[int]:
    """Every result of joining ``values`` left to right with '+' or '*'."""
    if not values:
        raise ValueError("no values to combine")
    results = [values[0]]
    for value in values[1:]:
        results = [r + value for r in results] + [r * value for r in results]
    return results


def combinations_with_concat(values: Sequence[int]) -> list[int]:
    """Every result of joining ``values`` left to right with '+', '*' or '||'."""
    if not values:
        raise ValueError("no values to combine")
    results = [values[0]]
    for value in values[1:]:
        results = [
            outcome
            for r in results
            for outcome in (r + value, r * value, concat(r, value))
        ]
    return results


def _equations(lines: Iterable[str]) -> Iterable[tuple[int, list[int]]]:
    for line in lines:
        fields = split(line, ":")
        if len(fields) < 2:
            raise ValueError(f"malformed equation {line!r}")
        yield int(fields[0]), split_ints(fields[1], " ")


def part1(lines: Iterable[str]) -> int:
    """Sum of the test values reachable with '+' and '*'."""
    return sum(
        target for target, values in _equations(lines) if target in combinations(values)
    )


def part2(lines: Iterable[str]) -> int:
    """Sum of the test values reachable with '+', '*' and concatenation."""
    return sum(
        target
        for target, values in _equations(lines)
        if target in combinations_with_concat(values)
    )