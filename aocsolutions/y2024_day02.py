"""Red-nosed reports: which level sequences are safe."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import pairwise

from aocsolutions.textutil import split_ints

MIN_STEP = 1
MAX_STEP = 3


def _differences(levels: Sequence[int]) -> list[int]:
    return [b - a for a, b in pairwise(levels)]


def _bounded(diff: int) -> bool:
    return MIN_STEP <= abs(diff) <= MAX_STEP


def is_safe(levels: Sequence[int]) -> bool:
    """True if the levels strictly rise or fall, by 1 to 3 at every step."""
    if not levels:
        raise ValueError("empty report")
    diffs = _differences(levels)
    monotonic = all(d > 0 for d in diffs) or all(d < 0 for d in diffs)
    return monotonic and all(_bounded(d) for d in diffs)


_OFFENCES: tuple[Callable[[int], bool], ...] = (
    lambda d: d <= 0,
    lambda d: d >= 0,
    lambda d: not _bounded(d),
)


def _removal_candidates(levels: Sequence[int]) -> Iterator[int]:
    """Levels worth dropping: both ends of a step that alone breaks one rule."""
    diffs = _differences(levels)
    for offends in _OFFENCES:
        offenders = [index for index, d in enumerate(diffs) if offends(d)]
        if len(offenders) == 1:
            yield offenders[0]
            yield offenders[0] + 1


def _tolerable(levels: list[int]) -> bool:
    return is_safe(levels) or any(
        is_safe(levels[:pos] + levels[pos + 1 :]) for pos in _removal_candidates(levels)
    )


def _reports(lines: Iterable[str]) -> Iterator[list[int]]:
    for line in lines:
        yield split_ints(line, " ")


def part1(lines: Iterable[str]) -> int:
    """Number of safe reports."""
    return sum(is_safe(levels) for levels in _reports(lines))


def part2(lines: Iterable[str]) -> int:
    """Number of reports that are safe, or become safe by dropping one level."""
    return sum(_tolerable(levels) for levels in _reports(lines))