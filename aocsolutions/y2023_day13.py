"""Point of incidence: lines of reflection in patterns of ash and rock."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import islice

Pattern = Sequence[str]


def split_patterns(lines: Iterable[str]) -> list[list[str]]:
    """Split the input on blank lines into non-empty patterns."""
    patterns: list[list[str]] = []
    current: list[str] = []
    for line in lines:
        if line:
            current.append(line)
        elif current:
            patterns.append(current)
            current = []
    if current:
        patterns.append(current)
    return patterns


def _col_differences(pattern: Pattern, pivot: int) -> Iterator[tuple[int, int]]:
    width = len(pattern[0])
    for j in range(min(pivot, width - pivot)):
        for i, row in enumerate(pattern):
            if row[pivot - j - 1] != row[pivot + j]:
                yield i, j


def _row_differences(pattern: Pattern, pivot: int) -> Iterator[tuple[int, int]]:
    width = len(pattern[0])
    for i in range(min(pivot, len(pattern) - pivot)):
        upper, lower = pattern[pivot - i - 1], pattern[pivot + i]
        for j in range(width):
            if upper[j] != lower[j]:
                yield i, j


def _single(differences: Iterator[tuple[int, int]]) -> tuple[int, int] | None:
    found = list(islice(differences, 2))
    return found[0] if len(found) == 1 else None


def is_mirror_col(pattern: Pattern, pivot: int) -> bool:
    """True if the columns mirror around ``pivot`` with at most one differing cell."""
    return len(list(islice(_col_differences(pattern, pivot), 2))) <= 1


def is_mirror_row(pattern: Pattern, pivot: int) -> bool:
    """True if the rows mirror exactly around ``pivot``."""
    return next(_row_differences(pattern, pivot), None) is None


def smudge_col(pattern: Pattern, pivot: int) -> tuple[int, int] | None:
    """(row, column offset) of the only difference around a column pivot, else None."""
    return _single(_col_differences(pattern, pivot))


def smudge_row(pattern: Pattern, pivot: int) -> tuple[int, int] | None:
    """(row offset, column) of the only difference around a row pivot, else None."""
    return _single(_row_differences(pattern, pivot))


def part1(lines: Iterable[str]) -> int:
    """Column pivots plus 100 times row pivots of all mirror lines."""
    total = 0
    for pattern in split_patterns(lines):
        total += sum(p for p in range(1, len(pattern[0])) if is_mirror_col(pattern, p))
        total += 100 * sum(
            p for p in range(1, len(pattern)) if is_mirror_row(pattern, p)
        )
    return total


def part2(lines: Iterable[str]) -> int:
    """Like part 1, counting only lines that are off by exactly one cell."""
    total = 0
    for pattern in split_patterns(lines):
        total += sum(
            p for p in range(1, len(pattern[0])) if smudge_col(pattern, p) is not None
        )
        total += 100 * sum(
            p for p in range(1, len(pattern)) if smudge_row(pattern, p) is not None
        )
    return total