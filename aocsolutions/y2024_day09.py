"""Disk fragmenter: laying out files and computing the filesystem checksum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

FREE = -1

_DIGITS = frozenset("0123456789")


@dataclass
class _Span:
    size: int
    owner: int


def checksum(blocks: Iterable[tuple[int, int]]) -> int:
    """Sum of position times file id over ``(size, owner)`` spans laid end to end.

    Free spans (owner -1) and file 0 add nothing.
    """
    total = 0
    start = 0
    for size, owner in blocks:
        end = start + size - 1
        if owner > 0 and end >= start:
            total += owner * size * (start + end) // 2
        start = end + 1
    return total


def _disk_map(lines: Iterable[str]) -> list[int]:
    first = next(iter(lines), "")
    if not first:
        raise ValueError("empty disk map")
    if not set(first) <= _DIGITS:
        raise ValueError(f"disk map must hold only digits: {first!r}")
    return [int(ch) for ch in first]


def part1(lines: Iterable[str]) -> int:
    """Checksum of the files packed one after another in id order."""
    digits = _disk_map(lines)
    return checksum((size, file_id) for file_id, size in enumerate(digits[0::2]))


def part2(lines: Sequence[str]) -> int:
    """Checksum after moving whole files, highest id first, to the leftmost gap that fits."""
    digits = _disk_map(lines)
    layout: list[_Span] = []
    for file_id, size in enumerate(digits[0::2]):
        layout.append(_Span(size, file_id))
        gap = 2 * file_id + 1
        if gap < len(digits):
            layout.append(_Span(digits[gap], FREE))

    pos = len(layout) - 1
    while pos > 1:
        span = layout[pos]
        if span.owner != FREE:
            for target in range(pos):
                gap_span = layout[target]
                if gap_span.owner == FREE and gap_span.size >= span.size:
                    moved = _Span(span.size, span.owner)
                    span.owner = FREE
                    gap_span.size -= moved.size
                    layout.insert(target, moved)
                    break
        pos -= 1
    return checksum((span.size, span.owner) for span in layout)