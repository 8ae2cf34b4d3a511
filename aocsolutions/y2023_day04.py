"""Scratchcards: points and copies won."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from aocsolutions.textutil import remove_before, split, split_ints


def card_matches(line: str) -> int:
    """Number of winning numbers on the card (counted with multiplicity)."""
    halves = split(remove_before(line, ": "), "|")
    if len(halves) < 2:
        raise ValueError(f"card without '|' separator: {line!r}")
    winning = Counter(split_ints(halves[0], " "))
    have = Counter(split_ints(halves[1], " "))
    return sum((winning & have).values())


def part1(lines: Iterable[str]) -> int:
    """Total points: each card scores 2**(matches - 1) if it has matches."""
    return sum(2 ** (n - 1) for n in map(card_matches, lines) if n > 0)


def part2(lines: Iterable[str]) -> int:
    """Total number of cards after winning copies of the following cards."""
    matches = [card_matches(line) for line in lines]
    copies = [1] * len(matches)
    for index, count in enumerate(matches):
        for target in range(index + 1, min(index + 1 + count, len(copies))):
            copies[target] += copies[index]
    return sum(copies)