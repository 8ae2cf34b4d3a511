"""Boat races: how many button hold times beat the record."""

from __future__ import annotations

import math
from collections.abc import Sequence

from aocsolutions.textutil import remove_before


def ways_to_win(time: int, distance: int) -> int:
    """Number of integer hold times that travel further than ``distance``.

    Raises ValueError if no real hold time reaches the distance.
    """
    root = math.sqrt(float(time) * time - 4.0 * distance)
    low = math.trunc((time - root) / 2.0)
    high = math.trunc((time + root) / 2.0 - 1e-12)
    return high - low


def _joined_number(line: str) -> int:
    return int("".join(remove_before(line, ": ").split()))


def part2(lines: Sequence[str]) -> int:
    """Ways to win the single race formed by joining the digits of each line."""
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return ways_to_win(_joined_number(lines[0]), _joined_number(lines[1]))