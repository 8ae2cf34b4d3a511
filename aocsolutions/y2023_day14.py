"""Parabolic reflector dish: tilting rounded rocks and measuring the load."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

Grid = tuple[str, ...]

SPIN_TARGET = 1_000_000_000

# Rounded rocks only roll through empty space; anything else stops them.
_ROLLING = re.compile(r"[O.]+")


def _roll_left(row: str) -> str:
    def pack(match: re.Match[str]) -> str:
        segment = match.group()
        rocks = segment.count("O")
        return "O" * rocks + "." * (len(segment) - rocks)

    return _ROLLING.sub(pack, row)


def _transpose(grid: Sequence[str]) -> Grid:
    if not grid:
        return ()
    return tuple("".join(column) for column in zip(*grid))


def tilt_west(grid: Sequence[str]) -> Grid:
    """Roll every rounded rock as far left as it goes."""
    return tuple(_roll_left(row) for row in grid)


def tilt_east(grid: Sequence[str]) -> Grid:
    """Roll every rounded rock as far right as it goes."""
    return tuple(_roll_left(row[::-1])[::-1] for row in grid)


def tilt_north(grid: Sequence[str]) -> Grid:
    """Roll every rounded rock as far up as it goes."""
    return _transpose(tilt_west(_transpose(grid)))


def tilt_south(grid: Sequence[str]) -> Grid:
    """Roll every rounded rock as far down as it goes."""
    return _transpose(tilt_east(_transpose(grid)))


def spin_cycle(grid: Sequence[str]) -> Grid:
    """Tilt north, west, south and east, in that order."""
    return tilt_east(tilt_south(tilt_west(tilt_north(grid))))


def load(grid: Sequence[str]) -> int:
    """Total load on the north beams: each rock weighs its distance from the south edge."""
    height = len(grid)
    return sum((height - r) * row.count("O") for r, row in enumerate(grid))


def part1(lines: Iterable[str]) -> int:
    """Load after tilting north once."""
    return load(tilt_north(tuple(lines)))


def part2(lines: Iterable[str]) -> int:
    """Load after a billion spin cycles, found by detecting the repeating cycle."""
    state = tuple(lines)
    history: list[Grid] = [state]
    seen: dict[Grid, int] = {state: 0}
    while True:
        state = spin_cycle(state)
        count = len(history)
        if state in seen:
            start = seen[state]
            length = count - start
            break
        seen[state] = count
        history.append(state)
    if SPIN_TARGET < len(history):
        return load(history[SPIN_TARGET])
    return load(history[start + (SPIN_TARGET - start) % length])