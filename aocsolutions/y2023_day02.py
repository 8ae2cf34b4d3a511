"""Cube games: which are possible, and the power of the minimal sets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from aocsolutions.textutil import remove_before, split, to_int

MAX_RED = 12
MAX_GREEN = 13
MAX_BLUE = 14

_COLOURS = ("red", "green", "blue")


@dataclass
class Draw:
    """The cubes shown in one grab."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def power(self) -> int:
        return self.red * self.green * self.blue


def parse_game(line: str) -> list[Draw]:
    """Parse the draws of one game line."""
    draws = []
    for grab in split(remove_before(line, ": "), ";"):
        counts: dict[str, int] = {}
        for cube in split(grab, ","):
            words = cube.split()
            if len(words) != 2:
                raise ValueError(f"malformed cube count {cube!r}")
            count, colour = words
            if colour in _COLOURS:
                counts[colour] = to_int(count)
        draws.append(Draw(**counts))
    return draws


def is_valid(draw: Draw) -> bool:
    """True if the draw fits within the available cubes."""
    return draw.red <= MAX_RED and draw.green <= MAX_GREEN and draw.blue <= MAX_BLUE


def part1(lines: Iterable[str]) -> int:
    """Sum of the numbers (1-based line positions) of the possible games."""
    return sum(
        number
        for number, line in enumerate(lines, start=1)
        if all(is_valid(draw) for draw in parse_game(line))
    )


def part2(lines: Iterable[str]) -> int:
    """Sum of the powers of the minimal cube sets of all games."""
    total = 0
    for line in lines:
        draws = parse_game(line)
        minimal = Draw(
            red=max((d.red for d in draws), default=0),
            green=max((d.green for d in draws), default=0),
            blue=max((d.blue for d in draws), default=0),
        )
        total += minimal.power()
    return total