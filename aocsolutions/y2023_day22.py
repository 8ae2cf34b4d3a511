"""Sand slabs: falling bricks and the chain reactions of removing them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from aocsolutions.textutil import split, split_ints

Point = tuple[int, int, int]


@dataclass(frozen=True)
class Brick:
    """A box of cubes from ``start`` to ``end``, both inclusive."""

    start: Point
    end: Point

    def __post_init__(self) -> None:
        if any(a > b for a, b in zip(self.start, self.end)):
            raise ValueError(f"brick start {self.start} lies beyond its end {self.end}")

    @property
    def footprint(self) -> list[tuple[int, int]]:
        return [
            (x, y)
            for x in range(self.start[0], self.end[0] + 1)
            for y in range(self.start[1], self.end[1] + 1)
        ]

    @property
    def cells(self) -> list[Point]:
        return [
            (x, y, z)
            for x, y in self.footprint
            for z in range(self.start[2], self.end[2] + 1)
        ]


def parse_bricks(lines: Iterable[str]) -> list[Brick]:
    """Parse lines of the form 'x,y,z~x,y,z'."""
    bricks = []
    for line in lines:
        ends = split(line, "~")
        if len(ends) < 2:
            raise ValueError(f"malformed brick {line!r}")
        first, second = split_ints(ends[0], ","), split_ints(ends[1], ",")
        if len(first) < 3 or len(second) < 3:
            raise ValueError(f"malformed brick {line!r}")
        bricks.append(Brick(tuple(first[:3]), tuple(second[:3])))
    return bricks


def settle(bricks: Iterable[Brick]) -> list[Brick]:
    """Let every brick fall as far as it can; return them ordered from low to high."""
    occupied: set[Point] = set()
    settled: list[Brick] = []
    for brick in sorted(bricks, key=lambda b: b.start[2]):
        footprint = brick.footprint
        z = brick.start[2]
        while z > 1 and not any((x, y, z - 1) in occupied for x, y in footprint):
            z -= 1
        drop = brick.start[2] - z
        (sx, sy, sz), (ex, ey, ez) = brick.start, brick.end
        moved = Brick((sx, sy, sz - drop), (ex, ey, ez - drop))
        occupied.update(moved.cells)
        settled.append(moved)
    return settled


def _support_graph(settled: Sequence[Brick]) -> tuple[list[set[int]], list[set[int]]]:
    owner = {cell: index for index, brick in enumerate(settled) for cell in brick.cells}
    supported_by: list[set[int]] = [set() for _ in settled]
    supports: list[set[int]] = [set() for _ in settled]
    for index, brick in enumerate(settled):
        below = brick.start[2] - 1
        for x, y in brick.footprint:
            other = owner.get((x, y, below))
            if other is not None:
                supported_by[index].add(other)
                supports[other].add(index)
    return supported_by, supports


def part1(lines: Iterable[str]) -> int:
    """Number of bricks that can be removed without any other brick falling."""
    settled = settle(parse_bricks(lines))
    supported_by, _ = _support_graph(settled)
    sole_supports = {next(iter(s)) for s in supported_by if len(s) == 1}
    return len(settled) - len(sole_supports)


def part2(lines: Iterable[str]) -> int:
    """Sum, over all bricks, of how many other bricks fall when it is removed."""
    settled = settle(parse_bricks(lines))
    supported_by, supports = _support_graph(settled)
    total = 0
    for index in range(len(settled)):
        falling = {index}
        stack = list(supports[index])
        while stack:
            candidate = stack.pop()
            if supported_by[candidate] <= falling:
                falling.add(candidate)
                stack.extend(supports[candidate])
        total += len(falling) - 1
    return total