"""Seed almanac: mapping seeds through chains of range maps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import reduce

from aocsolutions.textutil import remove_before, split_ints

SECTIONS = (
    "seed-to-soil",
    "soil-to-fertilizer",
    "fertilizer-to-water",
    "water-to-light",
    "light-to-temperature",
    "temperature-to-humidity",
    "humidity-to-location",
)


@dataclass(frozen=True)
class PlantMap:
    """One line of a map: a source range shifted onto a destination range."""

    dst_start: int
    src_start: int
    length: int

    @property
    def offset(self) -> int:
        return self.dst_start - self.src_start

    def is_in(self, src: int) -> bool:
        return self.src_start <= src < self.src_start + self.length

    def perform_map(self, src: int) -> int:
        return src + self.offset


def apply_maps(maps: Iterable[PlantMap], value: int) -> int:
    """Map ``value`` with the first map that covers it; otherwise keep it."""
    for plant_map in maps:
        if plant_map.is_in(value):
            return plant_map.perform_map(value)
    return value


def parse_almanac(lines: Iterable[str]) -> tuple[list[int], list[list[PlantMap]]]:
    """Return the seed numbers and the seven maps in chain order."""
    lines = list(lines)
    if not lines:
        raise ValueError("empty almanac")
    seeds = split_ints(remove_before(lines[0], ": "), " ")
    sections: dict[str, list[PlantMap]] = {name: [] for name in SECTIONS}
    current: list[PlantMap] | None = None
    for line in lines[1:]:
        if not line:
            current = None
            continue
        header = next((name for name in SECTIONS if line.startswith(name)), None)
        if header is not None:
            current = sections[header]
            continue
        if current is None:
            continue
        values = split_ints(line, " ")
        if len(values) < 3:
            raise ValueError(f"malformed map line {line!r}")
        current.append(PlantMap(*values[:3]))
    return seeds, [sections[name] for name in SECTIONS]


def _location(chain: Sequence[Sequence[PlantMap]], seed: int) -> int:
    return reduce(lambda value, maps: apply_maps(maps, value), chain, seed)


def _map_intervals(
    maps: Sequence[PlantMap], intervals: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Map half-open intervals, honouring first-match order of the maps."""
    pending = list(intervals)
    done: list[tuple[int, int]] = []
    for plant_map in maps:
        low, high = plant_map.src_start, plant_map.src_start + plant_map.length
        rest: list[tuple[int, int]] = []
        for start, end in pending:
            a, b = max(start, low), min(end, high)
            if a < b:
                done.append((a + plant_map.offset, b + plant_map.offset))
                if start < a:
                    rest.append((start, a))
                if b < end:
                    rest.append((b, end))
            else:
                rest.append((start, end))
        pending = rest
    return done + pending


def part1(lines: Iterable[str]) -> int:
    """Lowest location of any listed seed."""
    seeds, chain = parse_almanac(lines)
    if not seeds:
        raise ValueError("no seeds listed")
    return min(_location(chain, seed) for seed in seeds)


def part2(lines: Iterable[str]) -> int:
    """Lowest location when the seed list holds (start, length) pairs."""
    seeds, chain = parse_almanac(lines)
    numbers = iter(seeds)
    intervals = [
        (start, start + length) for start, length in zip(numbers, numbers) if length > 0
    ]
    if not intervals:
        raise ValueError("no seed ranges listed")
    for maps in chain:
        intervals = _map_intervals(maps, intervals)
    return min(start for start, _ in intervals)