"""Command line entry point: solve one day's puzzle from an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from aocsolutions import (
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
    y2023_day05,
    y2023_day06,
    y2023_day07,
    y2023_day08,
    y2023_day09,
    y2023_day10,
    y2023_day11,
    y2023_day12,
    y2023_day13,
    y2023_day14,
    y2023_day15,
    y2023_day16,
    y2023_day17,
    y2023_day18,
    y2023_day19,
    y2023_day20,
    y2023_day22,
    y2023_day23,
    y2023_day25,
    y2024_day01,
    y2024_day02,
    y2024_day07,
    y2024_day08,
    y2024_day09,
    y2024_day10,
)
from aocsolutions.textutil import load_file

Solver = Callable[[list[str]], int]

_SOLVERS: dict[tuple[int, int], tuple[Solver | None, Solver | None]] = {
    (2023, 1): (y2023_day01.part1, y2023_day01.part2),
    (2023, 2): (y2023_day02.part1, y2023_day02.part2),
    (2023, 3): (y2023_day03.part1, y2023_day03.part2),
    (2023, 4): (y2023_day04.part1, y2023_day04.part2),
    (2023, 5): (y2023_day05.part1, y2023_day05.part2),
    (2023, 6): (None, y2023_day06.part2),
    (2023, 7): (y2023_day07.part1, y2023_day07.part2),
    (2023, 8): (y2023_day08.part1, y2023_day08.part2),
    (2023, 9): (y2023_day09.part1, y2023_day09.part2),
    (2023, 10): (y2023_day10.part1, y2023_day10.part2),
    (2023, 11): (y2023_day11.part1, y2023_day11.part2),
    (2023, 12): (y2023_day12.part1, y2023_day12.part2),
    (2023, 13): (y2023_day13.part1, y2023_day13.part2),
    (2023, 14): (y2023_day14.part1, y2023_day14.part2),
    (2023, 15): (y2023_day15.part1, y2023_day15.part2),
    (2023, 16): (y2023_day16.part1, y2023_day16.part2),
    (2023, 17): (None, y2023_day17.part2),
    (2023, 18): (y2023_day18.part1, y2023_day18.part2),
    (2023, 19): (y2023_day19.part1, y2023_day19.part2),
    (2023, 20): (y2023_day20.part1, y2023_day20.part2),
    (2023, 22): (y2023_day22.part1, y2023_day22.part2),
    (2023, 23): (y2023_day23.part1, None),
    (2023, 25): (y2023_day25.part1, None),
    (2024, 1): (y2024_day01.part1, y2024_day01.part2),
    (2024, 2): (y2024_day02.part1, y2024_day02.part2),
    (2024, 7): (y2024_day07.part1, y2024_day07.part2),
    (2024, 8): (y2024_day08.part1, y2024_day08.part2),
    (2024, 9): (y2024_day09.part1, y2024_day09.part2),
    (2024, 10): (y2024_day10.part1, y2024_day10.part2),
}

_PART_NAMES = {1: "I", 2: "II"}


def _solvers(year: int, day: int) -> tuple[Solver | None, Solver | None]:
    try:
        return _SOLVERS[(year, day)]
    except KeyError:
        raise ValueError(f"no solution for {year} day {day}") from None


def solve(year: int, day: int, lines: Iterable[str]) -> list[tuple[int, int]]:
    """Run the available parts of a puzzle; return (part number, answer) pairs."""
    parts = _solvers(year, day)
    grid = list(lines)
    return [
        (number, solver(grid))
        for number, solver in enumerate(parts, start=1)
        if solver is not None
    ]


def _default_input(year: int, day: int) -> str:
    if year == 2023:
        return f"Data/aoc_input_{day}.txt"
    return f"Data/aoc_input{day}.txt"


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle named on the command line and print the answers."""
    parser = argparse.ArgumentParser(description="Solve one day's puzzle.")
    parser.add_argument("year", type=int, help="puzzle year")
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("input", nargs="?", help="input file (default: Data/...)")
    args = parser.parse_args(argv)

    try:
        _solvers(args.year, args.day)
        path = args.input or _default_input(args.year, args.day)
        lines = load_file(path)
        results = solve(args.year, args.day, lines)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for number, answer in results:
        name = _PART_NAMES[number]
        print(f"Total sum of scores for Part {name:<2}: {answer}")
    return 0