"""Calibration values hidden in lines of text."""

from __future__ import annotations

import string
from collections.abc import Iterable

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _calibration(line: str, spelled: bool) -> int:
    digits: list[str] = []
    for pos, char in enumerate(line):
        if char in string.digits:
            digits.append(char)
        if spelled:
            digits.extend(
                str(value)
                for value, word in enumerate(_WORDS, start=1)
                if line.startswith(word, pos)
            )
    if not digits:
        raise ValueError(f"no digit in line {line!r}")
    return int(digits[0] + digits[-1])


def part1(lines: Iterable[str]) -> int:
    """Sum of the numbers formed by the first and last digit of each line."""
    return sum(_calibration(line, spelled=False) for line in lines)


def part2(lines: Iterable[str]) -> int:
    """Like part 1, but spelled-out digits count as well."""
    return sum(_calibration(line, spelled=True) for line in lines)