"""Lens library: the HASH algorithm and the HASHMAP procedure."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce

from aocsolutions.textutil import split, to_int, trim

BOX_COUNT = 256


def hash_label(s: str) -> int:
    """The HASH value of ``s``, in range 0..255."""
    return reduce(lambda acc, char: (acc + ord(char)) * 17 % BOX_COUNT, s, 0)


def _steps(lines: Sequence[str]) -> list[str]:
    if not lines:
        raise ValueError("no initialization sequence")
    return split(lines[0], ",")


def part1(lines: Sequence[str]) -> int:
    """Sum of the HASH values of all steps."""
    return sum(hash_label(step) for step in _steps(lines))


def part2(lines: Sequence[str]) -> int:
    """Focusing power after running every step."""
    boxes: list[dict[str, int]] = [{} for _ in range(BOX_COUNT)]
    for step in _steps(lines):
        if "-" in step:
            label = trim(step, "-")
            boxes[hash_label(label)].pop(label, None)
        if "=" in step:
            fields = split(step, "=")
            if len(fields) < 2:
                raise ValueError(f"missing focal length in {step!r}")
            label = fields[0]
            boxes[hash_label(label)][label] = to_int(fields[1])
    return sum(
        box_number * slot * focal
        for box_number, box in enumerate(boxes, start=1)
        for slot, focal in enumerate(box.values(), start=1)
    )