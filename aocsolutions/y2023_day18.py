"""Lavaduct lagoon: the volume dug out by a dig plan."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from aocsolutions.textutil import split, to_int, trim

Point = tuple[int, int]

_MOVES: dict[str, Point] = {"R": (1, 0), "D": (0, -1), "L": (-1, 0), "U": (0, 1)}
# The last hex digit of a colour code names the direction.
_COLOUR_DIRECTIONS = "RDLU"


def _instruction(line: str, from_color: bool) -> tuple[str, int]:
    fields = split(line, " ")
    if len(fields) < (3 if from_color else 2):
        raise ValueError(f"malformed dig instruction {line!r}")
    direction = fields[0][:1]
    if from_color:
        colour = trim(fields[2], "()")
        if len(colour) < 7:
            raise ValueError(f"malformed colour code in {line!r}")
        code = colour[6]
        if code in "0123":
            direction = _COLOUR_DIRECTIONS[int(code)]
        try:
            length = int(colour[1:6], 16)
        except ValueError:
            raise ValueError(f"malformed colour code in {line!r}") from None
    else:
        length = to_int(fields[1])
    if direction not in _MOVES:
        raise ValueError(f"unknown direction {direction!r} in {line!r}")
    return direction, length


def parse_plan(lines: Iterable[str], from_color: bool) -> list[Point]:
    """Corners of the trench, starting at (0, 0); 'U' increases y.

    With ``from_color`` the direction and length are decoded from the colour
    code. Raises ValueError if the trench does not return to its start.
    """
    x = y = 0
    vertices: list[Point] = [(0, 0)]
    for line in lines:
        direction, length = _instruction(line, from_color)
        dx, dy = _MOVES[direction]
        x += dx * length
        y += dy * length
        vertices.append((x, y))
    if vertices[-1] != vertices[0]:
        raise ValueError("the dig plan does not return to its start")
    return vertices[:-1] if len(vertices) > 1 else vertices


def lagoon_area(vertices: Sequence[Point]) -> int:
    """Cubic metres dug out, trench included, for a closed rectilinear polygon."""
    points = list(vertices)
    if not points:
        raise ValueError("a lagoon needs at least one vertex")
    closed = points + points[:1]
    twice_area = sum(x0 * y1 - x1 * y0 for (x0, y0), (x1, y1) in pairwise(closed))
    boundary = sum(abs(x1 - x0) + abs(y1 - y0) for (x0, y0), (x1, y1) in pairwise(closed))
    return (abs(twice_area) + boundary) // 2 + 1


def part1(lines: Iterable[str]) -> int:
    """Lagoon size following the plain directions and lengths."""
    return lagoon_area(parse_plan(lines, from_color=False))


def part2(lines: Iterable[str]) -> int:
    """Lagoon size following the instructions hidden in the colour codes."""
    return lagoon_area(parse_plan(lines, from_color=True))