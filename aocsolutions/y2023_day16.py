"""Lava floor: beams of light bouncing through mirrors and splitters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

RIGHT, DOWN, LEFT, UP = range(4)

_MOVES = {RIGHT: (1, 0), DOWN: (0, 1), LEFT: (-1, 0), UP: (0, -1)}
_SLASH = {RIGHT: UP, DOWN: LEFT, LEFT: DOWN, UP: RIGHT}
_BACKSLASH = {RIGHT: DOWN, DOWN: RIGHT, LEFT: UP, UP: LEFT}


def _outgoing(tile: str, direction: int) -> tuple[int, ...]:
    if tile == "|" and direction in (RIGHT, LEFT):
        return DOWN, UP
    if tile == "-" and direction in (DOWN, UP):
        return RIGHT, LEFT
    if tile == "/":
        return (_SLASH[direction],)
    if tile == "\\":
        return (_BACKSLASH[direction],)
    return (direction,)


def energized(grid: Sequence[str], x: int, y: int, direction: int) -> int:
    """Number of tiles a beam entering at (x, y) heading ``direction`` passes through.

    Directions are 0 right, 1 down, 2 left, 3 up.
    """
    if not grid:
        raise ValueError("empty grid")
    if direction not in _MOVES:
        raise ValueError(f"invalid direction {direction}")
    height, width = len(grid), len(grid[0])
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"start {(x, y)} is outside the grid")

    stack = [(x, y, direction)]
    seen: set[tuple[int, int, int]] = set()
    while stack:
        beam = stack.pop()
        if beam in seen:
            continue
        seen.add(beam)
        bx, by, heading = beam
        for new_heading in _outgoing(grid[by][bx], heading):
            dx, dy = _MOVES[new_heading]
            nx, ny = bx + dx, by + dy
            if 0 <= nx < width and 0 <= ny < height:
                stack.append((nx, ny, new_heading))
    return len({(bx, by) for bx, by, _ in seen})


def part1(lines: Iterable[str]) -> int:
    """Tiles energized by a beam entering the top-left corner heading right."""
    return energized(list(lines), 0, 0, RIGHT)


def part2(lines: Iterable[str]) -> int:
    """Most tiles energized by a beam entering from any edge tile, heading inwards."""
    grid = list(lines)
    if not grid:
        raise ValueError("empty grid")
    height, width = len(grid), len(grid[0])
    starts = [(x, 0, DOWN) for x in range(width)]
    starts += [(x, height - 1, UP) for x in range(width)]
    starts += [(0, y, RIGHT) for y in range(height)]
    starts += [(width - 1, y, LEFT) for y in range(height)]
    return max(energized(grid, *start) for start in starts)