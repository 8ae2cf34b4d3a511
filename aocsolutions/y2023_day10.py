"""Pipe maze: the loop through the start tile and the area it encloses."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Position = tuple[int, int]

# For each direction of travel: the tile under the walker and the move it makes next.
_TURNS: dict[Position, dict[str, Position]] = {
    (0, 1): {"-": (0, 1), "7": (1, 0), "J": (-1, 0)},
    (0, -1): {"-": (0, -1), "F": (1, 0), "L": (-1, 0)},
    (1, 0): {"|": (1, 0), "L": (0, 1), "J": (0, -1)},
    (-1, 0): {"|": (-1, 0), "7": (0, -1), "F": (0, 1)},
}

# Later entries win when the start tile has more than two connections.
_START_SYMBOLS = (
    ({"L", "R"}, "-"),
    ({"T", "B"}, "|"),
    ({"T", "R"}, "L"),
    ({"T", "L"}, "J"),
    ({"B", "R"}, "F"),
    ({"B", "L"}, "7"),
)


def next_step(grid: Sequence[str], path: Sequence[Position]) -> Position:
    """The tile after the last one in ``path``, following the pipe it is on."""
    if len(path) < 2:
        raise ValueError("a path needs at least two positions")
    (prev_row, prev_col), (row, col) = path[-2], path[-1]
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise ValueError(f"position {(row, col)} is outside the grid")
    move = (row - prev_row, col - prev_col)
    turn = _TURNS.get(move, {}).get(grid[row][col])
    if turn is None:
        raise ValueError(
            f"tile {grid[row][col]!r} at {(row, col)} does not continue the path"
        )
    return row + turn[0], col + turn[1]


def _find_start(grid: Sequence[str]) -> Position:
    start = None
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char == "S":
                start = (row, col)
    if start is None:
        raise ValueError("no start tile 'S' in the grid")
    return start


def _start_links(grid: Sequence[str], start: Position) -> tuple[list[Position], str]:
    row, col = start
    width = len(grid[0])
    links: list[Position] = []
    sides: set[str] = set()
    if col < width - 1 and grid[row][col + 1] in "-7J":
        links.append((row, col + 1))
        sides.add("R")
    if col > 0 and grid[row][col - 1] in "-LF":
        links.append((row, col - 1))
        sides.add("L")
    if row > 0 and grid[row - 1][col] in "|7F":
        links.append((row - 1, col))
        sides.add("T")
    if row < len(grid) - 1 and grid[row + 1][col] in "|LJ":
        links.append((row + 1, col))
        sides.add("B")
    symbol = "S"
    for needed, candidate in _START_SYMBOLS:
        if needed <= sides:
            symbol = candidate
    return links, symbol


def find_loop(lines: Iterable[str]) -> tuple[list[Position], str]:
    """Return the loop's tiles in walking order, starting at 'S', and the pipe under 'S'."""
    grid = list(lines)
    start = _find_start(grid)
    links, symbol = _start_links(grid, start)
    if len(links) < 2:
        raise ValueError("the start tile connects to fewer than two pipes")
    loop = [start, links[0]]
    limit = sum(len(line) for line in grid)
    while (step := next_step(grid, loop)) != start:
        loop.append(step)
        if len(loop) > limit:
            raise ValueError("the pipe walk does not return to the start")
    return loop, symbol


def part1(lines: Iterable[str]) -> int:
    """Steps to the point of the loop farthest from the start."""
    loop, _ = find_loop(lines)
    return len(loop) // 2


def part2(lines: Iterable[str]) -> int:
    """Number of tiles enclosed by the loop."""
    grid = list(lines)
    loop, symbol = find_loop(grid)
    on_loop = set(loop)
    start = loop[0]
    enclosed = 0
    for row, line in enumerate(grid):
        inside = had_l = had_f = False
        for col, char in enumerate(line):
            if (row, col) not in on_loop:
                enclosed += inside
                continue
            if (row, col) == start:
                char = symbol
            if char == "|":
                inside = not inside
            elif char == "F":
                had_f = True
            elif had_f and char == "J":
                had_f = False
                inside = not inside
            elif had_f and char == "7":
                had_f = False
            elif char == "L":
                had_l = True
            elif had_l and char == "7":
                had_l = False
                inside = not inside
            elif had_l and char == "J":
                had_l = False
    return enclosed