import pytest

from aocsolutions.y2023_day10 import find_loop, next_step, part1, part2

SQUARE = [
    ".....",
    ".S-7.",
    ".|.|.",
    ".L-J.",
    ".....",
]

COMPLEX = [
    "..F7.",
    ".FJ|.",
    "SJ.L7",
    "|F--J",
    "LJ...",
]

ENCLOSED = [
    "...........",
    ".S-------7.",
    ".|F-----7|.",
    ".||.....||.",
    ".||.....||.",
    ".|L-7.F-J|.",
    ".|..|.|..|.",
    ".L--J.L--J.",
    "...........",
]


def test_part1_square_example():
    assert part1(SQUARE) == 4


def test_part1_complex_example():
    assert part1(COMPLEX) == 8


def test_part2_example():
    assert part2(ENCLOSED) == 4


@pytest.mark.parametrize("grid", [SQUARE, COMPLEX, ENCLOSED])
def test_loop_is_closed_chain_of_neighbours(grid):
    loop, symbol = find_loop(grid)
    assert grid[loop[0][0]][loop[0][1]] == "S"
    assert len(set(loop)) == len(loop)
    for (r1, c1), (r2, c2) in zip(loop, loop[1:] + loop[:1]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    assert symbol in "|-LJ7F"


@pytest.mark.parametrize("grid", [SQUARE, COMPLEX, ENCLOSED])
def test_part1_is_half_the_loop(grid):
    loop, _ = find_loop(grid)
    assert part1(grid) == len(loop) // 2


@pytest.mark.parametrize("grid", [SQUARE, COMPLEX, ENCLOSED])
def test_enclosed_tiles_fit_in_grid(grid):
    loop, _ = find_loop(grid)
    cells = sum(len(row) for row in grid)
    assert 0 <= part2(grid) <= cells - len(loop)


def test_next_step_follows_loop():
    loop, _ = find_loop(SQUARE)
    for k in range(2, len(loop)):
        assert next_step(SQUARE, loop[:k]) == loop[k]


def test_next_step_rejects_ground_tile():
    with pytest.raises(ValueError):
        next_step(SQUARE, [(1, 1), (0, 1)])


def test_next_step_needs_two_positions():
    with pytest.raises(ValueError):
        next_step(SQUARE, [(1, 1)])


def test_missing_start_raises():
    with pytest.raises(ValueError):
        find_loop(["-7", "LJ"])


def test_isolated_start_raises():
    with pytest.raises(ValueError):
        part1(["...", ".S.", "..."])