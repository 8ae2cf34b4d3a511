import pytest

from aocsolutions.y2023_day22 import Brick, parse_bricks, part1, part2, settle

EXAMPLE = [
    "1,0,1~1,2,1",
    "0,0,2~2,0,2",
    "0,2,3~2,2,3",
    "0,0,4~0,2,4",
    "2,0,5~2,2,5",
    "0,1,6~2,1,6",
    "1,1,8~1,1,9",
]


def _tower(height):
    return [f"0,0,{2 * z}~0,0,{2 * z}" for z in range(1, height + 1)]


def test_part1_example():
    assert part1(EXAMPLE) == 5


def test_part2_example():
    assert part2(EXAMPLE) == 7


def test_parse_bricks_reads_both_ends():
    bricks = parse_bricks(["1,0,1~1,2,1"])
    assert bricks == [Brick((1, 0, 1), (1, 2, 1))]


def test_settle_is_idempotent():
    settled = settle(parse_bricks(EXAMPLE))
    assert settle(settled) == settled


def test_settled_bricks_do_not_overlap_and_start_at_ground():
    settled = settle(parse_bricks(EXAMPLE))
    cells = [cell for brick in settled for cell in brick.cells]
    assert len(cells) == len(set(cells))
    assert min(brick.start[2] for brick in settled) == 1


def test_falling_brick_keeps_its_height():
    brick = Brick((0, 0, 5), (0, 0, 7))
    (moved,) = settle([brick])
    assert moved.start[2] == 1
    assert moved.end[2] - moved.start[2] == brick.end[2] - brick.start[2]


@pytest.mark.parametrize("height", [2, 3, 6])
def test_tower_only_top_is_removable(height):
    lines = _tower(height)
    assert part1(lines) == 1
    assert part2(lines) == height * (height - 1) // 2


def test_inverted_brick_raises():
    with pytest.raises(ValueError):
        Brick((0, 0, 3), (0, 0, 1))


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_bricks(["1,0,1"])