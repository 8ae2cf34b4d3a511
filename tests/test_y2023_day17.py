import pytest

from aocsolutions.y2023_day17 import min_heat_loss, part2

EXAMPLE = [
    "2413432311323",
    "3215453535623",
    "3255245654254",
    "3446585845452",
    "4546657867536",
    "1438598798454",
    "4457876987766",
    "3637877979653",
    "4654967986887",
    "4564679986453",
    "1224686865563",
    "2546548887735",
    "4322674655533",
]

SECOND_EXAMPLE = [
    "111111111111",
    "999999999991",
    "999999999991",
    "999999999991",
    "999999999991",
]


def test_example_normal_crucible():
    assert min_heat_loss(EXAMPLE, 1, 3) == 102


def test_example_ultra_crucible():
    assert part2(EXAMPLE) == 94


def test_second_example_ultra_crucible():
    assert part2(SECOND_EXAMPLE) == 71


def test_part2_uses_ultra_limits():
    assert part2(EXAMPLE) == min_heat_loss(EXAMPLE, 4, 10)


def test_single_row_sums_all_but_first():
    row = "12345"
    assert min_heat_loss([row], 1, 10) == sum(int(ch) for ch in row[1:])


def test_looser_limits_never_cost_more():
    assert min_heat_loss(EXAMPLE, 1, 10) <= min_heat_loss(EXAMPLE, 1, 3)


def test_unreachable_goal():
    with pytest.raises(ValueError):
        min_heat_loss(["12"], 4, 10)


def test_single_block_has_no_path():
    with pytest.raises(ValueError):
        min_heat_loss(["5"], 1, 3)


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        part2(["12a4", "1234"])