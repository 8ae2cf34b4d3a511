import pytest

from aocsolutions import y2024_day01

EXAMPLE = ["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]


def test_part1_example():
    assert y2024_day01.part1(EXAMPLE) == 11


def test_part2_example():
    assert y2024_day01.part2(EXAMPLE) == 31


def test_part1_is_symmetric_in_columns():
    swapped = [" ".join(reversed(line.split())) for line in EXAMPLE]
    assert y2024_day01.part1(swapped) == y2024_day01.part1(EXAMPLE)


def test_part1_does_not_depend_on_line_order():
    assert y2024_day01.part1(list(reversed(EXAMPLE))) == y2024_day01.part1(EXAMPLE)


def test_part1_identical_columns_have_no_distance():
    lines = ["5 5", "7 7", "1 1"]
    assert y2024_day01.part1(lines) == 0


def test_part2_does_not_depend_on_line_order():
    assert y2024_day01.part2(EXAMPLE[::-1]) == y2024_day01.part2(EXAMPLE)


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        y2024_day01.part1(["3"])