import pytest

from aocsolutions.y2023_day01 import part1, part2

EXAMPLE1 = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]

EXAMPLE2 = [
    "two1nine",
    "eightwothree",
    "abcone2threexyz",
    "xtwone3four",
    "4nineeightseven2",
    "zoneight234",
    "7pqrstsixteen",
]


def test_part1_example():
    assert part1(EXAMPLE1) == 142


def test_part2_example():
    assert part2(EXAMPLE2) == 281


def test_single_digit_is_used_twice():
    assert part1(["ab7cd"]) == 77


def test_part2_matches_part1_without_words():
    lines = ["1x9", "55", "a3b4c"]
    assert part2(lines) == part1(lines)


def test_overlapping_words():
    assert part2(["oneight"]) == 18


def test_line_without_digit_raises():
    with pytest.raises(ValueError):
        part1(["abc"])


def test_empty_input():
    assert part1([]) == 0