import pytest

from aocsolutions.y2023_day02 import Draw, is_valid, parse_game, part1, part2

EXAMPLE = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]


def test_parse_game():
    assert parse_game(EXAMPLE[0]) == [
        Draw(red=4, blue=3),
        Draw(red=1, green=2, blue=6),
        Draw(green=2),
    ]


def test_parse_game_rejects_malformed():
    with pytest.raises(ValueError):
        parse_game("Game 1: 3")


def test_is_valid_at_limits():
    assert is_valid(Draw(12, 13, 14)) is True
    assert is_valid(Draw(13, 0, 0)) is False
    assert is_valid(Draw(0, 0, 15)) is False


def test_power():
    assert Draw(2, 3, 5).power() == 30


def test_part1_example():
    assert part1(EXAMPLE) == 8


def test_part2_example():
    assert part2(EXAMPLE) == 2286


def test_missing_colour_gives_zero_power():
    assert part2(["Game 1: 3 blue, 4 red"]) == 0