from aocsolutions.y2023_day09 import extrapolate, part1, part2

EXAMPLE = [
    "0 3 6 9 12 15",
    "1 3 6 10 15 21",
    "10 13 16 21 30 45",
]


def test_part1_example():
    assert part1(EXAMPLE) == 114


def test_part2_example():
    assert part2(EXAMPLE) == 2


def test_constant_sequence():
    assert extrapolate([5, 5, 5, 5]) == (5, 5)


def test_all_zero_sequence():
    assert extrapolate([0, 0, 0]) == (0, 0)


def test_reversed_sequence_swaps_directions():
    values = [10, 13, 16, 21, 30, 45]
    forward = extrapolate(values)
    backward = extrapolate(list(reversed(values)))
    assert backward == (forward[1], forward[0])


def test_extending_keeps_previous_value():
    values = [1, 3, 6, 10, 15, 21]
    nxt, prev = extrapolate(values)
    assert extrapolate(values + [nxt])[1] == prev
    assert extrapolate([prev] + values)[0] == nxt


def test_negative_numbers_parsed():
    assert part1(["-3 -2 -1"]) == extrapolate([-3, -2, -1])[0]