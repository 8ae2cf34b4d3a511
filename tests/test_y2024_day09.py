import pytest

from aocsolutions import y2024_day09

EXAMPLE = "2333133121414131402"
# The same files with every gap emptied.
EXAMPLE_NO_GAPS = "".join(ch if i % 2 == 0 else "0" for i, ch in enumerate(EXAMPLE))


def test_part2_example():
    assert y2024_day09.part2([EXAMPLE]) == 2858


def test_part1_small():
    assert y2024_day09.part1(["111"]) == 1


def test_part1_ignores_gap_sizes():
    assert y2024_day09.part1([EXAMPLE_NO_GAPS]) == y2024_day09.part1([EXAMPLE])


def test_part2_without_gaps_moves_nothing():
    assert y2024_day09.part2([EXAMPLE_NO_GAPS]) == y2024_day09.part1([EXAMPLE_NO_GAPS])


def test_checksum_ignores_trailing_free_space():
    blocks = [(2, 0), (3, 1), (1, 2)]
    assert y2024_day09.checksum(blocks + [(4, y2024_day09.FREE)]) == y2024_day09.checksum(
        blocks
    )


def test_checksum_ignores_empty_spans():
    blocks = [(2, 0), (3, 1), (1, 2)]
    padded = [(2, 0), (0, 7), (3, 1), (0, y2024_day09.FREE), (1, 2)]
    assert y2024_day09.checksum(padded) == y2024_day09.checksum(blocks)


def test_checksum_of_single_file_id_zero_vanishes():
    assert y2024_day09.checksum([(9, 0)]) == y2024_day09.checksum([])


def test_part2_with_trailing_gap_matches_without():
    assert y2024_day09.part2(["1110"]) == y2024_day09.part2(["111"])


def test_empty_map_raises():
    with pytest.raises(ValueError):
        y2024_day09.part1([])
    with pytest.raises(ValueError):
        y2024_day09.part2([""])


def test_non_digit_raises():
    with pytest.raises(ValueError):
        y2024_day09.part1(["12a4"])