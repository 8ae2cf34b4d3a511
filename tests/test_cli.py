import pytest

from aocsolutions import cli, y2023_day17, y2024_day07

DAY1_EXAMPLE = ["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]
DAY7_EXAMPLE = ["190: 10 19", "3267: 81 40 27", "83: 17 5", "156: 15 6"]


def test_solve_both_parts():
    assert cli.solve(2024, 1, DAY1_EXAMPLE) == [(1, 11), (2, 31)]


def test_solve_matches_day_modules():
    assert cli.solve(2024, 7, DAY7_EXAMPLE) == [
        (1, y2024_day07.part1(DAY7_EXAMPLE)),
        (2, y2024_day07.part2(DAY7_EXAMPLE)),
    ]


def test_solve_only_available_part():
    lines = ["11111"]
    results = cli.solve(2023, 17, lines)
    assert [number for number, _ in results] == [2]
    assert results[0][1] == y2023_day17.part2(lines)


def test_solve_unknown_puzzle_raises():
    with pytest.raises(ValueError):
        cli.solve(2023, 24, [])


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(DAY1_EXAMPLE) + "\n", encoding="utf-8")
    assert cli.main(["2024", "1", str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Total sum of scores for Part I : 11",
        "Total sum of scores for Part II: 31",
    ]


def test_main_missing_file_fails(tmp_path, capsys):
    assert cli.main(["2024", "1", str(tmp_path / "missing.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_main_unknown_day_fails(capsys):
    assert cli.main(["2024", "3"]) == 1
    assert "2024" in capsys.readouterr().err