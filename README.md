# aocsolutions

Solvers for Advent of Code puzzles: most days of 2023 and some days of 2024.
Each day is a module named `y<year>_day<NN>`, such as `aocsolutions.y2023_day07`.
A module has a `part1` function, a `part2` function, or both. Each one takes
the puzzle input as a list of lines and returns the answer as an integer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
aocsolutions YEAR DAY [INPUT]
```

The command solves the parts that exist for that day. It prints one line per
part, for example:

```
Total sum of scores for Part I : 6440
Total sum of scores for Part II: 5905
```

If you leave out `INPUT`, the command reads `Data/aoc_input_<day>.txt` for 2023
and `Data/aoc_input<day>.txt` for 2024, relative to the current directory. If
the day is not supported, the file cannot be read or the input is malformed,
the command prints `error: ...` to standard error and exits with status 1. Run
`aocsolutions --help` to see the usage.

## Library use

```python
from aocsolutions.textutil import load_file
from aocsolutions import y2023_day07

lines = load_file("input.txt")
print(y2023_day07.part1(lines))
print(y2023_day07.part2(lines))
```

`aocsolutions.cli.solve(year, day, lines)` runs every part available for a day.
It returns a list of `(part number, answer)` pairs. An unsupported day raises
`ValueError`, and so does malformed input in most solvers.

Several modules also offer smaller building blocks. Some examples:

- `y2023_day12.count_arrangements`
- `y2023_day14.spin_cycle` and `load`
- `y2023_day16.energized`
- `y2023_day17.min_heat_loss`
- `y2023_day25.global_min_cut`
- `y2024_day07.combinations` and `combinations_with_concat`

In `y2023_day20`, `part1` takes an optional `presses` count, which defaults to
1000.

`aocsolutions.textutil` holds the parsing helpers the solvers share:

- `load_file`
- `to_int`
- `split`, `split_no_empty`, `split_ints` and `split_chars`
- `trim`
- `remove_before` and `remove_all`
- `replace_string`
- `is_all_unique`

## Supported days

| Year | Days | Parts |
|------|------|-------|
| 2023 | 1–5, 7–16, 18–20, 22 | both |
| 2023 | 6, 17 | part 2 only |
| 2023 | 23, 25 | part 1 only |
| 2024 | 1, 2, 7, 8, 9, 10 | both |

## What it does not do

- It does not download puzzle inputs. You supply them as files or as lists of lines.
- It has no solvers for 2023 days 21 and 24, and none for the 2024 days not listed above.
- Some parts are missing from the days it does cover, as shown in the table.