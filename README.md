# advent-puzzles

Solutions to the daily programming puzzles of the 2023 and 2024 seasons,
as a small pure-Python package with no third-party dependencies.

Each day lives in its own module, named after the year and the day:

| Module                          | Puzzle                          |
|---------------------------------|---------------------------------|
| `advent_puzzles.y2023_day01`    | calibration values              |
| `advent_puzzles.y2023_day02`    | cube game                       |
| `advent_puzzles.y2023_day03`    | engine schematic and gears      |
| `advent_puzzles.y2023_day04`    | scratchcards                    |
| `advent_puzzles.y2023_day05`    | seed almanac                    |
| `advent_puzzles.y2023_day06`    | boat races                      |
| `advent_puzzles.y2023_day07`    | camel cards                     |
| `advent_puzzles.y2023_day08`    | desert network                  |
| `advent_puzzles.y2023_day09`    | sequence extrapolation          |
| `advent_puzzles.y2023_day10`    | pipe maze                       |
| `advent_puzzles.y2023_day11`    | expanding galaxies              |
| `advent_puzzles.y2024_day01`    | location lists                  |
| `advent_puzzles.y2024_day02`    | reactor reports                 |
| `advent_puzzles.y2024_day03`    | corrupted multiplications       |
| `advent_puzzles.y2024_day04`    | word search                     |
| `advent_puzzles.y2024_day05`    | page ordering rules             |
| `advent_puzzles.y2024_day06`    | guard patrol                    |
| `advent_puzzles.y2024_day07`    | bridge calibration equations    |
| `advent_puzzles.y2024_day08`    | antenna antinodes               |
| `advent_puzzles.y2024_day09`    | disk compaction                 |
| `advent_puzzles.y2024_day10`    | hiking trails                   |
| `advent_puzzles.y2024_day11`    | splitting stones                |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the library

Every day module has `part1` and `part2` functions that take the puzzle
input as text and return the answer as an integer. Day 11 of 2024 has only
`part1`, and `y2024_day05.part1` / `part2` take the rules text and the
updates text as two separate arguments. Malformed input raises
`ValueError`.

```python
from pathlib import Path

from advent_puzzles import y2023_day01

text = Path("input.txt").read_text()
print(y2023_day01.part1(text))
print(y2023_day01.part2(text))
```

The building blocks are public too, so single lines, reports or grids can
be checked on their own:

```python
from advent_puzzles import y2023_day01, y2024_day02, y2024_day11

y2023_day01.calibration_value("1abc2")                # 12
y2023_day01.calibration_value_with_words("two1nine")  # 29
y2024_day02.is_safe([7, 6, 4, 2, 1])                  # True
y2024_day11.blink([0, 1, 10])                         # [1, 2024, 1, 0]
```

`advent_puzzles.grid.parse_char_grid` turns a block of text into a list of
rows of characters, skipping whitespace inside each line; several of the
grid puzzles start from it.

### Input conventions

A few days expect their input in a particular shape:

- 2023 day 3: the schematic carries a border of `.` on every side; numbers
  on the first and last row are never counted as part numbers.
- 2023 day 5: the almanac starts with a `seeds:` line followed by blank-line
  separated `... map:` blocks. Part 2 tries locations upwards from 0 and
  walks each back through the maps, so it can take a long time on large
  inputs.
- 2024 day 6: the guard is `^` and starts facing up; cells marked `N` count
  as outside the map, as does anything past its edges.
- 2024 day 10: digits are heights; any other character is impassable.

## Command line

The package installs an `advent-puzzles` command that solves one part of a
puzzle and prints the answer:

```
advent-puzzles YEAR DAY PART [INPUT ...]
```

For example:

```
advent-puzzles 2024 1 2 my_input.txt
```

Without input files it reads `inputs/input.txt` from the current directory;
for 2024 day 5 it reads `inputs/input_pages.txt` and
`inputs/input_updates.txt`, and two files must be given when naming them.
A missing file or malformed input prints an error and exits with status 1.
See all options with:

```
advent-puzzles --help
```

## What it does not do

The package only solves puzzles from input you already have: it does not
download puzzle inputs or submit answers. Day 12 of 2023 and the days after
day 11 in either season are not included.